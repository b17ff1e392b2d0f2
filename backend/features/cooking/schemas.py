# features/cooking/schemas.py
"""
Cooking 관련 Pydantic 모델
"""
from enum import Enum
from typing import List, Optional

from features.recipe.schemas import CamelModel, Recipe, SearchResult


class AssistantAction(str, Enum):
    """프론트가 UI 상태를 바꿀 때 쓰는 액션 태그"""
    SHOW_SEARCH_RESULTS = "show_search_results"
    SHOW_RECIPE = "show_recipe"
    UPDATE_STEP = "update_step"
    REPEAT_STEP = "repeat_step"
    SHOW_INGREDIENTS = "show_ingredients"
    SET_TIMER = "set_timer"
    SHOW_SAVED_RECIPES = "show_saved_recipes"
    RECIPE_COMPLETE = "recipe_complete"
    INFO = "info"


class AssistantResponse(CamelModel):
    """명령 1개에 대한 응답 (나레이션 + UI 갱신 정보)"""
    response_text: str
    action: AssistantAction = AssistantAction.INFO
    recipe_data: Optional[Recipe] = None
    search_results: Optional[List[SearchResult]] = None
    current_step_index: Optional[int] = None
    timer_duration: Optional[str] = None
    transcription: Optional[str] = None

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CommandRequest(CamelModel):
    command: str = ""
    session_id: Optional[str] = None


class SessionCreated(CamelModel):
    session_id: str


class SessionSnapshot(CamelModel):
    session_id: str
    recipe: Optional[Recipe] = None
    current_step_index: int = 0
    total_steps: int = 0
