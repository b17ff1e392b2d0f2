# features/cooking/interpreter.py
"""
CommandInterpreter - 명령 해석 + 조리 세션 상태 전이

발화 1개를 받아 의도를 순서대로 평가하고, 세션을 읽거나 바꾼 뒤 응답을 만든다.
앞쪽 의도가 응답을 만들지 못하면(검색 결과 없음, 1단계에서 이전 등) 다음
의도로 넘어간다.
"""
from typing import Awaitable, Callable, Dict, List, Optional, Tuple

from core.exceptions import AssistantError, ErrorKind
from features.cooking.schemas import AssistantAction, AssistantResponse
from features.cooking.session import CookingSession
from features.recipe.schemas import Recipe, SearchResult
from models.recipe_store import RecipeStore
from services.search import RecipeSearchService
from utils.intent import Intent, candidate_intents
from utils.logger import get_logger
from utils.parser import extract_recipe_query, parse_timer_minutes

logger = get_logger("interpreter", tag="Interpreter")

Outcome = Optional[Tuple[AssistantResponse, CookingSession]]


class CommandInterpreter:
    """조리 명령 상태 머신"""

    def __init__(self, search: RecipeSearchService, store: RecipeStore):
        self.search = search
        self.store = store
        self._handlers: Dict[str, Callable[[str, CookingSession], Awaitable[Outcome]]] = {
            Intent.SEARCH: self._handle_search,
            Intent.COOK: self._handle_cook,
            Intent.NEXT: self._handle_next,
            Intent.PREV: self._handle_prev,
            Intent.REPEAT: self._handle_repeat,
            Intent.INGREDIENTS: self._handle_ingredients,
            Intent.TIMER: self._handle_timer,
            Intent.SAVED_RECIPES: self._handle_saved_recipes,
        }

    async def interpret(
        self, utterance: str, session: CookingSession
    ) -> Tuple[AssistantResponse, CookingSession]:
        """발화 → (응답, 갱신된 세션). 입력 세션은 바꾸지 않음"""
        if not utterance or not utterance.strip():
            raise AssistantError(ErrorKind.INVALID_INPUT, "Command is required.")

        command = utterance.lower()

        for intent in candidate_intents(command, session.has_recipe):
            handler = self._handlers.get(intent)
            if handler is None:
                break

            outcome = await handler(command, session)
            if outcome is not None:
                logger.debug(f"'{command}' → {intent} (session={session.session_id})")
                return outcome

            logger.debug(f"'{command}' → {intent} 응답 없음, 다음 의도로")

        logger.debug(f"'{command}' → {Intent.UNKNOWN}")
        return self._default_response(utterance), session

    # ──────────────────────────────────────────────
    # 외부 호출
    # ──────────────────────────────────────────────
    async def _search(self, query: str) -> List[SearchResult]:
        try:
            return await self.search.search(query)
        except AssistantError:
            raise
        except Exception as e:
            logger.error(f"레시피 검색 실패 (query={query!r}): {e}")
            raise AssistantError(ErrorKind.UPSTREAM_UNAVAILABLE, "Recipe search is unavailable.") from e

    async def _saved_recipes(self) -> List[Recipe]:
        try:
            return await self.store.list_saved()
        except AssistantError:
            raise
        except Exception as e:
            logger.error(f"저장된 레시피 조회 실패: {e}")
            raise AssistantError(ErrorKind.UPSTREAM_UNAVAILABLE, "Recipe storage is unavailable.") from e

    # ──────────────────────────────────────────────
    # 의도별 처리
    # ──────────────────────────────────────────────
    async def _handle_search(self, command: str, session: CookingSession) -> Outcome:
        query = extract_recipe_query(command)
        results = await self._search(query)

        response = AssistantResponse(
            response_text=f"I found {len(results)} recipes for {query}. Which one would you like to cook?",
            action=AssistantAction.SHOW_SEARCH_RESULTS,
            search_results=results,
        )
        return response, session

    async def _handle_cook(self, command: str, session: CookingSession) -> Outcome:
        query = extract_recipe_query(command)
        results = await self._search(query)
        if not results:
            return None

        recipe = self.search.to_recipe(results[0])
        if not recipe.instructions:
            # 단계가 없으면 step_index 불변식을 지킬 수 없음
            logger.warning(f"'{recipe.title}' 조리 단계 없음, 선택 생략")
            return None
        updated = session.start(recipe)

        response = AssistantResponse(
            response_text=(
                f"Great! Let's cook {recipe.title}. Here are the ingredients you'll need, "
                "then I'll guide you step by step."
            ),
            action=AssistantAction.SHOW_RECIPE,
            recipe_data=recipe,
            current_step_index=updated.step_index,
        )
        return response, updated

    async def _handle_next(self, command: str, session: CookingSession) -> Outcome:
        if session.step_index >= session.last_index:
            response = AssistantResponse(
                response_text="Congratulations! You've completed the recipe. Your dish is ready to enjoy!",
                action=AssistantAction.RECIPE_COMPLETE,
            )
            return response, session

        updated = session.move_to(session.step_index + 1)
        return self._step_response(updated, "Step"), updated

    async def _handle_prev(self, command: str, session: CookingSession) -> Outcome:
        if session.step_index <= 0:
            return None

        updated = session.move_to(session.step_index - 1)
        return self._step_response(updated, "Going back to step"), updated

    async def _handle_repeat(self, command: str, session: CookingSession) -> Outcome:
        return self._step_response(session, "Step", AssistantAction.REPEAT_STEP), session

    async def _handle_ingredients(self, command: str, session: CookingSession) -> Outcome:
        recipe = session.active_recipe
        response = AssistantResponse(
            response_text=f"Here are the ingredients for {recipe.title}: {', '.join(recipe.ingredients)}",
            action=AssistantAction.SHOW_INGREDIENTS,
            recipe_data=recipe,
        )
        return response, session

    async def _handle_timer(self, command: str, session: CookingSession) -> Outcome:
        minutes = parse_timer_minutes(command)
        if minutes is None:
            return None

        response = AssistantResponse(
            response_text=f"Setting a timer for {minutes} minutes.",
            action=AssistantAction.SET_TIMER,
            timer_duration=f"{minutes} minutes",
        )
        return response, session

    async def _handle_saved_recipes(self, command: str, session: CookingSession) -> Outcome:
        saved = await self._saved_recipes()

        if not saved:
            response = AssistantResponse(
                response_text="You don't have any saved recipes yet. Try searching for a recipe first!",
                action=AssistantAction.INFO,
            )
            return response, session

        names = ", ".join(r.title for r in saved)
        response = AssistantResponse(
            response_text=f"You have {len(saved)} saved recipes: {names}. Which one would you like to cook?",
            action=AssistantAction.SHOW_SAVED_RECIPES,
        )
        return response, session

    # ──────────────────────────────────────────────
    # 응답 헬퍼
    # ──────────────────────────────────────────────
    @staticmethod
    def _step_response(
        session: CookingSession,
        prefix: str,
        action: AssistantAction = AssistantAction.UPDATE_STEP,
    ) -> AssistantResponse:
        return AssistantResponse(
            response_text=f"{prefix} {session.step_index + 1}: {session.current_instruction}",
            action=action,
            recipe_data=session.active_recipe,
            current_step_index=session.step_index,
        )

    @staticmethod
    def _default_response(utterance: str) -> AssistantResponse:
        return AssistantResponse(
            response_text=(
                f"I heard: {utterance}. Try saying 'find chocolate cake recipe' to search for recipes, "
                "or 'next step' if you're cooking."
            ),
            action=AssistantAction.INFO,
        )
