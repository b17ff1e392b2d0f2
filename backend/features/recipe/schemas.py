# backend/features/recipe/schemas.py
"""
Recipe API 스키마
"""
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON 키는 camelCase, 파이썬 필드는 snake_case"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchResult(CamelModel):
    title: str = ""
    description: str = ""
    image_url: str = ""
    video_url: str = ""
    source: str = ""
    source_url: str = ""
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)


class Recipe(CamelModel):
    id: Optional[int] = None
    title: str = ""
    cuisine: str = ""
    description: str = ""
    image_url: str = ""
    video_url: str = ""
    prep_time: int = Field(default=0, ge=0)
    cook_time: int = Field(default=0, ge=0)
    servings: int = Field(default=1, gt=0)
    difficulty: str = "Medium"
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    is_saved: bool = False
    source: str = "Manual"

    @property
    def is_cookable(self) -> bool:
        return bool(self.ingredients) and bool(self.instructions)


class DeleteRecipeResponse(BaseModel):
    message: str
