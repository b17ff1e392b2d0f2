# backend/models/recipe_store.py
"""
레시피 저장소 인터페이스 + 메모리 구현
"""
import asyncio
from abc import ABC, abstractmethod
from typing import Dict, List

from features.recipe.schemas import Recipe


class RecipeStore(ABC):
    """레시피 저장소 (add / list / delete)"""

    @abstractmethod
    async def add(self, recipe: Recipe) -> Recipe:
        """저장 후 id가 채워진 레시피 반환"""

    @abstractmethod
    async def list(self) -> List[Recipe]:
        pass

    @abstractmethod
    async def delete(self, recipe_id: int) -> bool:
        """삭제 성공 여부 (없으면 False)"""

    async def list_saved(self) -> List[Recipe]:
        return [r for r in await self.list() if r.is_saved]


class InMemoryRecipeStore(RecipeStore):
    """프로세스 메모리 저장소 (개발/테스트용)"""

    def __init__(self):
        self._recipes: Dict[int, Recipe] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def add(self, recipe: Recipe) -> Recipe:
        async with self._lock:
            stored = recipe.model_copy(update={"id": self._next_id}, deep=True)
            self._recipes[stored.id] = stored
            self._next_id += 1
        return stored.model_copy(deep=True)

    async def list(self) -> List[Recipe]:
        return [r.model_copy(deep=True) for r in self._recipes.values()]

    async def delete(self, recipe_id: int) -> bool:
        async with self._lock:
            return self._recipes.pop(recipe_id, None) is not None
