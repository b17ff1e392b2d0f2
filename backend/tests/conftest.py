from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from app.main import app
from core.dependencies import (
    get_recipe_search,
    get_recipe_store,
    get_session_registry,
    get_transcriber,
)
from features.cooking.interpreter import CommandInterpreter
from features.cooking.session import SessionRegistry
from features.recipe.schemas import Recipe, SearchResult
from models.recipe_store import InMemoryRecipeStore
from services.audio import Transcriber
from services.search import CARBONARA, RecipeSearchService


class FakeSearch(RecipeSearchService):
    """고정 결과를 돌려주고 호출 기록을 남기는 검색"""

    def __init__(self, results: Optional[List[SearchResult]] = None, error: Optional[Exception] = None):
        self.results = results if results is not None else [CARBONARA]
        self.error = error
        self.queries: List[str] = []

    async def search(self, query: str) -> List[SearchResult]:
        self.queries.append(query)
        if self.error:
            raise self.error
        return [r.model_copy(deep=True) for r in self.results]


class FakeTranscriber(Transcriber):
    name = "fake"

    def __init__(self, text: str = "", error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls = []

    async def _transcribe(self, audio_bytes: bytes, mime: str) -> str:
        self.calls.append((audio_bytes, mime))
        if self.error:
            raise self.error
        return self.text


def make_recipe(steps: int = 3, title: str = "Test Stew", saved: bool = False) -> Recipe:
    return Recipe(
        title=title,
        ingredients=["water", "salt", "carrots"],
        instructions=[f"Do step {i + 1}" for i in range(steps)],
        is_saved=saved,
    )


@pytest.fixture
def search():
    return FakeSearch()


@pytest.fixture
def store():
    return InMemoryRecipeStore()


@pytest.fixture
def interpreter(search, store):
    return CommandInterpreter(search, store)


@pytest.fixture
def registry():
    return SessionRegistry()


@pytest.fixture
def transcriber():
    return FakeTranscriber(text="Find pasta recipe")


@pytest.fixture
def client(search, store, registry, transcriber):
    app.dependency_overrides[get_recipe_search] = lambda: search
    app.dependency_overrides[get_recipe_store] = lambda: store
    app.dependency_overrides[get_session_registry] = lambda: registry
    app.dependency_overrides[get_transcriber] = lambda: transcriber
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
