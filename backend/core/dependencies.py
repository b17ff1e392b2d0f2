"""
FastAPI 의존성 관리
"""
from functools import lru_cache

from fastapi import Depends

from app.config import settings
from features.cooking.interpreter import CommandInterpreter
from features.cooking.session import SessionRegistry
from models.recipe_store import InMemoryRecipeStore, RecipeStore
from services.audio import Transcriber, get_transcriber as build_transcriber
from services.search import RecipeSearchService, get_search_service
from utils.logger import get_logger

logger = get_logger("dependencies", tag="Deps")


@lru_cache()
def get_recipe_search() -> RecipeSearchService:
    """검색 서비스 싱글톤"""
    return get_search_service(settings.SEARCH_BACKEND)


@lru_cache()
def get_recipe_store() -> RecipeStore:
    """레시피 저장소 싱글톤"""
    if settings.RECIPE_STORE.lower() == "mysql":
        from models.mysql_db import MySQLRecipeStore

        logger.info("MySQL 레시피 저장소 사용")
        return MySQLRecipeStore()

    logger.info("메모리 레시피 저장소 사용")
    return InMemoryRecipeStore()


@lru_cache()
def get_transcriber() -> Transcriber:
    """STT 싱글톤"""
    return build_transcriber()


@lru_cache()
def get_session_registry() -> SessionRegistry:
    """세션 레지스트리 싱글톤"""
    return SessionRegistry()


def get_interpreter(
    search: RecipeSearchService = Depends(get_recipe_search),
    store: RecipeStore = Depends(get_recipe_store),
) -> CommandInterpreter:
    return CommandInterpreter(search, store)
