# backend/features/recipe/router.py
"""
Recipe 검색/저장 API (저장소 단순 전달)
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from core.dependencies import get_recipe_search, get_recipe_store
from core.exceptions import AssistantError, ErrorKind, RecipeNotFoundError
from features.recipe.schemas import DeleteRecipeResponse, Recipe, SearchResult
from models.recipe_store import RecipeStore
from services.search import RecipeSearchService
from utils.logger import get_logger

logger = get_logger("recipe_router", tag="Recipe")

router = APIRouter()


@router.get("/search", response_model=List[SearchResult])
async def search_recipes(
    query: str = Query("", description="검색어"),
    search: RecipeSearchService = Depends(get_recipe_search),
):
    """레시피 검색"""
    if not query.strip():
        raise HTTPException(status_code=400, detail="Query parameter is required")

    try:
        return await search.search(query)
    except Exception as e:
        logger.error(f"검색 실패: {e}")
        raise AssistantError(ErrorKind.UPSTREAM_UNAVAILABLE, "Search failed") from e


@router.post("/save", response_model=Recipe)
async def save_recipe(
    result: SearchResult,
    search: RecipeSearchService = Depends(get_recipe_search),
    store: RecipeStore = Depends(get_recipe_store),
):
    """검색 결과를 레시피로 변환해서 저장"""
    recipe = search.to_recipe(result)
    recipe.is_saved = True

    try:
        saved = await store.add(recipe)
    except Exception as e:
        logger.error(f"저장 실패: {e}")
        raise AssistantError(ErrorKind.UPSTREAM_UNAVAILABLE, "Save failed") from e

    logger.info(f"레시피 저장: {saved.id} {saved.title}")
    return saved


@router.get("/saved", response_model=List[Recipe])
async def get_saved_recipes(store: RecipeStore = Depends(get_recipe_store)):
    """저장된 레시피 목록"""
    try:
        return await store.list_saved()
    except Exception as e:
        logger.error(f"저장 목록 조회 실패: {e}")
        raise AssistantError(ErrorKind.UPSTREAM_UNAVAILABLE, "Failed to get saved recipes") from e


@router.delete("/{recipe_id}", response_model=DeleteRecipeResponse)
async def delete_recipe(recipe_id: int, store: RecipeStore = Depends(get_recipe_store)):
    """레시피 삭제"""
    try:
        deleted = await store.delete(recipe_id)
    except Exception as e:
        logger.error(f"삭제 실패: {e}")
        raise AssistantError(ErrorKind.UPSTREAM_UNAVAILABLE, "Delete failed") from e

    if not deleted:
        raise RecipeNotFoundError(recipe_id)
    return DeleteRecipeResponse(message="Recipe deleted successfully")
