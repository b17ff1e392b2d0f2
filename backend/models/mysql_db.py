# backend/models/mysql_db.py
"""
MySQL 연결 관리 - recipe 테이블 CRUD
"""
import asyncio
import json
from contextlib import contextmanager
from typing import List

import pymysql

from app.config import settings
from features.recipe.schemas import Recipe
from models.recipe_store import RecipeStore
from utils.logger import get_logger

logger = get_logger("mysql_db", tag="MySQL")


def get_mysql_connection():
    """MySQL 커넥션 생성"""
    return pymysql.connect(
        host=settings.MYSQL_HOST,
        port=settings.MYSQL_PORT,
        user=settings.MYSQL_USER,
        password=settings.MYSQL_PASSWORD,
        database=settings.MYSQL_DATABASE,
        charset="utf8mb4",
        cursorclass=pymysql.cursors.DictCursor,
    )


@contextmanager
def mysql_cursor(connect=get_mysql_connection):
    """MySQL 커서 컨텍스트 매니저"""
    conn = connect()
    cursor = conn.cursor()
    try:
        yield cursor
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cursor.close()
        conn.close()


RECIPE_TABLE_DDL = """
    CREATE TABLE IF NOT EXISTS recipe (
        id BIGINT AUTO_INCREMENT PRIMARY KEY,
        title VARCHAR(255) NOT NULL,
        cuisine VARCHAR(100) NOT NULL DEFAULT '',
        description TEXT,
        image_url VARCHAR(2048) NOT NULL DEFAULT '',
        video_url VARCHAR(2048) NOT NULL DEFAULT '',
        prep_time INT NOT NULL DEFAULT 0,
        cook_time INT NOT NULL DEFAULT 0,
        servings INT NOT NULL DEFAULT 1,
        difficulty VARCHAR(50) NOT NULL DEFAULT 'Medium',
        ingredients JSON DEFAULT NULL,
        instructions JSON DEFAULT NULL,
        created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
        is_saved TINYINT(1) NOT NULL DEFAULT 0,
        source VARCHAR(50) NOT NULL DEFAULT 'Manual',
        INDEX idx_recipe_is_saved (is_saved)
    )
"""

RECIPE_COLUMNS = (
    "title", "cuisine", "description", "image_url", "video_url",
    "prep_time", "cook_time", "servings", "difficulty",
    "ingredients", "instructions", "created_at", "is_saved", "source",
)


def init_recipe_table(connect=get_mysql_connection):
    """recipe 테이블 자동 생성 (서버 시작 시 호출)"""
    with mysql_cursor(connect) as cur:
        cur.execute(RECIPE_TABLE_DDL)
    logger.info("🔧 [init] recipe 테이블 확인 완료")


def _row_to_recipe(row: dict) -> Recipe:
    row = dict(row)
    row["ingredients"] = json.loads(row["ingredients"]) if row.get("ingredients") else []
    row["instructions"] = json.loads(row["instructions"]) if row.get("instructions") else []
    row["is_saved"] = bool(row.get("is_saved"))
    row["description"] = row.get("description") or ""
    return Recipe(**row)


def _recipe_to_params(recipe: Recipe) -> tuple:
    data = recipe.model_dump()
    data["ingredients"] = json.dumps(recipe.ingredients, ensure_ascii=False)
    data["instructions"] = json.dumps(recipe.instructions, ensure_ascii=False)
    data["created_at"] = recipe.created_at.replace(tzinfo=None)
    data["is_saved"] = int(recipe.is_saved)
    return tuple(data[col] for col in RECIPE_COLUMNS)


def insert_recipe(recipe: Recipe, connect=get_mysql_connection) -> Recipe:
    """레시피 저장"""
    logger.info(f"📖 [recipe] INSERT - title: {recipe.title}")
    placeholders = ", ".join(["%s"] * len(RECIPE_COLUMNS))
    with mysql_cursor(connect) as cur:
        cur.execute(
            f"INSERT INTO recipe ({', '.join(RECIPE_COLUMNS)}) VALUES ({placeholders})",
            _recipe_to_params(recipe),
        )
        recipe_id = cur.lastrowid
        logger.info(f"📖 [recipe] INSERT 완료 - id: {recipe_id}")
        cur.execute("SELECT * FROM recipe WHERE id = %s", (recipe_id,))
        return _row_to_recipe(cur.fetchone())


def select_recipes(connect=get_mysql_connection) -> List[Recipe]:
    """레시피 전체 목록 (등록순)"""
    with mysql_cursor(connect) as cur:
        cur.execute("SELECT * FROM recipe ORDER BY id")
        return [_row_to_recipe(row) for row in cur.fetchall()]


def delete_recipe(recipe_id: int, connect=get_mysql_connection) -> bool:
    """레시피 삭제"""
    logger.info(f"🗑️ [recipe] DELETE - id: {recipe_id}")
    with mysql_cursor(connect) as cur:
        cur.execute("DELETE FROM recipe WHERE id = %s", (recipe_id,))
        return cur.rowcount > 0


class MySQLRecipeStore(RecipeStore):
    """pymysql은 동기라 워커 스레드에서 실행"""

    def __init__(self, connect=get_mysql_connection):
        self.connect = connect

    async def add(self, recipe: Recipe) -> Recipe:
        return await asyncio.to_thread(insert_recipe, recipe, self.connect)

    async def list(self) -> List[Recipe]:
        return await asyncio.to_thread(select_recipes, self.connect)

    async def delete(self, recipe_id: int) -> bool:
        return await asyncio.to_thread(delete_recipe, recipe_id, self.connect)
