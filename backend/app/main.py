# backend/app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from core.dependencies import get_recipe_store, get_session_registry
from core.exceptions import AssistantError
from features.cooking.router import router as cooking_router
from features.recipe.router import router as recipe_router
from features.voice.router import router as voice_router
from utils.logger import get_logger

logger = get_logger("main", tag="App")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("=" * 60)
    logger.info(f"{settings.APP_NAME} 시작!")
    logger.info("=" * 60)

    if settings.RECIPE_STORE.lower() == "mysql":
        from models.mysql_db import init_recipe_table

        try:
            init_recipe_table()
            logger.info("DB 테이블 자동 생성 완료")
        except Exception as e:
            logger.error(f"DB 테이블 생성 실패: {e}")

    yield

    logger.info("서버 종료")


app = FastAPI(
    title=settings.APP_NAME,
    description="음성/텍스트 명령 기반 조리 도우미 (규칙 기반 명령 해석 + 조리 세션)",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AssistantError)
async def assistant_error_handler(request: Request, exc: AssistantError):
    logger.warning(f"{request.url.path} 실패: {exc.kind.value} - {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": "Processing failed.",
            "kind": exc.kind.value,
            "message": exc.message,
        },
    )


app.include_router(voice_router, prefix="/api/voice", tags=["Voice"])
app.include_router(cooking_router, prefix="/api/cook", tags=["Cooking"])
app.include_router(recipe_router, prefix="/api/recipe", tags=["Recipe"])


@app.get("/")
async def root():
    return {"message": "Voice Cooking Assistant API"}


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "store": type(get_recipe_store()).__name__,
        "active_sessions": len(get_session_registry()),
    }
