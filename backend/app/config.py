# backend/app/config.py
"""
설정 및 환경변수 관리
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # API 설정
    APP_NAME: str = "Voice Cooking Assistant API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    # STT: "whisper" (OpenAI) 또는 "clova" (Naver Clova Speech)
    TRANSCRIBER: str = "whisper"

    # OpenAI Whisper
    OPENAI_API_KEY: str = ""
    WHISPER_MODEL: str = "whisper-1"
    TRANSCRIBE_LANGUAGE: str = "en"

    # Clova Speech STT
    CLOVA_STT_INVOKE_URL: str = ""
    CLOVA_STT_SECRET_KEY: str = ""

    UPSTREAM_TIMEOUT_SECONDS: float = 30.0
    MAX_AUDIO_BYTES: int = 25 * 1024 * 1024

    # 레시피 검색 / 저장소
    SEARCH_BACKEND: str = "mock"
    RECIPE_STORE: str = "memory"

    # MySQL (RECIPE_STORE=mysql 일 때만 사용)
    MYSQL_HOST: str = ""
    MYSQL_PORT: int = 3306
    MYSQL_USER: str = ""
    MYSQL_PASSWORD: str = ""
    MYSQL_DATABASE: str = ""

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"


settings = Settings()
