# utils/logger.py
"""
로거 유틸 - 모듈별 컬러 콘솔 로거
"""
import logging

from app.config import settings


def get_logger(name: str, tag: str = "") -> logging.Logger:
    """이름별 로거 생성 (핸들러는 한 번만 붙임)"""
    logger = logging.getLogger(name)
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        label = tag or name
        formatter = logging.Formatter(
            f"\033[36m[{label}]\033[0m %(asctime)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
