"""
커스텀 예외
"""
from enum import Enum

from fastapi import HTTPException


class ErrorKind(str, Enum):
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    TRANSCRIPTION_FAILED = "transcription_failed"
    TRANSCRIPTION_EMPTY = "transcription_empty"
    INVALID_INPUT = "invalid_input"


# ErrorKind → HTTP status
ERROR_STATUS = {
    ErrorKind.UPSTREAM_UNAVAILABLE: 503,
    ErrorKind.TRANSCRIPTION_FAILED: 502,
    ErrorKind.TRANSCRIPTION_EMPTY: 400,
    ErrorKind.INVALID_INPUT: 400,
}


class AssistantError(Exception):
    """명령 처리 실패 (응답 없이 전체 호출 실패)"""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return ERROR_STATUS[self.kind]


class RecipeNotFoundError(HTTPException):
    def __init__(self, recipe_id: int):
        super().__init__(
            status_code=404,
            detail=f"Recipe {recipe_id} not found"
        )


class SessionNotFoundError(HTTPException):
    def __init__(self, session_id: str):
        super().__init__(
            status_code=404,
            detail=f"Session {session_id} not found"
        )
