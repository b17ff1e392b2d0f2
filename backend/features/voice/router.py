"""
음성/텍스트 명령 라우터

엔드포인트:
  POST /process-text  - 텍스트 명령 → 응답 (JSON)
  POST /transcribe    - 음성 → STT → 응답 (JSON)
  GET  /health        - STT 설정 상태 확인
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from app.config import settings
from core.dependencies import get_interpreter, get_session_registry, get_transcriber
from features.cooking.interpreter import CommandInterpreter
from features.cooking.schemas import AssistantResponse, CommandRequest
from features.cooking.session import SessionRegistry
from features.voice.service import process_text_command, process_voice_command
from services.audio import Transcriber

router = APIRouter()


@router.post(
    "/process-text",
    response_model=AssistantResponse,
    response_model_exclude_none=True,
)
async def process_text(
    request: CommandRequest,
    interpreter: CommandInterpreter = Depends(get_interpreter),
    registry: SessionRegistry = Depends(get_session_registry),
):
    """
    텍스트 명령 처리

    Request (JSON):
        {"command": "find pasta recipe", "sessionId": "..."}

    Response (JSON):
        {"responseText": "...", "action": "...", "recipeData"?, "searchResults"?,
         "currentStepIndex"?, "timerDuration"?}
    """
    return await process_text_command(
        request.command, interpreter, registry, session_id=request.session_id
    )


@router.post(
    "/transcribe",
    response_model=AssistantResponse,
    response_model_exclude_none=True,
)
async def transcribe(
    audioFile: UploadFile = File(..., description="녹음된 음성 파일"),
    sessionId: Optional[str] = Form(None, description="조리 세션 ID"),
    interpreter: CommandInterpreter = Depends(get_interpreter),
    registry: SessionRegistry = Depends(get_session_registry),
    transcriber: Transcriber = Depends(get_transcriber),
):
    """음성 명령 처리 - 응답에 인식된 텍스트(transcription) 포함"""
    max_bytes = settings.MAX_AUDIO_BYTES
    # 최대 크기 + 1 바이트까지만 읽음 (초과 여부는 서비스에서 판단)
    audio_bytes = await audioFile.read(max_bytes + 1)

    return await process_voice_command(
        audio_bytes,
        interpreter,
        registry,
        transcriber,
        mime_hint=audioFile.content_type,
        session_id=sessionId,
        max_bytes=max_bytes,
    )


def mask_key(key: str) -> str:
    if len(key) < 12:
        return "No key" if not key else "***"
    return f"{key[:7]}...{key[-4:]}"


@router.get("/health")
async def health_check(transcriber: Transcriber = Depends(get_transcriber)):
    """Voice API 상태 확인"""
    key = transcriber.api_key
    return {
        "status": "ok",
        "service": "voice",
        "transcriber": transcriber.name,
        "hasApiKey": bool(key),
        "keyPreview": mask_key(key),
        "message": "API key is configured" if key else "API key is missing",
    }
