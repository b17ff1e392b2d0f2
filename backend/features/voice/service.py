"""
음성/텍스트 명령 처리 서비스

  텍스트: 명령 → CommandInterpreter → 응답
  음성:   STT → 명령 → CommandInterpreter → 응답 (+ 인식된 텍스트)

세션 갱신은 SessionRegistry가 세션 ID 단위로 직렬화한다.
"""
from typing import Optional

from core.exceptions import AssistantError, ErrorKind
from features.cooking.interpreter import CommandInterpreter
from features.cooking.schemas import AssistantResponse
from features.cooking.session import DEFAULT_SESSION_ID, SessionRegistry
from services.audio import Transcriber
from utils.logger import get_logger

logger = get_logger("voice_service", tag="Voice")


async def process_text_command(
    command: str,
    interpreter: CommandInterpreter,
    registry: SessionRegistry,
    session_id: Optional[str] = None,
) -> AssistantResponse:
    """텍스트 명령 처리"""
    if not isinstance(command, str) or not command.strip():
        raise AssistantError(ErrorKind.INVALID_INPUT, "Command is required.")

    session_id = session_id or DEFAULT_SESSION_ID
    logger.info(f"[{session_id}] 명령: {command}")

    async def run(session):
        return await interpreter.interpret(command, session)

    return await registry.apply(session_id, run)


async def process_voice_command(
    audio_bytes: bytes,
    interpreter: CommandInterpreter,
    registry: SessionRegistry,
    transcriber: Transcriber,
    mime_hint: Optional[str] = None,
    session_id: Optional[str] = None,
    max_bytes: Optional[int] = None,
) -> AssistantResponse:
    """음성 명령 처리 (STT → 명령 처리)"""
    if not audio_bytes:
        raise AssistantError(ErrorKind.INVALID_INPUT, "No audio file provided.")
    if max_bytes is not None and len(audio_bytes) > max_bytes:
        limit_mb = max_bytes // (1024 * 1024)
        raise AssistantError(
            ErrorKind.INVALID_INPUT,
            f"Audio file too large. Maximum size is {limit_mb}MB."
        )

    transcription = await transcriber.transcribe(audio_bytes, mime_hint)
    logger.info(f"[STT] 인식: \"{transcription}\"")

    response = await process_text_command(transcription, interpreter, registry, session_id)
    return response.model_copy(update={"transcription": transcription})
