"""
음성 처리 서비스 - STT (OpenAI Whisper / Clova Speech)
"""
from abc import ABC, abstractmethod
from typing import Optional

from openai import AsyncOpenAI

from app.config import settings
from core.exceptions import AssistantError, ErrorKind
from utils.logger import get_logger

logger = get_logger("audio", tag="STT")

DEFAULT_MIME = "audio/webm"
MIME_EXTENSIONS = {
    "audio/webm": "webm",
    "audio/wav": "wav",
    "audio/x-wav": "wav",
    "audio/mpeg": "mp3",
    "audio/mp4": "m4a",
    "audio/ogg": "ogg",
}


def normalize_mime(mime_hint: Optional[str]) -> str:
    """비어있거나 octet-stream이면 브라우저 녹음 기본값(webm)"""
    if not mime_hint or mime_hint == "application/octet-stream":
        return DEFAULT_MIME
    return mime_hint.split(";")[0].strip()


class Transcriber(ABC):
    """STT 추상 클래스"""

    name = "base"

    @abstractmethod
    async def _transcribe(self, audio_bytes: bytes, mime: str) -> str:
        pass

    @property
    def api_key(self) -> str:
        return ""

    async def transcribe(self, audio_bytes: bytes, mime_hint: Optional[str] = None) -> str:
        """음성 바이트 → 텍스트. 실패/무음은 AssistantError"""
        mime = normalize_mime(mime_hint)
        try:
            text = await self._transcribe(audio_bytes, mime)
        except AssistantError:
            raise
        except Exception as e:
            logger.error(f"{self.name} STT 오류: {e}")
            raise AssistantError(
                ErrorKind.TRANSCRIPTION_FAILED,
                "Voice transcription failed. Please check the speech service configuration "
                "and try again. You can also type your command instead."
            ) from e

        text = (text or "").strip()
        if not text:
            raise AssistantError(
                ErrorKind.TRANSCRIPTION_EMPTY,
                "No speech detected. Please try speaking more clearly."
            )

        logger.info(f">> STT 완료: {text[:30]}...")
        return text


class WhisperTranscriber(Transcriber):
    """OpenAI Whisper STT"""

    name = "whisper"

    def __init__(
        self,
        api_key: str,
        model: str = "whisper-1",
        language: str = "en",
        timeout: float = 30.0,
        client: Optional[AsyncOpenAI] = None,
    ):
        self._api_key = api_key
        self.model = model
        self.language = language
        self.client = client or AsyncOpenAI(api_key=api_key, timeout=timeout)

    @property
    def api_key(self) -> str:
        return self._api_key

    async def _transcribe(self, audio_bytes: bytes, mime: str) -> str:
        filename = f"audio.{MIME_EXTENSIONS.get(mime, 'webm')}"
        result = await self.client.audio.transcriptions.create(
            model=self.model,
            file=(filename, audio_bytes, mime),
            language=self.language,
        )
        return result.text


def get_transcriber() -> Transcriber:
    """설정에 따라 STT 백엔드 선택"""
    engine = settings.TRANSCRIBER.lower()

    if engine == "clova":
        from features.voice.clova_speech_client import ClovaSpeechTranscriber

        if not settings.CLOVA_STT_INVOKE_URL or not settings.CLOVA_STT_SECRET_KEY:
            raise RuntimeError("CLOVA_STT_INVOKE_URL / CLOVA_STT_SECRET_KEY가 .env에 설정되지 않았습니다.")
        return ClovaSpeechTranscriber(
            settings.CLOVA_STT_INVOKE_URL,
            settings.CLOVA_STT_SECRET_KEY,
            timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
        )

    if engine != "whisper":
        logger.warning(f"지원하지 않는 STT 엔진: {engine}, whisper 사용")

    return WhisperTranscriber(
        api_key=settings.OPENAI_API_KEY,
        model=settings.WHISPER_MODEL,
        language=settings.TRANSCRIBE_LANGUAGE,
        timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
    )
