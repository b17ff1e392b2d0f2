# features/voice/clova_speech_client.py
"""
Clova Speech 기반 Transcriber (TRANSCRIBER=clova 일 때 사용)
"""
import json

import httpx

from services.audio import MIME_EXTENSIONS, Transcriber
from utils.logger import get_logger

logger = get_logger("clova_speech", tag="ClovaSpeech")


class ClovaSpeechTranscriber(Transcriber):
    name = "clova"

    def __init__(self, invoke_url: str, secret_key: str, language: str = "en-US", timeout: float = 30.0):
        self.invoke_url = invoke_url.rstrip("/")
        self.secret_key = secret_key
        self.language = language
        self.timeout = timeout

    @property
    def api_key(self) -> str:
        return self.secret_key

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout)

    async def _transcribe(self, audio_bytes: bytes, mime: str) -> str:
        """recognizer/upload 동기 호출. 빈 문자열은 상위에서 TRANSCRIPTION_EMPTY 처리"""
        request_url = f"{self.invoke_url}/recognizer/upload"

        params = {
            "language": self.language,
            "completion": "sync",
            "callback": "",
            "userdata": {"id": "voice_command"},
            "wordAlignment": False,
            "fullText": True,
            "diarization": {"enable": False},
        }
        filename = f"audio.{MIME_EXTENSIONS.get(mime, 'webm')}"

        async with self._client() as client:
            response = await client.post(
                request_url,
                headers={"X-CLOVASPEECH-API-KEY": self.secret_key},
                files={
                    "media": (filename, audio_bytes, mime),
                    "params": (None, json.dumps(params, ensure_ascii=False), "application/json"),
                },
            )
            response.raise_for_status()
            result = response.json()

            logger.debug(f"응답: {result}")

            return result.get("text", "").strip()
