from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from conftest import FakeTranscriber
from core.exceptions import AssistantError, ErrorKind
from features.voice.clova_speech_client import ClovaSpeechTranscriber
from services.audio import WhisperTranscriber, normalize_mime


@pytest.mark.parametrize("hint, expected", [
    (None, "audio/webm"),
    ("", "audio/webm"),
    ("application/octet-stream", "audio/webm"),
    ("audio/webm;codecs=opus", "audio/webm"),
    ("audio/wav", "audio/wav"),
])
def test_normalize_mime(hint, expected):
    assert normalize_mime(hint) == expected


@pytest.mark.asyncio
async def test_transcribe_strips_text():
    transcriber = FakeTranscriber(text="  next step \n")

    assert await transcriber.transcribe(b"abc", "audio/wav") == "next step"
    assert transcriber.calls == [(b"abc", "audio/wav")]


@pytest.mark.asyncio
async def test_transcribe_empty_result_is_transcription_empty():
    with pytest.raises(AssistantError) as exc:
        await FakeTranscriber(text="   ").transcribe(b"abc")
    assert exc.value.kind == ErrorKind.TRANSCRIPTION_EMPTY


@pytest.mark.asyncio
async def test_transcribe_upstream_error_is_transcription_failed():
    transcriber = FakeTranscriber(error=httpx.ConnectError("refused"))

    with pytest.raises(AssistantError) as exc:
        await transcriber.transcribe(b"abc")
    assert exc.value.kind == ErrorKind.TRANSCRIPTION_FAILED
    assert exc.value.status_code == 502


@pytest.mark.asyncio
async def test_whisper_sends_model_language_and_file():
    create = AsyncMock(return_value=SimpleNamespace(text="Find pasta"))
    client = SimpleNamespace(audio=SimpleNamespace(transcriptions=SimpleNamespace(create=create)))
    transcriber = WhisperTranscriber(api_key="sk-test", client=client)

    text = await transcriber.transcribe(b"\x00\x01", None)

    assert text == "Find pasta"
    create.assert_awaited_once_with(
        model="whisper-1",
        file=("audio.webm", b"\x00\x01", "audio/webm"),
        language="en",
    )


@pytest.mark.asyncio
async def test_clova_posts_media_and_reads_text():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1/recognizer/upload"
        assert request.headers["X-CLOVASPEECH-API-KEY"] == "secret"
        return httpx.Response(200, json={"text": " cook pasta "})

    transcriber = ClovaSpeechTranscriber("https://clova.example/v1/", "secret")
    mock_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    with patch.object(transcriber, "_client", return_value=mock_client):
        text = await transcriber.transcribe(b"audio", "audio/wav")

    assert text == "cook pasta"


@pytest.mark.asyncio
async def test_clova_http_error_is_transcription_failed():
    transcriber = ClovaSpeechTranscriber("https://clova.example", "secret")
    mock_client = httpx.AsyncClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(500, json={}))
    )

    with patch.object(transcriber, "_client", return_value=mock_client):
        with pytest.raises(AssistantError) as exc:
            await transcriber.transcribe(b"audio")
    assert exc.value.kind == ErrorKind.TRANSCRIPTION_FAILED
