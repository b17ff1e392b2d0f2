# features/cooking/router.py
"""
조리 세션 라우터 (세션 관리 + WebSocket)
"""
import json

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from core.dependencies import get_interpreter, get_session_registry
from core.exceptions import AssistantError, ErrorKind, SessionNotFoundError
from core.websocket import manager
from features.cooking.interpreter import CommandInterpreter
from features.cooking.schemas import SessionCreated, SessionSnapshot
from features.cooking.session import SessionRegistry
from features.voice.service import process_text_command
from utils.logger import get_logger

logger = get_logger("cook_router", tag="Cook WS")

router = APIRouter()


@router.post("/session", response_model=SessionCreated)
async def create_session(registry: SessionRegistry = Depends(get_session_registry)):
    """새 조리 세션 생성"""
    return SessionCreated(session_id=registry.create())


@router.get("/session/{session_id}", response_model=SessionSnapshot)
async def get_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
):
    """현재 레시피 + 단계 조회"""
    session = registry.get(session_id)
    if session is None:
        raise SessionNotFoundError(session_id)

    return SessionSnapshot(
        session_id=session.session_id,
        recipe=session.active_recipe,
        current_step_index=session.step_index,
        total_steps=session.total_steps,
    )


@router.delete("/session/{session_id}")
async def delete_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
):
    if not registry.drop(session_id):
        raise SessionNotFoundError(session_id)
    return {"message": "Session ended"}


def _error_frame(kind: str, message: str) -> dict:
    return {"type": "error", "kind": kind, "message": message}


def _parse_command_frame(raw: str) -> str:
    """{"type": "command", "text": "..."} 프레임에서 명령 텍스트 추출. 형식 오류는 INVALID_INPUT"""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise AssistantError(ErrorKind.INVALID_INPUT, "Message must be valid JSON.") from e

    if not isinstance(data, dict):
        raise AssistantError(ErrorKind.INVALID_INPUT, "Message must be a JSON object.")
    if data.get("type") != "command":
        raise AssistantError(ErrorKind.INVALID_INPUT, f"Unsupported message type: {data.get('type')}")

    text = data.get("text", "")
    if not isinstance(text, str):
        raise AssistantError(ErrorKind.INVALID_INPUT, "Command text must be a string.")
    return text


@router.websocket("/ws/{session_id}")
async def cooking_websocket(
    websocket: WebSocket,
    session_id: str,
    interpreter: CommandInterpreter = Depends(get_interpreter),
    registry: SessionRegistry = Depends(get_session_registry),
):
    """연결 1개 = 조리 세션 1개. 연결이 끊기면 세션도 삭제"""
    await manager.connect(websocket, session_id)

    try:
        while True:
            raw = await websocket.receive_text()

            try:
                command = _parse_command_frame(raw)
                response = await process_text_command(
                    command, interpreter, registry, session_id=session_id
                )
            except AssistantError as e:
                logger.warning(f"[{session_id}] 명령 실패: {e.kind.value} - {e.message}")
                await manager.send_message(session_id, _error_frame(e.kind.value, e.message))
                continue

            await manager.send_message(session_id, {
                "type": "assistant_response",
                **response.to_wire()
            })

    except WebSocketDisconnect:
        logger.info(f"[{session_id}] 연결 종료")
    finally:
        manager.disconnect(session_id)
        registry.drop(session_id)
