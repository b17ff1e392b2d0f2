# features/cooking/session.py
"""
CookingSession - 진행 중인 레시피 + 현재 단계
SessionRegistry - 대화(세션 ID)별 세션 보관, 같은 ID는 한 번에 하나씩 처리
"""
import asyncio
from dataclasses import dataclass, replace
from typing import Awaitable, Callable, Dict, Optional, Tuple, TypeVar

from features.recipe.schemas import Recipe
from utils.helpers import generate_session_id

DEFAULT_SESSION_ID = "default"

T = TypeVar("T")


@dataclass(frozen=True)
class CookingSession:
    """조리 세션 (불변 값, 변경 시 새 객체 반환)"""
    session_id: str = DEFAULT_SESSION_ID
    active_recipe: Optional[Recipe] = None
    step_index: int = 0

    @property
    def has_recipe(self) -> bool:
        return self.active_recipe is not None

    @property
    def total_steps(self) -> int:
        if not self.active_recipe:
            return 0
        return len(self.active_recipe.instructions)

    @property
    def last_index(self) -> int:
        return self.total_steps - 1

    @property
    def current_instruction(self) -> str:
        return self.active_recipe.instructions[self.step_index]

    def start(self, recipe: Recipe) -> "CookingSession":
        """레시피 설정 (기존 레시피는 덮어씀)"""
        return replace(self, active_recipe=recipe, step_index=0)

    def move_to(self, step_index: int) -> "CookingSession":
        if not 0 <= step_index < self.total_steps:
            raise IndexError(f"step {step_index} out of range for {self.total_steps} steps")
        return replace(self, step_index=step_index)


class SessionRegistry:
    """세션 ID별 CookingSession 저장소

    - 같은 ID의 apply는 ID별 asyncio.Lock으로 하나씩 실행
    - 락은 잡고 있거나 기다리는 apply가 없어지면 정리
    - 실행 중에 drop된 세션은 apply가 끝나도 다시 저장하지 않음
    """

    def __init__(self):
        self._sessions: Dict[str, CookingSession] = {}
        self._locks: Dict[str, asyncio.Lock] = {}
        self._users: Dict[str, int] = {}
        self._drops: Dict[str, int] = {}

    def create(self) -> str:
        session_id = generate_session_id(self._sessions)
        self._sessions[session_id] = CookingSession(session_id=session_id)
        return session_id

    def get(self, session_id: str) -> Optional[CookingSession]:
        return self._sessions.get(session_id)

    def drop(self, session_id: str) -> bool:
        if session_id in self._users:
            self._drops[session_id] = self._drops.get(session_id, 0) + 1
        return self._sessions.pop(session_id, None) is not None

    def _checkout(self, session_id: str) -> asyncio.Lock:
        lock = self._locks.get(session_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[session_id] = lock
        self._users[session_id] = self._users.get(session_id, 0) + 1
        return lock

    def _checkin(self, session_id: str):
        remaining = self._users[session_id] - 1
        if remaining:
            self._users[session_id] = remaining
            return
        del self._users[session_id]
        self._locks.pop(session_id, None)
        self._drops.pop(session_id, None)

    def _store(self, session_id: str, updated: CookingSession):
        # 발급되지 않은 ID의 빈 세션은 새로 만든 세션과 같으므로 보관하지 않음
        if session_id not in self._sessions and not updated.has_recipe:
            return
        self._sessions[session_id] = updated

    async def apply(
        self,
        session_id: str,
        handler: Callable[[CookingSession], Awaitable[Tuple[T, CookingSession]]],
    ) -> T:
        """세션에 handler 적용. 성공했을 때만 새 세션을 저장"""
        lock = self._checkout(session_id)
        try:
            async with lock:
                drops = self._drops.get(session_id, 0)
                session = self._sessions.get(session_id) or CookingSession(session_id=session_id)
                result, updated = await handler(session)
                if self._drops.get(session_id, 0) == drops:
                    self._store(session_id, updated)
                return result
        finally:
            self._checkin(session_id)

    def __len__(self) -> int:
        return len(self._sessions)
