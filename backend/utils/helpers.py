# utils/helpers.py
"""
세션 ID 헬퍼
"""
import uuid


def generate_session_id(existing=()) -> str:
    """조리 세션 ID 생성 (이미 쓰는 ID와 겹치지 않게)"""
    while True:
        session_id = uuid.uuid4().hex
        if session_id not in existing:
            return session_id
