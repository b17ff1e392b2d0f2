# utils/parser.py
"""
파싱 유틸
"""
import re
from typing import Optional

# 제거 순서 고정 (단순 부분 문자열 치환)
QUERY_SCAFFOLD_WORDS = ("find", "search", "recipe for", "cook", "make", "start")
DEFAULT_QUERY = "recipe"

TIMER_PATTERN = re.compile(r"(\d+)\s*minute")


def extract_recipe_query(command: str) -> str:
    """명령어에서 동사 부분을 지우고 요리 이름만 남김

    "cookies" 같은 단어도 "ies"로 깎이지만, 검색 쿼리 동작이 바뀌지 않도록
    그대로 둔다.
    """
    query = command
    for word in QUERY_SCAFFOLD_WORDS:
        query = query.replace(word, "")
    query = query.strip()

    return query or DEFAULT_QUERY


def parse_timer_minutes(command: str) -> Optional[str]:
    """'10 minutes' 형태에서 첫 번째 숫자 추출"""
    match = TIMER_PATTERN.search(command)
    if not match:
        return None
    return match.group(1)
