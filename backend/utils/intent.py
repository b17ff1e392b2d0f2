# backend/utils/intent.py
"""
의도 감지 유틸 (규칙 기반, 순서대로 첫 매칭 우선)
"""
from typing import Iterable, List


class Intent:
    # 레시피 탐색
    SEARCH = "search"
    COOK = "cook"

    # 조리 모드 의도 (진행 중인 레시피가 있을 때만)
    NEXT = "next_step"
    PREV = "prev_step"
    REPEAT = "repeat_step"
    INGREDIENTS = "ingredients"

    TIMER = "timer"
    SAVED_RECIPES = "saved_recipes"

    UNKNOWN = "unknown"


INTENT_KEYWORDS = {
    Intent.SEARCH: ("find", "search", "recipe for"),
    Intent.COOK: ("cook", "make", "start"),
    Intent.NEXT: ("next", "continue"),
    Intent.PREV: ("previous", "back"),
    Intent.REPEAT: ("repeat", "again"),
    Intent.INGREDIENTS: ("ingredients",),
    Intent.SAVED_RECIPES: ("my recipes", "saved recipes"),
}

COOKING_INTENTS = (Intent.NEXT, Intent.PREV, Intent.REPEAT, Intent.INGREDIENTS)


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(k in text for k in keywords)


def is_timer_request(text: str) -> bool:
    """'timer'와 'minute'가 모두 있어야 타이머 요청"""
    return "timer" in text and "minute" in text


def candidate_intents(text: str, has_recipe: bool) -> List[str]:
    """조건을 만족하는 의도를 평가 순서대로 반환

    text는 이미 소문자여야 함. 앞쪽 의도가 응답을 만들지 못하면 다음 의도로
    넘어가고, 모두 실패하면 UNKNOWN(기본 응답)으로 끝난다.
    """
    intents = []

    if contains_any(text, INTENT_KEYWORDS[Intent.SEARCH]):
        intents.append(Intent.SEARCH)
    if contains_any(text, INTENT_KEYWORDS[Intent.COOK]):
        intents.append(Intent.COOK)

    if has_recipe:
        for intent in COOKING_INTENTS:
            if contains_any(text, INTENT_KEYWORDS[intent]):
                intents.append(intent)

    if is_timer_request(text):
        intents.append(Intent.TIMER)
    if contains_any(text, INTENT_KEYWORDS[Intent.SAVED_RECIPES]):
        intents.append(Intent.SAVED_RECIPES)

    intents.append(Intent.UNKNOWN)
    return intents
