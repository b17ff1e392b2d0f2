import pytest

from utils.parser import extract_recipe_query, parse_timer_minutes


@pytest.mark.parametrize("command, expected", [
    ("find chocolate cake", "chocolate cake"),
    ("search for lasagna", "for lasagna"),
    ("give me a recipe for tacos", "give me a  tacos"),
    ("cook pasta", "pasta"),
    ("let's make curry", "let's  curry"),
    ("start the carbonara", "the carbonara"),
    ("find chocolate cake recipe", "chocolate cake recipe"),
])
def test_extract_recipe_query_strips_scaffold_words(command, expected):
    assert extract_recipe_query(command) == expected


def test_extract_recipe_query_falls_back_when_nothing_left():
    assert extract_recipe_query("find") == "recipe"
    assert extract_recipe_query("  cook  ") == "recipe"
    assert extract_recipe_query("") == "recipe"


def test_extract_recipe_query_over_strips_inside_words():
    # plain substring removal also eats "cook" inside "cookies"
    assert extract_recipe_query("find cookies") == "ies"


@pytest.mark.parametrize("command", [
    "find chocolate cake",
    "cook pasta",
    "search for a recipe for spicy ramen",
    "make",
])
def test_extract_recipe_query_is_idempotent(command):
    once = extract_recipe_query(command)
    assert extract_recipe_query(once) == once


@pytest.mark.parametrize("command, expected", [
    ("set a timer for 10 minutes", "10"),
    ("timer 5minute", "5"),
    ("timer for 3 minutes then 7 minutes", "3"),
    ("timer for ten minutes", None),
    ("timer 10 seconds", None),
])
def test_parse_timer_minutes(command, expected):
    assert parse_timer_minutes(command) == expected
