from utils.intent import Intent, candidate_intents


def test_search_comes_before_cook():
    intents = candidate_intents("find something to cook", has_recipe=False)
    assert intents[:2] == [Intent.SEARCH, Intent.COOK]


def test_cooking_intents_require_active_recipe():
    assert candidate_intents("next step", has_recipe=False) == [Intent.UNKNOWN]
    assert candidate_intents("next step", has_recipe=True) == [Intent.NEXT, Intent.UNKNOWN]


def test_cooking_intents_keep_their_order():
    intents = candidate_intents("go back and repeat the ingredients again", has_recipe=True)
    assert intents == [Intent.PREV, Intent.REPEAT, Intent.INGREDIENTS, Intent.UNKNOWN]


def test_timer_needs_both_words():
    assert Intent.TIMER not in candidate_intents("set a timer", has_recipe=False)
    assert Intent.TIMER not in candidate_intents("wait 5 minutes", has_recipe=False)
    assert Intent.TIMER in candidate_intents("set a timer for 5 minutes", has_recipe=False)


def test_saved_recipes_listing():
    assert candidate_intents("show my recipes", has_recipe=False) == [Intent.SAVED_RECIPES, Intent.UNKNOWN]
    assert candidate_intents("saved recipes please", has_recipe=True) == [Intent.SAVED_RECIPES, Intent.UNKNOWN]


def test_unknown_is_always_last():
    assert candidate_intents("hello there", has_recipe=True) == [Intent.UNKNOWN]
