import itertools
import random
from collections import Counter

import pytest

from quiz_mcp.data.question_catalog import get_default_catalog
from quiz_mcp.models.quiz import Category, Difficulty
from quiz_mcp.services.quiz_selector import (
    EmptyPoolError,
    QuizSelectionError,
    QuizSelector,
    resolve_defaults,
)


@pytest.mark.parametrize("category,difficulty", list(itertools.product(Category, Difficulty)))
def test_selected_entry_comes_from_resolved_pool(category, difficulty):
    selector = QuizSelector()

    selection = selector.select_question(category, difficulty)

    assert selection.category is category
    assert selection.difficulty is difficulty
    assert selection.entry in get_default_catalog().lookup(category, difficulty)


def test_defaults_to_general_medium():
    selector = QuizSelector()

    for _ in range(20):
        selection = selector.select_question()
        assert (selection.category, selection.difficulty) == (Category.GENERAL, Difficulty.MEDIUM)
        assert selection.entry in get_default_catalog().lookup(Category.GENERAL, Difficulty.MEDIUM)


def test_partial_requests_default_the_missing_field():
    selector = QuizSelector()

    assert selector.select_question(category=Category.SCIENCE).difficulty is Difficulty.MEDIUM
    assert selector.select_question(difficulty=Difficulty.HARD).category is Category.GENERAL


def test_resolve_defaults():
    assert resolve_defaults() == (Category.GENERAL, Difficulty.MEDIUM)
    assert resolve_defaults(Category.HISTORY, Difficulty.EASY) == (Category.HISTORY, Difficulty.EASY)


def test_draws_cover_whole_pool():
    selector = QuizSelector()
    pool = get_default_catalog().lookup(Category.SCIENCE, Difficulty.HARD)

    counts = Counter(
        selector.select_question(Category.SCIENCE, Difficulty.HARD).entry for _ in range(1000)
    )

    assert set(counts) == set(pool)


def test_draws_are_roughly_uniform_with_seeded_rng():
    selector = QuizSelector(rng=random.Random(1234))

    counts = Counter(
        selector.select_question(Category.GEOGRAPHY, Difficulty.EASY).entry for _ in range(3000)
    )

    assert len(counts) == 3
    assert all(800 < count < 1200 for count in counts.values())


def test_seeded_rng_is_reproducible():
    first = QuizSelector(rng=random.Random(7))
    second = QuizSelector(rng=random.Random(7))

    draws_a = [first.select_question(Category.HISTORY, Difficulty.HARD).entry for _ in range(25)]
    draws_b = [second.select_question(Category.HISTORY, Difficulty.HARD).entry for _ in range(25)]

    assert draws_a == draws_b


def test_selection_does_not_change_pool():
    selector = QuizSelector()
    before = get_default_catalog().lookup(Category.ENTERTAINMENT, Difficulty.MEDIUM)

    for _ in range(50):
        selector.select_question(Category.ENTERTAINMENT, Difficulty.MEDIUM)

    assert get_default_catalog().lookup(Category.ENTERTAINMENT, Difficulty.MEDIUM) == before


def test_empty_pool_raises(catalog_with_empty_science_hard):
    selector = QuizSelector(catalog=catalog_with_empty_science_hard)

    with pytest.raises(EmptyPoolError) as exc_info:
        selector.select_question(Category.SCIENCE, Difficulty.HARD)

    assert isinstance(exc_info.value, QuizSelectionError)
    assert exc_info.value.category is Category.SCIENCE
    assert exc_info.value.difficulty is Difficulty.HARD
    assert "science" in str(exc_info.value)
    assert "hard" in str(exc_info.value)


def test_empty_pool_does_not_affect_other_pairs(catalog_with_empty_science_hard):
    selector = QuizSelector(catalog=catalog_with_empty_science_hard)

    selection = selector.select_question(Category.SCIENCE, Difficulty.EASY)

    assert selection.entry in catalog_with_empty_science_hard.lookup(Category.SCIENCE, Difficulty.EASY)
