from typing import Dict, List

import pytest

from quiz_mcp.data.question_catalog import QUIZ_QUESTIONS, QuestionCatalog
from quiz_mcp.models.quiz import Category, Difficulty, QuestionEntry


@pytest.fixture
def anyio_backend():
    return "asyncio"


def copy_questions() -> Dict[Category, Dict[Difficulty, List[QuestionEntry]]]:
    """Mutable copy of the bundled question table"""
    return {
        category: {difficulty: list(pool) for difficulty, pool in pools.items()}
        for category, pools in QUIZ_QUESTIONS.items()
    }


@pytest.fixture
def catalog_with_empty_science_hard() -> QuestionCatalog:
    questions = copy_questions()
    questions[Category.SCIENCE][Difficulty.HARD] = []
    return QuestionCatalog(questions)


@pytest.fixture
def questions() -> Dict[Category, Dict[Difficulty, List[QuestionEntry]]]:
    return copy_questions()
