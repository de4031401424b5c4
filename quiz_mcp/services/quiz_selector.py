"""
Quiz Selector
Resolves an optional category/difficulty request to a single random question
"""
import logging
import random
from typing import Optional

from quiz_mcp.data.question_catalog import QuestionCatalog, get_default_catalog
from quiz_mcp.models.quiz import (
    Category,
    Difficulty,
    DEFAULT_CATEGORY,
    DEFAULT_DIFFICULTY,
    QuizSelection,
)

logger = logging.getLogger(__name__)


class QuizSelectionError(Exception):
    """Base exception for question selection errors"""
    pass


class EmptyPoolError(QuizSelectionError):
    """Raised when the resolved category/difficulty pool has no questions"""

    def __init__(self, category: Category, difficulty: Difficulty):
        self.category = category
        self.difficulty = difficulty
        super().__init__(
            f"No questions available for category '{category.value}' "
            f"at '{difficulty.value}' difficulty"
        )


def resolve_defaults(
    category: Optional[Category] = None,
    difficulty: Optional[Difficulty] = None
) -> tuple[Category, Difficulty]:
    """Fill in missing values: category -> general, difficulty -> medium"""
    return (
        category if category is not None else DEFAULT_CATEGORY,
        difficulty if difficulty is not None else DEFAULT_DIFFICULTY,
    )


class QuizSelector:
    """
    Draws one question uniformly at random from a catalog pool

    The catalog is read-only and the selector keeps no per-call state, so a
    single instance can serve concurrent tool calls.
    """

    def __init__(
        self,
        catalog: Optional[QuestionCatalog] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Args:
            catalog: Question catalog to draw from (bundled catalog if omitted)
            rng: Random source; pass a seeded random.Random for reproducible draws
        """
        self.catalog = catalog if catalog is not None else get_default_catalog()
        self._rng = rng if rng is not None else random.Random()

    def select_question(
        self,
        category: Optional[Category] = None,
        difficulty: Optional[Difficulty] = None
    ) -> QuizSelection:
        """
        Select a random question for the requested category and difficulty

        Args:
            category: Requested category, or None for the default (general)
            difficulty: Requested difficulty, or None for the default (medium)

        Returns:
            QuizSelection with the resolved category, difficulty and drawn entry

        Raises:
            EmptyPoolError: If the resolved pool contains no questions

        Example:
            >>> selection = QuizSelector().select_question(Category.SCIENCE, Difficulty.HARD)
            >>> selection.category, selection.difficulty
            (<Category.SCIENCE: 'science'>, <Difficulty.HARD: 'hard'>)
        """
        category, difficulty = resolve_defaults(category, difficulty)

        pool = self.catalog.lookup(category, difficulty)
        if not pool:
            logger.error(
                f"❌ Empty question pool - "
                f"Category: {category.value}, Difficulty: {difficulty.value}"
            )
            raise EmptyPoolError(category, difficulty)

        entry = pool[self._rng.randrange(len(pool))]

        logger.debug(
            f"🎯 Selected question from pool of {len(pool)} - "
            f"Category: {category.value}, Difficulty: {difficulty.value}"
        )

        return QuizSelection(category=category, difficulty=difficulty, entry=entry)
