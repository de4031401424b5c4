from quiz_mcp.models.quiz import (
    Category,
    Difficulty,
    DEFAULT_CATEGORY,
    DEFAULT_DIFFICULTY,
    QuestionEntry,
    QuizRequest,
    QuizSelection,
    QuizResult,
    format_quiz,
)

__all__ = [
    "Category",
    "Difficulty",
    "DEFAULT_CATEGORY",
    "DEFAULT_DIFFICULTY",
    "QuestionEntry",
    "QuizRequest",
    "QuizSelection",
    "QuizResult",
    "format_quiz",
]
