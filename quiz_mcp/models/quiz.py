"""
Quiz Models
Pydantic models for quiz requests, catalog entries and tool results
FILE: quiz_mcp/models/quiz.py
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Category(str, Enum):
    """Top-level topic of a question"""
    GENERAL = "general"
    SCIENCE = "science"
    HISTORY = "history"
    GEOGRAPHY = "geography"
    ENTERTAINMENT = "entertainment"


class Difficulty(str, Enum):
    """Difficulty tier of a question"""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


DEFAULT_CATEGORY = Category.GENERAL
DEFAULT_DIFFICULTY = Difficulty.MEDIUM


class QuestionEntry(BaseModel):
    """
    A single question/answer pair from the catalog
    """
    question: str = Field(..., description="Question text", min_length=1)
    answer: str = Field(..., description="Correct answer", min_length=1)

    class Config:
        frozen = True


class QuizRequest(BaseModel):
    """
    Arguments accepted by the get_quiz tool

    Both fields are optional; missing values are defaulted by the selector.
    """
    category: Optional[Category] = Field(
        None,
        description="The category of questions to ask"
    )
    difficulty: Optional[Difficulty] = Field(
        None,
        description="The difficulty level of the quiz"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "category": "science",
                "difficulty": "hard"
            }
        }


class QuizSelection(BaseModel):
    """Resolved category/difficulty and the entry drawn from that pool"""
    category: Category
    difficulty: Difficulty
    entry: QuestionEntry

    class Config:
        frozen = True


class QuizResult(BaseModel):
    """
    Outcome of one get_quiz invocation

    Success carries the resolved category, difficulty, question and answer.
    Failure carries only an error message. Both carry the text sent back to
    the MCP client. Use `success()` / `failure()` rather than building
    instances directly.
    """
    is_error: bool = Field(..., description="True when the invocation failed")
    text: str = Field(..., description="Human-readable text returned to the client")
    category: Optional[Category] = Field(None, description="Resolved category (success only)")
    difficulty: Optional[Difficulty] = Field(None, description="Resolved difficulty (success only)")
    question: Optional[str] = Field(None, description="Question text (success only)")
    answer: Optional[str] = Field(None, description="Answer text (success only)")
    message: Optional[str] = Field(None, description="Error description (failure only)")

    class Config:
        frozen = True

    @classmethod
    def success(cls, selection: QuizSelection) -> "QuizResult":
        entry = selection.entry
        return cls(
            is_error=False,
            text=format_quiz(selection.category, selection.difficulty, entry.question, entry.answer),
            category=selection.category,
            difficulty=selection.difficulty,
            question=entry.question,
            answer=entry.answer,
        )

    @classmethod
    def failure(cls, message: str) -> "QuizResult":
        return cls(is_error=True, text=f"An error occurred: {message}", message=message)


def format_quiz(category: Category, difficulty: Difficulty, question: str, answer: str) -> str:
    """
    Render a question in the fixed layout: header, question, answer

    Example output:
        Quiz Question (science, hard):

        Which planet has the most moons?

        Answer: Saturn
    """
    return (
        f"Quiz Question ({category.value}, {difficulty.value}):\n\n"
        f"{question}\n\n"
        f"Answer: {answer}"
    )
