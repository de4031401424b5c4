"""
MCP Tool Handlers
Decodes get_quiz arguments, runs the selector and builds the tool result
"""
import logging
from typing import Any, Dict, Optional

from quiz_mcp.models.quiz import QuizRequest, QuizResult
from quiz_mcp.services.quiz_selector import QuizSelector, resolve_defaults

logger = logging.getLogger(__name__)


GET_QUIZ_TOOL = "get_quiz"


def parse_quiz_request(arguments: Optional[Dict[str, Any]]) -> QuizRequest:
    """
    Validate raw tool arguments against the QuizRequest schema

    Raises:
        pydantic.ValidationError: If category or difficulty is not a supported value
    """
    return QuizRequest.model_validate(arguments or {})


class QuizToolHandler:
    """
    Handler behind the get_quiz tool

    Every call is independent; the handler only holds a reference to the
    selector it delegates to.
    """

    def __init__(self, selector: Optional[QuizSelector] = None):
        self.selector = selector if selector is not None else QuizSelector()

    def get_quiz(self, request: QuizRequest) -> QuizResult:
        """
        Produce one quiz question for an already-validated request

        Never raises: selection or formatting errors are logged and returned
        as a failure result so a single bad call cannot take the server down.

        Args:
            request: Validated get_quiz arguments

        Returns:
            QuizResult with is_error=False and the formatted question, or
            is_error=True with a description of what went wrong
        """
        category, difficulty = resolve_defaults(request.category, request.difficulty)

        try:
            logger.info(
                f"🎯 Quiz tool called with "
                f"category={category.value}, difficulty={difficulty.value}"
            )

            selection = self.selector.select_question(category, difficulty)
            result = QuizResult.success(selection)

            logger.info(
                f"✅ Quiz question served - "
                f"Category: {category.value}, Difficulty: {difficulty.value}"
            )

            return result

        except Exception as e:
            logger.error(f"❌ Quiz tool error: {e}", exc_info=True)
            return QuizResult.failure(str(e))

    def handle(self, arguments: Optional[Dict[str, Any]]) -> QuizResult:
        """Validate raw arguments and run get_quiz (validation errors propagate)"""
        return self.get_quiz(parse_quiz_request(arguments))
