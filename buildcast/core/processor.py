"""
Main study-content orchestrator.
Sends document text to the model and turns the reply into a StructuredResult.
"""

from typing import Optional

from constants import USER_PROMPT_TEMPLATE
from settings import settings
from ..api.client import GeminiAPIClient
from ..models import StructuredResult
from ..parsers.response_parser import ResponseParser
from ..parsers.result_builder import ResultBuilder
from ..utils.logging import get_logger

logger = get_logger(__name__)


class StudyProcessor:
    """Produces concepts, a summary and flashcards for a document."""

    def __init__(self, api_client: GeminiAPIClient, max_input_chars: Optional[int] = None):
        """
        Args:
            api_client: Model client used for every request
            max_input_chars: Document text beyond this length is not sent
        """
        self.api_client = api_client
        self.max_input_chars = max_input_chars or settings.MAX_INPUT_CHARS

    def build_prompt(self, document_text: str) -> str:
        return USER_PROMPT_TEMPLATE.format(content=document_text[:self.max_input_chars])

    def process(self, document_text: str) -> StructuredResult:
        """
        Analyze a document. Never raises.

        Model failures (missing key, network, empty reply) yield a fully
        generic result; unusable replies are repaired or salvaged.
        """
        try:
            reply = self.api_client.generate_content(self.build_prompt(document_text))
        except Exception as e:
            logger.error(f"Model request failed, returning fallback response: {e}")
            return ResultBuilder.fallback()

        logger.debug(f"Full response: {reply}")
        result = ResponseParser.parse_response(reply)
        logger.info(
            f"Content processing completed: {len(result.concepts)} concepts, "
            f"{len(result.flashcards)} flashcards"
        )
        return result
