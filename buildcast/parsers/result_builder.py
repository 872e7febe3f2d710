"""
Result assembly for the study pipeline.
Validates parsed replies and backfills missing fields with generic content.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from constants import FALLBACK_CONCEPTS, FALLBACK_FLASHCARDS, FALLBACK_SUMMARY
from ..models import Flashcard, StructuredResult
from ..utils.file_utils import generate_id
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ResultBuilder:
    """Builds complete StructuredResult objects."""

    @staticmethod
    def validate_response_structure(data: Any) -> bool:
        """
        Check that a parsed reply has the expected shape.

        Args:
            data: Object produced by json.loads

        Returns:
            True if concepts is a list, summary a string, and flashcards a list
            of objects with string question and answer
        """
        if not isinstance(data, dict):
            return False
        if not isinstance(data.get("concepts"), list):
            return False
        if not isinstance(data.get("summary"), str):
            return False
        flashcards = data.get("flashcards")
        if not isinstance(flashcards, list):
            return False
        return all(
            isinstance(card, dict)
            and isinstance(card.get("question"), str)
            and isinstance(card.get("answer"), str)
            for card in flashcards
        )

    @staticmethod
    def from_parsed(data: Dict[str, Any]) -> StructuredResult:
        """Assemble from a reply that passed validate_response_structure."""
        pairs = [(card["question"], card["answer"]) for card in data["flashcards"]]
        return ResultBuilder.assemble(data["concepts"], data["summary"], pairs)

    @staticmethod
    def assemble(
        concepts: Optional[Iterable[Any]] = None,
        summary: Optional[str] = None,
        flashcards: Optional[Sequence[Tuple[str, str]]] = None,
    ) -> StructuredResult:
        """
        Merge recovered fields with generic defaults.

        Never fails: any field that ends up empty is replaced by its fallback,
        and every flashcard gets a fresh identifier.

        Args:
            concepts: Recovered concept strings
            summary: Recovered summary
            flashcards: Recovered (question, answer) pairs

        Returns:
            A complete StructuredResult
        """
        clean_concepts = [c for c in (concepts or []) if isinstance(c, str) and c.strip()]
        clean_pairs = [
            (q, a) for q, a in (flashcards or [])
            if isinstance(q, str) and isinstance(a, str) and q.strip() and a.strip()
        ]
        clean_summary = summary if isinstance(summary, str) and summary.strip() else ""

        backfilled: List[str] = []
        if not clean_concepts:
            clean_concepts = list(FALLBACK_CONCEPTS)
            backfilled.append("concepts")
        if not clean_summary:
            clean_summary = FALLBACK_SUMMARY
            backfilled.append("summary")
        if not clean_pairs:
            clean_pairs = list(FALLBACK_FLASHCARDS)
            backfilled.append("flashcards")
        if backfilled:
            logger.info(f"Backfilled generic content for: {', '.join(backfilled)}")

        cards = tuple(
            Flashcard(id=ResultBuilder._unique_id(i), question=q, answer=a)
            for i, (q, a) in enumerate(clean_pairs)
        )
        return StructuredResult(
            concepts=tuple(clean_concepts),
            summary=clean_summary,
            flashcards=cards,
        )

    @staticmethod
    def fallback() -> StructuredResult:
        """Fully generic result used when nothing could be recovered."""
        return ResultBuilder.assemble()

    @staticmethod
    def _unique_id(index: int) -> str:
        # Random part keeps ids opaque; index suffix rules out collisions within one result
        return f"{generate_id(16)}{index:x}"
