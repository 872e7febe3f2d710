"""Field-level recovery from model replies that cannot be parsed as JSON"""

import re
from typing import List, Tuple

from constants import (
    MAX_GUESSED_CONCEPTS,
    MAX_SALVAGED_FLASHCARDS,
    MIN_FLASHCARD_TEXT_LENGTH,
    MIN_SUMMARY_LENGTH,
)
from ..utils.logging import get_logger

logger = get_logger(__name__)

# A JSON string body: anything but a quote or backslash, or an escape pair
_STRING_BODY = r'(?:[^"\\]|\\.)'

_CONCEPTS_FIELD = re.compile(r'"concepts"\s*:\s*\[([\s\S]*?)\]')
_QUOTED_ITEM = re.compile(r'"([^"]+)"')
_QUOTED_CANDIDATE = re.compile(r'"([^"]{3,50})"')

_SUMMARY_FIELD = re.compile(r'"summary"\s*:\s*"(' + _STRING_BODY + r'*)"')
_SUMMARY_FIELD_UNTERMINATED = re.compile(r'"summary"\s*:\s*"(' + _STRING_BODY + r'+)')

_QUESTION_FIELD = re.compile(r'"question"\s*:\s*"(' + _STRING_BODY + r'+)"')
_ANSWER_FIELD = re.compile(r'"answer"\s*:\s*"(' + _STRING_BODY + r'+)"')

_EXCLUDED_CONCEPT_WORDS = ("question", "answer", "summary")


def _unescape(value: str) -> str:
    return value.replace('\\"', '"').replace("\\n", " ").strip()


class PartialExtractor:
    """Regex salvage of concepts, summary and flashcards.

    Each extractor works on its own and returns an empty value instead of
    raising, so a corrupt field never blocks recovery of the others.
    """

    @staticmethod
    def extract_concepts(text: str) -> List[str]:
        """Pull concept strings from a "concepts" array, or guess them.

        Args:
            text: Normalized model reply

        Returns:
            Concepts in order of appearance, possibly empty
        """
        try:
            match = _CONCEPTS_FIELD.search(text)
            if match:
                concepts = _QUOTED_ITEM.findall(match.group(1))
                if concepts:
                    logger.debug(f"Extracted {len(concepts)} concepts from concepts field")
                    return concepts

            # No usable concepts array: look for short capitalised quoted strings
            guesses = []
            for candidate in _QUOTED_CANDIDATE.findall(text):
                if len(candidate) <= 3:
                    continue
                if any(word in candidate for word in _EXCLUDED_CONCEPT_WORDS):
                    continue
                if not candidate[0].isupper():
                    continue
                guesses.append(candidate)
                if len(guesses) == MAX_GUESSED_CONCEPTS:
                    break
            if guesses:
                logger.debug(f"Guessed {len(guesses)} concepts from quoted strings")
            else:
                logger.debug("No concepts could be extracted")
            return guesses
        except Exception as e:
            logger.warning(f"Concept extraction failed: {e}")
            return []

    @staticmethod
    def extract_summary(text: str) -> str:
        """Pull the summary string, tolerating a missing closing quote.

        Args:
            text: Normalized model reply

        Returns:
            Unescaped summary, or "" when absent or too short
        """
        try:
            match = _SUMMARY_FIELD.search(text) or _SUMMARY_FIELD_UNTERMINATED.search(text)
            if not match:
                return ""
            summary = _unescape(match.group(1))
            if len(summary) > MIN_SUMMARY_LENGTH:
                logger.debug(f"Extracted summary: {summary[:100]}")
                return summary
            return ""
        except Exception as e:
            logger.warning(f"Summary extraction failed: {e}")
            return ""

    @staticmethod
    def extract_flashcards(text: str) -> List[Tuple[str, str]]:
        """Pair up question and answer fields.

        Args:
            text: Normalized model reply

        Returns:
            Up to 8 (question, answer) pairs whose texts are long enough
        """
        pairs: List[Tuple[str, str]] = []
        try:
            # An answer may follow its question after any span of text
            pos = 0
            while len(pairs) < MAX_SALVAGED_FLASHCARDS:
                question_match = _QUESTION_FIELD.search(text, pos)
                if not question_match:
                    break
                answer_match = _ANSWER_FIELD.search(text, question_match.end())
                if not answer_match:
                    # Later questions cannot have an answer either
                    break
                pos = answer_match.end()
                question = _unescape(question_match.group(1))
                answer = _unescape(answer_match.group(1))
                if len(question) > MIN_FLASHCARD_TEXT_LENGTH and len(answer) > MIN_FLASHCARD_TEXT_LENGTH:
                    pairs.append((question, answer))
            if pairs:
                logger.debug(f"Extracted {len(pairs)} flashcards")
            return pairs
        except Exception as e:
            logger.warning(f"Flashcard extraction failed: {e}")
            return []
