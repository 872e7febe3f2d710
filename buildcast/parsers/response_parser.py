"""
JSON response parser with robust recovery.
Turns a raw model reply into a complete StructuredResult:
- Smart-quote cleanup and JSON payload isolation (code fences, stray prose)
- Heuristic repair (trailing commas, quotes, unterminated strings, truncation)
- Regex salvage of individual fields when the payload still cannot be parsed
- Assembly with generic defaults so the caller always gets a usable result
"""

import json
import re
from typing import Any, Optional

from ..models import StructuredResult
from ..utils.logging import get_logger
from .partial_extractor import PartialExtractor
from .result_builder import ResultBuilder

logger = get_logger(__name__)

_SMART_DOUBLE_QUOTES = re.compile("[“”]")
_SMART_SINGLE_QUOTES = re.compile("[‘’]")
_SMART_QUOTES = re.compile("[“”‘’]")
_JSON_FENCE = re.compile(r"```json\s*([\s\S]*?)\s*```")
_TRAILING_COMMA = re.compile(r"(?:,\s*)+([}\]])")
_STRUCTURAL_CHAR = re.compile(r"[,}\]]")
_STARTS_WITH_STRUCTURAL = re.compile(r"\s*[,}\]]")
_DANGLING_TAIL = re.compile(r"[\s,]+$")


class ResponseParser:
    """Parses model replies with staged recovery."""

    @staticmethod
    def parse_response(response_text: str) -> StructuredResult:
        """
        Run the full recovery chain on a model reply.

        Stages run once each, in order: strict parse, parse after repair,
        field salvage. The first stage that yields a correctly shaped object
        wins; otherwise salvaged fields are merged with defaults.

        Args:
            response_text: Raw reply text

        Returns:
            A complete StructuredResult (never raises)
        """
        candidate = ""
        try:
            candidate = ResponseParser.normalize(response_text or "")
            logger.debug(f"Normalized reply length: {len(candidate)}")

            parsed = ResponseParser._try_parse(candidate, "direct")
            if parsed is None:
                parsed = ResponseParser._try_parse(ResponseParser.repair(candidate), "after repair")

            if parsed is not None:
                if ResultBuilder.validate_response_structure(parsed):
                    logger.info("Response validation successful")
                    return ResultBuilder.from_parsed(parsed)
                logger.warning("Parsed reply has the wrong shape; salvaging fields")
        except Exception as e:
            logger.error(f"Unexpected error while parsing reply, salvaging fields: {e}")

        try:
            return ResponseParser.salvage(candidate)
        except Exception as e:
            logger.error(f"Salvage failed, returning generic result: {e}")
            return ResultBuilder.fallback()

    # --------------------
    # Stage 1: normalization
    # --------------------
    @staticmethod
    def normalize(text: str) -> str:
        """
        Isolate the JSON payload in a model reply.
        - Replaces smart quotes with straight ones
        - Prefers the contents of a ```json fenced block
        - Otherwise slices from the first '{' to the last '}'
        - With no closing brace after the first '{', keeps everything from
          that brace on (truncated reply)
        """
        clean = text.strip()
        clean = _SMART_DOUBLE_QUOTES.sub('"', clean)
        clean = _SMART_SINGLE_QUOTES.sub("'", clean)

        fence = _JSON_FENCE.search(clean)
        if fence:
            return fence.group(1).strip()

        first = clean.find("{")
        if first == -1:
            return clean

        last = clean.rfind("}")
        if last == -1 or last < first:
            return clean[first:]

        return clean[first:last + 1]

    # --------------------
    # Stage 2: structural repair
    # --------------------
    @staticmethod
    def repair(text: str) -> str:
        """
        Apply the fixed sequence of textual repairs.
        1. Trim whitespace
        2. Drop every comma run directly before '}' or ']'
        3. Turn single and smart quotes into double quotes
        4. Close an unterminated string
        5. Close unbalanced brackets, then braces, when the text looks cut off
        """
        repaired = text.strip()

        # Whole comma runs go in one pass so a second repair finds nothing left
        repaired = _TRAILING_COMMA.sub(r"\1", repaired).strip()

        repaired = repaired.replace("'", '"')
        repaired = _SMART_QUOTES.sub('"', repaired)

        if repaired.count('"') % 2 != 0:
            last_quote = repaired.rfind('"')
            after = repaired[last_quote + 1:]
            if not _STARTS_WITH_STRUCTURAL.match(after):
                logger.debug("Closing unterminated string")
                nxt = _STRUCTURAL_CHAR.search(after)
                if nxt:
                    pos = last_quote + 1 + nxt.start()
                    repaired = repaired[:pos] + '"' + repaired[pos:]
                else:
                    repaired += '"'

        if not repaired.endswith(("}", "]")):
            missing_brackets = repaired.count("[") - repaired.count("]")
            missing_braces = repaired.count("{") - repaired.count("}")
            logger.debug(f"Reply looks truncated (missing brackets={missing_brackets}, braces={missing_braces})")
            if missing_brackets > 0 or missing_braces > 0:
                # A cut right after a comma would leave ",]" behind
                repaired = _DANGLING_TAIL.sub("", repaired)
                repaired += "]" * max(0, missing_brackets)
                repaired += "}" * max(0, missing_braces)

        return repaired

    # --------------------
    # Stage 3: salvage
    # --------------------
    @staticmethod
    def salvage(text: str) -> StructuredResult:
        """Recover each field independently and fill the gaps with defaults."""
        logger.info("Falling back to field salvage")
        concepts = PartialExtractor.extract_concepts(text)
        summary = PartialExtractor.extract_summary(text)
        flashcards = PartialExtractor.extract_flashcards(text)
        logger.info(
            f"Salvaged concepts={len(concepts)}, summary={'yes' if summary else 'no'}, "
            f"flashcards={len(flashcards)}"
        )
        return ResultBuilder.assemble(concepts, summary, flashcards)

    @staticmethod
    def _try_parse(text: str, stage: str) -> Optional[Any]:
        try:
            parsed = json.loads(text)
            logger.debug(f"JSON parsing successful ({stage})")
            return parsed
        except (ValueError, RecursionError) as e:
            logger.warning(f"JSON parsing error ({stage}): {e}")
            return None
