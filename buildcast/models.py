"""Result types produced by the study pipeline."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Flashcard:
    id: str
    question: str
    answer: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "question": self.question, "answer": self.answer}


@dataclass(frozen=True)
class StructuredResult:
    """Concepts, summary and flashcards for one model reply.

    Built only by ResultBuilder, which guarantees every field is populated.
    """

    concepts: Tuple[str, ...]
    summary: str
    flashcards: Tuple[Flashcard, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "concepts": list(self.concepts),
            "summary": self.summary,
            "flashcards": [card.to_dict() for card in self.flashcards],
        }


@dataclass(frozen=True)
class AudioResult:
    audio_url: str
    transcript: str
    download_url: str
    audio_bytes: Optional[bytes] = field(default=None, repr=False)

    @property
    def is_placeholder(self) -> bool:
        return self.audio_bytes is None

    def to_dict(self) -> Dict[str, str]:
        return {
            "audioUrl": self.audio_url,
            "transcript": self.transcript,
            "downloadUrl": self.download_url,
        }
