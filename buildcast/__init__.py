"""BuildCast - study material to concepts, summaries, flashcards and narration"""

from buildcast.core.processor import StudyProcessor
from buildcast.api.client import GeminiAPIClient
from buildcast.models import AudioResult, Flashcard, StructuredResult

__version__ = "1.0.0"
__all__ = [
    "StudyProcessor",
    "GeminiAPIClient",
    "StructuredResult",
    "Flashcard",
    "AudioResult",
]
