"""
Text-to-speech narration via ElevenLabs.

Long text is split into sentence-bounded chunks, each chunk is synthesized
separately, and the MP3 bytes are concatenated into one base64 data URL.
Any failure degrades to a short silent placeholder clip.
"""

import base64
import re
import time
from typing import Any, Callable, List, Optional

from elevenlabs import VoiceSettings
from elevenlabs.client import ElevenLabs

from constants import MOCK_AUDIO_URL
from settings import settings
from ..models import AudioResult
from ..utils.exceptions import AudioGenerationError
from ..utils.logging import get_logger

logger = get_logger(__name__)

OUTPUT_FORMAT = "mp3_44100_128"
VOICE_SETTINGS = VoiceSettings(
    stability=0.6,
    similarity_boost=0.7,
    style=0.2,
    use_speaker_boost=True,
)


def split_text_into_chunks(text: str, max_chars: int) -> List[str]:
    """Pack sentences into chunks of at most max_chars characters.

    Sentences are split on runs of '.', '!' and '?' and re-terminated with
    '.'. A sentence longer than the limit is split on spaces.
    """
    chunks: List[str] = []
    sentences = [s for s in re.split(r"[.!?]+", text) if s.strip()]
    current = ""

    for raw_sentence in sentences:
        sentence = raw_sentence.strip() + "."
        candidate = f"{current} {sentence}" if current else sentence
        if len(candidate) <= max_chars:
            current = candidate
            continue

        if current:
            chunks.append(current)
            current = ""

        if len(sentence) <= max_chars:
            current = sentence
            continue

        word_chunk = ""
        for word in sentence.split(" "):
            joined = f"{word_chunk} {word}" if word_chunk else word
            if len(joined) <= max_chars:
                word_chunk = joined
            else:
                if word_chunk:
                    chunks.append(word_chunk)
                word_chunk = word
        current = word_chunk

    if current:
        chunks.append(current)

    return chunks or [text]


def to_data_url(audio: bytes) -> str:
    return "data:audio/mpeg;base64," + base64.b64encode(audio).decode("ascii")


class AudioSynthesizer:
    """Narrates study summaries."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        voice_id: Optional[str] = None,
        model_id: Optional[str] = None,
        max_chars: Optional[int] = None,
        *,
        client: Any = None,
        chunk_delay: float = 0.1,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            api_key: ElevenLabs key (defaults to ELEVENLABS_API_KEY)
            voice_id: Voice to use
            model_id: ElevenLabs model
            max_chars: Provider limit per request
            client: Pre-built ElevenLabs client (or compatible object)
            chunk_delay: Pause between chunk requests, in seconds
            sleep: Sleep function (injectable for tests)
        """
        self.api_key = api_key if api_key is not None else settings.ELEVENLABS_API_KEY
        self.voice_id = voice_id or settings.ELEVENLABS_VOICE_ID
        self.model_id = model_id or settings.ELEVENLABS_MODEL_ID
        self.max_chars = max_chars or settings.TTS_MAX_CHARS
        self.chunk_delay = chunk_delay
        self._sleep = sleep

        if client is not None:
            self._client = client
        elif self.api_key:
            self._client = ElevenLabs(api_key=self.api_key)
        else:
            self._client = None

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    @staticmethod
    def placeholder(text: str) -> AudioResult:
        return AudioResult(audio_url=MOCK_AUDIO_URL, transcript=text, download_url=MOCK_AUDIO_URL)

    def synthesize(self, text: str) -> AudioResult:
        """
        Narrate text. Never raises.

        Returns:
            AudioResult with a data URL; the placeholder clip when the key is
            missing or synthesis fails
        """
        if self._client is None:
            logger.warning("ElevenLabs API key not configured, returning mock audio")
            return self.placeholder(text)

        try:
            chunks = split_text_into_chunks(text, self.max_chars) if len(text) > self.max_chars else [text]
            logger.info(f"Synthesizing audio: {len(text)} chars in {len(chunks)} chunk(s)")

            parts: List[bytes] = []
            for i, chunk in enumerate(chunks):
                if i > 0 and self.chunk_delay > 0:
                    # Stay under the provider's rate limit
                    self._sleep(self.chunk_delay)
                parts.append(self._synthesize_chunk(chunk))

            audio = b"".join(parts)
            if not audio:
                raise AudioGenerationError("Empty audio returned by ElevenLabs")

            url = to_data_url(audio)
            return AudioResult(audio_url=url, transcript=text, download_url=url, audio_bytes=audio)
        except Exception as e:
            logger.error(f"TTS generation error, falling back to mock audio: {e}")
            return self.placeholder(text)

    def _synthesize_chunk(self, chunk: str) -> bytes:
        stream = self._client.text_to_speech.convert(
            voice_id=self.voice_id,
            text=chunk,
            model_id=self.model_id,
            output_format=OUTPUT_FORMAT,
            voice_settings=VOICE_SETTINGS,
        )
        if isinstance(stream, (bytes, bytearray)):
            return bytes(stream)
        return b"".join(stream)

    def ping(self) -> bool:
        """Connectivity check: list the account's voices."""
        if self._client is None:
            return False
        try:
            self._client.voices.get_all()
            return True
        except Exception as e:
            logger.error(f"ElevenLabs connection test failed: {e}")
            return False
