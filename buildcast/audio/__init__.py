"""Audio narration"""

from .synthesizer import AudioSynthesizer, split_text_into_chunks

__all__ = ["AudioSynthesizer", "split_text_into_chunks"]
