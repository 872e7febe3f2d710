"""Text extraction for uploads"""

from .text_extractor import TextExtractor

__all__ = ["TextExtractor"]
