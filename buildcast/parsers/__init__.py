"""Response parsing modules"""

from .response_parser import ResponseParser
from .partial_extractor import PartialExtractor
from .result_builder import ResultBuilder

__all__ = [
    "ResponseParser",
    "PartialExtractor",
    "ResultBuilder",
]
