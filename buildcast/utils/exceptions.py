"""
Custom exceptions for BuildCast.
"""


class BuildCastError(Exception):
    """Base exception for BuildCast errors."""
    pass


class APIError(BuildCastError):
    """Base exception for remote API errors."""
    pass


class ContentGenerationError(APIError):
    """Raised when the language model call fails or returns nothing usable."""
    pass


class TextExtractionError(BuildCastError):
    """Raised when text cannot be extracted from an uploaded file."""
    pass


class UnsupportedFileTypeError(TextExtractionError):
    """Raised for uploads whose MIME type has no extractor."""
    pass


class AudioGenerationError(APIError):
    """Raised when text-to-speech synthesis fails."""
    pass
