"""API client modules for Gemini"""

from .client import GeminiAPIClient

__all__ = [
    "GeminiAPIClient",
]
