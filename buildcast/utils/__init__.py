"""Utility modules for BuildCast"""

from .retry_handler import RetryHandler
from .file_utils import generate_id, format_file_size, get_file_type_category

__all__ = [
    "RetryHandler",
    "generate_id",
    "format_file_size",
    "get_file_type_category",
]
