"""Small helpers for uploaded files and flashcard identifiers."""

import secrets
import string

SUPPORTED_FILE_TYPES = (
    "text/plain",
    "application/pdf",
    "image/jpeg",
    "image/png",
    "image/jpg",
)

OCR_SUPPORTED_FORMATS = ("image/jpeg", "image/jpg", "image/png")

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_id(length: int = 22) -> str:
    """Return a random lowercase alphanumeric identifier."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


def format_file_size(num_bytes: int) -> str:
    if num_bytes <= 0:
        return "0 Bytes"
    sizes = ["Bytes", "KB", "MB", "GB"]
    value = float(num_bytes)
    i = 0
    while value >= 1024 and i < len(sizes) - 1:
        value /= 1024
        i += 1
    # "1.50" -> "1.5", "2.00" -> "2"
    return f"{round(value, 2):g} {sizes[i]}"


def is_valid_file_type(content_type: str) -> bool:
    return (content_type or "").lower() in SUPPORTED_FILE_TYPES


def get_file_type_category(content_type: str) -> str:
    """Map a MIME type to "text", "pdf", "image" or "unknown"."""
    ct = (content_type or "").lower()
    if ct == "text/plain":
        return "text"
    if ct == "application/pdf":
        return "pdf"
    if ct.startswith("image/"):
        return "image"
    return "unknown"


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."
