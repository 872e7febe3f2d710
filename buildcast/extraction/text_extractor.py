"""
Text extraction for uploaded study material.
Handles plain text, PDF (PyMuPDF) and images (Tesseract OCR).
"""

import io
import re
from typing import Optional

import pymupdf as fitz
import pytesseract
from PIL import Image

from settings import settings
from ..utils.exceptions import TextExtractionError, UnsupportedFileTypeError
from ..utils.file_utils import OCR_SUPPORTED_FORMATS, format_file_size, get_file_type_category
from ..utils.logging import get_logger

logger = get_logger(__name__)

MIN_OCR_TEXT_LENGTH = 10


class TextExtractor:
    """Extracts raw text from uploaded file contents."""

    def __init__(self, max_ocr_file_size: Optional[int] = None, ocr_lang: str = "eng"):
        self.max_ocr_file_size = max_ocr_file_size or settings.MAX_OCR_FILE_SIZE
        self.ocr_lang = ocr_lang

    def extract(self, data: bytes, content_type: str) -> str:
        """
        Extract text according to the upload's MIME type.

        Args:
            data: Raw file contents
            content_type: MIME type reported for the upload

        Returns:
            Extracted text

        Raises:
            UnsupportedFileTypeError: If no extractor handles the type
            TextExtractionError: If extraction fails
        """
        category = get_file_type_category(content_type)
        logger.info(f"Extracting text from {content_type} ({format_file_size(len(data))})")
        if category == "text":
            return self.extract_plain_text(data)
        if category == "pdf":
            return self.extract_pdf_text(data)
        if category == "image":
            return self.extract_image_text(data, content_type)
        raise UnsupportedFileTypeError(f"Unsupported file type: {content_type}")

    @staticmethod
    def extract_plain_text(data: bytes) -> str:
        return data.decode("utf-8", errors="replace")

    @staticmethod
    def extract_pdf_text(data: bytes) -> str:
        """Concatenate the text layer of every page."""
        try:
            with fitz.open(stream=data, filetype="pdf") as doc:
                pages = [page.get_text() for page in doc]
            logger.debug(f"Extracted text from {len(pages)} PDF pages")
            return "\n".join(pages)
        except Exception as e:
            logger.error(f"PDF parsing error: {e}")
            raise TextExtractionError(
                "Failed to extract text from PDF. Please ensure the PDF contains readable text."
            ) from e

    def validate_image_for_ocr(self, data: bytes, content_type: str) -> bool:
        if (content_type or "").lower() not in OCR_SUPPORTED_FORMATS:
            return False
        return len(data) <= self.max_ocr_file_size

    def extract_image_text(self, data: bytes, content_type: str) -> str:
        """Run OCR on an image and normalize the whitespace in its output."""
        if not self.validate_image_for_ocr(data, content_type):
            raise TextExtractionError(
                f"OCR failed: image must be JPEG or PNG and at most "
                f"{format_file_size(self.max_ocr_file_size)}"
            )
        try:
            with Image.open(io.BytesIO(data)) as image:
                text = pytesseract.image_to_string(image, lang=self.ocr_lang)
        except Exception as e:
            logger.error(f"OCR processing error: {e}")
            raise TextExtractionError(f"OCR failed: {e}") from e

        cleaned = re.sub(r"\n\s*\n", "\n", text)
        cleaned = re.sub(r"\s+", " ", cleaned).strip()

        if len(cleaned) < MIN_OCR_TEXT_LENGTH:
            raise TextExtractionError(
                "OCR failed: Could not extract meaningful text from the image. "
                "Please ensure the image contains clear, readable text."
            )
        return cleaned
