import io

import pymupdf as fitz
import pytest
from PIL import Image

from buildcast.extraction import TextExtractor
from buildcast.extraction import text_extractor
from buildcast.utils.exceptions import TextExtractionError, UnsupportedFileTypeError


def _pdf_bytes(*lines):
    doc = fitz.open()
    for line in lines:
        page = doc.new_page()
        page.insert_text((72, 72), line)
    data = doc.tobytes()
    doc.close()
    return data


def _png_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (20, 20), "white").save(buf, format="PNG")
    return buf.getvalue()


def test_plain_text_is_decoded():
    assert TextExtractor().extract("Grüße".encode("utf-8"), "text/plain") == "Grüße"


def test_plain_text_replaces_bad_bytes():
    assert TextExtractor().extract(b"ok \xff", "text/plain") == "ok �"


def test_pdf_text_from_every_page():
    text = TextExtractor().extract(_pdf_bytes("First page text", "Second page text"), "application/pdf")
    assert "First page text" in text
    assert "Second page text" in text


def test_corrupt_pdf_raises():
    with pytest.raises(TextExtractionError, match="Failed to extract text from PDF"):
        TextExtractor().extract(b"not a pdf", "application/pdf")


def test_image_ocr_output_is_cleaned(monkeypatch):
    monkeypatch.setattr(
        text_extractor.pytesseract, "image_to_string",
        lambda image, lang="eng": "  Line one\n\n\nLine   two\tend  ",
    )
    assert TextExtractor().extract(_png_bytes(), "image/png") == "Line one Line two end"


def test_image_with_too_little_text_raises(monkeypatch):
    monkeypatch.setattr(text_extractor.pytesseract, "image_to_string", lambda image, lang="eng": " a ")
    with pytest.raises(TextExtractionError, match="meaningful text"):
        TextExtractor().extract(_png_bytes(), "image/png")


def test_oversized_image_is_rejected():
    with pytest.raises(TextExtractionError, match="OCR failed"):
        TextExtractor(max_ocr_file_size=10).extract(_png_bytes(), "image/png")


def test_non_ocr_image_type_is_rejected():
    with pytest.raises(TextExtractionError):
        TextExtractor().extract(b"GIF89a", "image/gif")


def test_unsupported_type_raises():
    with pytest.raises(UnsupportedFileTypeError, match="Unsupported file type: application/zip"):
        TextExtractor().extract(b"PK", "application/zip")
