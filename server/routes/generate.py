from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from starlette.concurrency import run_in_threadpool

from buildcast.core import StudyProcessor
from buildcast.extraction import TextExtractor
from buildcast.utils import format_file_size
from buildcast.utils.exceptions import TextExtractionError
from buildcast.utils.logging import get_logger

from ..core import MAX_FILE_SIZE, MIN_TEXT_LENGTH
from ._helpers import error_response, get_extractor, get_processor, success_response

router = APIRouter()
logger = get_logger(__name__)


@router.post("/api/generate")
async def generate(
    file: Optional[UploadFile] = File(None),
    processor: StudyProcessor = Depends(get_processor),
    extractor: TextExtractor = Depends(get_extractor),
):
    """Extract text from an uploaded file and build study material from it."""
    if file is None:
        return error_response("No file provided")

    try:
        content = await file.read()
        if len(content) > MAX_FILE_SIZE:
            return error_response(f"File size exceeds maximum of {format_file_size(MAX_FILE_SIZE)}")

        content_type = file.content_type or ""
        logger.info(f"Processing upload {file.filename} ({content_type}, {format_file_size(len(content))})")

        try:
            text = await run_in_threadpool(extractor.extract, content, content_type)
        except TextExtractionError as e:
            return error_response(str(e))

        if len(text.strip()) < MIN_TEXT_LENGTH:
            return error_response(
                "Extracted text is too short. Please provide more substantial content."
            )

        result = await run_in_threadpool(processor.process, text)
        return success_response(result.to_dict())
    except Exception as e:
        logger.error(f"Generation error: {e}")
        return error_response("Failed to process file. Please try again.", status_code=500)
