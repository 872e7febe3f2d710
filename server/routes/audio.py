from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from buildcast.audio import AudioSynthesizer
from buildcast.utils.logging import get_logger

from ..core import MIN_TEXT_LENGTH
from ._helpers import error_response, get_synthesizer, success_response

router = APIRouter()
logger = get_logger(__name__)


@router.post("/api/generate-audio")
async def generate_audio(request: Request, synthesizer: AudioSynthesizer = Depends(get_synthesizer)):
    """Narrate a summary. Falls back to placeholder audio when TTS is unavailable."""
    try:
        payload = await request.json()
    except ValueError:
        return error_response("Request body must be JSON")

    text = payload.get("text") if isinstance(payload, dict) else None
    if not isinstance(text, str):
        return error_response("Text is required")
    if len(text.strip()) < MIN_TEXT_LENGTH:
        return error_response(f"Text must be at least {MIN_TEXT_LENGTH} characters long")

    try:
        result = await run_in_threadpool(synthesizer.synthesize, text.strip())
        return success_response(result.to_dict())
    except Exception as e:
        logger.error(f"Audio generation error: {e}")
        return error_response("Failed to generate audio. Please try again.", status_code=500)
