from datetime import datetime, timezone

from fastapi import APIRouter, Request

from config import MODEL_NAMES, get_environment_info, validate_environment
from settings import settings

from ..core import ROUTE_MAP

router = APIRouter()


@router.get("/config")
def get_config(request: Request):
    """Expose server capabilities for the frontend UI."""
    synthesizer = getattr(request.app.state, "synthesizer", None)
    return {
        "model": MODEL_NAMES.get(settings.GEMINI_MODEL, settings.GEMINI_MODEL),
        "models": list(MODEL_NAMES),
        "audio_enabled": bool(synthesizer is not None and synthesizer.is_configured),
    }


@router.get("/api/health")
def health_check():
    """Health check endpoint for monitoring."""
    validation = validate_environment()
    return {
        "status": "healthy" if validation["isValid"] else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": get_environment_info(),
        "validation": validation,
        "routes": ROUTE_MAP,
    }
