from typing import Optional, Dict, Any, List

from dotenv import load_dotenv
from google import genai  # google-genai unified SDK
from google.genai import types as genai_types

from constants import SYSTEM_PROMPT
from settings import settings

load_dotenv()

# Note: google-genai prefers per-instance clients over global configure.
# Clients are built where needed and injected; nothing here is process-global.

# Base configuration
GENERATION_CONFIG: Dict[str, Any] = {
    "temperature": 0.1,
    "max_output_tokens": 3000,
}

# Model name mapping
MODEL_NAMES = {
    "flash": "gemini-2.5-flash",
    "pro": "gemini-2.5-pro",
}


def create_model(model_type: Optional[str] = None, system_prompt: str = SYSTEM_PROMPT) -> Dict[str, Any]:
    """
    Build the model configuration used by GeminiAPIClient.

    Args:
        model_type: "flash" (default) or "pro"; falls back to GEMINI_MODEL
        system_prompt: System instruction sent with every request

    Returns:
        Dict with model_name and generation_config
    """
    model_type = model_type or settings.GEMINI_MODEL
    model_name = MODEL_NAMES.get(model_type, MODEL_NAMES["flash"])
    config = GENERATION_CONFIG.copy()
    config["system_instruction"] = system_prompt
    return {
        "model_name": model_name,
        "generation_config": config,
    }


def build_client(api_key: Optional[str] = None, timeout_secs: Optional[int] = None) -> genai.Client:
    """Create a scoped google-genai Client with an HTTP timeout.

    Raises ValueError from the SDK when no key is available.
    """
    key_to_use = api_key or settings.GEMINI_API_KEY
    timeout = timeout_secs or settings.GENAI_REQUEST_TIMEOUT_SECS
    # HttpOptions.timeout is in milliseconds
    http_options = genai_types.HttpOptions(timeout=int(timeout * 1000))
    return genai.Client(api_key=key_to_use, http_options=http_options)


def validate_environment() -> Dict[str, Any]:
    """Report which required credentials are configured."""
    required = {
        "GEMINI_API_KEY": settings.GEMINI_API_KEY,
        "ELEVENLABS_API_KEY": settings.ELEVENLABS_API_KEY,
    }
    missing: List[str] = []
    present: List[str] = []
    for key, value in required.items():
        if not value or not value.strip():
            missing.append(key)
        else:
            present.append(key)
    return {
        "isValid": not missing,
        "missing": missing,
        "present": present,
        "summary": (
            "All environment variables are configured"
            if not missing
            else f"Missing environment variables: {', '.join(missing)}"
        ),
    }


def get_environment_info() -> Dict[str, Any]:
    """Describe the configured credentials without revealing them."""
    return {
        "model": MODEL_NAMES.get(settings.GEMINI_MODEL, MODEL_NAMES["flash"]),
        "hasGeminiKey": bool(settings.GEMINI_API_KEY),
        "hasElevenLabsKey": bool(settings.ELEVENLABS_API_KEY),
        "geminiKeyLength": len(settings.GEMINI_API_KEY or ""),
        "elevenLabsKeyLength": len(settings.ELEVENLABS_API_KEY or ""),
    }
