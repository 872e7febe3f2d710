"""
Gemini API client for handling API interactions.
Provides a clean interface for content generation with retry logic and error handling.

Each instance owns its own `genai.Client(api_key=...)`; nothing is configured
process-wide, so the client can be constructed once and injected where needed.
"""

from typing import Any, Dict, Optional

from config import build_client, create_model
from settings import settings
from ..utils.exceptions import ContentGenerationError
from ..utils.logging import get_logger
from ..utils.retry_handler import RetryHandler

logger = get_logger(__name__)


class GeminiAPIClient:
    """Client for interacting with Google Gemini API."""

    def __init__(
        self,
        model: Optional[Dict[str, Any]] = None,
        api_key: Optional[str] = None,
        *,
        client: Any = None,
        max_retries: int = settings.GENAI_MAX_RETRIES,
        backoff_factor: float = 2,
    ):
        """
        Initialize the Gemini API client.

        Args:
            model: Model configuration from config.create_model (default model if omitted)
            api_key: Optional API key (defaults to GEMINI_API_KEY)
            client: Pre-built genai.Client (or compatible object)
            max_retries: Attempts per generation call
            backoff_factor: Exponential backoff factor between attempts
        """
        model = model or create_model()
        self.model_name = model.get("model_name") or "gemini-2.5-flash"
        self.base_generation_config: Dict[str, Any] = dict(model.get("generation_config") or {})
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor

        if client is not None:
            self._client = client
        elif not self.api_key:
            logger.warning("GEMINI_API_KEY is not configured; model calls will fall back")
            self._client = None
        else:
            try:
                self._client = build_client(self.api_key)
            except Exception as e:
                # Keep the object usable; generate_content reports the failure
                logger.error(f"Failed to initialize genai.Client for key {self._key_tag()}: {e}")
                self._client = None

    def _key_tag(self) -> str:
        """Return a safe identifier for the bound API key for logs, e.g. ***abcd"""
        suffix = (self.api_key or "")[-4:] if self.api_key else "????"
        return f"***{suffix}"

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def generate_content(self, content: str) -> str:
        """
        Generate text for the given prompt with retry logic.

        Args:
            content: User prompt

        Returns:
            Reply text

        Raises:
            ContentGenerationError: If the client is unusable or every attempt fails
        """
        if self._client is None:
            raise ContentGenerationError("GEMINI_API_KEY is not configured")

        def _call() -> str:
            logger.info(f"Sending request to {self.model_name} [key={self._key_tag()}]")
            response = self._client.models.generate_content(
                model=self.model_name,
                contents=content,
                config=self.base_generation_config or None,
            )
            return self._extract_text(response)

        try:
            return RetryHandler.execute_with_retry(
                _call, self.max_retries, self.backoff_factor
            )
        except ContentGenerationError:
            raise
        except Exception as e:
            raise ContentGenerationError(
                f"Failed to generate content after {self.max_retries} attempts: {e}"
            ) from e

    def _extract_text(self, response: Any) -> str:
        """Read reply text, falling back to the first candidate's parts."""
        pf = getattr(response, "prompt_feedback", None)
        block_reason = getattr(pf, "block_reason", None) if pf is not None else None
        if block_reason:
            raise ContentGenerationError(f"Prompt blocked: block_reason={block_reason}")

        text = None
        try:
            text = response.text
        except Exception:
            candidates = getattr(response, "candidates", None) or []
            if candidates:
                parts = getattr(getattr(candidates[0], "content", None), "parts", None) or []
                texts = [p.text for p in parts if getattr(p, "text", None)]
                text = "\n".join(texts) if texts else None

        if not text:
            raise ContentGenerationError("Empty response from API")

        candidates = getattr(response, "candidates", None) or []
        if candidates:
            finish_reason = str(getattr(candidates[0], "finish_reason", ""))
            if "MAX_TOKENS" in finish_reason:
                # Truncated replies are expected; the parser repairs them
                logger.warning(f"Response truncated due to token limit (length: {len(text)})")

        logger.info(f"Response received, length: {len(text)}")
        return text

    def ping(self) -> bool:
        """Cheap connectivity check: list available models."""
        if self._client is None:
            return False
        try:
            return len(list(self._client.models.list())) > 0
        except Exception as e:
            logger.error(f"Gemini connection test failed [key={self._key_tag()}]: {e}")
            return False
