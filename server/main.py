from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from buildcast import __version__
from buildcast.api import GeminiAPIClient
from buildcast.audio import AudioSynthesizer
from buildcast.core import StudyProcessor
from buildcast.extraction import TextExtractor
from buildcast.utils.logging import get_logger
from config import create_model
from settings import settings

from .routes import audio, generate, misc

logger = get_logger(__name__)


def create_app(
    processor: Optional[StudyProcessor] = None,
    synthesizer: Optional[AudioSynthesizer] = None,
    extractor: Optional[TextExtractor] = None,
) -> FastAPI:
    """Build the API. Collaborators not passed in are constructed at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application startup: initializing clients")
        app.state.processor = processor or StudyProcessor(
            GeminiAPIClient(create_model(settings.GEMINI_MODEL))
        )
        app.state.synthesizer = synthesizer or AudioSynthesizer()
        app.state.extractor = extractor or TextExtractor()
        yield
        logger.info("Application shutdown")

    app = FastAPI(title="BuildCast API", version=__version__, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(misc.router)
    app.include_router(generate.router)
    app.include_router(audio.router)
    return app
