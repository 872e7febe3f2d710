from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from buildcast.audio import AudioSynthesizer
from buildcast.core import StudyProcessor
from buildcast.extraction import TextExtractor


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def success_response(data: Any) -> dict:
    return {"success": True, "data": data}


def get_processor(request: Request) -> StudyProcessor:
    return request.app.state.processor


def get_synthesizer(request: Request) -> AudioSynthesizer:
    return request.app.state.synthesizer


def get_extractor(request: Request) -> TextExtractor:
    return request.app.state.extractor
