#!/usr/bin/env python3

import argparse
import json
import mimetypes
import sys
from pathlib import Path

from buildcast.api import GeminiAPIClient
from buildcast.audio import AudioSynthesizer
from buildcast.core import StudyProcessor
from buildcast.extraction import TextExtractor
from buildcast.utils import format_file_size
from buildcast.utils.exceptions import TextExtractionError
from buildcast.utils.logging import setup_file_logging
from config import MODEL_NAMES, create_model
from settings import settings


def guess_content_type(path: Path) -> str:
    content_type, _ = mimetypes.guess_type(path.name)
    return content_type or "application/octet-stream"


def main():
    parser = argparse.ArgumentParser(description="Turn study material into concepts, a summary and flashcards")
    parser.add_argument("file", help="Text, PDF, JPEG or PNG file")
    parser.add_argument("--model", choices=list(MODEL_NAMES), default=settings.GEMINI_MODEL,
                        help=f"Gemini model (default: {settings.GEMINI_MODEL})")
    parser.add_argument("--audio", metavar="OUT.mp3", help="Also narrate the summary to this file")
    parser.add_argument("--output", metavar="OUT.json", help="Write the result here instead of stdout")
    parser.add_argument("--log-dir", help="Also write debug logs to a file in this directory")

    args = parser.parse_args()

    if args.log_dir:
        log_file = setup_file_logging(args.log_dir)
        print(f"Logging to {log_file}", file=sys.stderr)

    path = Path(args.file)
    if not path.is_file():
        print(f"Error: file not found: {path}", file=sys.stderr)
        return 1

    data = path.read_bytes()
    if len(data) > settings.MAX_FILE_SIZE:
        print(f"Error: file exceeds maximum size of {format_file_size(settings.MAX_FILE_SIZE)}", file=sys.stderr)
        return 1

    content_type = guess_content_type(path)
    print(f"Reading {path.name} ({content_type}, {format_file_size(len(data))})", file=sys.stderr)

    try:
        text = TextExtractor().extract(data, content_type)
    except TextExtractionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if len(text.strip()) < settings.MIN_TEXT_LENGTH:
        print("Error: extracted text is too short. Please provide more substantial content.", file=sys.stderr)
        return 1

    print(f"Model: {MODEL_NAMES[args.model]}", file=sys.stderr)
    processor = StudyProcessor(GeminiAPIClient(create_model(args.model)))
    result = processor.process(text)

    payload = json.dumps(result.to_dict(), ensure_ascii=False, indent=2)
    if args.output:
        Path(args.output).write_text(payload, encoding="utf-8")
        print(f"Saved result to {args.output}", file=sys.stderr)
    else:
        print(payload)

    if args.audio:
        audio = AudioSynthesizer().synthesize(result.summary)
        if audio.is_placeholder:
            print("Warning: audio unavailable (check ELEVENLABS_API_KEY); nothing written", file=sys.stderr)
        else:
            Path(args.audio).write_bytes(audio.audio_bytes)
            print(f"Saved narration to {args.audio} ({format_file_size(len(audio.audio_bytes))})", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
