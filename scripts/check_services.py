#!/usr/bin/env python3
"""
Local connectivity check for the external services.

Loads GEMINI_API_KEY and ELEVENLABS_API_KEY from .env and tries a lightweight
metadata request against each (list models, list voices). Prints pass/fail per
service and exits non-zero if any configured service fails.

Usage:
  python scripts/check_services.py

Optional:
  python scripts/check_services.py --verbose
"""

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from buildcast.api import GeminiAPIClient  # noqa: E402
from buildcast.audio import AudioSynthesizer  # noqa: E402
from config import get_environment_info, validate_environment  # noqa: E402


def mask_key(key: str) -> str:
    if not key:
        return "<empty>"
    return f"{key[:4]}...{key[-4:]}" if len(key) > 8 else "****"


def main() -> int:
    parser = argparse.ArgumentParser(description="Check Gemini and ElevenLabs connectivity using local .env")
    parser.add_argument("--verbose", action="store_true", help="Print extra details")
    args = parser.parse_args()

    load_dotenv()  # load .env from current directory if present

    validation = validate_environment()
    if args.verbose:
        print(f"Environment: {get_environment_info()}\n")
    if not validation["present"]:
        print("No GEMINI_API_KEY or ELEVENLABS_API_KEY found in environment (.env).", file=sys.stderr)
        return 2

    checks = [
        ("Gemini", "GEMINI_API_KEY", lambda key: GeminiAPIClient(api_key=key).ping()),
        ("ElevenLabs", "ELEVENLABS_API_KEY", lambda key: AudioSynthesizer(api_key=key).ping()),
    ]

    all_ok = True
    print("Service health check:\n")
    for name, env_name, check in checks:
        key = os.getenv(env_name, "").strip()
        if not key:
            print(f"{name}: SKIPPED ({env_name} not set)")
            continue
        print(f"{name}: key {mask_key(key)} -> ", end="", flush=True)
        if check(key):
            print("PASS")
        else:
            all_ok = False
            print("FAIL")

    print("\nSummary: " + ("ALL PASS" if all_ok else "SOME FAILURES"))
    return 0 if all_ok else 1


if __name__ == "__main__":
    sys.exit(main())
