"""Smoke test for the Gemini REST API using the configured key."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import httpx

from app.config import get_settings
from app.services.gemini_client import GeminiClient

DEFAULT_PROMPT = "Explain AI in one sentence."


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send one prompt to Gemini and print the raw reply")
    parser.add_argument("--prompt", default=DEFAULT_PROMPT, help="Prompt text to send")
    parser.add_argument("--model", help="Model name override (defaults to GEMINI_MODEL)")
    args = parser.parse_args(argv)

    settings = get_settings()
    if not settings.gemini_api_key:
        print("API Key not found. Set GEMINI_API_KEY in .env.local")
        return 1

    try:
        with GeminiClient(settings.gemini_api_key, model=args.model or settings.gemini_model) as client:
            response = client.generate_content(args.prompt)
    except httpx.HTTPError as err:
        print(f"Error: {err}")
        return 1

    print("Status:", response.status_code)
    print("Response:", response.text)
    return 0 if response.is_success else 1


if __name__ == "__main__":
    sys.exit(main())
