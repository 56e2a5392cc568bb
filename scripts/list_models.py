"""List the Gemini models available to the configured API key."""
from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import httpx

from app.config import get_settings
from app.services.gemini_client import GeminiClient, GeminiError


def main() -> int:
    settings = get_settings()
    if not settings.gemini_api_key:
        print("API Key not found. Set GEMINI_API_KEY in .env.local")
        return 1

    try:
        with GeminiClient(settings.gemini_api_key) as client:
            names = client.list_models()
    except (GeminiError, httpx.HTTPError) as err:
        print(f"Error: {err}")
        return 1

    print("Available Models:")
    for name in names:
        print(name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
