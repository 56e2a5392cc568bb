"""Minimal REST client for the Gemini Generative Language API."""
from __future__ import annotations

import logging
from typing import Any

import httpx


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash"


class GeminiError(RuntimeError):
    """Raised when the Gemini API returns something we cannot interpret."""


class GeminiClient:
    """Thin wrapper over the ``generateContent`` and ``models`` endpoints."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        if not api_key:
            raise ValueError("GEMINI_API_KEY is required")
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "GeminiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def generate_content(self, prompt: str) -> httpx.Response:
        """POST a single-turn prompt and return the raw response."""

        url = f"{self.base_url}/models/{self.model}:generateContent"
        body = {"contents": [{"parts": [{"text": prompt}]}]}
        logger.debug("Calling %s with %d-char prompt", self.model, len(prompt))
        return self._client.post(url, params={"key": self.api_key}, json=body)

    def list_models(self) -> list[str]:
        """Return the names of models available to this API key."""

        response = self._client.get(f"{self.base_url}/models", params={"key": self.api_key})
        try:
            payload = response.json()
        except ValueError as exc:
            raise GeminiError(f"Error parsing JSON: {response.text}") from exc

        models = payload.get("models") if isinstance(payload, dict) else None
        if models is None:
            raise GeminiError(f"No models found, response: {response.text}")
        return [model["name"] for model in models if "name" in model]

    @staticmethod
    def extract_text(payload: dict[str, Any]) -> str | None:
        """Return the first candidate's text from a ``generateContent`` payload."""

        for candidate in payload.get("candidates") or []:
            parts = (candidate.get("content") or {}).get("parts") or []
            texts = [part["text"] for part in parts if "text" in part]
            if texts:
                return "".join(texts)
        return None
