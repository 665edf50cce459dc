"""Minimal client for the Ollama text-generation endpoint.

Only ``POST /api/generate`` with ``stream: false`` is used. Every failure
(connection error, non-2xx status, undecodable or oddly shaped body) comes out
as ``InferenceError`` so callers have a single exception to fall back on.
"""

import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

GENERATE_OPTIONS = {
    "temperature": 0.1,  # narrow output vocabulary for label extraction
    "top_p": 0.9,
    "max_tokens": 150,
}


class InferenceError(Exception):
    """Raised when the inference backend cannot produce a usable response."""
    pass


class OllamaClient:
    def __init__(self, base_url: str, model: str, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings, alternative: bool = False) -> "OllamaClient":
        model = settings.OLLAMA_ALTERNATIVE_MODEL if alternative else settings.OLLAMA_MODEL
        return cls(settings.OLLAMA_BASE_URL, model, timeout=settings.OLLAMA_TIMEOUT)

    @property
    def generate_url(self) -> str:
        return f"{self.base_url}/api/generate"

    def generate(self, prompt: str) -> str:
        """Run one non-streaming completion and return the stripped text."""
        body: Dict[str, Any] = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": dict(GENERATE_OPTIONS),
        }
        logger.debug("Calling Ollama model=%s url=%s", self.model, self.generate_url)
        try:
            resp = self.session.post(self.generate_url, json=body, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise InferenceError(f"Ollama request failed: {e}") from e
        except ValueError as e:
            raise InferenceError(f"Ollama returned a non-JSON body: {e}") from e

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise InferenceError("Ollama response has no 'response' text")
        return text.strip()
