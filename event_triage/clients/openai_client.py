"""Singleton accessor for the OpenAI SDK client."""

from __future__ import annotations

from openai import OpenAI as _OpenAIClient

from ..config import CLASSIFIER_TIMEOUT_SECONDS, OPENAI_API_KEY

_client: _OpenAIClient | None = None


def get_openai() -> _OpenAIClient:
    """Return a singleton instance of :class:`openai.OpenAI`.

    The SDK's built-in retries are disabled: a classification gets exactly
    one attempt before the caller falls back.
    """
    global _client
    if _client is None:
        if not OPENAI_API_KEY:
            raise EnvironmentError("OPENAI_API_KEY is not set in environment variables")
        _client = _OpenAIClient(
            api_key=OPENAI_API_KEY,
            timeout=CLASSIFIER_TIMEOUT_SECONDS,
            max_retries=0,
        )
    return _client

__all__ = ["get_openai"]
