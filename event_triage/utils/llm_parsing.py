"""Utilities for parsing structured outputs returned by LLM calls.

Chat models asked for "JSON only" still occasionally wrap the payload in a
markdown fence or prepend a sentence. The helper below recovers the first
JSON object it can find so classifiers don't each reimplement the search.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict

__all__ = ["strip_code_fences", "extract_structured_json"]

_FENCE_RE = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", flags=re.DOTALL | re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json … ``` fence, if present."""
    cleaned = (text or "").strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[len("```json") :].strip()
    if cleaned.startswith("```"):
        cleaned = cleaned[3:].strip()
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3].strip()
    return cleaned


def extract_structured_json(response_text: str) -> Dict[str, Any]:
    """Robustly extract a JSON object from an LLM response.

    Parameters
    ----------
    response_text
        The raw message content returned by the chat completion.

    Returns
    -------
    dict[str, Any]
        The parsed JSON object.

    Raises
    ------
    ValueError
        If no JSON object can be located in *response_text*.
    """
    cleaned = strip_code_fences(response_text)
    if not cleaned:
        raise ValueError("Empty LLM response")

    # 1. Whole string (fast path)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError:
        pass
    else:
        if isinstance(parsed, dict):
            return parsed
        raise ValueError(f"Expected a JSON object, got {type(parsed).__name__}")

    # 2. Fenced block somewhere inside surrounding prose
    fenced = _FENCE_RE.search(cleaned)
    if fenced:
        try:
            return json.loads(fenced.group(1))
        except json.JSONDecodeError:
            cleaned = fenced.group(1)

    # 3. Progressive truncation from the first "{"
    start = cleaned.find("{")
    if start == -1:
        raise ValueError("Could not locate JSON in LLM response")

    candidate = cleaned[start:]
    for end in range(len(candidate), 0, -1):
        if candidate[end - 1] != "}":
            continue
        try:
            parsed = json.loads(candidate[:end])
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed

    raise ValueError("Could not locate JSON in LLM response")
