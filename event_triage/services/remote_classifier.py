"""Event classification via the OpenAI chat completions API."""

from __future__ import annotations

import logging
from typing import Sequence

from openai import OpenAI as _OpenAIClient

from ..config import OPENAI_CLASSIFIER_MODEL
from ..exceptions import ClassificationError
from ..models import Analysis, EventContent
from ..utils.llm_parsing import extract_structured_json

# ---------------------------------------------------------------------------
# Local completion settings
# ---------------------------------------------------------------------------
CLASSIFIER_TEMPERATURE: float = 0.3
CLASSIFIER_MAX_TOKENS: int = 300

logger = logging.getLogger(__name__)


def build_prompt(content: EventContent, terms: Sequence[str]) -> str:
    return (
        "Analyze this security event and provide:\n"
        "1. A concise summary in natural language\n"
        "2. Severity level (LOW/MED/HIGH/CRITICAL)\n"
        "3. Suggested next action for the analyst\n"
        "\n"
        f"Event Data: {content.serialize()}\n"
        f"Watch Terms: {', '.join(terms)}\n"
        "\n"
        "Respond in JSON format:\n"
        "{\n"
        '  "summary": "Brief description of the event",\n'
        '  "severity": "LOW|MED|HIGH|CRITICAL",\n'
        '  "suggestedAction": "Specific action recommendation"\n'
        "}"
    )


class RemoteClassifier:
    """Single-attempt LLM classifier.

    Any transport error, empty completion or unparseable reply is raised as
    :class:`ClassificationError`; choosing a fallback is the caller's job.
    """

    def __init__(self, client: _OpenAIClient, model: str = OPENAI_CLASSIFIER_MODEL) -> None:
        self._client = client
        self._model = model

    def classify(self, content: EventContent, terms: Sequence[str], correlation_id: str) -> Analysis:
        try:
            resp = self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": build_prompt(content, terms)}],
                temperature=CLASSIFIER_TEMPERATURE,
                max_tokens=CLASSIFIER_MAX_TOKENS,
            )
        except Exception as exc:  # network failure, auth, rate limit, timeout
            raise ClassificationError(f"OpenAI request failed: {exc}") from exc

        try:
            raw: str | None = resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as exc:
            raise ClassificationError("Malformed OpenAI response envelope") from exc

        if not raw or not raw.strip():
            raise ClassificationError("No response from OpenAI")

        try:
            analysis = Analysis.from_dict(extract_structured_json(raw))
        except ValueError as exc:
            logger.debug("Unparseable classifier reply [correlation_id=%s]: %s", correlation_id, raw)
            raise ClassificationError(f"Unparseable classifier reply: {exc}") from exc

        logger.info(
            "OpenAI analysis completed [correlation_id=%s] severity=%s",
            correlation_id,
            analysis.severity.value,
        )
        return analysis


__all__ = ["RemoteClassifier", "build_prompt"]
