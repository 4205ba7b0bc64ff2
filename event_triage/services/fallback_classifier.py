"""Rule-based severity classifier used when the remote model is unavailable.

Severity and summary are a pure function of the event content and the watch
list terms. Only the suggested action is drawn at random from a fixed pool
per severity, through an injectable :class:`random.Random`.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, Sequence, Tuple

from ..models import Analysis, EventContent, Severity

# ---------------------------------------------------------------------------
# Keyword tiers, checked in this order; first tier with a hit wins
# ---------------------------------------------------------------------------
SEVERITY_KEYWORDS: Tuple[Tuple[Severity, Tuple[str, ...]], ...] = (
    (
        Severity.CRITICAL,
        ("ransomware", "breach", "compromise", "attack", "critical", "wannacry", "encrypted"),
    ),
    (Severity.HIGH, ("malware", "trojan", "virus", "exploit", "high")),
    (Severity.MED, ("phishing", "suspicious", "medium", "med")),
)

SUGGESTED_ACTIONS: Dict[Severity, Tuple[str, ...]] = {
    Severity.LOW: (
        "Monitor for patterns",
        "Log for future reference",
        "Schedule routine review",
    ),
    Severity.MED: (
        "Investigate within 24h",
        "Check related systems",
        "Notify team lead",
    ),
    Severity.HIGH: (
        "Immediate investigation required",
        "Escalate to security team",
        "Block suspicious activity",
    ),
    Severity.CRITICAL: (
        "URGENT: Immediate response required",
        "Activate incident response",
        "Contact security operations center",
    ),
}

logger = logging.getLogger(__name__)


def match_terms(text: str, terms: Sequence[str]) -> List[str]:
    """Return the *terms* whose lowercase form occurs in lowercase *text*, in order."""
    haystack = text.lower()
    return [term for term in terms if term.lower() in haystack]


def score_severity(text: str, matched_terms: Sequence[str]) -> Severity:
    """Keyword tiers first, then escalate on the number of matched terms."""
    haystack = text.lower()
    for severity, keywords in SEVERITY_KEYWORDS:
        if any(keyword in haystack for keyword in keywords):
            return severity

    if len(matched_terms) > 2:
        return Severity.HIGH
    if matched_terms:
        return Severity.MED
    return Severity.LOW


def compose_summary(content: EventContent, matched_terms: Sequence[str]) -> str:
    if matched_terms:
        matches = f"matching terms: {', '.join(matched_terms)}"
    else:
        matches = "with no term matches"
    return f'Mock analysis: Detected event of type "{content.type}" {matches}. {content.description}'


class FallbackClassifier:
    """Deterministic keyword/term-volume classifier. Never fails."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def classify(self, content: EventContent, terms: Sequence[str]) -> Analysis:
        text = content.serialize()
        matched = match_terms(text, terms)
        severity = score_severity(text, matched)
        action = self._rng.choice(SUGGESTED_ACTIONS[severity])

        logger.debug(
            "Fallback classified event type '%s' as %s (%d matched terms)",
            content.type,
            severity.value,
            len(matched),
        )
        return Analysis(
            summary=compose_summary(content, matched),
            severity=severity,
            suggested_action=action,
        )


__all__ = [
    "FallbackClassifier",
    "SEVERITY_KEYWORDS",
    "SUGGESTED_ACTIONS",
    "match_terms",
    "score_severity",
    "compose_summary",
]
