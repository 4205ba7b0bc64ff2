"""Severity tiers and the `Analysis` value produced by the classifiers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Any, Dict


@total_ordering
class Severity(Enum):
    """Ordered severity tiers: LOW < MED < HIGH < CRITICAL."""

    LOW = "LOW"
    MED = "MED"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"

    @property
    def rank(self) -> int:
        return _SEVERITY_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank


_SEVERITY_ORDER = (Severity.LOW, Severity.MED, Severity.HIGH, Severity.CRITICAL)


@dataclass(frozen=True, slots=True)
class Analysis:
    """Enrichment output for a single event."""

    summary: str
    severity: Severity
    suggested_action: str

    def to_dict(self) -> Dict[str, str]:
        """Return the wire representation (``suggestedAction`` key)."""
        return {
            "summary": self.summary,
            "severity": self.severity.value,
            "suggestedAction": self.suggested_action,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Analysis":
        """Build an :class:`Analysis` from its wire form.

        Raises
        ------
        ValueError
            If *data* is not a mapping, a field is missing or empty, or the
            severity label is not one of the four tiers.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Analysis payload must be an object, got {type(data).__name__}")

        summary = data.get("summary")
        severity = data.get("severity")
        action = data.get("suggestedAction")

        for name, value in (("summary", summary), ("severity", severity), ("suggestedAction", action)):
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Analysis field '{name}' is missing or empty")

        try:
            parsed_severity = Severity(severity.strip().upper())
        except ValueError as exc:
            raise ValueError(f"Unknown severity label: {severity!r}") from exc

        return cls(summary=summary.strip(), severity=parsed_severity, suggested_action=action.strip())


__all__ = ["Severity", "Analysis"]
