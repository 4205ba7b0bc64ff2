"""Definition of the `Event` dataclass and its raw content payload."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from ..exceptions import ValidationError
from ..utils.datetime_utils import get_current_timestamp
from .analysis import Analysis, Severity

# Closed set of JSON-like values allowed inside event metadata
JSONValue = Union[str, int, float, bool, None, Dict[str, "JSONValue"], List["JSONValue"]]


def validate_json_value(value: Any, path: str = "metadata") -> None:
    """Raise :class:`ValidationError` if *value* is not a :data:`JSONValue`."""
    if value is None or isinstance(value, (str, bool, int, float)):
        return
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise ValidationError(f"{path}: keys must be strings, got {key!r}")
            validate_json_value(item, f"{path}.{key}")
        return
    if isinstance(value, list):
        for idx, item in enumerate(value):
            validate_json_value(item, f"{path}[{idx}]")
        return
    raise ValidationError(f"{path}: unsupported value of type {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class EventContent:
    """Raw payload reported for an event."""

    type: str
    description: str
    domain: Optional[str] = None
    ip: Optional[str] = None
    metadata: Optional[Dict[str, JSONValue]] = None

    @classmethod
    def from_dict(cls, data: Any) -> "EventContent":
        if not isinstance(data, dict):
            raise ValidationError("Event content must be an object")

        for required in ("type", "description"):
            value = data.get(required)
            if not isinstance(value, str) or not value:
                raise ValidationError(f"Event content field '{required}' must be a non-empty string")

        for optional in ("domain", "ip"):
            value = data.get(optional)
            if value is not None and not isinstance(value, str):
                raise ValidationError(f"Event content field '{optional}' must be a string")

        metadata = data.get("metadata")
        if metadata is not None:
            if not isinstance(metadata, dict):
                raise ValidationError("Event content field 'metadata' must be an object")
            validate_json_value(metadata)

        return cls(
            type=data["type"],
            description=data["description"],
            domain=data.get("domain"),
            ip=data.get("ip"),
            metadata=dict(metadata) if metadata is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the payload with keys in canonical order, absent fields omitted."""
        out: Dict[str, Any] = {"type": self.type, "description": self.description}
        if self.domain is not None:
            out["domain"] = self.domain
        if self.ip is not None:
            out["ip"] = self.ip
        if self.metadata is not None:
            out["metadata"] = self.metadata
        return out

    def serialize(self) -> str:
        """Canonical compact JSON used for term matching and cache keys."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)


@dataclass(slots=True)
class Event:
    """A single reported occurrence, progressing from unprocessed to processed.

    The enrichment fields are either all set (``processed=True``) or all
    ``None``.
    """

    id: str
    watch_list_id: str
    content: EventContent
    correlation_id: str
    processed: bool = False
    summary: Optional[str] = None
    severity: Optional[Severity] = None
    suggested_action: Optional[str] = None
    created_at: datetime = field(default_factory=get_current_timestamp)

    @property
    def analysis(self) -> Optional[Analysis]:
        if not self.processed:
            return None
        return Analysis(self.summary, self.severity, self.suggested_action)

    def apply(self, analysis: Analysis) -> "Event":
        """Return a processed copy carrying *analysis*."""
        return replace(
            self,
            processed=True,
            summary=analysis.summary,
            severity=analysis.severity,
            suggested_action=analysis.suggested_action,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "watchListId": self.watch_list_id,
            "rawData": self.content.to_dict(),
            "correlationId": self.correlation_id,
            "processed": self.processed,
            "summary": self.summary,
            "severity": self.severity.value if self.severity else None,
            "suggestedAction": self.suggested_action,
            "createdAt": self.created_at.isoformat(),
        }


__all__ = ["Event", "EventContent", "JSONValue", "validate_json_value"]
