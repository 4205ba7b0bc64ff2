"""Definition of the `WatchList` dataclass and its input rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from ..exceptions import ValidationError
from ..utils.datetime_utils import get_current_timestamp

MAX_NAME_LENGTH: int = 100
MAX_TERMS: int = 50


@dataclass(slots=True)
class WatchList:
    """A named set of indicator terms that incoming events are matched against."""

    id: str
    name: str
    terms: List[str]
    description: Optional[str] = None
    created_at: datetime = field(default_factory=get_current_timestamp)


def validate_watch_list_fields(name: Any, terms: Any, description: Any = None) -> None:
    """Raise :class:`ValidationError` unless the fields describe a valid watch list."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Watch list name must be a non-empty string")
    if len(name.strip()) > MAX_NAME_LENGTH:
        raise ValidationError(f"Watch list name must be at most {MAX_NAME_LENGTH} characters")
    if description is not None and not isinstance(description, str):
        raise ValidationError("Watch list description must be a string")
    if not isinstance(terms, (list, tuple)):
        raise ValidationError("Watch list terms must be a list of strings")
    if not 1 <= len(terms) <= MAX_TERMS:
        raise ValidationError(f"Watch list must have between 1 and {MAX_TERMS} terms")
    for term in terms:
        if not isinstance(term, str) or not term:
            raise ValidationError("Watch list terms must be non-empty strings")


__all__ = ["WatchList", "validate_watch_list_fields", "MAX_NAME_LENGTH", "MAX_TERMS"]
