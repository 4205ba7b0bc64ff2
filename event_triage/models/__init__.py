"""Domain models used across the project."""

from .analysis import Analysis, Severity  # noqa: F401
from .event import Event, EventContent, JSONValue, validate_json_value  # noqa: F401
from .watch_list import WatchList, validate_watch_list_fields  # noqa: F401

__all__ = [
    "Analysis",
    "Severity",
    "Event",
    "EventContent",
    "JSONValue",
    "validate_json_value",
    "WatchList",
    "validate_watch_list_fields",
]
