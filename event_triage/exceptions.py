"""Exception hierarchy shared by the triage services."""

from __future__ import annotations


class EventTriageError(Exception):
    """Base class for all errors raised by event_triage."""


class ValidationError(EventTriageError, ValueError):
    """Malformed watch-list or event input supplied by a caller."""


class WatchListNotFoundError(EventTriageError, LookupError):
    """The referenced watch list does not exist."""


class ClassificationError(EventTriageError):
    """The remote classifier was unreachable or returned unusable output."""


class CacheUnavailableError(EventTriageError):
    """The analysis cache backend could not be reached."""


class StoreUpdateError(EventTriageError):
    """The processed analysis could not be written back to the event store."""


__all__ = [
    "EventTriageError",
    "ValidationError",
    "WatchListNotFoundError",
    "ClassificationError",
    "CacheUnavailableError",
    "StoreUpdateError",
]
