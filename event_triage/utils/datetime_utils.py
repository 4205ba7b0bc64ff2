"""Utility functions for working with dates and times."""

from datetime import datetime, timezone

__all__ = [
    "get_current_timestamp",
]

def get_current_timestamp() -> datetime:
    """Return the current UTC datetime.

    Stored directly in MongoDB, where it is written as a BSON Date.
    """
    return datetime.now(tz=timezone.utc)
