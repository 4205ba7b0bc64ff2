"""Correlation identifiers propagated from the request path into background work."""

from __future__ import annotations

import uuid
from typing import Optional

__all__ = ["ensure_correlation_id"]


def ensure_correlation_id(correlation_id: Optional[str] = None) -> str:
    """Return *correlation_id* unchanged, or a fresh uuid4 string when it is empty."""
    if correlation_id:
        return correlation_id
    return str(uuid.uuid4())
