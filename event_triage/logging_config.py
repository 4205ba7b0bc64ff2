"""Logging setup for event_triage, applied on first import.

The level comes from ``LOG_LEVEL`` (default ``INFO``). Modules log through
``logging.getLogger(__name__)`` and include ``[correlation_id=...]`` in
enrichment messages so background failures can be traced to the request.
"""

import logging

from .config import LOG_LEVEL

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(threadName)s - %(message)s",
)

__all__ = ["logging"]
