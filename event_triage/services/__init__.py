"""Service layer modules grouping business logic by concern.

This module provides convenience re-exports so that callers can simply do for
example `from event_triage.services import FallbackClassifier` without having
to know which underlying module provides the symbol.
"""

from .analysis_cache import InMemoryAnalysisCache, RedisAnalysisCache, fingerprint  # noqa: F401
from .enrichment import EnrichmentOrchestrator  # noqa: F401
from .event_store import InMemoryEventStore, MongoEventStore  # noqa: F401
from .fallback_classifier import FallbackClassifier  # noqa: F401
from .remote_classifier import RemoteClassifier  # noqa: F401

__all__ = [
    "InMemoryAnalysisCache",
    "RedisAnalysisCache",
    "fingerprint",
    "EnrichmentOrchestrator",
    "InMemoryEventStore",
    "MongoEventStore",
    "FallbackClassifier",
    "RemoteClassifier",
]
