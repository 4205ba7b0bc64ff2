"""Request-path operations and process wiring for the triage pipeline."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional, Sequence, Tuple

from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from ..clients.mongodb_client import get_mongo_client
from ..clients.openai_client import get_openai
from ..clients.redis_client import get_redis
from ..config import MONGODB_DATABASE, MONGODB_URI, OPENAI_API_KEY, REDIS_URL
from ..exceptions import WatchListNotFoundError
from ..models import Event, EventContent, WatchList, validate_watch_list_fields
from ..services.analysis_cache import AnalysisCache, InMemoryAnalysisCache, RedisAnalysisCache
from ..services.enrichment import EnrichmentOrchestrator
from ..services.event_store import EventStore, InMemoryEventStore, MongoEventStore
from ..services.fallback_classifier import FallbackClassifier
from ..services.remote_classifier import RemoteClassifier
from ..utils.correlation import ensure_correlation_id

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Request-path operations
# ---------------------------------------------------------------------------


def create_watch_list(
    store: EventStore,
    name: str,
    terms: Sequence[str],
    description: Optional[str] = None,
) -> WatchList:
    """Validate and persist a new watch list."""
    validate_watch_list_fields(name, terms, description)
    watch_list = store.create_watch_list(name.strip(), list(terms), description)
    logger.info("Watch list created: %s (%d terms)", watch_list.id, len(watch_list.terms))
    return watch_list


def create_event(
    store: EventStore,
    orchestrator: EnrichmentOrchestrator,
    watch_list_id: str,
    raw_content: Dict[str, Any],
    correlation_id: Optional[str] = None,
) -> Event:
    """Persist an unprocessed event and schedule its enrichment.

    Returns as soon as the record exists; the returned event is always
    ``processed=False``. Raises :class:`ValidationError` for malformed content
    and :class:`WatchListNotFoundError` for an unknown watch list.
    """
    correlation_id = ensure_correlation_id(correlation_id)
    content = EventContent.from_dict(raw_content)

    watch_list = store.get_watch_list(watch_list_id)
    if watch_list is None:
        raise WatchListNotFoundError(f"Watch list not found: {watch_list_id}")

    event = store.create_event(watch_list.id, content, correlation_id)
    orchestrator.trigger_enrichment(event.id, content, watch_list.terms, correlation_id)

    logger.info("Event created %s [correlation_id=%s]", event.id, correlation_id)
    return event


# ---------------------------------------------------------------------------
# Process wiring
# ---------------------------------------------------------------------------


def build_store() -> EventStore:
    """MongoDB when ``MONGODB_URI`` is set, otherwise an in-memory store."""
    if MONGODB_URI:
        store = MongoEventStore(get_mongo_client()[MONGODB_DATABASE])
        store.ensure_indexes()
        logger.info("Using MongoDB event store (database=%s)", MONGODB_DATABASE)
        return store
    logger.info("MONGODB_URI not set – using in-memory event store")
    return InMemoryEventStore()


def build_cache() -> AnalysisCache:
    """Redis when ``REDIS_URL`` is set, otherwise an in-process TTL cache."""
    if REDIS_URL:
        logger.info("Using Redis analysis cache")
        return RedisAnalysisCache(get_redis())
    logger.info("REDIS_URL not set – using in-process analysis cache")
    return InMemoryAnalysisCache()


def build_orchestrator(store: Optional[EventStore] = None) -> Tuple[EventStore, EnrichmentOrchestrator]:
    """Construct the shared collaborators once for the whole process."""
    store = store or build_store()
    remote = RemoteClassifier(get_openai()) if OPENAI_API_KEY else None
    if remote is None:
        logger.info("OPENAI_API_KEY not set – classifying with the rule engine only")
    orchestrator = EnrichmentOrchestrator(
        store=store,
        cache=build_cache(),
        fallback=FallbackClassifier(),
        remote=remote,
    )
    return store, orchestrator


def simulate_event(
    watch_list_name: str,
    terms: Sequence[str],
    raw_content: Dict[str, Any],
    timeout: float = 30.0,
    poll_interval: float = 0.2,
) -> Event:
    """Create a watch list and an event against it, then wait for enrichment.

    Returns the latest stored copy of the event, which is still unprocessed
    if enrichment failed or did not finish within *timeout* seconds.
    """
    store, orchestrator = build_orchestrator()
    try:
        watch_list = create_watch_list(store, watch_list_name, terms)
        event = create_event(store, orchestrator, watch_list.id, raw_content)

        deadline = time.monotonic() + timeout
        current = event
        while time.monotonic() < deadline:
            current = store.get_event(event.id) or current
            if current.processed:
                break
            time.sleep(poll_interval)
        else:
            logger.warning("Event %s not processed within %.1fs", event.id, timeout)
        return current
    finally:
        orchestrator.shutdown(wait=False)


__all__ = [
    "create_watch_list",
    "create_event",
    "build_store",
    "build_cache",
    "build_orchestrator",
    "simulate_event",
]
