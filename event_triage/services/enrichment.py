"""Event enrichment – severity, summary and suggested action for stored events.

The request path persists an unprocessed event and hands it to
:meth:`EnrichmentOrchestrator.trigger_enrichment`, which returns immediately.
A worker thread then runs, in order:

1. analysis cache lookup,
2. on a miss, the remote classifier, falling back to the rule engine,
3. best-effort cache write,
4. event store update (``processed=True``).

A failed store update leaves the event unprocessed. Logging is the only
channel through which background failures surface.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Optional, Sequence

from ..config import ANALYSIS_CACHE_TTL_SECONDS, ENRICHMENT_MAX_WORKERS
from ..exceptions import StoreUpdateError
from ..models import Analysis, EventContent
from .analysis_cache import AnalysisCache, fingerprint
from .event_store import EventStore
from .fallback_classifier import FallbackClassifier
from .remote_classifier import RemoteClassifier

logger = logging.getLogger(__name__)


class EnrichmentOrchestrator:
    """Ties cache, classifiers and store together for one event at a time.

    Collaborators are injected once at process start and shared by all
    workers; the orchestrator itself keeps no per-event state.
    """

    def __init__(
        self,
        store: EventStore,
        cache: AnalysisCache,
        fallback: FallbackClassifier,
        remote: Optional[RemoteClassifier] = None,
        executor: Optional[Executor] = None,
        cache_ttl: int = ANALYSIS_CACHE_TTL_SECONDS,
    ) -> None:
        self._store = store
        self._cache = cache
        self._fallback = fallback
        self._remote = remote
        self._executor = executor or ThreadPoolExecutor(
            max_workers=ENRICHMENT_MAX_WORKERS, thread_name_prefix="enrichment"
        )
        self._cache_ttl = cache_ttl

        logger.info("Enrichment orchestrator initialised (remote classifier: %s)", remote is not None)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def trigger_enrichment(
        self,
        event_id: str,
        content: EventContent,
        terms: Sequence[str],
        correlation_id: str,
    ) -> None:
        """Schedule enrichment of *event_id* and return immediately. Never raises."""
        try:
            future = self._executor.submit(self.enrich, event_id, content, list(terms), correlation_id)
        except RuntimeError as exc:  # executor already shut down
            logger.error(
                "Could not schedule enrichment for event %s [correlation_id=%s]: %s",
                event_id,
                correlation_id,
                exc,
            )
            return
        future.add_done_callback(lambda f: _log_unexpected_failure(f, event_id, correlation_id))

    def enrich(
        self,
        event_id: str,
        content: EventContent,
        terms: Sequence[str],
        correlation_id: str,
    ) -> None:
        """Run one enrichment attempt synchronously. Failures are logged, not raised."""
        try:
            analysis = self.analyze(content, terms, correlation_id)
        except Exception:
            logger.exception(
                "AI analysis crashed for event %s [correlation_id=%s] – event stays unprocessed",
                event_id,
                correlation_id,
            )
            return

        try:
            self._write_back(event_id, analysis)
        except StoreUpdateError as exc:
            logger.error(
                "AI processing failed for event %s [correlation_id=%s]: %s – event stays unprocessed",
                event_id,
                correlation_id,
                exc,
            )
            return

        logger.info(
            "Event %s processed with AI [correlation_id=%s] severity=%s",
            event_id,
            correlation_id,
            analysis.severity.value,
        )

    def analyze(self, content: EventContent, terms: Sequence[str], correlation_id: str) -> Analysis:
        """Return the cached analysis for (*content*, *terms*) or compute and cache it."""
        key = fingerprint(content, terms)

        try:
            cached = self._cache.get(key)
        except Exception as exc:  # cache backend down; treat as a miss
            logger.warning("Analysis cache read failed [correlation_id=%s]: %s", correlation_id, exc)
            cached = None
        if cached is not None:
            logger.info("AI analysis cache hit [correlation_id=%s]", correlation_id)
            return cached

        analysis = self._classify(content, terms, correlation_id)

        try:
            self._cache.put(key, analysis, self._cache_ttl)
        except Exception as exc:
            logger.warning("Analysis cache write failed [correlation_id=%s]: %s", correlation_id, exc)
        return analysis

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work; with *wait*, block until queued enrichments finish."""
        self._executor.shutdown(wait=wait)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _classify(self, content: EventContent, terms: Sequence[str], correlation_id: str) -> Analysis:
        if self._remote is not None:
            try:
                return self._remote.classify(content, terms, correlation_id)
            except Exception as exc:  # ClassificationError or anything the client raised
                logger.error(
                    "OpenAI analysis failed, falling back to rule engine [correlation_id=%s]: %s",
                    correlation_id,
                    exc,
                )
        return self._fallback.classify(content, terms)

    def _write_back(self, event_id: str, analysis: Analysis) -> None:
        try:
            updated = self._store.update_event(event_id, analysis)
        except Exception as exc:  # store unreachable / driver error
            raise StoreUpdateError(f"event store update failed: {exc}") from exc
        if not updated:
            raise StoreUpdateError("event record not found")


def _log_unexpected_failure(future: Future, event_id: str, correlation_id: str) -> None:
    exc = future.exception()
    if exc is not None:
        logger.error(
            "Unexpected enrichment failure for event %s [correlation_id=%s]",
            event_id,
            correlation_id,
            exc_info=exc,
        )


__all__ = ["EnrichmentOrchestrator"]
