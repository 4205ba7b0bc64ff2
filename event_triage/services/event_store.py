"""Persistence of watch lists and events: MongoDB and in-memory backends.

Both backends implement :class:`EventStore`. The enrichment orchestrator
only relies on :meth:`EventStore.update_event`; the request path uses the
create / read methods.
"""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import replace
from typing import Any, Dict, List, Optional, Protocol, Sequence

from pymongo import DESCENDING
from pymongo.database import Database

from ..models import Analysis, Event, EventContent, Severity, WatchList
from ..utils.datetime_utils import get_current_timestamp

DEFAULT_LIST_LIMIT: int = 50

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


class EventStore(Protocol):
    def create_watch_list(
        self, name: str, terms: Sequence[str], description: Optional[str] = None
    ) -> WatchList: ...

    def get_watch_list(self, watch_list_id: str) -> Optional[WatchList]: ...

    def list_watch_lists(self) -> List[WatchList]: ...

    def delete_watch_list(self, watch_list_id: str) -> bool: ...

    def create_event(self, watch_list_id: str, content: EventContent, correlation_id: str) -> Event: ...

    def get_event(self, event_id: str) -> Optional[Event]: ...

    def list_events(
        self, watch_list_id: Optional[str] = None, limit: int = DEFAULT_LIST_LIMIT
    ) -> List[Event]: ...

    def update_event(self, event_id: str, analysis: Analysis) -> bool: ...


# ---------------------------------------------------------------------------
# In-memory backend
# ---------------------------------------------------------------------------


class InMemoryEventStore:
    """Dictionary-backed store guarded by a single lock. Returns copies."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._watch_lists: Dict[str, WatchList] = {}
        self._events: Dict[str, Event] = {}

    def create_watch_list(
        self, name: str, terms: Sequence[str], description: Optional[str] = None
    ) -> WatchList:
        watch_list = WatchList(id=_new_id(), name=name, terms=list(terms), description=description)
        with self._lock:
            self._watch_lists[watch_list.id] = watch_list
        return replace(watch_list, terms=list(watch_list.terms))

    def get_watch_list(self, watch_list_id: str) -> Optional[WatchList]:
        with self._lock:
            watch_list = self._watch_lists.get(watch_list_id)
        if watch_list is None:
            return None
        return replace(watch_list, terms=list(watch_list.terms))

    def list_watch_lists(self) -> List[WatchList]:
        with self._lock:
            items = list(self._watch_lists.values())
        items.sort(key=lambda wl: wl.created_at, reverse=True)
        return [replace(wl, terms=list(wl.terms)) for wl in items]

    def delete_watch_list(self, watch_list_id: str) -> bool:
        with self._lock:
            if self._watch_lists.pop(watch_list_id, None) is None:
                return False
            for event_id in [e.id for e in self._events.values() if e.watch_list_id == watch_list_id]:
                del self._events[event_id]
        return True

    def create_event(self, watch_list_id: str, content: EventContent, correlation_id: str) -> Event:
        event = Event(
            id=_new_id(),
            watch_list_id=watch_list_id,
            content=content,
            correlation_id=correlation_id,
        )
        with self._lock:
            self._events[event.id] = event
        return replace(event)

    def get_event(self, event_id: str) -> Optional[Event]:
        with self._lock:
            event = self._events.get(event_id)
        return replace(event) if event is not None else None

    def list_events(
        self, watch_list_id: Optional[str] = None, limit: int = DEFAULT_LIST_LIMIT
    ) -> List[Event]:
        with self._lock:
            events = [
                e for e in self._events.values() if watch_list_id is None or e.watch_list_id == watch_list_id
            ]
        events.sort(key=lambda e: e.created_at, reverse=True)
        return [replace(e) for e in events[:limit]]

    def update_event(self, event_id: str, analysis: Analysis) -> bool:
        with self._lock:
            event = self._events.get(event_id)
            if event is None:
                return False
            self._events[event_id] = event.apply(analysis)
        return True


# ---------------------------------------------------------------------------
# MongoDB backend
# ---------------------------------------------------------------------------


def _watch_list_to_document(watch_list: WatchList) -> Dict[str, Any]:
    return {
        "_id": watch_list.id,
        "name": watch_list.name,
        "description": watch_list.description,
        "terms": list(watch_list.terms),
        "createdAt": watch_list.created_at,
    }


def _document_to_watch_list(doc: Dict[str, Any]) -> WatchList:
    return WatchList(
        id=doc["_id"],
        name=doc["name"],
        terms=list(doc.get("terms", [])),
        description=doc.get("description"),
        created_at=doc["createdAt"],
    )


def _event_to_document(event: Event) -> Dict[str, Any]:
    return {
        "_id": event.id,
        "watchListId": event.watch_list_id,
        "rawData": event.content.to_dict(),
        "correlationId": event.correlation_id,
        "processed": event.processed,
        "summary": event.summary,
        "severity": event.severity.value if event.severity else None,
        "suggestedAction": event.suggested_action,
        "createdAt": event.created_at,
    }


def _document_to_event(doc: Dict[str, Any]) -> Event:
    severity = doc.get("severity")
    return Event(
        id=doc["_id"],
        watch_list_id=doc["watchListId"],
        content=EventContent.from_dict(doc["rawData"]),
        correlation_id=doc.get("correlationId", ""),
        processed=bool(doc.get("processed", False)),
        summary=doc.get("summary"),
        severity=Severity(severity) if severity else None,
        suggested_action=doc.get("suggestedAction"),
        created_at=doc["createdAt"],
    )


class MongoEventStore:
    """MongoDB-backed store using the ``watch_lists`` and ``events`` collections.

    pymongo's client is thread-safe, so one instance is shared by the request
    path and the enrichment workers. Connection errors surface as
    :class:`pymongo.errors.PyMongoError`.
    """

    def __init__(self, db: Database) -> None:
        self._watch_lists = db["watch_lists"]
        self._events = db["events"]

    def ensure_indexes(self) -> None:
        self._events.create_index([("watchListId", 1), ("createdAt", DESCENDING)])
        logger.info("Ensured MongoDB indexes on events collection")

    def create_watch_list(
        self, name: str, terms: Sequence[str], description: Optional[str] = None
    ) -> WatchList:
        watch_list = WatchList(id=_new_id(), name=name, terms=list(terms), description=description)
        result = self._watch_lists.insert_one(_watch_list_to_document(watch_list))
        logger.info("Stored watch list to MongoDB with _id=%s", result.inserted_id)
        return watch_list

    def get_watch_list(self, watch_list_id: str) -> Optional[WatchList]:
        doc = self._watch_lists.find_one({"_id": watch_list_id})
        return _document_to_watch_list(doc) if doc else None

    def list_watch_lists(self) -> List[WatchList]:
        cursor = self._watch_lists.find().sort("createdAt", DESCENDING)
        return [_document_to_watch_list(doc) for doc in cursor]

    def delete_watch_list(self, watch_list_id: str) -> bool:
        result = self._watch_lists.delete_one({"_id": watch_list_id})
        if not result.deleted_count:
            return False
        removed = self._events.delete_many({"watchListId": watch_list_id})
        logger.info("Deleted watch list %s and %d events", watch_list_id, removed.deleted_count)
        return True

    def create_event(self, watch_list_id: str, content: EventContent, correlation_id: str) -> Event:
        event = Event(
            id=_new_id(),
            watch_list_id=watch_list_id,
            content=content,
            correlation_id=correlation_id,
            created_at=get_current_timestamp(),
        )
        self._events.insert_one(_event_to_document(event))
        return event

    def get_event(self, event_id: str) -> Optional[Event]:
        doc = self._events.find_one({"_id": event_id})
        return _document_to_event(doc) if doc else None

    def list_events(
        self, watch_list_id: Optional[str] = None, limit: int = DEFAULT_LIST_LIMIT
    ) -> List[Event]:
        query = {"watchListId": watch_list_id} if watch_list_id else {}
        cursor = self._events.find(query).sort("createdAt", DESCENDING).limit(limit)
        return [_document_to_event(doc) for doc in cursor]

    def update_event(self, event_id: str, analysis: Analysis) -> bool:
        result = self._events.update_one(
            {"_id": event_id},
            {
                "$set": {
                    "summary": analysis.summary,
                    "severity": analysis.severity.value,
                    "suggestedAction": analysis.suggested_action,
                    "processed": True,
                }
            },
        )
        return result.matched_count > 0


__all__ = [
    "EventStore",
    "InMemoryEventStore",
    "MongoEventStore",
    "DEFAULT_LIST_LIMIT",
]
