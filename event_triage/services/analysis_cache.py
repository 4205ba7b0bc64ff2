"""Best-effort TTL cache of classifier output, keyed by content fingerprint.

A cache is an optimisation only: backend failures are logged and turn reads
into misses and writes into no-ops.
"""

from __future__ import annotations

import hashlib
import json
import logging
import threading
import time
from typing import Callable, Dict, Optional, Protocol, Sequence, Tuple

import redis

from ..config import ANALYSIS_CACHE_TTL_SECONDS
from ..exceptions import CacheUnavailableError
from ..models import Analysis, EventContent

KEY_PREFIX: str = "ai_analysis"

logger = logging.getLogger(__name__)


def fingerprint(content: EventContent, terms: Sequence[str]) -> str:
    """Return the cache key for (*content*, *terms*).

    Any change to the content, metadata included, or to the order of the
    terms yields a different key.
    """
    material = f"{content.serialize()}:{','.join(terms)}"
    digest = hashlib.sha256(material.encode("utf-8")).hexdigest()
    return f"{KEY_PREFIX}:{digest}"


class AnalysisCache(Protocol):
    def get(self, key: str) -> Optional[Analysis]: ...

    def put(self, key: str, value: Analysis, ttl_seconds: int = ANALYSIS_CACHE_TTL_SECONDS) -> None: ...


class InMemoryAnalysisCache:
    """In-process TTL cache, thread-safe, used when no Redis is configured."""

    def __init__(self, maxsize: int = 1024, clock: Callable[[], float] = time.monotonic) -> None:
        self._data: Dict[str, Tuple[float, Analysis]] = {}
        self._lock = threading.Lock()
        self._maxsize = maxsize
        self._clock = clock

    def get(self, key: str) -> Optional[Analysis]:
        now = self._clock()
        with self._lock:
            item = self._data.get(key)
            if item is None:
                return None
            expires_at, value = item
            if expires_at <= now:
                del self._data[key]
                return None
            return value

    def put(self, key: str, value: Analysis, ttl_seconds: int = ANALYSIS_CACHE_TTL_SECONDS) -> None:
        expires_at = self._clock() + max(0, int(ttl_seconds))
        with self._lock:
            if key not in self._data and len(self._data) >= self._maxsize:
                # Drop the oldest insertion
                self._data.pop(next(iter(self._data)))
            self._data[key] = (expires_at, value)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class RedisAnalysisCache:
    """Redis-backed cache storing JSON-serialised analyses with ``SETEX``."""

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    def _fetch(self, key: str) -> Optional[str]:
        try:
            return self._client.get(key)
        except redis.RedisError as exc:
            raise CacheUnavailableError(str(exc)) from exc

    def _store(self, key: str, payload: str, ttl_seconds: int) -> None:
        try:
            self._client.setex(key, ttl_seconds, payload)
        except redis.RedisError as exc:
            raise CacheUnavailableError(str(exc)) from exc

    def get(self, key: str) -> Optional[Analysis]:
        try:
            raw = self._fetch(key)
        except CacheUnavailableError as exc:
            logger.warning("Redis GET failed for %s – treating as miss: %s", key, exc)
            return None
        if raw is None:
            return None
        try:
            return Analysis.from_dict(json.loads(raw))
        except ValueError as exc:  # json.JSONDecodeError is a ValueError
            logger.warning("Discarding unreadable cache entry %s: %s", key, exc)
            return None

    def put(self, key: str, value: Analysis, ttl_seconds: int = ANALYSIS_CACHE_TTL_SECONDS) -> None:
        try:
            self._store(key, json.dumps(value.to_dict()), ttl_seconds)
        except CacheUnavailableError as exc:
            logger.warning("Redis SET failed for %s – skipping cache write: %s", key, exc)


__all__ = [
    "AnalysisCache",
    "InMemoryAnalysisCache",
    "RedisAnalysisCache",
    "fingerprint",
    "KEY_PREFIX",
]
