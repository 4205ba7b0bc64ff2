"""Singleton accessor for the Redis client backing the analysis cache."""

from __future__ import annotations

import redis

from ..config import REDIS_URL

_client: redis.Redis | None = None


def get_redis() -> redis.Redis:
    """Return a singleton :class:`redis.Redis` built from ``REDIS_URL``.

    Construction does not connect; the first command does.
    """
    global _client
    if _client is None:
        if not REDIS_URL:
            raise EnvironmentError("REDIS_URL is not set in environment variables")
        _client = redis.Redis.from_url(REDIS_URL, decode_responses=True, socket_timeout=2)
    return _client

__all__ = ["get_redis"]
