"""Centralised configuration for event_triage.

Environment variables are loaded once and all related constants are
grouped by service for easier maintenance.
"""

from __future__ import annotations

import os
from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Core credentials / endpoints (from environment)
# ---------------------------------------------------------------------------
OPENAI_API_KEY: str | None = os.getenv("OPENAI_API_KEY")
MONGODB_URI: str | None = os.getenv("MONGODB_URI")
REDIS_URL: str | None = os.getenv("REDIS_URL")

# ---------------------------------------------------------------------------
# Remote classifier
# ---------------------------------------------------------------------------
OPENAI_CLASSIFIER_MODEL: str = os.getenv("OPENAI_CLASSIFIER_MODEL", "gpt-3.5-turbo")
# Single attempt, bounded by this request timeout
CLASSIFIER_TIMEOUT_SECONDS: float = float(os.getenv("CLASSIFIER_TIMEOUT_SECONDS", "10"))

# ---------------------------------------------------------------------------
# Storage + cache
# ---------------------------------------------------------------------------
MONGODB_DATABASE: str = os.getenv("MONGODB_DATABASE", "event_triage")
ANALYSIS_CACHE_TTL_SECONDS: int = int(os.getenv("ANALYSIS_CACHE_TTL_SECONDS", "3600"))

# ---------------------------------------------------------------------------
# Background enrichment
# ---------------------------------------------------------------------------
ENRICHMENT_MAX_WORKERS: int = int(os.getenv("ENRICHMENT_MAX_WORKERS", "4"))

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # credentials
    "OPENAI_API_KEY",
    "MONGODB_URI",
    "REDIS_URL",
    # classifier
    "OPENAI_CLASSIFIER_MODEL",
    "CLASSIFIER_TIMEOUT_SECONDS",
    # storage
    "MONGODB_DATABASE",
    "ANALYSIS_CACHE_TTL_SECONDS",
    # enrichment
    "ENRICHMENT_MAX_WORKERS",
    # logging
    "LOG_LEVEL",
]
