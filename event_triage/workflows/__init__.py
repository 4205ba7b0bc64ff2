"""Workflows combining the services into request-path operations."""

from .event_pipeline import (  # noqa: F401
    build_orchestrator,
    create_event,
    create_watch_list,
    simulate_event,
)

__all__ = ["build_orchestrator", "create_event", "create_watch_list", "simulate_event"]
