"""Top-level package for the event-triage project.

Exposes the request-path helpers so callers can do
`from event_triage import create_event` or run `python -m event_triage`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("event-triage")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .workflows.event_pipeline import (  # convenience re-exports
    build_orchestrator,
    create_event,
    create_watch_list,
    simulate_event,
)

__all__ = [
    "build_orchestrator",
    "create_event",
    "create_watch_list",
    "simulate_event",
    "__version__",
]
