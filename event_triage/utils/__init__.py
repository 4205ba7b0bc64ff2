"""Utility functions for the event triage project.

Re-exports the LLM-parsing helpers, datetime utilities and correlation-id
helper so that imports like `from ..utils import extract_structured_json`
work as expected.
"""

from .correlation import ensure_correlation_id  # noqa: F401
from .datetime_utils import get_current_timestamp  # noqa: F401
from .llm_parsing import extract_structured_json, strip_code_fences  # noqa: F401

__all__ = [
    "ensure_correlation_id",
    "get_current_timestamp",
    "extract_structured_json",
    "strip_code_fences",
]
