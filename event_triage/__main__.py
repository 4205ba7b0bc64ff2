"""Command-line entry point: simulate one event against an ad-hoc watch list."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .exceptions import ValidationError
from .workflows.event_pipeline import simulate_event

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="event_triage",
        description="Create a watch list and an event, then print the enriched event.",
    )
    parser.add_argument("--name", default="Simulated", help="watch list name")
    parser.add_argument("--terms", required=True, help="comma-separated watch list terms")
    parser.add_argument("--type", dest="event_type", required=True, help="event type, e.g. alert")
    parser.add_argument("--description", required=True, help="event description")
    parser.add_argument("--domain")
    parser.add_argument("--ip")
    parser.add_argument("--metadata", help="JSON object with extra event metadata")
    parser.add_argument("--timeout", type=float, default=30.0, help="seconds to wait for enrichment")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    content = {"type": args.event_type, "description": args.description}
    if args.domain:
        content["domain"] = args.domain
    if args.ip:
        content["ip"] = args.ip
    if args.metadata:
        try:
            content["metadata"] = json.loads(args.metadata)
        except json.JSONDecodeError as exc:
            logger.error("--metadata is not valid JSON: %s", exc)
            return 2

    terms = [term.strip() for term in args.terms.split(",") if term.strip()]
    try:
        event = simulate_event(args.name, terms, content, timeout=args.timeout)
    except ValidationError as exc:
        logger.error("Invalid input: %s", exc)
        return 2

    print(json.dumps(event.to_dict(), indent=2))
    return 0 if event.processed else 1


if __name__ == "__main__":
    sys.exit(main())
