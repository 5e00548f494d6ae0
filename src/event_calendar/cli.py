from __future__ import annotations

import argparse
import logging
from datetime import datetime, timedelta
from typing import Optional, Sequence

from .config import get_settings
from .domain import Event
from .logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Event calendar command line interface.")
    parser.add_argument("--log-level", default=None, help="Override EVENT_CALENDAR_LOG_LEVEL.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP server exposing the calendar functions.")
    serve_parser.add_argument("--host", default=settings.server.host)
    serve_parser.add_argument("--port", type=int, default=settings.server.port)

    mcp_parser = subparsers.add_parser("mcp", help="Start the FastMCP server exposing the calendar functions.")
    mcp_parser.add_argument("--host", default=settings.mcp.host)
    mcp_parser.add_argument("--port", type=int, default=settings.mcp.port)

    demo_parser = subparsers.add_parser("demo", help="Run a sample session against a running server.")
    demo_parser.add_argument("--url", default=settings.client.base_url)

    return parser


def run_demo(url: str) -> None:
    from .services.client import CalendarClient

    with CalendarClient(url) as calendar:
        calendar.lookup()

        meeting = Event("Meeting", datetime(2023, 12, 5, 5, 30), 60, "Business", "Discuss project", "Office")
        logger.info("Add %s: %s", meeting.name, calendar.add_event(meeting))

        duplicate = Event("Meeting", datetime(2023, 12, 6, 8, 30), 90, "Business", "Another discussion", "Coffee Shop")
        logger.info("Add duplicate %s: %s", duplicate.name, calendar.add_event(duplicate))

        conference = Event(
            "Conference",
            datetime.now().replace(second=0, microsecond=0) + timedelta(days=1),
            120,
            "Tech",
            "Annual tech conference",
            "Conference Hall",
        )
        logger.info("Add %s: %s", conference.name, calendar.add_event(conference))

        logger.info("Events named 'Meeting': %s", calendar.get_events_by_name("Meeting"))
        logger.info("Events of type 'Tech': %s", calendar.get_events_by_type("Tech"))
        logger.info("Events at %s: %s", meeting.start, calendar.get_events_by_date(meeting.start))
        logger.info("Events at 'Conference Hall': %s", calendar.get_events_by_location("Conference Hall"))
        logger.info("Events for 12/2023: %s", calendar.get_events_for_month(2023, 12))
        logger.info("Remove %s: %s", meeting.name, calendar.remove_event(meeting.name))
        logger.info("All events: %s", list(calendar.get_all_events().values()))


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    logger.info("Event calendar CLI starting: %s", args.command)

    if args.command == "serve":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    elif args.command == "mcp":
        from .services.mcp import run_mcp_server

        run_mcp_server(host=args.host, port=args.port)
    elif args.command == "demo":
        run_demo(args.url)
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
