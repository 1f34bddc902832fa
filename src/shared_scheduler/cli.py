from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import MAXYEAR, MINYEAR, date
from typing import Callable, Optional, Sequence

from .bootstrap import configure_logging
from .domain import SchedulerError
from .layout import WEEKDAY_LABELS, MonthView, days_in_month, events_between
from .services import CalendarService, ServiceContext, UserService
from .storage import EMPTY_DOCUMENT, HandleStore, LocalFileHandle, encode_document, open_handle

logger = logging.getLogger(__name__)

CELL_WIDTH = 6


def _parse_month(value: str) -> tuple[int, int]:
    try:
        year_text, month_text = value.split("-", 1)
        year, month = int(year_text), int(month_text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("month must be formatted YYYY-MM") from exc
    if not MINYEAR <= year <= MAXYEAR:
        raise argparse.ArgumentTypeError(f"year must be between {MINYEAR} and {MAXYEAR}")
    if not 1 <= month <= 12:
        raise argparse.ArgumentTypeError("month must be between 01 and 12")
    return year, month


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Shared Scheduler command line interface.")
    parser.add_argument("--file", help="Schedule file to open (defaults to SCHEDULER_DOCUMENT_PATH).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init", help="Create an empty schedule file if none exists.")
    subparsers.add_parser("gui", help="Launch the desktop GUI.")

    month_parser = subparsers.add_parser("month", help="Print a month grid with its events.")
    month_parser.add_argument("month", nargs="?", type=_parse_month, help="YYYY-MM, defaults to this month.")

    users_parser = subparsers.add_parser("users", help="Manage users.")
    users_sub = users_parser.add_subparsers(dest="action", required=True)
    users_sub.add_parser("list", help="List users.")
    add_user = users_sub.add_parser("add", help="Add a user.")
    add_user.add_argument("name")
    delete_user = users_sub.add_parser("delete", help="Delete a user and unassign it from events.")
    delete_user.add_argument("name")
    delete_user.add_argument("--yes", action="store_true", help="Do not ask for confirmation.")

    events_parser = subparsers.add_parser("events", help="Manage events.")
    events_sub = events_parser.add_subparsers(dest="action", required=True)
    list_events = events_sub.add_parser("list", help="List events.")
    list_events.add_argument("--month", type=_parse_month, help="Only events in YYYY-MM.")
    add_event = events_sub.add_parser("add", help="Add an event.")
    add_event.add_argument("date", help="YYYY-MM-DD")
    add_event.add_argument("title")
    add_event.add_argument("--time", help="HH:MM")
    add_event.add_argument("--desc", help="Free-text description.")
    add_event.add_argument("--assignee", action="append", default=[], help="Repeat for several users.")
    add_event.add_argument("--category", help="Category tag.")
    delete_event = events_sub.add_parser("delete", help="Delete an event.")
    delete_event.add_argument("event_id")
    delete_event.add_argument("--yes", action="store_true", help="Do not ask for confirmation.")

    return parser


# ------------------------------------------------------------------ rendering


def render_month(view: MonthView) -> str:
    lines = [view.title.center(CELL_WIDTH * 7).rstrip()]
    lines.append("".join(label.rjust(CELL_WIDTH) for label in WEEKDAY_LABELS))
    for row in view.rows:
        cells = []
        for cell in row:
            text = f"{cell.date.day:2d}" if cell.in_month else f"({cell.date.day})"
            marker = "*" if cell.chips and cell.in_month else " "
            cells.append(f"{text}{marker}".rjust(CELL_WIDTH))
        lines.append("".join(cells))

    for cell in view.cells:
        if not cell.in_month or not cell.chips:
            continue
        lines.append("")
        lines.append(cell.date.isoformat())
        for chip in cell.chips:
            tooltip = chip.tooltip.splitlines()
            lines.append(f"  - {tooltip[0]}  ({chip.event_id})")
            lines.extend(f"      {line}" for line in tooltip[1:])
    return "\n".join(lines)


def _confirm(prompt: str, assume_yes: bool) -> bool:
    if assume_yes:
        return True
    answer = input(f"{prompt} [y/N] ")
    return answer.strip().lower() in {"y", "yes"}


# ------------------------------------------------------------------ commands


def _init(handle: LocalFileHandle) -> int:
    if handle.path.exists() and handle.path.stat().st_size:
        print(f"{handle.path} already exists.")
        return 0
    asyncio.run(HandleStore(handle).write(encode_document(EMPTY_DOCUMENT)))
    print(f"Created {handle.path}")
    return 0


async def _run(args: argparse.Namespace, handle: LocalFileHandle, out: Callable[[str], None]) -> int:
    context = await ServiceContext.open(handle)
    calendar = CalendarService(context)
    users = UserService(context)

    if args.command == "month":
        if args.month:
            view = calendar.show_month(*args.month)
        else:
            view = calendar.show_today()
        out(render_month(view))
    elif args.command == "users":
        if args.action == "list":
            for name in users.list_users():
                out(name)
        elif args.action == "add":
            await users.add_user(args.name)
            out(f"Added {args.name}")
        elif args.action == "delete":
            if not _confirm(f"Delete user {args.name!r}?", args.yes):
                out("Cancelled.")
                return 1
            await users.delete_user(args.name)
            out(f"Deleted {args.name}")
    elif args.command == "events":
        if args.action == "list":
            events = list(calendar.document.events)
            if args.month:
                year, month = args.month
                last = date(year, month, days_in_month(year, month))
                events = events_between(events, date(year, month, 1), last)
            else:
                events = events_between(events, date.min, date.max)
            for event in events:
                when = f"{event.date.isoformat()} {event.time or '--:--'}"
                out(f"{event.id}  {when}  {event.title}")
        elif args.action == "add":
            event = await calendar.create_event(
                date=args.date,
                title=args.title,
                time=args.time,
                description=args.desc,
                assignees=args.assignee,
                category_id=args.category,
            )
            out(event.id)
        elif args.action == "delete":
            if not _confirm(f"Delete event {args.event_id}?", args.yes):
                out("Cancelled.")
                return 1
            await calendar.delete_event(args.event_id)
            out(f"Deleted {args.event_id}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    logger.debug("Shared Scheduler CLI running %s", args.command)

    if args.command == "gui":
        from .ui.app import run_gui

        run_gui(path=args.file)
        return 0

    handle = open_handle(args.file)
    if args.command == "init":
        return _init(handle)

    try:
        return asyncio.run(_run(args, handle, print))
    except SchedulerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
