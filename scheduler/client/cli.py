"""
Terminal front-end for the scheduler demo.

Usage:
    scheduler-client days
    scheduler-client show --day Tuesday
    scheduler-client book 4 --student "Zoe" --interviewer 1
    scheduler-client cancel 1

Each command prints the session id; pass it back with --session (or set
SCHEDULER_SESSION_ID) to keep working on the same schedule.
"""

import argparse
import sys
from typing import List, Optional

from .api import SchedulerClient, SchedulerClientError
from .appointment import Mode
from .state import DEFAULT_DAY, SchedulerApp, format_spots, short_session_id

# End-of-day marker shown after the last bookable slot
LAST_SLOT_TIME = "5pm"


def _print_days(app: SchedulerApp) -> None:
    for day in app.days:
        marker = ">" if day.name == app.day else " "
        print(f"{marker} {day.name:<10} {format_spots(day.spots)}")


def _print_day(app: SchedulerApp) -> None:
    day = app.selected_day()
    if day is None:
        print(f"No such day: {app.day}")
        return
    print(f"{day.name}: {format_spots(day.spots)}")
    for slot in app.slots_for_day():
        print(f"  [{slot.id:>2}] {slot.render()}")
    print(f"       {LAST_SLOT_TIME:>5}")


def _book(app: SchedulerApp, args) -> int:
    slot = app.slot_for(args.appointment_id)
    if slot is None:
        print(f"❌ Appointment not found: {args.appointment_id}")
        return 1
    if slot.mode is Mode.SHOW:
        slot.edit()
    else:
        slot.add()
    slot.set_student(args.student)
    slot.select_interviewer(args.interviewer)
    if not slot.save():
        print("❌ Student name and interviewer are both required")
        return 1
    print(slot.render())
    return 0 if slot.mode is Mode.SHOW else 1


def _cancel(app: SchedulerApp, args) -> int:
    slot = app.slot_for(args.appointment_id)
    if slot is None:
        print(f"❌ Appointment not found: {args.appointment_id}")
        return 1
    if slot.mode is Mode.EMPTY:
        print(slot.render())
        return 0
    slot.delete()
    slot.confirm()
    print(slot.render())
    return 0 if slot.mode is Mode.EMPTY else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Interview Scheduler demo client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  scheduler-client days
  scheduler-client --session <id> show --day Wednesday
  scheduler-client --session <id> book 4 --student "Zoe" --interviewer 1
        """,
    )
    parser.add_argument("--url", help="API base URL (default: SCHEDULER_API_URL or http://localhost:8001)")
    parser.add_argument("--session", help="Existing session id (default: SCHEDULER_SESSION_ID, else a new session)")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("days", help="List days with remaining spots")

    show = sub.add_parser("show", help="Show the appointments of one day")
    show.add_argument("--day", default=DEFAULT_DAY, help=f"Day name (default: {DEFAULT_DAY})")

    book = sub.add_parser("book", help="Book or edit an interview")
    book.add_argument("appointment_id", help="Appointment id")
    book.add_argument("--student", required=True, help="Student name")
    book.add_argument("--interviewer", type=int, required=True, help="Interviewer id")

    cancel = sub.add_parser("cancel", help="Cancel an interview")
    cancel.add_argument("appointment_id", help="Appointment id")
    return parser


def main(argv: Optional[List[str]] = None, client: Optional[SchedulerClient] = None) -> int:
    args = build_parser().parse_args(argv)
    client = client or SchedulerClient(base_url=args.url, session_id=args.session)
    if args.session:
        client.session_id = args.session
    app = SchedulerApp(client)

    try:
        if client.session_id:
            app.load()
        else:
            app.start()
    except SchedulerClientError as e:
        print(f"❌ Error: {e}")
        return 1

    print(f"🎭 Demo Session {short_session_id(app.session_id)} ({app.session_id})")

    if args.command == "days":
        _print_days(app)
        return 0
    if args.command == "show":
        app.set_day(args.day)
        _print_day(app)
        return 0 if app.selected_day() else 1
    if args.command == "book":
        return _book(app, args)
    return _cancel(app, args)


if __name__ == "__main__":
    sys.exit(main())
