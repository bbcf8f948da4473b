"""
Event status derivation, calendar grid and ticker text.

All comparisons are at day granularity: an event is *running* from its
start date through its end date inclusive, *upcoming* before it starts and
*completed* afterwards.
"""
import calendar
from datetime import date as date_cls

from django.utils import timezone

RUNNING = "running"
UPCOMING = "upcoming"
COMPLETED = "completed"
STATUSES = (RUNNING, UPCOMING, COMPLETED)


def today():
    return timezone.localdate()


def event_status(start, end=None, on=None):
    on = on or today()
    end = end or start
    if on < start:
        return UPCOMING
    if on <= end:
        return RUNNING
    return COMPLETED


def status_of(event, on=None):
    return event_status(event.date, event.deadline, on=on)


def filter_by_status(events, status, on=None):
    return [e for e in events if status_of(e, on=on) == status]


def format_display_date(value) -> str:
    """``dd-mm-yyyy`` as shown on the public pages; blank for missing dates."""
    if not value:
        return ""
    return value.strftime("%d-%m-%Y")


def month_grid(year: int, month: int, events):
    """
    Sunday-first month layout.

    Returns ``{"year", "month", "leading_blanks", "days": [{"day", "date",
    "events": [...]}, ...]}`` where an event lands on the day it starts.
    """
    first = date_cls(year, month, 1)
    # date.weekday(): Monday=0 .. Sunday=6; shift so Sunday is column 0
    leading = (first.weekday() + 1) % 7
    days_in_month = calendar.monthrange(year, month)[1]

    by_day = {}
    for event in events:
        if event.date.year == year and event.date.month == month:
            by_day.setdefault(event.date.day, []).append(event)

    return {
        "year": year,
        "month": month,
        "month_name": calendar.month_name[month],
        "leading_blanks": leading,
        "days": [
            {
                "day": day,
                "date": date_cls(year, month, day),
                "events": by_day.get(day, []),
            }
            for day in range(1, days_in_month + 1)
        ],
    }


def agenda(events, which="all", on=None):
    """Events ascending by date; ``upcoming`` means starting today or later."""
    on = on or today()
    if which == "upcoming":
        events = [e for e in events if e.date >= on]
    elif which == "past":
        events = [e for e in events if e.date < on]
    return sorted(events, key=lambda e: (e.date, e.id))


def ticker_items(events, custom_values, on=None):
    items = [
        f"ONGOING: {e.title} ({format_display_date(e.date)})"
        for e in sorted(filter_by_status(events, RUNNING, on=on), key=lambda e: e.date, reverse=True)
    ]
    items.extend(value for value in custom_values if value and value.strip())
    return items
