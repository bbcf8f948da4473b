"""
Unit tests for event status derivation, the month grid and the ticker text.
"""
from datetime import date
from types import SimpleNamespace

from events import status


def ev(id, title, start, end=None):
    return SimpleNamespace(id=id, title=title, date=start, deadline=end)


def test_single_day_event_is_running_only_on_its_day():
    day = date(2025, 3, 10)
    assert status.event_status(day, on=date(2025, 3, 9)) == status.UPCOMING
    assert status.event_status(day, on=day) == status.RUNNING
    assert status.event_status(day, on=date(2025, 3, 11)) == status.COMPLETED


def test_deadline_extends_the_running_window_inclusively():
    start, end = date(2025, 3, 10), date(2025, 3, 12)
    assert status.event_status(start, end, on=date(2025, 3, 12)) == status.RUNNING
    assert status.event_status(start, end, on=date(2025, 3, 13)) == status.COMPLETED


def test_month_grid_starts_on_sunday():
    # 1 June 2025 is a Sunday, 1 March 2025 a Saturday
    june = status.month_grid(2025, 6, [])
    march = status.month_grid(2025, 3, [])
    assert june["leading_blanks"] == 0
    assert march["leading_blanks"] == 6
    assert len(march["days"]) == 31
    assert len(status.month_grid(2024, 2, [])["days"]) == 29


def test_month_grid_places_events_on_their_start_day():
    hack = ev(1, "Hackathon", date(2025, 3, 10), date(2025, 3, 12))
    other_month = ev(2, "Seminar", date(2025, 4, 1))
    grid = status.month_grid(2025, 3, [hack, other_month])
    assert grid["days"][9]["events"] == [hack]
    assert all(not d["events"] for d in grid["days"] if d["day"] != 10)


def test_agenda_filters_and_sorts_ascending():
    today = date(2025, 3, 10)
    events = [
        ev(1, "Later", date(2025, 4, 1)),
        ev(2, "Past", date(2025, 2, 1)),
        ev(3, "Today", today),
    ]
    assert [e.title for e in status.agenda(events, "all", on=today)] == ["Past", "Today", "Later"]
    assert [e.title for e in status.agenda(events, "upcoming", on=today)] == ["Today", "Later"]
    assert [e.title for e in status.agenda(events, "past", on=today)] == ["Past"]


def test_ticker_lists_running_events_then_custom_values():
    today = date(2025, 3, 10)
    events = [
        ev(1, "CRT Week", date(2025, 3, 8), date(2025, 3, 14)),
        ev(2, "Old Talk", date(2025, 1, 5)),
    ]
    items = status.ticker_items(events, ["MoU signed with Ceremorphic", "   ", ""], on=today)
    assert items == ["ONGOING: CRT Week (08-03-2025)", "MoU signed with Ceremorphic"]


def test_display_date_format():
    assert status.format_display_date(date(2025, 1, 7)) == "07-01-2025"
    assert status.format_display_date(None) == ""
