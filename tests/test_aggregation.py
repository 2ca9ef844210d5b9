from __future__ import annotations

from datetime import date, datetime

from fittrack.services.aggregation import ActivityRow, current_streak, group_by_day_and_user, summarize


def _row(day: str, user_id: str, name: str = None, photo: str = None, duration: int = 30) -> ActivityRow:
    return ActivityRow(datetime.fromisoformat(day), user_id, name or user_id, photo, duration)


def test_group_by_day_and_user_counts_rows_not_minutes():
    rows = [
        _row("2024-01-15T08:00:00", "u1", duration=90),
        _row("2024-01-15T18:00:00", "u1", duration=10),
        _row("2024-01-15T09:00:00", "u2", photo="http://img/u2.png"),
        _row("2024-01-16T07:00:00", "u2"),
    ]

    by_day = group_by_day_and_user(rows)

    assert list(by_day) == ["2024-01-15", "2024-01-16"]
    day = {entry["userId"]: entry for entry in by_day["2024-01-15"]}
    assert day["u1"]["activityCount"] == 2
    assert day["u2"]["activityCount"] == 1
    assert day["u2"]["photoUrl"] == "http://img/u2.png"
    assert by_day["2024-01-16"] == [
        {"userId": "u2", "userName": "u2", "photoUrl": None, "activityCount": 1}
    ]


def test_group_by_day_and_user_assigns_each_row_to_one_bucket():
    rows = [_row(f"2024-03-{d:02d}T12:00:00", f"u{d % 3}") for d in range(1, 29)] * 2

    by_day = group_by_day_and_user(rows)

    assert sum(e["activityCount"] for entries in by_day.values() for e in entries) == len(rows)
    for entries in by_day.values():
        user_ids = [e["userId"] for e in entries]
        assert len(user_ids) == len(set(user_ids))


def test_group_by_day_and_user_sorts_unordered_input():
    rows = [_row("2024-02-02T00:00:00", "b"), _row("2024-02-01T00:00:00", "a")]
    assert list(group_by_day_and_user(rows)) == ["2024-02-01", "2024-02-02"]


def test_group_by_day_and_user_empty():
    assert group_by_day_and_user([]) == {}


def test_current_streak_counts_back_from_today():
    today = date(2024, 5, 10)
    days = [date(2024, 5, 10), date(2024, 5, 9), date(2024, 5, 8), date(2024, 5, 6)]
    assert current_streak(days, today) == 3


def test_current_streak_starts_yesterday_when_today_is_empty():
    today = date(2024, 5, 10)
    assert current_streak([date(2024, 5, 9), date(2024, 5, 8)], today) == 2
    assert current_streak([date(2024, 5, 7)], today) == 0


def test_summarize():
    today = date(2024, 5, 10)
    rows = [
        (datetime(2024, 5, 10, 7), 30),
        (datetime(2024, 5, 9, 7), 45),
        (datetime(2024, 5, 1, 7), 60),
        (datetime(2024, 4, 30, 7), 20),
    ]

    stats = summarize(rows, today)

    assert stats == {
        "total_activities": 4,
        "weekly_activities": 2,
        "weekly_score": 75,
        "monthly_score": 135,
        "active_streak": 2,
    }
