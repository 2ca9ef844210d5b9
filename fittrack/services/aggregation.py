"""
Чистые функции агрегации: ничего не знают о БД и работают с уже
отфильтрованными строками.
"""
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Iterable, NamedTuple, Optional


class ActivityRow(NamedTuple):
    date: datetime
    user_id: str
    user_name: Optional[str]
    photo_url: Optional[str]
    duration: int = 0


def day_key(value: date | datetime) -> str:
    return value.strftime("%Y-%m-%d")


def group_by_day_and_user(rows: Iterable[ActivityRow]) -> dict[str, list[dict]]:
    """
    Группирует активности по ключу (день, пользователь) и считает записи.
    Результат: {"2024-01-15": [{"userId", "userName", "photoUrl", "activityCount"}, ...]}.
    Дни идут по возрастанию, пользователи внутри дня в порядке первой активности.
    """
    buckets: dict[tuple[str, str], dict] = {}
    for row in sorted(rows, key=lambda r: r.date):
        key = (day_key(row.date), row.user_id)
        if key not in buckets:
            buckets[key] = {
                "userId": row.user_id,
                "userName": row.user_name,
                "photoUrl": row.photo_url,
                "activityCount": 0,
            }
        buckets[key]["activityCount"] += 1

    by_day: dict[str, list[dict]] = {}
    for (day, _), entry in buckets.items():
        by_day.setdefault(day, []).append(entry)
    return by_day


def current_streak(days: Iterable[date], today: date) -> int:
    """Сколько дней подряд была хотя бы одна активность, считая от сегодня (или вчера)."""
    active = set(days)
    cursor = today if today in active else today - timedelta(days=1)
    streak = 0
    while cursor in active:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def summarize(rows: Iterable[tuple[datetime, int]], today: date) -> dict:
    """
    Сводка для дашборда по (дата, длительность) активностям пользователя:
    всего, за последние 7 дней (штук и минут), минут за текущий месяц, серия дней.
    """
    week_start = today - timedelta(days=6)
    totals = defaultdict(int)
    days = set()

    for when, duration in rows:
        day = when.date() if isinstance(when, datetime) else when
        totals["total"] += 1
        days.add(day)
        if week_start <= day <= today:
            totals["weekly"] += 1
            totals["weekly_minutes"] += duration
        if (day.year, day.month) == (today.year, today.month):
            totals["monthly_minutes"] += duration

    return {
        "total_activities": totals["total"],
        "weekly_activities": totals["weekly"],
        "weekly_score": totals["weekly_minutes"],
        "monthly_score": totals["monthly_minutes"],
        "active_streak": current_streak(days, today),
    }
