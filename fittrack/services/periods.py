"""
Разбор дат из запросов и календарные окна (неделя / месяц / год).
"""
import calendar
from datetime import date, datetime, time, timedelta, timezone

from fittrack.core.errors import ValidationError
from fittrack.schemas.common import Period

WEEKLY = "weekly"
MONTHLY = "monthly"
YEARLY = "yearly"
VIEW_TYPES = (WEEKLY, MONTHLY, YEARLY)


def parse_date(value) -> datetime:
    """
    Принимает datetime, date или ISO-строку ("2024-01-15", "2024-01-15T08:30:00Z").
    Возвращает наивное UTC-время, как оно хранится в БД.
    """
    if value is None or value == "":
        raise ValidationError("Date is required")
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValidationError(f"Invalid date: {value}")
    else:
        raise ValidationError(f"Invalid date: {value}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def period_window(view_type: str, base: date | datetime) -> tuple[datetime, datetime]:
    """Начало и конец (включительно) периода, содержащего base. Неделя начинается с понедельника."""
    if isinstance(base, datetime):
        base = base.date()

    if view_type == YEARLY:
        start = date(base.year, 1, 1)
        end = date(base.year, 12, 31)
    elif view_type == MONTHLY:
        start = base.replace(day=1)
        end = base.replace(day=calendar.monthrange(base.year, base.month)[1])
    else:
        start = base - timedelta(days=base.weekday())
        end = start + timedelta(days=6)

    return datetime.combine(start, time.min), datetime.combine(end, time.max)


def normalize_view_type(view_type: str | None) -> str:
    """Неизвестный вид периода считается неделей, как и в period_window"""
    return view_type if view_type in VIEW_TYPES else WEEKLY


def period_payload(start: datetime, end: datetime) -> Period:
    return Period(start=start.isoformat(), end=end.isoformat())
