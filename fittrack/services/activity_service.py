import logging
from datetime import date, datetime

from sqlalchemy.orm import Session, joinedload

from fittrack.core.db import transaction
from fittrack.core.errors import Forbidden, NotFound, ValidationError
from fittrack.models import Activity, ActivityType, User
from fittrack.services import group_service, user_service
from fittrack.services.aggregation import ActivityRow, group_by_day_and_user, summarize
from fittrack.services.periods import parse_date, period_window

logger = logging.getLogger(__name__)

RECENT_ACTIVITIES_LIMIT = 20
# Одна активность не длиннее суток
MAX_DURATION_MINUTES = 24 * 60


def parse_activity_type(value) -> ActivityType:
    if isinstance(value, ActivityType):
        return value
    try:
        return ActivityType(str(value).strip().upper())
    except ValueError:
        raise ValidationError(f"Unknown activity type: {value}")


def parse_duration(value) -> int:
    # bool является подклассом int, но не длительностью
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError("Duration must be a positive number of minutes")
    if value > MAX_DURATION_MINUTES:
        raise ValidationError(f"Duration cannot exceed {MAX_DURATION_MINUTES} minutes")
    return value


def _validate_fields(activity_type, duration, when) -> tuple[ActivityType, int, datetime]:
    if not activity_type or not duration or not when:
        raise ValidationError("Missing required fields")
    return parse_activity_type(activity_type), parse_duration(duration), parse_date(when)


def get_owned_activity(db: Session, user: User, activity_id: str) -> Activity:
    activity = db.query(Activity).filter(Activity.id == activity_id).first()
    if not activity:
        raise NotFound("Activity not found")
    if activity.user_id != user.id:
        raise Forbidden("Not authorized to modify this activity")
    return activity


def create_activity(db: Session, user: User, activity_type, duration, when, group_id) -> Activity:
    """Записывает активность пользователя в группу, в которой он состоит"""
    if not group_id:
        logger.info(f"⚠️ Активность без обязательных полей от пользователя {user.id}")
        raise ValidationError("Missing required fields")
    activity_type, duration, when = _validate_fields(activity_type, duration, when)

    group_service.require_member(db, group_id, user)

    activity = Activity(
        user_id=user.id,
        group_id=group_id,
        activity_type=activity_type,
        duration=duration,
        date=when,
    )
    with transaction(db, "log activity"):
        db.add(activity)
    db.refresh(activity)

    logger.info(f"🏃 Активность {activity.id} ({activity_type.value}, {duration} мин) записана в группу {group_id}")
    return activity


def update_activity(db: Session, user: User, activity_id: str, activity_type, duration, when) -> Activity:
    activity = get_owned_activity(db, user, activity_id)
    activity_type, duration, when = _validate_fields(activity_type, duration, when)

    with transaction(db, "update activity"):
        activity.activity_type = activity_type
        activity.duration = duration
        activity.date = when
    db.refresh(activity)
    return activity


def delete_activity(db: Session, user: User, activity_id: str) -> None:
    activity = get_owned_activity(db, user, activity_id)
    with transaction(db, "delete activity"):
        db.delete(activity)
    logger.info(f"🗑️ Активность {activity_id} удалена")


def list_own_activities(db: Session, user: User) -> list[Activity]:
    return (
        db.query(Activity)
        .options(joinedload(Activity.group))
        .filter(Activity.user_id == user.id)
        .order_by(Activity.date.desc())
        .all()
    )


def list_group_recent_activities(db: Session, group_id: str, limit: int = RECENT_ACTIVITIES_LIMIT):
    """Последние активности группы: [(activity, user_name, photo_url)]"""
    group_service.get_group(db, group_id)

    activities = (
        db.query(Activity)
        .options(joinedload(Activity.user), joinedload(Activity.group))
        .filter(Activity.group_id == group_id)
        .order_by(Activity.date.desc(), Activity.created_at.desc())
        .limit(limit)
        .all()
    )
    photos = user_service.latest_photos(db, {a.user_id for a in activities})
    return [(a, a.user.name, photos.get(a.user_id)) for a in activities]


def aggregate_group_activities(db: Session, user: User, group_id: str, base: date | datetime, view_type: str):
    """
    Активности группы за неделю / месяц / год, сгруппированные по дню и пользователю.
    Возвращает (by_day, start, end).
    """
    group_service.require_member(db, group_id, user)
    start, end = period_window(view_type, base)

    rows = (
        db.query(Activity.date, Activity.user_id, User.name, Activity.duration)
        .join(User, User.id == Activity.user_id)
        .filter(
            Activity.group_id == group_id,
            Activity.date >= start,
            Activity.date <= end,
        )
        .order_by(Activity.date.asc())
        .all()
    )
    photos = user_service.latest_photos(db, {r.user_id for r in rows})

    by_day = group_by_day_and_user(
        ActivityRow(date=r.date, user_id=r.user_id, user_name=r.name, photo_url=photos.get(r.user_id), duration=r.duration)
        for r in rows
    )
    return by_day, start, end


def activity_summary(db: Session, user: User, today: date) -> dict:
    rows = db.query(Activity.date, Activity.duration).filter(Activity.user_id == user.id).all()
    return summarize(rows, today)
