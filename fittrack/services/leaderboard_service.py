import logging
from datetime import datetime

from sqlalchemy import desc, func
from sqlalchemy.orm import Session

from fittrack.models import Activity, User
from fittrack.schemas.activity import LeaderboardEntry

logger = logging.getLogger(__name__)


def leaderboard(db: Session, start: datetime, end: datetime, group_id: str | None = None) -> list[LeaderboardEntry]:
    """
    Сумма минут и число активностей по каждому пользователю за период,
    по убыванию суммарной длительности.
    """
    total_duration = func.coalesce(func.sum(Activity.duration), 0).label("total_duration")
    total_activities = func.count(Activity.id).label("total_activities")

    query = (
        db.query(User.id, User.name, User.email, total_duration, total_activities)
        .join(Activity, Activity.user_id == User.id)
        .filter(Activity.date >= start, Activity.date <= end)
    )
    if group_id:
        query = query.filter(Activity.group_id == group_id)

    rows = (
        query.group_by(User.id, User.name, User.email)
        .order_by(desc("total_duration"), User.name)
        .all()
    )

    return [
        LeaderboardEntry(
            user_id=row.id,
            user_name=row.name,
            user_email=row.email or "unknown",
            total_duration=int(row.total_duration),
            total_activities=row.total_activities,
        )
        for row in rows
    ]
