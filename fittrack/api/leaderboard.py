from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fittrack.api.auth import get_current_user
from fittrack.core.db import get_db
from fittrack.models import User
from fittrack.models.base import utcnow
from fittrack.schemas.activity import ActivitySummary
from fittrack.services import activity_service, leaderboard_service
from fittrack.services.periods import MONTHLY, YEARLY, period_payload, period_window

router = APIRouter()


@router.get("/leaderboard")
def get_leaderboard(
    time_range: str = Query(MONTHLY, alias="timeRange"),
    group_id: str | None = Query(None, alias="groupId"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Рейтинг по суммарной длительности за текущий месяц или год"""
    if time_range != YEARLY:
        time_range = MONTHLY
    start, end = period_window(time_range, utcnow())
    entries = leaderboard_service.leaderboard(db, start, end, group_id=group_id)
    return {"leaderboard": entries, "timeRange": time_range, "period": period_payload(start, end)}


@router.get("/summary")
def get_summary(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    """Статистика для дашборда: неделя, месяц, серия дней"""
    stats = activity_service.activity_summary(db, current_user, utcnow().date())
    return {"summary": ActivitySummary(**stats)}
