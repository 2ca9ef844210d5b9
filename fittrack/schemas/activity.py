from datetime import datetime
from typing import Optional

from fittrack.schemas.common import CamelModel


class ActivityCreate(CamelModel):
    activity_type: Optional[str] = None
    duration: Optional[int] = None
    date: Optional[str] = None
    group_id: Optional[str] = None


class ActivityUpdate(CamelModel):
    activity_type: Optional[str] = None
    duration: Optional[int] = None
    date: Optional[str] = None


class ActivityResponse(CamelModel):
    id: str
    user_id: str
    group_id: str
    activity_type: str
    duration: int
    date: datetime
    created_at: datetime
    group_name: Optional[str] = None
    user_name: Optional[str] = None
    photo_url: Optional[str] = None


class LeaderboardEntry(CamelModel):
    user_id: str
    user_name: Optional[str] = None
    user_email: str
    total_duration: int
    total_activities: int


class ActivitySummary(CamelModel):
    total_activities: int
    weekly_activities: int
    weekly_score: int
    monthly_score: int
    active_streak: int


def activity_to_response(activity, group_name=None, user_name=None, photo_url=None) -> ActivityResponse:
    return ActivityResponse(
        id=activity.id,
        user_id=activity.user_id,
        group_id=activity.group_id,
        activity_type=activity.activity_type.value,
        duration=activity.duration,
        date=activity.date,
        created_at=activity.created_at,
        group_name=group_name,
        user_name=user_name,
        photo_url=photo_url,
    )
