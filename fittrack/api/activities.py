from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fittrack.api.auth import get_current_user
from fittrack.core.db import get_db
from fittrack.models import User
from fittrack.schemas.activity import ActivityCreate, ActivityUpdate, activity_to_response
from fittrack.services import activity_service

router = APIRouter()


@router.get("")
def list_activities(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    """Активности текущего пользователя, новые сверху"""
    activities = activity_service.list_own_activities(db, current_user)
    return {
        "activities": [activity_to_response(a, group_name=a.group.name) for a in activities],
        "count": len(activities),
    }


@router.post("")
def create_activity(
    data: ActivityCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    activity = activity_service.create_activity(
        db, current_user, data.activity_type, data.duration, data.date, data.group_id
    )
    return {
        "message": "Activity logged successfully",
        "activity": activity_to_response(activity, group_name=activity.group.name),
        "groupDetails": {"id": activity.group_id, "name": activity.group.name},
    }


@router.put("/{activity_id}")
def update_activity(
    activity_id: str,
    data: ActivityUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    activity = activity_service.update_activity(
        db, current_user, activity_id, data.activity_type, data.duration, data.date
    )
    return {"activity": activity_to_response(activity, group_name=activity.group.name)}


@router.delete("/{activity_id}")
def delete_activity(activity_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    activity_service.delete_activity(db, current_user, activity_id)
    return {"message": "Activity deleted successfully"}
