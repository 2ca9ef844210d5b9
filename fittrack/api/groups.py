from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fittrack.api.auth import get_current_user
from fittrack.core.db import get_db
from fittrack.models import User
from fittrack.models.base import utcnow
from fittrack.schemas.activity import activity_to_response
from fittrack.schemas.group import GroupCreate
from fittrack.services import activity_service, group_service
from fittrack.services.periods import MONTHLY, normalize_view_type, parse_date, period_payload

router = APIRouter()


@router.get("")
def list_groups(
    show_all: bool = Query(False, alias="showAll"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Группы пользователя (или все, если showAll=true) с флагами isMember / isCreator"""
    groups = group_service.list_groups(db, current_user, show_all=show_all)
    return {"groups": groups, "count": len(groups)}


@router.post("")
def create_group(
    group_data: GroupCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    group = group_service.create_group(db, current_user, group_data.name, group_data.description)
    return {"group": group_service.group_to_response(group)}


@router.post("/{group_id}/join", status_code=201)
def join_group(group_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    membership = group_service.join_group(db, current_user, group_id)
    return {"membership": group_service.membership_to_response(membership, membership.group.name)}


@router.post("/{group_id}/leave")
def leave_group(group_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    group_service.leave_group(db, current_user, group_id)
    return {"message": "Successfully left group"}


@router.post("/{group_id}/delete")
def delete_group(group_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    group_service.delete_group(db, current_user, group_id)
    return {"message": "Group successfully deleted"}


@router.get("/{group_id}/recent-activities")
def recent_activities(group_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    """Последние 20 активностей группы с именем и фото участника"""
    entries = activity_service.list_group_recent_activities(db, group_id)
    return {
        "activities": [
            activity_to_response(a, group_name=a.group.name, user_name=name, photo_url=photo)
            for a, name, photo in entries
        ]
    }


@router.get("/{group_id}/weekly-activities")
def weekly_activities(
    group_id: str,
    date_param: str | None = Query(None, alias="date"),
    view_type: str = Query(MONTHLY, alias="viewType"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Активности группы по дням и участникам за неделю / месяц / год"""
    view_type = normalize_view_type(view_type)
    base = parse_date(date_param) if date_param else utcnow()
    by_day, start, end = activity_service.aggregate_group_activities(db, current_user, group_id, base, view_type)
    return {"activities": by_day, "viewType": view_type, "period": period_payload(start, end)}
