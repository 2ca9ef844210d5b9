import logging

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from fittrack.core.db import transaction
from fittrack.models import Activity, Group, GroupMember, PersonalData, User, Weight

logger = logging.getLogger(__name__)

ADMIN_ACTIVITIES_LIMIT = 100


def _counts(db: Session, column) -> dict:
    return dict(db.query(column, func.count()).group_by(column).all())


def admin_overview(db: Session) -> dict:
    """Сводка по всем пользователям, группам, активностям и участникам"""
    activities_by_user = _counts(db, Activity.user_id)
    memberships_by_user = _counts(db, GroupMember.user_id)
    groups_by_creator = _counts(db, Group.creator_id)
    members_by_group = _counts(db, GroupMember.group_id)
    activities_by_group = _counts(db, Activity.group_id)

    users = [
        {
            "id": u.id,
            "name": u.name,
            "email": u.email,
            "role": u.role.value,
            "createdAt": u.created_at,
            "counts": {
                "activities": activities_by_user.get(u.id, 0),
                "memberships": memberships_by_user.get(u.id, 0),
                "createdGroups": groups_by_creator.get(u.id, 0),
            },
        }
        for u in db.query(User).order_by(User.created_at).all()
    ]

    groups = [
        {
            "id": g.id,
            "name": g.name,
            "description": g.description,
            "createdBy": {"name": g.creator.name, "email": g.creator.email},
            "counts": {
                "members": members_by_group.get(g.id, 0),
                "activities": activities_by_group.get(g.id, 0),
            },
        }
        for g in db.query(Group).options(joinedload(Group.creator)).order_by(Group.created_at).all()
    ]

    activities = [
        {
            "id": a.id,
            "activityType": a.activity_type.value,
            "duration": a.duration,
            "date": a.date,
            "user": {"name": a.user.name, "email": a.user.email},
            "group": {"name": a.group.name} if a.group else None,
        }
        for a in (
            db.query(Activity)
            .options(joinedload(Activity.user), joinedload(Activity.group))
            .order_by(Activity.created_at.desc())
            .limit(ADMIN_ACTIVITIES_LIMIT)
            .all()
        )
    ]

    members = [
        {
            "id": m.id,
            "role": m.role.value,
            "joinedAt": m.joined_at,
            "user": {"name": m.user.name, "email": m.user.email},
            "group": {"name": m.group.name},
        }
        for m in (
            db.query(GroupMember)
            .options(joinedload(GroupMember.user), joinedload(GroupMember.group))
            .order_by(GroupMember.joined_at)
            .all()
        )
    ]

    return {"users": users, "groups": groups, "activities": activities, "groupMembers": members}


def reset_database(db: Session) -> None:
    """Удаляет все данные: от зависимых таблиц к users"""
    with transaction(db, "reset database"):
        for model in (Activity, GroupMember, Group, Weight, PersonalData, User):
            deleted = db.query(model).delete(synchronize_session=False)
            logger.info(f"❌ {model.__tablename__}: удалено {deleted} строк")
    logger.info("✅ База данных очищена")
