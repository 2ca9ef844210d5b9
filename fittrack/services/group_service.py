import logging

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload, selectinload

from fittrack.core.db import transaction
from fittrack.core.errors import Conflict, Forbidden, NotFound, ValidationError
from fittrack.models import Activity, Group, GroupMember, MemberRole, User
from fittrack.schemas.group import GroupListItem, GroupResponse, MemberEntry, MembershipResponse, PersonRef

logger = logging.getLogger(__name__)


def group_to_response(group: Group) -> GroupResponse:
    return GroupResponse(
        id=group.id,
        name=group.name,
        description=group.description,
        creator_id=group.creator_id,
        created_at=group.created_at,
    )


def membership_to_response(membership: GroupMember, group_name: str | None = None) -> MembershipResponse:
    return MembershipResponse(
        id=membership.id,
        group_id=membership.group_id,
        user_id=membership.user_id,
        role=membership.role.value,
        joined_at=membership.joined_at,
        group_name=group_name,
    )


def get_group(db: Session, group_id: str) -> Group:
    group = db.query(Group).filter(Group.id == group_id).first()
    if not group:
        raise NotFound("Group not found")
    return group


def get_membership(db: Session, group_id: str, user_id: str) -> GroupMember | None:
    return db.query(GroupMember).filter(
        GroupMember.group_id == group_id,
        GroupMember.user_id == user_id
    ).first()


def require_member(db: Session, group_id: str, user: User) -> GroupMember:
    membership = get_membership(db, group_id, user.id)
    if not membership:
        raise Forbidden("User is not a member of this group")
    return membership


def create_group(db: Session, user: User, name: str | None, description: str | None = None) -> Group:
    """Создаёт группу; создатель сразу становится её ADMIN-участником"""
    name = (name or "").strip()
    if not name:
        raise ValidationError("Group name is required")

    group = Group(name=name, description=(description or "").strip() or None, creator_id=user.id)
    with transaction(db, "create group"):
        db.add(group)
        db.flush()
        db.add(GroupMember(group_id=group.id, user_id=user.id, role=MemberRole.ADMIN))
    db.refresh(group)

    logger.info(f"👥 Пользователь {user.id} создал группу {group.id} ({group.name})")
    return group


def list_groups(db: Session, user: User, show_all: bool = False) -> list[GroupListItem]:
    """
    Все группы (show_all) или только те, где пользователь состоит.
    Флаги isMember / isCreator считаются по id пользователя.
    """
    query = db.query(Group).options(
        joinedload(Group.creator),
        selectinload(Group.members).joinedload(GroupMember.user),
    )
    if not show_all:
        query = query.join(GroupMember, GroupMember.group_id == Group.id).filter(GroupMember.user_id == user.id)
    groups = query.order_by(Group.created_at.desc()).all()

    group_ids = [g.id for g in groups]
    activity_counts = {}
    if group_ids:
        activity_counts = dict(
            db.query(Activity.group_id, func.count(Activity.id))
            .filter(Activity.group_id.in_(group_ids))
            .group_by(Activity.group_id)
            .all()
        )

    result = []
    for group in groups:
        member_ids = {m.user_id for m in group.members}
        result.append(GroupListItem(
            id=group.id,
            name=group.name,
            description=group.description,
            created_by=PersonRef(id=group.creator.id, name=group.creator.name or "Unknown", email=group.creator.email),
            members=[
                MemberEntry(
                    user=PersonRef(id=m.user.id, name=m.user.name or "Unknown", email=m.user.email),
                    role=m.role.value,
                )
                for m in group.members
            ],
            member_count=len(group.members),
            activity_count=activity_counts.get(group.id, 0),
            is_member=user.id in member_ids,
            is_creator=group.creator_id == user.id,
        ))
    return result


def join_group(db: Session, user: User, group_id: str) -> GroupMember:
    group = get_group(db, group_id)

    if get_membership(db, group_id, user.id):
        raise Conflict("Already a member of this group")

    membership = GroupMember(group_id=group.id, user_id=user.id, role=MemberRole.MEMBER)
    # Параллельный join отсекается уникальным ограничением (group_id, user_id)
    with transaction(db, "join group", conflict_message="Already a member of this group"):
        db.add(membership)
    db.refresh(membership)

    logger.info(f"➕ Пользователь {user.id} вступил в группу {group_id}")
    return membership


def leave_group(db: Session, user: User, group_id: str) -> None:
    membership = get_membership(db, group_id, user.id)
    if not membership:
        raise NotFound("Not a member of this group")

    if membership.group.creator_id == user.id:
        raise Forbidden("Group creator cannot leave the group")

    with transaction(db, "leave group"):
        db.delete(membership)

    logger.info(f"➖ Пользователь {user.id} покинул группу {group_id}")


def delete_group(db: Session, user: User, group_id: str) -> None:
    """
    Удаляет группу (только создатель). Активности и участники удаляются
    в той же транзакции и раньше самой группы.
    """
    group = get_group(db, group_id)
    if group.creator_id != user.id:
        raise Forbidden("Only the group creator can delete the group")

    with transaction(db, "delete group"):
        db.query(Activity).filter(Activity.group_id == group_id).delete(synchronize_session=False)
        db.query(GroupMember).filter(GroupMember.group_id == group_id).delete(synchronize_session=False)
        db.query(Group).filter(Group.id == group_id).delete(synchronize_session=False)

    logger.info(f"✅ Группа {group_id} удалена пользователем {user.id}")
