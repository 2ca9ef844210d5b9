import logging

from sqlalchemy.orm import Session

from fittrack.core.db import transaction
from fittrack.core.errors import Conflict, ValidationError
from fittrack.core.logs import mask_email
from fittrack.core.security import hash_password
from fittrack.models import Activity, Group, GroupMember, PersonalData, User, UserRole, Weight
from fittrack.models.base import utcnow
from fittrack.schemas.user import UserResponse

logger = logging.getLogger(__name__)


def user_to_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, email=user.email, name=user.name, role=user.role.value)


def register(db: Session, email: str | None, password: str | None, name: str | None) -> User:
    """Регистрация пользователя с ролью USER"""
    email = (email or "").strip().lower()
    name = (name or "").strip()
    if not email or not password or not name:
        raise ValidationError("Missing required fields")

    if db.query(User).filter(User.email == email).first():
        raise Conflict("User already exists")

    user = User(email=email, name=name, password_hash=hash_password(password), role=UserRole.USER)
    with transaction(db, "create user", conflict_message="Email already in use"):
        db.add(user)
    db.refresh(user)

    logger.info(f"👤 Зарегистрирован пользователь {mask_email(email)}")
    return user


def log_photo(db: Session, user: User, photo_url: str | None) -> PersonalData:
    photo_url = (photo_url or "").strip()
    if not photo_url:
        raise ValidationError("Photo URL is required")

    entry = PersonalData(user_id=user.id, photo_url=photo_url, log_date=utcnow())
    with transaction(db, "save personal data"):
        db.add(entry)
    db.refresh(entry)
    return entry


def current_photo(db: Session, user_id: str) -> PersonalData | None:
    """Текущее фото: самая свежая запись по log_date"""
    return (
        db.query(PersonalData)
        .filter(PersonalData.user_id == user_id)
        .order_by(PersonalData.log_date.desc())
        .first()
    )


def latest_photos(db: Session, user_ids) -> dict[str, str]:
    """{user_id: photo_url} по самым свежим записям"""
    user_ids = set(user_ids)
    if not user_ids:
        return {}

    photos: dict[str, str] = {}
    rows = (
        db.query(PersonalData.user_id, PersonalData.photo_url)
        .filter(PersonalData.user_id.in_(user_ids))
        .order_by(PersonalData.log_date.desc())
        .all()
    )
    for user_id, photo_url in rows:
        photos.setdefault(user_id, photo_url)
    return photos


def delete_account(db: Session, user: User) -> None:
    """
    Удаляет пользователя и все зависимые данные одной транзакцией.
    Порядок важен: сначала дочерние строки, потом группы и сам пользователь.
    """
    user_id = user.id
    created_group_ids = [gid for (gid,) in db.query(Group.id).filter(Group.creator_id == user_id).all()]

    with transaction(db, "delete user"):
        db.query(Activity).filter(Activity.user_id == user_id).delete(synchronize_session=False)
        if created_group_ids:
            db.query(Activity).filter(Activity.group_id.in_(created_group_ids)).delete(synchronize_session=False)
            db.query(GroupMember).filter(GroupMember.group_id.in_(created_group_ids)).delete(synchronize_session=False)
        db.query(GroupMember).filter(GroupMember.user_id == user_id).delete(synchronize_session=False)
        db.query(Group).filter(Group.creator_id == user_id).delete(synchronize_session=False)
        db.query(Weight).filter(Weight.user_id == user_id).delete(synchronize_session=False)
        db.query(PersonalData).filter(PersonalData.user_id == user_id).delete(synchronize_session=False)
        db.query(User).filter(User.id == user_id).delete(synchronize_session=False)

    logger.info(f"🗑️ Пользователь {user_id} удалён вместе с {len(created_group_ids)} группами")
