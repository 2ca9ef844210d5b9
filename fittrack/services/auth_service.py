import logging

from sqlalchemy.orm import Session

from fittrack.core.errors import Unauthenticated
from fittrack.core.logs import mask_email
from fittrack.core.security import create_access_token, verify_password
from fittrack.models import User

logger = logging.getLogger(__name__)


def authorize(db: Session, email: str | None, password: str | None) -> dict:
    """Проверяем email и пароль. Возвращаем {id, email, name, role} или бросаем Unauthenticated."""
    if not email or not password:
        logger.warning("🔒 Попытка входа без email или пароля")
        raise Unauthenticated("Email and password are required")

    email = email.strip().lower()
    user = db.query(User).filter(User.email == email).first()
    if not user or not user.password_hash:
        logger.warning(f"🔒 Неудачный вход для {mask_email(email)}: user_not_found")
        raise Unauthenticated("Invalid email or password")

    if not verify_password(password, user.password_hash):
        logger.warning(f"🔒 Неудачный вход для {mask_email(email)}: invalid_password")
        raise Unauthenticated("Invalid email or password")

    logger.info(f"✅ Успешный вход для {mask_email(email)}")
    return {"id": user.id, "email": user.email, "name": user.name, "role": user.role.value}


def issue_token(identity: dict) -> str:
    # В токене только id и роль, остальное берём из БД
    return create_access_token({"sub": identity["id"], "role": identity["role"]})
