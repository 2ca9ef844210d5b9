from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from fittrack.core.config import SESSION_COOKIE_NAME
from fittrack.core.db import get_db
from fittrack.core.errors import Forbidden, Unauthenticated
from fittrack.core.security import decode_access_token
from fittrack.models import User, UserRole

# auto_error=False: токен может прийти и в cookie сессии
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/login", auto_error=False)


def _token_from_request(request: Request, bearer: str | None) -> str | None:
    return bearer or request.cookies.get(SESSION_COOKIE_NAME)


def resolve_user(db: Session, token: str | None) -> User | None:
    if not token:
        return None
    payload = decode_access_token(token)
    if not payload or not payload.get("sub"):
        return None
    return db.query(User).filter(User.id == payload["sub"]).first()


def get_current_user(
    request: Request,
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    raw_token = _token_from_request(request, token)
    if not raw_token:
        raise Unauthenticated("Not authenticated")

    user = resolve_user(db, raw_token)
    if user is None:
        raise Unauthenticated("Invalid or expired session")
    return user


def get_optional_user(
    request: Request,
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User | None:
    """Для HTML-страниц: None вместо 401, страница сама редиректит на /login"""
    return resolve_user(db, _token_from_request(request, token))


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.ADMIN:
        raise Forbidden("Admin access required")
    return current_user
