from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from fittrack.api.auth import get_current_user
from fittrack.core.config import ACCESS_TOKEN_EXPIRE_HOURS, IS_PRODUCTION, SESSION_COOKIE_NAME
from fittrack.core.db import get_db
from fittrack.models import User
from fittrack.schemas.user import PhotoCreate, TokenResponse, UserCreate, UserLogin
from fittrack.services import auth_service, user_service

router = APIRouter()


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=ACCESS_TOKEN_EXPIRE_HOURS * 3600,
        httponly=True,
        samesite="lax",
        secure=IS_PRODUCTION,
    )


@router.post("/register", status_code=201)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Регистрация пользователя"""
    user = user_service.register(db, user_data.email, user_data.password, user_data.name)
    return {"message": "User created successfully", "user": user_service.user_to_response(user)}


@router.post("/login", response_model=TokenResponse)
def login(user_data: UserLogin, response: Response, db: Session = Depends(get_db)):
    """Авторизация: токен в ответе и в cookie сессии"""
    identity = auth_service.authorize(db, user_data.email, user_data.password)
    token = auth_service.issue_token(identity)
    set_session_cookie(response, token)
    return {"access_token": token, "token_type": "bearer", "user": identity}


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(SESSION_COOKIE_NAME)
    return {"message": "Signed out"}


@router.get("/me")
def me(current_user: User = Depends(get_current_user)):
    return {"user": user_service.user_to_response(current_user)}


@router.get("/profile")
def get_profile(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    entry = user_service.current_photo(db, current_user.id)
    if entry is None:
        return {"personalData": None}
    return {"personalData": {"id": entry.id, "photoUrl": entry.photo_url, "logDate": entry.log_date}}


@router.post("/profile")
def log_profile_photo(
    data: PhotoCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    entry = user_service.log_photo(db, current_user, data.photo_url)
    return {"personalData": {"id": entry.id, "photoUrl": entry.photo_url, "logDate": entry.log_date}}


@router.delete("/user/delete")
def delete_user(
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Удаляет аккаунт и все связанные данные"""
    user_service.delete_account(db, current_user)
    response.delete_cookie(SESSION_COOKIE_NAME)
    return {"message": "User deleted successfully"}
