from typing import Optional
from pydantic import BaseModel

from fittrack.schemas.common import CamelModel


# Поля необязательные: отсутствие проверяет сервис и отвечает 400
class UserCreate(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None


class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(CamelModel):
    id: str
    email: str
    name: Optional[str] = None
    role: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


class PhotoCreate(CamelModel):
    photo_url: Optional[str] = None
