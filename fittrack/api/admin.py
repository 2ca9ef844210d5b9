import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fittrack.api.auth import require_admin
from fittrack.core.db import get_db
from fittrack.models import User
from fittrack.services import admin_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/overview")
def overview(db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    """Все пользователи, группы, активности и участники (только ADMIN)"""
    return admin_service.admin_overview(db)


@router.post("/reset")
def reset(db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    logger.warning(f"⚠️ Администратор {admin.id} очищает базу данных")
    admin_service.reset_database(db)
    return {"message": "Database reset successful"}
