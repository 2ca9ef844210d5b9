from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fittrack.api.auth import get_current_user
from fittrack.core.db import get_db
from fittrack.models import User
from fittrack.schemas.weight import WeightCreate, WeightResponse
from fittrack.services import weight_service

router = APIRouter()


@router.get("")
def list_weights(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    weights = weight_service.list_weights(db, current_user)
    return {"weights": [WeightResponse.model_validate(w) for w in weights]}


@router.post("")
def log_weight(data: WeightCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    entry = weight_service.create_weight(db, current_user, data.weight, data.date)
    return {"weight": WeightResponse.model_validate(entry)}


@router.put("/{weight_id}")
def update_weight(
    weight_id: str,
    data: WeightCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    entry = weight_service.update_weight(db, current_user, weight_id, data.weight, data.date)
    return {"weight": WeightResponse.model_validate(entry)}


@router.delete("/{weight_id}")
def delete_weight(weight_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    weight_service.delete_weight(db, current_user, weight_id)
    return {"message": "Weight entry deleted successfully"}
