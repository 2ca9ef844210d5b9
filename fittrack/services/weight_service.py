import logging
import math

from sqlalchemy.orm import Session

from fittrack.core.db import transaction
from fittrack.core.errors import Forbidden, NotFound, ValidationError
from fittrack.models import User, Weight
from fittrack.services.periods import parse_date

logger = logging.getLogger(__name__)


def _validate(weight, when):
    if not weight or not when:
        raise ValidationError("Weight and date are required")
    # json.loads пропускает NaN и Infinity
    if isinstance(weight, bool) or not isinstance(weight, (int, float)) or not math.isfinite(weight) or weight <= 0:
        raise ValidationError("Weight must be a positive number")
    return float(weight), parse_date(when)


def get_owned_weight(db: Session, user: User, weight_id: str) -> Weight:
    entry = db.query(Weight).filter(Weight.id == weight_id).first()
    if not entry:
        raise NotFound("Weight entry not found")
    if entry.user_id != user.id:
        raise Forbidden("Not authorized to modify this weight entry")
    return entry


def create_weight(db: Session, user: User, weight, when) -> Weight:
    weight, when = _validate(weight, when)
    entry = Weight(user_id=user.id, weight=weight, date=when)
    with transaction(db, "log weight"):
        db.add(entry)
    db.refresh(entry)
    logger.info(f"⚖️ Пользователь {user.id} записал вес {weight} кг")
    return entry


def update_weight(db: Session, user: User, weight_id: str, weight, when) -> Weight:
    weight, when = _validate(weight, when)
    entry = get_owned_weight(db, user, weight_id)
    with transaction(db, "update weight entry"):
        entry.weight = weight
        entry.date = when
    db.refresh(entry)
    return entry


def delete_weight(db: Session, user: User, weight_id: str) -> None:
    entry = get_owned_weight(db, user, weight_id)
    with transaction(db, "delete weight entry"):
        db.delete(entry)


def list_weights(db: Session, user: User) -> list[Weight]:
    return db.query(Weight).filter(Weight.user_id == user.id).order_by(Weight.date.desc()).all()
