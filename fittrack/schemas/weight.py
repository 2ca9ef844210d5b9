from datetime import datetime
from typing import Optional

from fittrack.schemas.common import CamelModel


class WeightCreate(CamelModel):
    weight: Optional[float] = None
    date: Optional[str] = None


class WeightResponse(CamelModel):
    id: str
    user_id: str
    weight: float
    date: datetime
    created_at: datetime
