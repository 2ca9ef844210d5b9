import enum

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship

from fittrack.core.db import Base
from fittrack.models.base import new_id, utcnow


class ActivityType(str, enum.Enum):
    WALK = "WALK"
    RUN = "RUN"
    STATIONARY_BIKE = "STATIONARY_BIKE"
    GYM = "GYM"
    TAP_OUT = "TAP_OUT"
    PILATES = "PILATES"
    MALOVA = "MALOVA"
    SWIMMING = "SWIMMING"


class Activity(Base):
    __tablename__ = "activities"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    group_id = Column(String(36), ForeignKey("groups.id"), nullable=False, index=True)
    activity_type = Column(Enum(ActivityType, name="activity_type"), nullable=False)
    duration = Column(Integer, nullable=False)  # минуты
    date = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    user = relationship("User", back_populates="activities")
    group = relationship("Group", back_populates="activities")
