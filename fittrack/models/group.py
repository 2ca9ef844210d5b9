from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from fittrack.core.db import Base
from fittrack.models.base import new_id, utcnow


class Group(Base):
    __tablename__ = "groups"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    creator_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    creator = relationship("User", back_populates="created_groups")
    members = relationship("GroupMember", back_populates="group")
    activities = relationship("Activity", back_populates="group")
