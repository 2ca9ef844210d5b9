import enum

from sqlalchemy import Column, String, DateTime, Enum
from sqlalchemy.orm import relationship

from fittrack.core.db import Base
from fittrack.models.base import new_id, utcnow


class UserRole(str, enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=True)
    role = Column(Enum(UserRole, name="user_role"), nullable=False, default=UserRole.USER)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Каскадов на уровне ORM нет: удаление аккаунта идёт явной транзакцией в user_service
    activities = relationship("Activity", back_populates="user")
    weights = relationship("Weight", back_populates="user")
    memberships = relationship("GroupMember", back_populates="user")
    created_groups = relationship("Group", back_populates="creator")
    personal_data = relationship("PersonalData", back_populates="user")
