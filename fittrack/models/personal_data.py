from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from fittrack.core.db import Base
from fittrack.models.base import new_id, utcnow


class PersonalData(Base):
    __tablename__ = "personal_data"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    photo_url = Column(String, nullable=False)
    log_date = Column(DateTime, nullable=False, default=utcnow)

    user = relationship("User", back_populates="personal_data")
