# models/photo.py
from datetime import datetime

from sqlalchemy import Column, BigInteger, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from .base import Base


class Photo(Base):
    __tablename__ = "photos"

    id = Column(BigInteger, primary_key=True, index=True)
    user_id = Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    url = Column(String(length=512), nullable=False)
    description = Column(String(length=255), nullable=True)
    date_added = Column(DateTime, default=datetime.utcnow, nullable=False)
    is_main = Column(Boolean, default=False, nullable=False)

    user = relationship("User", back_populates="photos")

    def __repr__(self):
        return f"<Photo id={self.id} user_id={self.user_id} main={self.is_main}>"
