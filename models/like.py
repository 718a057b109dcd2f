# models/like.py
from sqlalchemy import Column, BigInteger, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .base import Base


class Like(Base):
    __tablename__ = "likes"

    # составной первичный ключ: одна пара (liker, likee) существует не более одного раза
    liker_id = Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    likee_id = Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    liker = relationship("User", foreign_keys=[liker_id], back_populates="likees")
    likee = relationship("User", foreign_keys=[likee_id], back_populates="likers")

    def __repr__(self):
        return f"<Like {self.liker_id}→{self.likee_id}>"
