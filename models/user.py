# models/user.py
from datetime import datetime

from sqlalchemy import Column, BigInteger, DateTime, String, Text, Date, LargeBinary
from sqlalchemy.orm import relationship

from .base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(BigInteger, primary_key=True, index=True)
    username = Column(String(64), unique=True, nullable=False, index=True)
    password_hash = Column(LargeBinary, nullable=False)
    password_salt = Column(LargeBinary, nullable=False)

    gender = Column(String(10), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    known_as = Column(String(100), nullable=True)
    created = Column(DateTime, default=datetime.utcnow, nullable=False)
    last_active = Column(DateTime, default=datetime.utcnow, nullable=False)

    introduction = Column(Text, nullable=True)
    looking_for = Column(Text, nullable=True)
    interests = Column(Text, nullable=True)
    city = Column(String(64), nullable=True)
    country = Column(String(64), nullable=True)

    photos = relationship(
        "Photo",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="Photo.date_added",
    )
    # кто лайкнул этого пользователя
    likers = relationship(
        "Like",
        foreign_keys="Like.likee_id",
        back_populates="likee",
        cascade="all, delete-orphan",
    )
    # кого лайкнул этот пользователь
    likees = relationship(
        "Like",
        foreign_keys="Like.liker_id",
        back_populates="liker",
        cascade="all, delete-orphan",
    )

    @property
    def main_photo(self):
        return next((photo for photo in self.photos if photo.is_main), None)

    def __repr__(self):
        return f"<User id={self.id} username={self.username}>"
