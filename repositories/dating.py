"""Доступ к данным приложения знакомств."""
import enum
import logging
from datetime import date
from typing import Optional, Protocol

from fastapi import Depends
from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_db
from models.like import Like
from models import photo as _photo  # noqa: F401  маппер Photo для User.photos
from models.user import User
from schemas.pagination import UserParams
from utils.pagination import PagedList

log = logging.getLogger(__name__)

DEFAULT_MIN_AGE = 18
DEFAULT_MAX_AGE = 99


class LikeResult(enum.Enum):
    CREATED = "created"
    DUPLICATE = "duplicate"
    FAILED = "failed"


class DatingRepository(Protocol):
    def add(self, entity) -> None:
        ...

    async def delete(self, entity) -> None:
        ...

    async def save_all(self) -> bool:
        ...

    async def get_user(self, user_id: int) -> Optional[User]:
        ...

    async def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    async def get_users(self, user_params: UserParams) -> PagedList[User]:
        ...

    async def get_like(self, user_id: int, recipient_id: int) -> Optional[Like]:
        ...

    async def add_like(self, user_id: int, recipient_id: int) -> LikeResult:
        ...


def _years_ago(today: date, years: int) -> date:
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        # 29 февраля в невисокосный год
        return today.replace(year=today.year - years, day=28)


class SqlAlchemyDatingRepository:
    """Репозиторий поверх AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def add(self, entity) -> None:
        self.db.add(entity)

    async def delete(self, entity) -> None:
        await self.db.delete(entity)

    async def save_all(self) -> bool:
        try:
            await self.db.commit()
        except SQLAlchemyError:
            log.exception("Failed to save changes")
            await self.db.rollback()
            return False
        return True

    async def get_user(self, user_id: int) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_user_by_username(self, username: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.username == username.lower()))
        return result.scalar_one_or_none()

    async def get_users(self, user_params: UserParams) -> PagedList[User]:
        stmt = select(User).where(User.id != user_params.user_id)

        if user_params.gender:
            stmt = stmt.where(User.gender == user_params.gender)

        if user_params.likers:
            sub_likers = select(Like.liker_id).where(Like.likee_id == user_params.user_id)
            stmt = stmt.where(User.id.in_(sub_likers))

        if user_params.likees:
            sub_likees = select(Like.likee_id).where(Like.liker_id == user_params.user_id)
            stmt = stmt.where(User.id.in_(sub_likees))

        if user_params.min_age != DEFAULT_MIN_AGE or user_params.max_age != DEFAULT_MAX_AGE:
            today = date.today()
            min_dob = _years_ago(today, user_params.max_age + 1)
            max_dob = _years_ago(today, user_params.min_age)
            stmt = stmt.where(User.date_of_birth >= min_dob, User.date_of_birth <= max_dob)

        if user_params.order_by == "created":
            stmt = stmt.order_by(User.created.desc(), User.id)
        else:
            stmt = stmt.order_by(User.last_active.desc(), User.id)

        return await PagedList.create(
            self.db, stmt, user_params.page_number, user_params.page_size
        )

    async def get_like(self, user_id: int, recipient_id: int) -> Optional[Like]:
        result = await self.db.execute(
            select(Like).where(
                Like.liker_id == user_id,
                Like.likee_id == recipient_id,
            )
        )
        return result.scalar_one_or_none()

    async def add_like(self, user_id: int, recipient_id: int) -> LikeResult:
        """
        Вставка лайка под составным ключом (liker_id, likee_id).
        Параллельный дубль упирается в ключ и возвращает DUPLICATE.
        """
        try:
            await self.db.execute(insert(Like).values(liker_id=user_id, likee_id=recipient_id))
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            log.info("Like %s -> %s already exists", user_id, recipient_id)
            return LikeResult.DUPLICATE
        except SQLAlchemyError:
            log.exception("Failed to save like %s -> %s", user_id, recipient_id)
            await self.db.rollback()
            return LikeResult.FAILED
        return LikeResult.CREATED


async def get_repository(db: AsyncSession = Depends(get_db)) -> SqlAlchemyDatingRepository:
    """Dependency for DatingRepository."""
    return SqlAlchemyDatingRepository(db)
