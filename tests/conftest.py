"""Pytest configuration and shared fixtures for DatingApp API tests."""
from datetime import date, datetime, timedelta
from typing import Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from core.database import get_db
from core.security import create_access_token, create_password_hash
from main import app
from models.base import Base
from models.like import Like
from models.photo import Photo
from models.user import User
from repositories.dating import LikeResult, get_repository
from schemas.pagination import UserParams
from utils.pagination import PagedList


def make_user(user_id: int, username: str, gender: str, age: int = 30, **extra) -> User:
    password_hash, password_salt = create_password_hash("password")
    now = datetime.utcnow()
    fields = dict(
        id=user_id,
        username=username,
        password_hash=password_hash,
        password_salt=password_salt,
        gender=gender,
        known_as=username.capitalize(),
        date_of_birth=date.today() - timedelta(days=age * 365 + 30),
        created=now - timedelta(days=user_id),
        last_active=now - timedelta(hours=user_id),
        city="Riga",
        country="Latvia",
        photos=[],
    )
    fields.update(extra)
    return User(**fields)


@pytest.fixture
def user_factory():
    """Builds unsaved User rows: user_factory(id, username, gender, age=30, **fields)."""
    return make_user


@pytest_asyncio.fixture
async def db_engine():
    """In-memory SQLite with the full schema."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def seeded_users(session_factory):
    """Users 5, 7 (male) and 6, 8, 9 (female); user 9 has a main photo."""
    users = [
        make_user(5, "bob", "male", age=30),
        make_user(6, "alice", "female", age=25),
        make_user(7, "tom", "male", age=40),
        make_user(8, "eve", "female", age=50),
        make_user(
            9, "kate", "female", age=28,
            photos=[
                Photo(url="https://example.com/kate-1.jpg", description="main", is_main=True),
                Photo(url="https://example.com/kate-2.jpg", is_main=False),
            ],
        ),
    ]
    async with session_factory() as session:
        session.add_all(users)
        await session.commit()
    return {user.id: user for user in users}


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP client against the app, wired to the SQLite session factory."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(user_id: int, username: str = "user") -> dict:
        return {"Authorization": f"Bearer {create_access_token(user_id, username)}"}
    return _headers


class FakeDatingRepository:
    """In-memory DatingRepository with switchable failures."""

    def __init__(self, users=None):
        self.users = {user.id: user for user in users or []}
        self.likes = {}
        self.pending = []
        self.save_result = True
        self.like_result: Optional[LikeResult] = None
        self.save_calls = 0

    def add(self, entity) -> None:
        self.pending.append(entity)

    async def delete(self, entity) -> None:
        self.users.pop(entity.id, None)

    async def save_all(self) -> bool:
        self.save_calls += 1
        if not self.save_result:
            self.pending.clear()
            return False
        for entity in self.pending:
            if isinstance(entity, User):
                self.users[entity.id] = entity
            elif isinstance(entity, Like):
                self.likes[(entity.liker_id, entity.likee_id)] = entity
        self.pending.clear()
        return True

    async def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username.lower()), None)

    async def get_users(self, user_params: UserParams) -> PagedList:
        users = [
            u for u in self.users.values()
            if u.id != user_params.user_id and (not user_params.gender or u.gender == user_params.gender)
        ]
        start = (user_params.page_number - 1) * user_params.page_size
        page = users[start:start + user_params.page_size]
        return PagedList(page, len(users), user_params.page_number, user_params.page_size)

    async def get_like(self, user_id: int, recipient_id: int) -> Optional[Like]:
        return self.likes.get((user_id, recipient_id))

    async def add_like(self, user_id: int, recipient_id: int) -> LikeResult:
        if self.like_result is not None:
            return self.like_result
        if (user_id, recipient_id) in self.likes:
            return LikeResult.DUPLICATE
        self.likes[(user_id, recipient_id)] = Like(liker_id=user_id, likee_id=recipient_id)
        return LikeResult.CREATED


@pytest.fixture
def fake_repo():
    return FakeDatingRepository([
        make_user(5, "bob", "male"),
        make_user(6, "alice", "female"),
        make_user(9, "kate", "female"),
    ])


@pytest_asyncio.fixture
async def fake_client(fake_repo):
    """HTTP client with the repository replaced by FakeDatingRepository."""
    app.dependency_overrides[get_repository] = lambda: fake_repo
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
