# utils/seed_db.py
import asyncio
import logging
import random
from datetime import datetime, timedelta

from sqlalchemy import select

from core.database import AsyncSessionLocal, engine
from core.security import create_password_hash
from models.base import Base
from models.user import User
from models.photo import Photo
from models.like import Like

log = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

# Константы для семплов
NUM_USERS = 20
NUM_LIKES = 50
SEED_PASSWORD = "password"

# Пример рандомных имен
FIRST_NAMES = [
    "Alex", "Sam", "Jordan", "Taylor", "Morgan", "Casey", "Jamie", "Reese", "Drew", "Quinn",
    "Riley", "Avery", "Cameron", "Logan", "Hayden", "Peyton", "Skyler", "Dakota", "Emerson", "Kai"
]
GENDERS = ["male", "female"]
CITIES = [("London", "United Kingdom"), ("Berlin", "Germany"), ("Lisbon", "Portugal"), ("Riga", "Latvia")]
ABOUT_TEMPLATES = [
    "Love hiking and outdoor adventures.",
    "Coffee fanatic and book lover.",
    "Tech enthusiast and amateur chef.",
    "Travel addict exploring the world.",
    "Music is life. Always at concerts.",
]


def photo_url(gender: str, index: int) -> str:
    folder = "men" if gender == "male" else "women"
    return f"https://randomuser.me/api/portraits/{folder}/{index}.jpg"


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        # 1. Пользователи с главным фото
        users = []
        for i, name in enumerate(FIRST_NAMES[:NUM_USERS]):
            gender = random.choice(GENDERS)
            city, country = random.choice(CITIES)
            password_hash, password_salt = create_password_hash(SEED_PASSWORD)
            user = User(
                username=f"{name.lower()}{i}",
                password_hash=password_hash,
                password_salt=password_salt,
                gender=gender,
                known_as=name,
                date_of_birth=datetime.utcnow().date() - timedelta(days=random.randint(18*365, 60*365)),
                created=datetime.utcnow() - timedelta(days=random.randint(0, 365)),
                last_active=datetime.utcnow() - timedelta(minutes=random.randint(0, 10_000)),
                introduction=random.choice(ABOUT_TEMPLATES),
                looking_for=random.choice(ABOUT_TEMPLATES),
                interests=random.choice(ABOUT_TEMPLATES),
                city=city,
                country=country,
                photos=[Photo(url=photo_url(gender, i), description=f"{name} main photo", is_main=True)],
            )
            session.add(user)
            users.append(user)
        await session.commit()

        # 2. Лайки, без повторов пар
        all_ids = [u.id for u in users]
        seen = set()
        for _ in range(NUM_LIKES):
            liker, likee = random.sample(all_ids, 2)
            if (liker, likee) in seen:
                continue
            exists = await session.execute(
                select(Like).where(Like.liker_id == liker, Like.likee_id == likee)
            )
            if exists.scalar_one_or_none():
                continue
            seen.add((liker, likee))
            session.add(Like(liker_id=liker, likee_id=likee))
        await session.commit()

    await engine.dispose()
    log.info("DB seeded successfully: %s users, %s likes", len(users), len(seen))


if __name__ == '__main__':
    asyncio.run(seed())
