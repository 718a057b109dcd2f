"""Преобразование моделей пользователей в DTO и обратно."""
from collections.abc import Iterable
from datetime import date
from typing import List, Optional

from models.user import User
from schemas.photo import PhotoForDetailedDto
from schemas.user import UserForDetailedDto, UserForListDto, UserForUpdateDto

UPDATABLE_FIELDS = ("introduction", "looking_for", "interests", "city", "country")


def calculate_age(date_of_birth: Optional[date], today: Optional[date] = None) -> Optional[int]:
    """Полных лет на сегодня; день рождения в этом году ещё мог не наступить."""
    if date_of_birth is None:
        return None
    today = today or date.today()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def to_user_for_list(user: User) -> UserForListDto:
    """Сконвертировать модель пользователя в UserForListDto с главным фото."""
    main_photo = user.main_photo
    return UserForListDto(
        id=user.id,
        username=user.username,
        gender=user.gender,
        age=calculate_age(user.date_of_birth),
        known_as=user.known_as,
        created=user.created,
        last_active=user.last_active,
        city=user.city,
        country=user.country,
        photo_url=main_photo.url if main_photo else None,
    )


def to_users_for_list(users: Iterable[User]) -> List[UserForListDto]:
    return [to_user_for_list(user) for user in users]


def to_user_for_detailed(user: User) -> UserForDetailedDto:
    """Сконвертировать модель пользователя в UserForDetailedDto со всеми фото."""
    main_photo = user.main_photo
    return UserForDetailedDto(
        id=user.id,
        username=user.username,
        gender=user.gender,
        age=calculate_age(user.date_of_birth),
        known_as=user.known_as,
        created=user.created,
        last_active=user.last_active,
        city=user.city,
        country=user.country,
        photo_url=main_photo.url if main_photo else None,
        introduction=user.introduction,
        looking_for=user.looking_for,
        interests=user.interests,
        photos=[PhotoForDetailedDto.model_validate(photo) for photo in user.photos],
    )


def apply_user_update(dto: UserForUpdateDto, user: User) -> User:
    """Перенести поля UserForUpdateDto на модель (значения перезаписываются целиком)."""
    for field in UPDATABLE_FIELDS:
        setattr(user, field, getattr(dto, field))
    return user
