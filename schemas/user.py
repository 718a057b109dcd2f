from typing import Optional, List
from datetime import datetime, date

from pydantic import BaseModel, Field

from schemas.photo import PhotoForDetailedDto


class UserForListDto(BaseModel):
    id: int = Field(..., description="PK в базе данных")
    username: str
    gender: Optional[str] = Field(None, description="Пол: 'male' или 'female'")
    age: Optional[int] = Field(None, description="Возраст, вычисляется из даты рождения")
    known_as: Optional[str] = Field(None, description="Отображаемое имя")
    created: datetime
    last_active: datetime
    city: Optional[str] = None
    country: Optional[str] = None
    photo_url: Optional[str] = Field(None, description="URL главного фото")

    class Config:
        from_attributes = True


class UserForDetailedDto(UserForListDto):
    introduction: Optional[str] = Field(None, description="О себе")
    looking_for: Optional[str] = Field(None, description="Кого ищу")
    interests: Optional[str] = Field(None, description="Интересы")
    photos: List[PhotoForDetailedDto] = Field([], description="Все фото пользователя")


class UserForUpdateDto(BaseModel):
    introduction: Optional[str] = Field(None, description="О себе")
    looking_for: Optional[str] = Field(None, description="Кого ищу")
    interests: Optional[str] = Field(None, description="Интересы")
    city: Optional[str] = Field(None, max_length=64, description="Город")
    country: Optional[str] = Field(None, max_length=64, description="Страна")


class UserForRegisterDto(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=4, max_length=8, description="Пароль от 4 до 8 символов")
    gender: str = Field(..., max_length=10, description="Пол: 'male' или 'female'")
    known_as: str = Field(..., max_length=100, description="Отображаемое имя")
    date_of_birth: date = Field(..., description="Дата рождения (YYYY-MM-DD)")
    city: str = Field(..., max_length=64)
    country: str = Field(..., max_length=64)


class UserForLoginDto(BaseModel):
    username: str
    password: str
