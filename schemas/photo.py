from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PhotoForDetailedDto(BaseModel):
    id: int
    url: str = Field(..., description="Публичный URL фотографии")
    description: Optional[str] = Field(None, description="Подпись к фото")
    date_added: datetime
    is_main: bool = Field(..., description="Главное фото профиля")

    class Config:
        from_attributes = True
