from typing import Optional

from pydantic import BaseModel, Field, field_validator

MAX_PAGE_SIZE = 50


class UserParams(BaseModel):
    """
    Параметры выборки пользователей: пагинация + фильтры.
    Создаётся на каждый запрос и нигде не сохраняется.
    """
    page_number: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)
    user_id: Optional[int] = Field(None, description="Берётся из токена, а не из query")
    gender: Optional[str] = None
    min_age: int = Field(18, ge=0)
    max_age: int = Field(99, ge=0)
    order_by: Optional[str] = Field(None, description="'created' или по умолчанию last_active")
    likers: bool = False
    likees: bool = False

    @field_validator("page_size")
    @classmethod
    def cap_page_size(cls, value: int) -> int:
        return min(value, MAX_PAGE_SIZE)


class PaginationHeader(BaseModel):
    current_page: int = Field(..., serialization_alias="currentPage")
    items_per_page: int = Field(..., serialization_alias="itemsPerPage")
    total_items: int = Field(..., serialization_alias="totalItems")
    total_pages: int = Field(..., serialization_alias="totalPages")
