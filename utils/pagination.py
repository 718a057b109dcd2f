"""Постраничная выборка и заголовок Pagination для ответа."""
import math
from typing import Generic, Iterator, List, TypeVar

from fastapi import Response
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from schemas.pagination import PaginationHeader

T = TypeVar("T")


class PagedList(Generic[T]):
    """Одна страница выборки вместе со счётчиками всей выборки."""

    def __init__(self, items: List[T], count: int, page_number: int, page_size: int):
        self.items = list(items)
        self.total_count = count
        self.page_size = page_size
        self.current_page = page_number
        self.total_pages = math.ceil(count / page_size) if page_size else 0

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @classmethod
    async def create(
        cls,
        db: AsyncSession,
        stmt: Select,
        page_number: int,
        page_size: int,
    ) -> "PagedList":
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        count = (await db.execute(count_stmt)).scalar_one()

        page_stmt = stmt.offset((page_number - 1) * page_size).limit(page_size)
        result = await db.execute(page_stmt)
        items = result.scalars().all()
        return cls(items, count, page_number, page_size)


def add_pagination(
    response: Response,
    current_page: int,
    items_per_page: int,
    total_items: int,
    total_pages: int,
) -> None:
    header = PaginationHeader(
        current_page=current_page,
        items_per_page=items_per_page,
        total_items=total_items,
        total_pages=total_pages,
    )
    response.headers["Pagination"] = header.model_dump_json(by_alias=True)
    # без этого браузер не отдаст заголовок фронтенду
    response.headers["Access-Control-Expose-Headers"] = "Pagination"
