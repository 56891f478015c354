from typing import List

from sqlalchemy import select as sa_select
from sqlalchemy.orm import joinedload

from catalog.database.models import BookOrm
from catalog.repositories.base import BaseRepository
from catalog.schemas.filter import Filters, Sort


class BookRepository(BaseRepository):

    async def get_book(self, book_id: str) -> BookOrm | None:
        stmt = (
            sa_select(BookOrm)
            .options(joinedload(BookOrm.author))
            .where(BookOrm.id == book_id)
            .limit(1)
        )
        book = await self.select_first(stmt)
        return book

    async def get_books(self, sort: Sort | None = None) -> List[BookOrm]:
        stmt = (
            sa_select(BookOrm)
            .options(joinedload(BookOrm.author))
        )
        stmt = self.apply_sort(stmt, BookOrm, sort)
        books = await self.select_all(stmt)
        return books

    async def get_book_count(self, filters: Filters | None = None) -> int:
        return await self.count_objects(BookOrm, filters)

    async def create_book(self, title: str, summary: str, isbn: str, author_id: str) -> BookOrm:
        new_book = BookOrm(title=title, summary=summary, isbn=isbn, author_id=author_id)
        await self.save_object(new_book)
        new_book = await self.get_book(new_book.id)
        return new_book
