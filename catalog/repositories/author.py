from typing import List

from sqlalchemy import select as sa_select

from catalog.database.models import AuthorOrm
from catalog.repositories.base import BaseRepository
from catalog.schemas.author import AuthorCreateSchema
from catalog.schemas.filter import Filters, Sort


class AuthorRepository(BaseRepository):

    async def get_authors(self, sort: Sort | None = None) -> List[AuthorOrm]:
        stmt = sa_select(AuthorOrm)
        stmt = self.apply_sort(stmt, AuthorOrm, sort)
        authors = await self.select_all(stmt)
        return authors

    async def get_author_count(self, filters: Filters | None = None) -> int:
        return await self.count_objects(AuthorOrm, filters)

    async def get_author_id_by_name(self, family_name: str, first_name: str) -> str | None:
        stmt = (
            sa_select(AuthorOrm.id)
            .where(AuthorOrm.family_name == family_name)
            .where(AuthorOrm.first_name == first_name)
            .order_by(AuthorOrm.seq)
            .limit(1)
        )
        author_id = await self.select_single_field(stmt)
        return author_id

    async def create_author(self, author: AuthorCreateSchema) -> AuthorOrm:
        new_author = AuthorOrm(**author.model_dump())
        await self.save_object(new_author)
        return new_author
