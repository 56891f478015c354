from typing import List

from catalog.repositories.author import AuthorRepository
from catalog.schemas.author import AuthorCreateSchema, AuthorReadSchema
from catalog.schemas.filter import Filters, Sort


class AuthorService:

    def __init__(self, repository: AuthorRepository) -> None:
        self.repository = repository
        self.logger = repository.logger

    async def count(self, filters: Filters | None = None) -> int:
        # Без фильтра - общее количество авторов
        count = await self.repository.get_author_count(filters)
        return count

    async def list(self, sort: Sort | None = None) -> List[str]:
        # Ошибки БД не перехватываются: пустой список означает именно отсутствие авторов
        authors = await self.repository.get_authors(sort)
        return [f"{author.name} : {author.lifespan}" for author in authors]

    async def find_id_by_name(self, family_name: str, first_name: str) -> str | None:
        author_id = await self.repository.get_author_id_by_name(family_name, first_name)
        return author_id

    async def create(self, author_create_schema: AuthorCreateSchema) -> AuthorReadSchema:
        new_author = await self.repository.create_author(author_create_schema)
        self.logger.info(f'Создан автор {new_author.name}')
        return AuthorReadSchema.model_validate(new_author)
