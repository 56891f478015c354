from typing import List

from catalog.repositories.book import BookRepository
from catalog.schemas.book import BookCreateSchema, BookReadSchema
from catalog.schemas.filter import Filters, Sort
from catalog.services.author import AuthorService
from catalog.utils.exceptions import BadRequestException


class BookService:

    def __init__(self, repository: BookRepository, author_service: AuthorService) -> None:
        self.repository = repository
        self.author_service = author_service
        self.logger = repository.logger

    async def count(self, filters: Filters | None = None) -> int:
        count = await self.repository.get_book_count(filters)
        return count

    async def list(self, sort: Sort | None = None) -> List[str]:
        books = await self.repository.get_books(sort)
        return [book.display for book in books]

    async def get(self, book_id: str) -> BookReadSchema | None:
        book = await self.repository.get_book(book_id)
        if not book:
            return None

        return BookReadSchema.model_validate(book)

    async def create(self, book_create_schema: BookCreateSchema) -> BookReadSchema:
        # Автор указывается по имени и должен уже существовать
        author_id = await self.author_service.find_id_by_name(
            book_create_schema.author_family_name,
            book_create_schema.author_first_name
        )
        if not author_id:
            raise BadRequestException('Автор не найден')

        new_book = await self.repository.create_book(
            title=book_create_schema.title,
            summary=book_create_schema.summary,
            isbn=book_create_schema.isbn,
            author_id=author_id
        )
        self.logger.info(f'Создана книга {new_book.title}')
        return BookReadSchema.model_validate(new_book)
