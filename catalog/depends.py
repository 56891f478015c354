from fastapi import Depends

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.database.db import get_session
from catalog.repositories.author import AuthorRepository
from catalog.repositories.book import BookRepository
from catalog.services.author import AuthorService
from catalog.services.book import BookService

"""
Файл внедрения зависимостей
"""


def get_service_author(
    session: AsyncSession = Depends(get_session)
) -> AuthorService:
    repository = AuthorRepository(session)
    service = AuthorService(repository)
    return service


def get_service_book(
    session: AsyncSession = Depends(get_session),
    author_service: AuthorService = Depends(get_service_author)
) -> BookService:
    repository = BookRepository(session)
    service = BookService(repository, author_service)
    return service
