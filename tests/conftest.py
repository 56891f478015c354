from datetime import date
from typing import AsyncGenerator, Any, Dict, List

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.config import TEST_URI
from catalog.database.db import sessionmanager
from catalog.database.models import AuthorOrm
from catalog.main import init_app
from catalog.repositories.author import AuthorRepository
from catalog.repositories.book import BookRepository
from catalog.services.author import AuthorService
from catalog.services.book import BookService


@pytest.fixture
async def app():
    app = init_app(TEST_URI, tests = True)
    await sessionmanager.drop_all()
    await sessionmanager.create_all()
    yield app
    await sessionmanager.close()


@pytest.fixture
async def aclient(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as aclient:
        yield aclient


@pytest.fixture
async def session(app) -> AsyncGenerator[AsyncSession, None]:
    async with sessionmanager.session() as session:
        yield session


@pytest.fixture
def author_service(session: AsyncSession) -> AuthorService:
    return AuthorService(AuthorRepository(session))


@pytest.fixture
def book_service(session: AsyncSession, author_service: AuthorService) -> BookService:
    return BookService(BookRepository(session), author_service)


async def add_authors(dataset: List[Dict[str, Any]]) -> List[AuthorOrm]:
    # Записи добавляются по одной, чтобы порядок хранения совпадал с порядком в списке
    authors = []
    async with sessionmanager.session() as session:
        for data in dataset:
            author = AuthorOrm(**data)
            session.add(author)
            await session.flush()
            authors.append(author)

        await session.commit()

    return authors


# Набор из четырех авторов с разными фамилиями, в порядке хранения
UNSORTED_AUTHORS = [
    {'first_name': 'John', 'family_name': 'Aoun', 'date_of_birth': date(1958, 10, 10), 'date_of_death': date(2020, 1, 1)},
    {'first_name': 'John', 'family_name': 'Dune', 'date_of_birth': date(1964, 5, 21)},
    {'first_name': 'John', 'family_name': 'Boon', 'date_of_birth': date(1989, 1, 9), 'date_of_death': date(2020, 1, 1)},
    {'first_name': 'John', 'family_name': 'Ewan', 'date_of_birth': date(1992, 12, 27)},
]
