import uuid
from datetime import date

import pytest
from httpx import AsyncClient

from catalog.schemas.book import BookCreateSchema
from catalog.schemas.filter import Equals, SortDirection
from catalog.services.book import BookService
from catalog.utils.exceptions import BadRequestException
from tests.conftest import add_authors

AUTHORS = [
    {'first_name': 'Patrick', 'family_name': 'Rothfuss', 'date_of_birth': date(1973, 6, 6)},
    {'first_name': 'Isaac', 'family_name': 'Asimov', 'date_of_birth': date(1920, 1, 2), 'date_of_death': date(1992, 4, 6)},
]


def book_schema(title: str, first_name: str = 'Patrick', family_name: str = 'Rothfuss') -> BookCreateSchema:
    return BookCreateSchema(
        title=title,
        summary='Summary',
        isbn='9780756404741',
        author_first_name=first_name,
        author_family_name=family_name
    )


class TestBookService:

    async def test_create_and_list(self, book_service: BookService):
        await add_authors(AUTHORS)
        await book_service.create(book_schema("The Wise Man's Fear"))
        await book_service.create(book_schema('Foundation', 'Isaac', 'Asimov'))
        await book_service.create(book_schema('The Name of the Wind'))

        assert await book_service.list() == [
            "The Wise Man's Fear : Rothfuss, Patrick",
            'Foundation : Asimov, Isaac',
            'The Name of the Wind : Rothfuss, Patrick',
        ]
        assert await book_service.list({'title': SortDirection.ASC}) == [
            'Foundation : Asimov, Isaac',
            'The Name of the Wind : Rothfuss, Patrick',
            "The Wise Man's Fear : Rothfuss, Patrick",
        ]

    async def test_count(self, book_service: BookService):
        authors = await add_authors(AUTHORS)
        await book_service.create(book_schema('The Name of the Wind'))
        await book_service.create(book_schema('Foundation', 'Isaac', 'Asimov'))

        assert await book_service.count() == 2
        assert await book_service.count({'author_id': Equals(authors[1].id)}) == 1

    async def test_create_with_unknown_author(self, book_service: BookService):
        await add_authors(AUTHORS)
        with pytest.raises(BadRequestException):
            await book_service.create(book_schema('Dune', 'Frank', 'Herbert'))

        assert await book_service.count() == 0

    async def test_get_missing_book(self, book_service: BookService):
        assert await book_service.get(str(uuid.uuid4())) is None


class TestBookRouting:

    async def test_create_and_get_book(self, aclient: AsyncClient):
        await add_authors(AUTHORS)
        response = await aclient.post(
            url="/books",
            json={
                "title": "Foundation",
                "summary": "Psychohistory",
                "isbn": "9780553293357",
                "author_first_name": "Isaac",
                "author_family_name": "Asimov",
            }
        )
        assert response.status_code == 200
        book_id = response.json()["id"]

        response = await aclient.get(f"/books/{book_id}")
        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Foundation"
        assert body["author"]["name"] == "Asimov, Isaac"
        assert body["author"]["lifespan"] == "1920 - 1992"

    async def test_get_missing_book(self, aclient: AsyncClient):
        response = await aclient.get(f"/books/{uuid.uuid4()}")
        assert response.status_code == 404

    async def test_create_book_with_unknown_author(self, aclient: AsyncClient):
        response = await aclient.post(
            url="/books",
            json={
                "title": "Dune",
                "summary": "Spice",
                "isbn": "9780441172719",
                "author_first_name": "Frank",
                "author_family_name": "Herbert",
            }
        )
        assert response.status_code == 400

    async def test_list_books(self, aclient: AsyncClient, book_service: BookService):
        await add_authors(AUTHORS)
        await book_service.create(book_schema('The Name of the Wind'))
        await book_service.create(book_schema('Foundation', 'Isaac', 'Asimov'))

        response = await aclient.get("/books")
        assert response.status_code == 200
        assert response.json() == ['Foundation : Asimov, Isaac', 'The Name of the Wind : Rothfuss, Patrick']

        response = await aclient.get("/books", params={"title": -1})
        assert response.json() == ['The Name of the Wind : Rothfuss, Patrick', 'Foundation : Asimov, Isaac']

    async def test_list_books_empty(self, aclient: AsyncClient):
        response = await aclient.get("/books")
        assert response.status_code == 200
        assert response.text == 'No books found'


class TestCatalogSummary:

    async def test_summary(self, aclient: AsyncClient, book_service: BookService):
        await add_authors(AUTHORS)
        await book_service.create(book_schema('Foundation', 'Isaac', 'Asimov'))

        response = await aclient.get("/")
        assert response.status_code == 200
        assert response.json() == {"author_count": 2, "deceased_author_count": 1, "book_count": 1}
