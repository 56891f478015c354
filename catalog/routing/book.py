import uuid

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from catalog.config import NO_BOOKS_FOUND
from catalog.depends import get_service_book
from catalog.schemas.book import BookReadSchema, BookCreateSchema
from catalog.schemas.common import MessageSchema, ValidationMessageSchema
from catalog.schemas.filter import SortDirection
from catalog.services.book import BookService
from catalog.utils.common import sort_from_query
from catalog.utils.descriptions.book import book_tag_description, get_books_description, \
    get_book_description, create_book_description
from catalog.utils.exceptions import DBException, NotFoundException, api_logger

router = APIRouter()
book_tag_metadata = {
    "name": "book",
    "description": book_tag_description,
}

SORT_FIELDS = ("title", "isbn")


@router.get(
    path="/books",
    tags=["book"],
    responses = {
        200: {
            "description": "Список книг либо текст No books found",
            "content": {"text/plain": {}}
        },
        400: {'model': MessageSchema, "description": "Bad request"}
    },
    response_model = None,
    name = 'Получение листинга книг',
    description = get_books_description
)
async def get_all_books(
    request: Request,
    service: BookService = Depends(get_service_book)
):
    sort = sort_from_query(request.query_params.multi_items(), SORT_FIELDS) or {"title": SortDirection.ASC}

    try:
        books = await service.list(sort)

    except DBException as e:
        api_logger.error(f"Error processing request: {e!r} caused by {e.__cause__!r}")
        return PlainTextResponse(NO_BOOKS_FOUND, status_code=200)

    if not books:
        return PlainTextResponse(NO_BOOKS_FOUND, status_code=200)

    return JSONResponse(books, status_code=200)


@router.get(
    path="/books/{id}",
    tags=["book"],
    responses = {404: {'model': MessageSchema, "description": "Not found"}},
    response_model = BookReadSchema,
    name = 'Получение сведений о книге',
    description = get_book_description
)
async def get_book(
    id: uuid.UUID,
    service: BookService = Depends(get_service_book)
) -> BookReadSchema:
    _id_ = str(id)
    book = await service.get(_id_)
    if not book:
        raise NotFoundException('Книга не найдена')

    return book


@router.post(
    path="/books",
    tags=["book"],
    responses = {
        400: {'model': MessageSchema, "description": "Bad request"},
        422: {'model': ValidationMessageSchema, "description": "Validation error"}
    },
    response_model = BookReadSchema,
    name = 'Создание книги',
    description = create_book_description
)
async def create_book(
    data: BookCreateSchema,
    service: BookService = Depends(get_service_book)
) -> BookReadSchema:
    book = await service.create(data)
    return book
