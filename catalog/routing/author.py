from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from catalog.config import NO_AUTHORS_FOUND
from catalog.depends import get_service_author
from catalog.schemas.author import AuthorReadSchema, AuthorCreateSchema
from catalog.schemas.common import MessageSchema, ValidationMessageSchema
from catalog.schemas.filter import SortDirection
from catalog.services.author import AuthorService
from catalog.utils.common import sort_from_query
from catalog.utils.descriptions.author import author_tag_description, get_authors_description, \
    create_author_description
from catalog.utils.exceptions import DBException, api_logger

router = APIRouter()
author_tag_metadata = {
    "name": "author",
    "description": author_tag_description,
}

SORT_FIELDS = ("first_name", "family_name", "date_of_birth", "date_of_death")


@router.get(
    path="/authors",
    tags=["author"],
    responses = {
        200: {
            "description": "Список авторов либо текст No authors found",
            "content": {"text/plain": {}}
        },
        400: {'model': MessageSchema, "description": "Bad request"}
    },
    response_model = None,
    name = 'Получение листинга авторов',
    description = get_authors_description
)
async def get_all_authors(
    request: Request,
    service: AuthorService = Depends(get_service_author)
):
    # По умолчанию - по фамилии, по возрастанию
    sort = sort_from_query(request.query_params.multi_items(), SORT_FIELDS) or {"family_name": SortDirection.ASC}

    try:
        authors = await service.list(sort)

    except DBException as e:
        # Ошибка БД для пользователя выглядит как пустой каталог
        api_logger.error(f"Error processing request: {e!r} caused by {e.__cause__!r}")
        return PlainTextResponse(NO_AUTHORS_FOUND, status_code=200)

    if not authors:
        return PlainTextResponse(NO_AUTHORS_FOUND, status_code=200)

    return JSONResponse(authors, status_code=200)


@router.post(
    path="/authors",
    tags=["author"],
    responses = {
        400: {'model': MessageSchema, "description": "Bad request"},
        422: {'model': ValidationMessageSchema, "description": "Validation error"}
    },
    response_model = AuthorReadSchema,
    name = 'Создание автора',
    description = create_author_description
)
async def create_author(
    data: AuthorCreateSchema,
    service: AuthorService = Depends(get_service_author)
) -> AuthorReadSchema:
    author = await service.create(data)
    return author
