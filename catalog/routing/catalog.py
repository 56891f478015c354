from fastapi import APIRouter, Depends

from catalog.depends import get_service_author, get_service_book
from catalog.schemas.common import CatalogSummarySchema, MessageSchema
from catalog.schemas.filter import Exists
from catalog.services.author import AuthorService
from catalog.services.book import BookService

router = APIRouter()
catalog_tag_metadata = {
    "name": "catalog",
    "description": "Сводная информация по каталогу.",
}


@router.get(
    path="/",
    tags=["catalog"],
    responses = {400: {'model': MessageSchema, "description": "Bad request"}},
    response_model = CatalogSummarySchema,
    name = 'Сводка по каталогу',
    description = "Количество авторов (в т.ч. с известной датой смерти) и книг."
)
async def get_summary(
    author_service: AuthorService = Depends(get_service_author),
    book_service: BookService = Depends(get_service_book)
) -> CatalogSummarySchema:
    summary = CatalogSummarySchema(
        author_count = await author_service.count(),
        deceased_author_count = await author_service.count({"date_of_death": Exists(True)}),
        book_count = await book_service.count()
    )
    return summary
