from typing import Annotated

from pydantic import Field

from catalog.database.models.author import NAME_MAX_LENGTH
from catalog.database.models.book import TITLE_MAX_LENGTH, SUMMARY_MAX_LENGTH, ISBN_MAX_LENGTH
from catalog.schemas.author import AuthorReadSchema
from catalog.schemas.base import BaseSchema

id_ = Annotated[str, Field(description="UUID книги", examples=["20f06bf0-ae28-4f32-b2ca-f57796103a71"])]

title_ = Annotated[
    str,
    Field(description="Название", min_length=1, max_length=TITLE_MAX_LENGTH, examples=["The Name of the Wind"])
]

summary_ = Annotated[
    str,
    Field(description="Аннотация", min_length=1, max_length=SUMMARY_MAX_LENGTH, examples=["A story about..."])
]

isbn_ = Annotated[
    str,
    Field(description="ISBN", min_length=1, max_length=ISBN_MAX_LENGTH, examples=["9780756404741"])
]

author_first_name_ = Annotated[
    str,
    Field(description="Имя автора", min_length=1, max_length=NAME_MAX_LENGTH, examples=["Patrick"])
]

author_family_name_ = Annotated[
    str,
    Field(description="Фамилия автора", min_length=1, max_length=NAME_MAX_LENGTH, examples=["Rothfuss"])
]


class BookCreateSchema(BaseSchema):
    title: title_
    summary: summary_
    isbn: isbn_
    author_first_name: author_first_name_
    author_family_name: author_family_name_


class BookReadSchema(BaseSchema):
    id: id_
    title: str
    summary: str
    isbn: str
    author: AuthorReadSchema | None = None

