from typing import Dict

from pydantic import BaseModel


class MessageSchema(BaseModel):
    message: str


class ValidationMessageSchema(BaseModel):
    message: str
    errors: Dict[str, str]


class CatalogSummarySchema(BaseModel):
    author_count: int
    deceased_author_count: int
    book_count: int
