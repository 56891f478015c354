from catalog.database.models.base import Base
from catalog.database.models.author import AuthorOrm
from catalog.database.models.book import BookOrm
