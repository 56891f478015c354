import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database.models.base import Base

TITLE_MAX_LENGTH = 200
SUMMARY_MAX_LENGTH = 2000
ISBN_MAX_LENGTH = 20


class BookOrm(Base):
    __tablename__ = "book"
    __table_args__ = {
        'comment': 'Книги'
    }

    title: Mapped[str] = mapped_column(
        sa.String(TITLE_MAX_LENGTH),
        nullable=False,
        comment="Название"
    )

    summary: Mapped[str] = mapped_column(
        sa.String(SUMMARY_MAX_LENGTH),
        nullable=False,
        comment="Аннотация"
    )

    isbn: Mapped[str] = mapped_column(
        sa.String(ISBN_MAX_LENGTH),
        nullable=False,
        comment="ISBN"
    )

    author_id: Mapped[str] = mapped_column(
        sa.ForeignKey("author.id"),
        nullable=False,
        comment="Автор"
    )

    # Автор
    author: Mapped["AuthorOrm"] = relationship(
        back_populates="books",
        init=False,
        lazy="raise"
    )

    @property
    def display(self) -> str:
        author_name = self.author.name if self.author else ""
        return f"{self.title} : {author_name}"

    def __repr__(self) -> str:
        return self.repr(("id", "title"))
