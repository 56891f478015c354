from datetime import date
from typing import List, Optional

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database.models.base import Base

NAME_MAX_LENGTH = 100


def author_name(first_name: Optional[str], family_name: Optional[str]) -> str:
    """
    Отображаемое имя автора: "<фамилия>, <имя>".
    Если хотя бы одно из имен не задано, возвращается пустая строка.
    """
    if first_name and family_name:
        return f"{family_name}, {first_name}"

    return ""


def author_lifespan(date_of_birth: Optional[date], date_of_death: Optional[date]) -> str:
    """
    Годы жизни: "<год рождения> - <год смерти>".
    Неизвестная дата отображается пустой строкой, разделитель присутствует всегда.
    """
    birth = f"{date_of_birth.year:04d}" if date_of_birth else ""
    death = f"{date_of_death.year:04d}" if date_of_death else ""
    return f"{birth} - {death}"


class AuthorOrm(Base):
    __tablename__ = "author"
    __table_args__ = {
        'comment': 'Авторы'
    }

    first_name: Mapped[str] = mapped_column(
        sa.String(NAME_MAX_LENGTH),
        nullable=False,
        comment="Имя"
    )

    family_name: Mapped[str] = mapped_column(
        sa.String(NAME_MAX_LENGTH),
        nullable=False,
        comment="Фамилия"
    )

    date_of_birth: Mapped[Optional[date]] = mapped_column(
        sa.Date,
        nullable=True,
        default=None,
        comment="Дата рождения"
    )

    date_of_death: Mapped[Optional[date]] = mapped_column(
        sa.Date,
        nullable=True,
        default=None,
        comment="Дата смерти"
    )

    # Список книг автора
    books: Mapped[List["BookOrm"]] = relationship(
        back_populates="author",
        cascade="all, delete-orphan",
        lazy="raise",
        init=False
    )

    @property
    def name(self) -> str:
        return author_name(self.first_name, self.family_name)

    @property
    def lifespan(self) -> str:
        return author_lifespan(self.date_of_birth, self.date_of_death)

    def __repr__(self) -> str:
        return self.repr(("id", "family_name", "first_name"))
