import uuid
from typing import Tuple

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import MappedAsDataclass, DeclarativeBase, Mapped, mapped_column


class Base(AsyncAttrs, MappedAsDataclass, DeclarativeBase):

    # Порядковый номер записи в хранилище. Задает "естественный" порядок выдачи.
    seq: Mapped[int] = mapped_column(
        sa.Integer(),
        primary_key=True,
        autoincrement=True,
        init=False,
        comment="Порядковый номер записи"
    )

    id: Mapped[str] = mapped_column(
        sa.String(36),
        unique=True,
        nullable=False,
        insert_default=lambda: str(uuid.uuid4()),
        init=False,
        comment="Идентификатор записи"
    )

    def repr(self, repr_cols: Tuple) -> str:
        cols = []
        for col in self.__table__.columns.keys():
            if col in repr_cols:
                cols.append(f"{col}={getattr(self, col)}")

        return f"<{self.__class__.__name__} {', '.join(cols)}>"
