import traceback
from typing import Any, Type

import sqlalchemy as sa
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.database.models import Base
from catalog.schemas.filter import Equals, Exists, Filters, Sort, SortDirection
from catalog.utils.exceptions import DBException, DBDuplicateException, api_logger


class BaseRepository:

    def __init__(self, session: AsyncSession):
        self.session = session
        self.logger = api_logger

    async def select_helper(self, stmt, scalars=True) -> Any:
        try:
            if scalars:
                result = await self.session.scalars(
                    stmt,
                    execution_options={"populate_existing": True}
                )
                result = result.unique()
            else:
                result = await self.session.execute(stmt)

            await self.session.commit()
            return result

        except Exception as e:
            self.logger.error(traceback.format_exc())
            raise DBException() from e

    async def select_all(self, stmt, scalars=True) -> Any:
        dataset = await self.select_helper(stmt, scalars)
        return dataset.all()

    async def select_first(self, stmt, scalars=True) -> Any:
        dataset = await self.select_helper(stmt, scalars)
        return dataset.first()

    async def select_single_field(self, stmt) -> Any:
        dataset = await self.select_helper(stmt, scalars=False)
        row = dataset.first()
        return row[0] if row else None

    async def save_object(self, obj: Any) -> None:
        try:
            self.session.add(obj)
            await self.session.flush()
            await self.session.commit()
            await self.session.refresh(obj)

        except IntegrityError:
            self.logger.error(traceback.format_exc())
            raise DBDuplicateException()

        except Exception as e:
            self.logger.error(traceback.format_exc())
            raise DBException() from e

    @staticmethod
    def column(_model_: Type[Base], field: str) -> Any:
        if field not in _model_.__table__.columns.keys():
            raise DBException(f'Поле "{field}" отсутствует в коллекции {_model_.__tablename__}')

        return getattr(_model_, field)

    def apply_filters(self, stmt, _model_: Type[Base], filters: Filters | None):
        # Все условия объединяются через AND
        for field, condition in (filters or {}).items():
            column = self.column(_model_, field)
            if isinstance(condition, Equals):
                stmt = stmt.where(column == condition.value)

            elif isinstance(condition, Exists):
                stmt = stmt.where(column.is_not(None) if condition.present else column.is_(None))

            else:
                raise DBException(f'Неподдерживаемое условие фильтрации по полю "{field}"')

        return stmt

    def apply_sort(self, stmt, _model_: Type[Base], sort: Sort | None):
        if not sort:
            # Естественный порядок хранения
            return stmt.order_by(_model_.seq)

        # Учитывается только один ключ сортировки - последний из переданных
        field, direction = list(sort.items())[-1]
        column = self.column(_model_, field)

        # Регистрозависимое лексикографическое сравнение строк
        column_type = _model_.__table__.columns[field].type
        if isinstance(column_type, sa.String) and self.session.bind.dialect.name == 'postgresql':
            column = column.collate("C")

        try:
            direction = SortDirection(direction)

        except ValueError:
            raise DBException(f'Некорректное направление сортировки по полю "{field}"')

        if direction == SortDirection.DESC:
            column = column.desc()
        else:
            column = column.asc()

        # Пустые значения всегда в конце, независимо от направления и СУБД
        column = column.nulls_last()

        # При равенстве значений сохраняется порядок хранения
        return stmt.order_by(column, _model_.seq)

    async def count_objects(self, _model_: Type[Base], filters: Filters | None = None) -> int:
        stmt = sa.select(sa.func.count()).select_from(_model_)
        stmt = self.apply_filters(stmt, _model_, filters)
        count = await self.select_single_field(stmt)
        return count or 0
