from typing import Iterable, Tuple

from catalog.schemas.filter import Sort, SortDirection
from catalog.utils.exceptions import BadRequestException


def sort_from_query(params: Iterable[Tuple[str, str]], fields: Iterable[str]) -> Sort | None:
    """
    Формирует параметры сортировки из query-параметров запроса вида ?family_name=-1.
    Учитываются только поля из списка fields, прочие параметры игнорируются.
    Если передано несколько полей, действует последнее.
    """
    fields = set(fields)
    sort = None
    for field, value in params:
        if field not in fields:
            continue

        try:
            direction = SortDirection(int(value))

        except ValueError:
            raise BadRequestException(f'Некорректное направление сортировки по полю "{field}": {value}')

        sort = {field: direction}

    return sort
