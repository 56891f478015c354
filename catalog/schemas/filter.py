from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict


@dataclass(frozen=True)
class Equals:
    """Точное совпадение значения поля."""
    value: Any


@dataclass(frozen=True)
class Exists:
    """Наличие (True) или отсутствие (False) значения поля."""
    present: bool = True


FieldFilter = Equals | Exists


class SortDirection(IntEnum):
    ASC = 1
    DESC = -1


Filters = Dict[str, FieldFilter]
Sort = Dict[str, SortDirection]
