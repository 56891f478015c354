from datetime import date
from typing import Annotated, Any, Dict

from pydantic import Field, BeforeValidator, ValidationError

from catalog.database.models.author import NAME_MAX_LENGTH
from catalog.schemas.base import BaseSchema
from catalog.schemas.validators import empty_str_to_none
from catalog.utils.exceptions import ValidationException

id_ = Annotated[str, Field(description="UUID автора", examples=["c39e5c5c-b980-45eb-a192-585e6823faa7"])]

first_name_ = Annotated[
    str,
    Field(description="Имя", min_length=1, max_length=NAME_MAX_LENGTH, examples=["John"])
]

family_name_ = Annotated[
    str,
    Field(description="Фамилия", min_length=1, max_length=NAME_MAX_LENGTH, examples=["Doe"])
]

date_of_birth_ = Annotated[
    date | None,
    BeforeValidator(empty_str_to_none),
    Field(description="Дата рождения", examples=["1958-10-10"])
]

date_of_death_ = Annotated[
    date | None,
    BeforeValidator(empty_str_to_none),
    Field(description="Дата смерти", examples=["2020-01-01"])
]

name_ = Annotated[str, Field(description="Отображаемое имя", examples=["Doe, John"])]

lifespan_ = Annotated[str, Field(description="Годы жизни", examples=["1958 - 2020"])]


class AuthorCreateSchema(BaseSchema):
    first_name: first_name_
    family_name: family_name_
    date_of_birth: date_of_birth_ = None
    date_of_death: date_of_death_ = None


class AuthorReadSchema(BaseSchema):
    id: id_
    first_name: str
    family_name: str
    date_of_birth: date | None = None
    date_of_death: date | None = None
    name: name_
    lifespan: lifespan_


def validate_author(data: Dict[str, Any]) -> Dict[str, str]:
    """
    Проверка атрибутов автора.
    Возвращает словарь {поле: описание нарушения} по всем некорректным полям.
    Пустой словарь означает, что данные корректны.
    Проверка "дата смерти раньше даты рождения" не выполняется.
    """
    try:
        AuthorCreateSchema.model_validate(data)

    except ValidationError as e:
        return ValidationException.from_pydantic(e).errors

    return {}


def build_author(data: Dict[str, Any]) -> AuthorCreateSchema:
    try:
        return AuthorCreateSchema.model_validate(data)

    except ValidationError as e:
        raise ValidationException.from_pydantic(e)
