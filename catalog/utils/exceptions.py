from typing import Any, Dict, List

from pydantic import ValidationError

from catalog.utils.loggers import ColoredLogger


class BadRequestException(Exception):
    def __init__(self, message: str):
        self.message = message


class NotFoundException(Exception):
    def __init__(self, message: str = 'Запись не найдена'):
        self.message = message


class DBException(Exception):
    def __init__(self, message: str = 'Ошибка при выполнении запроса к БД'):
        self.message = message
        super().__init__(message)


class DBDuplicateException(Exception):
    def __init__(self):
        self.message = 'Нарушение целостности: попытка добавить идентичную запись.'


class ValidationException(Exception):
    """
    Ошибка валидации сущности.
    Содержит словарь {поле: описание нарушения} по всем некорректным полям сразу.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        self.message = 'Ошибка валидации: ' + ', '.join(errors.keys())
        super().__init__(self.message)

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "ValidationException":
        return cls.from_error_list(exc.errors())

    @classmethod
    def from_error_list(cls, error_list: List[Dict[str, Any]]) -> "ValidationException":
        errors = {}
        for error in error_list:
            # Для ошибок запроса первым элементом идет источник: body, query, path
            loc = [item for item in error['loc'] if item not in ('body', 'query', 'path')]
            field = str(loc[0]) if loc else '__root__'
            # По каждому полю сохраняем первое нарушение
            errors.setdefault(field, error['msg'])

        return cls(errors)


api_logger = ColoredLogger(logfile_name='api.log', logger_name='API')
