from datetime import date

import pytest

from catalog.database.models import AuthorOrm
from catalog.database.models.author import author_name, author_lifespan
from catalog.schemas.author import validate_author, build_author
from catalog.utils.exceptions import ValidationException


def author_data(**fields):
    data = {
        'first_name': 'John',
        'family_name': 'Doe',
        'date_of_birth': '1990-01-01',
        'date_of_death': '2020-01-01',
    }
    data.update(fields)
    return data


class TestAuthorValidation:

    def test_valid_author(self):
        assert validate_author(author_data()) == {}

    def test_empty_first_name(self):
        errors = validate_author(author_data(first_name=''))
        assert list(errors.keys()) == ['first_name']

    def test_missing_first_name(self):
        data = author_data()
        data.pop('first_name')
        errors = validate_author(data)
        assert list(errors.keys()) == ['first_name']

    def test_first_name_too_long(self):
        errors = validate_author(author_data(first_name='a' * 101))
        assert list(errors.keys()) == ['first_name']

    def test_first_name_max_length_is_valid(self):
        assert validate_author(author_data(first_name='a' * 100)) == {}

    def test_empty_family_name(self):
        errors = validate_author(author_data(family_name=''))
        assert list(errors.keys()) == ['family_name']

    def test_family_name_too_long(self):
        errors = validate_author(author_data(family_name='a' * 101))
        assert list(errors.keys()) == ['family_name']

    def test_invalid_date_of_birth(self):
        errors = validate_author(author_data(date_of_birth='2020-27-12', date_of_death='2020-12-27'))
        assert list(errors.keys()) == ['date_of_birth']

    def test_invalid_date_of_death(self):
        errors = validate_author(author_data(date_of_death='2020-27-12'))
        assert list(errors.keys()) == ['date_of_death']

    def test_dates_are_optional(self):
        assert validate_author({'first_name': 'John', 'family_name': 'Doe'}) == {}

    def test_all_violations_reported(self):
        errors = validate_author({'first_name': '', 'family_name': 'a' * 101, 'date_of_birth': '1990-02-30'})
        assert set(errors.keys()) == {'first_name', 'family_name', 'date_of_birth'}

    def test_death_before_birth_is_accepted(self):
        assert validate_author(author_data(date_of_birth='2020-01-01', date_of_death='1990-01-01')) == {}

    def test_build_author_raises(self):
        with pytest.raises(ValidationException) as exc_info:
            build_author(author_data(first_name='a' * 101))

        assert list(exc_info.value.errors.keys()) == ['first_name']

    def test_build_author(self):
        author = build_author(author_data())
        assert author.date_of_birth == date(1990, 1, 1)


class TestAuthorName:

    def test_full_name(self):
        assert author_name('John', 'Doe') == 'Doe, John'

    def test_first_name_missing(self):
        assert author_name('', 'Doe') == ''

    def test_family_name_missing(self):
        assert author_name('John', '') == ''

    def test_both_names_missing(self):
        assert author_name(None, None) == ''


class TestAuthorLifespan:

    def test_both_dates(self):
        assert author_lifespan(date(1990, 1, 9), date(2020, 12, 27)) == '1990 - 2020'

    def test_only_birth(self):
        assert author_lifespan(date(1990, 1, 9), None) == '1990 - '

    def test_only_death(self):
        assert author_lifespan(None, date(2020, 12, 27)) == ' - 2020'

    def test_no_dates(self):
        assert author_lifespan(None, None) == ' - '


class TestAuthorOrm:

    def test_derived_fields(self):
        author = AuthorOrm(
            first_name='John',
            family_name='Doe',
            date_of_birth=date(1990, 1, 9),
            date_of_death=date(2020, 12, 27)
        )
        assert author.name == 'Doe, John'
        assert author.lifespan == '1990 - 2020'

    def test_derived_fields_follow_changes(self):
        author = AuthorOrm(first_name='John', family_name='Doe')
        assert author.lifespan == ' - '

        author.first_name = 'Jane'
        author.date_of_death = date(2001, 3, 4)
        assert author.name == 'Doe, Jane'
        assert author.lifespan == ' - 2001'

        author.family_name = ''
        assert author.name == ''
