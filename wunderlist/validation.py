"""
Validation strategies used by endpoint schemas and parameter checks.

Every strategy exposes the same ``validate(value, property, allow_empty)`` call and raises
:class:`~wunderlist.errors.ValidationError` on the first problem it finds. A value is considered
absent when it is ``None``.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from wunderlist.constants import MAX_STRING_LENGTH
from wunderlist.errors import ValidationError

EMAIL_PATTERN = re.compile(
    r'(([^<>()[\]\\.,;:\s@"]+(\.[^<>()[\]\\.,;:\s@"]+)*)|(".+"))'
    r'@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))'
)

# Group 3 is the date separator and group 17 the time separator, both reused as backreferences.
ISO_8601_PATTERN = re.compile(
    r'([+-]?\d{4}(?!\d{2}\b))'
    r'((-?)((0[1-9]|1[0-2])(\3([12]\d|0[1-9]|3[01]))?|W([0-4]\d|5[0-2])(-?[1-7])?'
    r'|(00[1-9]|0[1-9]\d|[12]\d{2}|3([0-5]\d|6[1-6])))'
    r'([T\s]((([01]\d|2[0-3])((:?)[0-5]\d)?|24:?00)([.,]\d+(?!:))?)?'
    r'(\17[0-5]\d([.,]\d+)?)?([zZ]|([+-])([01]\d|2[0-3]):?([0-5]\d)?)?)?)?'
)


class ValidationStrategy(ABC):
    name: str = ''
    expected_type: tuple[type, ...] | None = None

    def validate(self, value: Any, property: str | None, allow_empty: bool = False) -> None:
        if self.expected_type is not None and value is not None and not self._has_expected_type(value):
            type_names = ', '.join(t.__name__ for t in self.expected_type)
            raise ValidationError(property, self.name, f'is not of type {type_names}')
        self._validate(value, property, allow_empty)

    def _has_expected_type(self, value: Any) -> bool:
        return isinstance(value, self.expected_type)

    def error(self, property: str | None, message: str) -> ValidationError:
        return ValidationError(property, self.name, message)

    @abstractmethod
    def _validate(self, value: Any, property: str | None, allow_empty: bool) -> None:
        pass

    def __repr__(self):
        return f'{self.__class__.__name__}()'


class NumericValidation(ValidationStrategy):
    """Identifiers and revisions: numbers greater than 0."""
    name = 'Numeric'
    expected_type = (int, float)

    def _has_expected_type(self, value: Any) -> bool:
        # bool is an int subclass but never a valid identifier
        return isinstance(value, self.expected_type) and not isinstance(value, bool)

    def _validate(self, value: Any, property: str | None, allow_empty: bool) -> None:
        if value is None:
            if not allow_empty:
                raise self.error(property, 'is empty')
            return
        if value <= 0:
            raise self.error(property, 'has to be greater than 0')


class StringValidation(ValidationStrategy):
    name = 'String'
    expected_type = (str,)

    def _validate(self, value: Any, property: str | None, allow_empty: bool) -> None:
        if not value and not allow_empty:
            raise self.error(property, 'cannot be empty')
        if value and len(value) > MAX_STRING_LENGTH:
            raise self.error(property, f'cannot exceed {MAX_STRING_LENGTH} characters')


class EmptyRequired(ValidationStrategy):
    """Keeps server-assigned fields (e.g. ``revision`` on creation) out of the request."""
    name = 'EmptyRequired'

    def _validate(self, value: Any, property: str | None, allow_empty: bool) -> None:
        if value is not None:
            raise self.error(property, 'needs to be empty')


class EmailValidation(ValidationStrategy):
    name = 'Email'
    expected_type = (str,)

    def _validate(self, value: Any, property: str | None, allow_empty: bool) -> None:
        if not value and not allow_empty:
            raise self.error(property, 'cannot be empty')
        if value and EMAIL_PATTERN.fullmatch(value) is None:
            raise self.error(property, 'is not a valid email')


class ArrayValidation(ValidationStrategy):
    name = 'Array'

    def _validate(self, value: Any, property: str | None, allow_empty: bool) -> None:
        if value is not None and not isinstance(value, (list, tuple)):
            raise self.error(property, 'not an array')
        if not value and not allow_empty:
            raise self.error(property, 'cannot be empty')


class BooleanValidation(ValidationStrategy):
    """Explicit ``False`` counts as a value; only ``None`` is empty."""
    name = 'Boolean'
    expected_type = (bool,)

    def _validate(self, value: Any, property: str | None, allow_empty: bool) -> None:
        if value is None and not allow_empty:
            raise self.error(property, 'cannot be empty')


class DateValidation(ValidationStrategy):
    name = 'Date'
    expected_type = (str,)

    def _validate(self, value: Any, property: str | None, allow_empty: bool) -> None:
        if not value and not allow_empty:
            raise self.error(property, 'cannot be empty')
        if value and ISO_8601_PATTERN.fullmatch(value) is None:
            raise self.error(property, 'is not a valid ISO 8601 date')


NUMERIC = NumericValidation()
STRING = StringValidation()
EMPTY_REQUIRED = EmptyRequired()
EMAIL = EmailValidation()
ARRAY = ArrayValidation()
BOOLEAN = BooleanValidation()
DATE = DateValidation()


@dataclass(frozen=True, slots=True)
class FieldRule:
    """A validation strategy bound to one field of a schema."""

    strategy: ValidationStrategy
    allow_empty: bool = False

    def validate(self, value: Any, property: str) -> None:
        self.strategy.validate(value, property, self.allow_empty)


def required(strategy: ValidationStrategy) -> FieldRule:
    return FieldRule(strategy)


def optional(strategy: ValidationStrategy) -> FieldRule:
    return FieldRule(strategy, allow_empty=True)
