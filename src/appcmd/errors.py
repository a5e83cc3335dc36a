from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from enum import Enum


__all__ = (
    'AppCommandException',
    'ChoiceValueTypeMismatch',
    'FieldNotApplicableForType',
    'IllegalNesting',
    'InvalidLocale',
    'InvalidName',
    'LengthOutOfRange',
    'MutuallyExclusiveFields',
    'NumericRangeInverted',
    'RequiredOptionOrder',
    'SerializationError',
    'TooManyChoices',
    'TooManyOptions',
    'UnknownCode',
    'ValidationError',
    'ValueOutOfRange',
)


class AppCommandException(Exception):
    ...


class UnknownCode(AppCommandException):
    def __init__(self, enum_name: str, code: int) -> None:
        self.enum_name = enum_name
        self.code = code
        super().__init__(f'{code} is not a known {enum_name} code')


class SerializationError(AppCommandException):
    ...


class ValidationError(AppCommandException):
    """Base of every validation failure.

    `path` names the offending field relative to the command root,
    e.g. `options[2].choices`.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f'{path}: {message}')


class LengthOutOfRange(ValidationError):
    def __init__(
        self,
        path: str,
        actual: int,
        allowed: tuple[int, int]
    ) -> None:
        self.actual = actual
        self.allowed = allowed
        super().__init__(
            path,
            f'length {actual} is outside {allowed[0]}-{allowed[1]}'
        )

    @property
    def field(self) -> str:
        return self.path


class ValueOutOfRange(ValidationError):
    def __init__(
        self,
        path: str,
        actual: object,
        allowed: str
    ) -> None:
        self.actual = actual
        self.allowed = allowed
        super().__init__(path, f'{actual!r} is not {allowed}')


class TooManyChoices(ValidationError):
    def __init__(self, path: str, actual: int, max: int = 25) -> None:
        self.actual = actual
        self.max = max
        super().__init__(path, f'{actual} choices, max {max}')


class TooManyOptions(ValidationError):
    def __init__(self, path: str, actual: int, max: int = 25) -> None:
        self.actual = actual
        self.max = max
        super().__init__(path, f'{actual} options, max {max}')


class IllegalNesting(ValidationError):
    def __init__(self, path: str, depth: int, reason: str) -> None:
        self.depth = depth
        super().__init__(path, f'illegal nesting at depth {depth}; {reason}')


class FieldNotApplicableForType(ValidationError):
    def __init__(self, path: str, field: str, type: Enum) -> None:
        self.field = field
        self.type = type
        super().__init__(path, f'{field} is not allowed for {type.name}')

    @property
    def option_type(self) -> Enum:
        return self.type


class MutuallyExclusiveFields(ValidationError):
    def __init__(self, path: str, field_a: str, field_b: str) -> None:
        self.field_a = field_a
        self.field_b = field_b
        super().__init__(path, f'{field_a} and {field_b} are mutually exclusive')


class ChoiceValueTypeMismatch(ValidationError):
    def __init__(self, path: str, expected: Enum, actual: Enum) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            path,
            f'expected a {expected.value} value, got {actual.value}'
        )


class NumericRangeInverted(ValidationError):
    def __init__(
        self,
        path: str,
        min: float,
        max: float
    ) -> None:
        self.min = min
        self.max = max
        super().__init__(path, f'minimum {min} is greater than maximum {max}')


class InvalidName(ValidationError):
    def __init__(self, path: str, name: str) -> None:
        self.name = name
        super().__init__(path, f'{name!r} is not a valid command name')


class InvalidLocale(ValidationError):
    def __init__(self, path: str, locale: str) -> None:
        self.locale = locale
        super().__init__(path, f'{locale!r} is not a discord locale')


class RequiredOptionOrder(ValidationError):
    def __init__(self, path: str, name: str) -> None:
        self.name = name
        super().__init__(
            path,
            f'required option {name!r} follows an optional option'
        )
