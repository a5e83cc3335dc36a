from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING
from math import isfinite

import logfire
import regex

from .missing import is_not_missing, Optional
from .enums import (
    AUTOCOMPLETE_OPTION_TYPES,
    CHOICE_OPTION_TYPES,
    CHOICE_VALUE_KINDS,
    NUMERIC_OPTION_TYPES,
    SUBCOMMAND_OPTION_TYPES,
    ApplicationCommandOptionType,
    ApplicationCommandType,
    Locale
)
from .errors import (
    ChoiceValueTypeMismatch,
    FieldNotApplicableForType,
    IllegalNesting,
    InvalidLocale,
    InvalidName,
    LengthOutOfRange,
    MutuallyExclusiveFields,
    NumericRangeInverted,
    RequiredOptionOrder,
    TooManyChoices,
    TooManyOptions,
    ValidationError,
    ValueOutOfRange
)

if TYPE_CHECKING:
    from .models import (
        ApplicationCommand,
        ApplicationCommandOption,
        ApplicationCommandOptionChoice
    )


__all__ = (
    'COMMAND_NAME_PATTERN',
    'validate',
    'validate_choice',
    'validate_option',
)


COMMAND_NAME_PATTERN = regex.compile(
    r'^[-_\p{L}\p{N}\p{sc=Deva}\p{sc=Thai}]{1,32}$')

NAME_LENGTH = (1, 32)
DESCRIPTION_LENGTH = (1, 100)
CHOICE_NAME_LENGTH = (1, 100)
CHOICE_STRING_LENGTH = (0, 100)
MIN_LENGTH_RANGE = (0, 6000)
MAX_LENGTH_RANGE = (1, 6000)
MAX_CHOICES = 25
MAX_OPTIONS = 25
INT32_MIN, INT32_MAX = -2**31, 2**31 - 1
JSON_SAFE_MIN, JSON_SAFE_MAX = -2**53, 2**53

_LOCALES = frozenset(Locale)


def validate(command: ApplicationCommand) -> None:
    """Check every invariant of a command definition.

    Raises the first `ValidationError` found; the command is never modified.
    """
    try:
        _validate_command(command)
    except ValidationError as e:
        logfire.debug(
            'validation of {command_name} failed at {path}',
            command_name=command.name,
            path=e.path,
            reason=str(e)
        )
        raise

    logfire.debug('validated {command_name}', command_name=command.name)


def validate_option(
    option: ApplicationCommandOption,
    path: str = 'option'
) -> None:
    _validate_option(path, option, depth=1, parent_type=None)


def validate_choice(
    choice: ApplicationCommandOptionChoice,
    option_type: ApplicationCommandOptionType,
    path: str = 'choice'
) -> None:
    _check_length(f'{path}.name', choice.name, CHOICE_NAME_LENGTH)
    _check_localizations(
        f'{path}.name_localizations',
        choice.name_localizations,
        lambda p, v: _check_length(p, v, CHOICE_NAME_LENGTH)
    )

    expected = CHOICE_VALUE_KINDS.get(option_type)

    if expected is None:
        raise FieldNotApplicableForType(path, 'choices', option_type)

    if choice.kind != expected:
        raise ChoiceValueTypeMismatch(f'{path}.value', expected, choice.kind)

    match choice.value:
        case str():
            _check_length(f'{path}.value', choice.value, CHOICE_STRING_LENGTH)
        case int():
            if not INT32_MIN <= choice.value <= INT32_MAX:
                raise ValueOutOfRange(
                    f'{path}.value', choice.value, 'a 32-bit integer')
        case float():
            if not isfinite(choice.value):
                raise ValueOutOfRange(
                    f'{path}.value', choice.value, 'a finite number')


def _validate_command(command: ApplicationCommand) -> None:
    command_type = command.interaction_type or ApplicationCommandType.CHAT_INPUT

    if not command.is_chat_input:
        # ? user and message commands take no arguments and no description
        for field in ('options', 'description', 'description_localizations'):
            if getattr(command, field):
                raise FieldNotApplicableForType(field, field, command_type)

    _check_name('name', command.name, command.is_chat_input)
    _check_localizations(
        'name_localizations',
        command.name_localizations,
        lambda p, v: _check_name(p, v, command.is_chat_input)
    )

    if command.is_chat_input:
        _check_length(
            'description',
            command.description or '',
            DESCRIPTION_LENGTH
        )
        _check_localizations(
            'description_localizations',
            command.description_localizations,
            lambda p, v: _check_length(p, v, DESCRIPTION_LENGTH)
        )

    permissions = command.default_member_permissions
    if (
        is_not_missing(permissions) and
        not (permissions.isascii() and permissions.isdigit())
    ):
        raise ValueOutOfRange(
            'default_member_permissions',
            permissions,
            'a decimal permission bitfield'
        )

    _check_options('options', command.options or [], 1, None)


def _check_options(
    path: str,
    options: list[ApplicationCommandOption],
    depth: int,
    parent_type: ApplicationCommandOptionType | None
) -> None:
    if len(options) > MAX_OPTIONS:
        raise TooManyOptions(path, len(options), MAX_OPTIONS)

    subcommands = [
        option
        for option in options
        if option.option_type in SUBCOMMAND_OPTION_TYPES
    ]

    if subcommands and len(subcommands) != len(options):
        raise IllegalNesting(
            path, depth, 'subcommands cannot share a level with parameters')

    seen_optional = False

    for index, option in enumerate(options):
        option_path = f'{path}[{index}]'

        if not option.required:
            seen_optional = True
        elif seen_optional:
            raise RequiredOptionOrder(option_path, option.name)

        _validate_option(option_path, option, depth, parent_type)


def _validate_option(
    path: str,
    option: ApplicationCommandOption,
    depth: int,
    parent_type: ApplicationCommandOptionType | None
) -> None:
    option_type = option.option_type

    _check_nesting(path, option_type, depth, parent_type)

    _check_name(f'{path}.name', option.name, True)
    _check_localizations(
        f'{path}.name_localizations',
        option.name_localizations,
        lambda p, v: _check_name(p, v, True)
    )
    _check_length(f'{path}.description', option.description, DESCRIPTION_LENGTH)
    _check_localizations(
        f'{path}.description_localizations',
        option.description_localizations,
        lambda p, v: _check_length(p, v, DESCRIPTION_LENGTH)
    )

    if option_type in SUBCOMMAND_OPTION_TYPES:
        _not_applicable(path, option, 'required', option_type)

    if option_type not in CHOICE_OPTION_TYPES:
        _not_applicable(path, option, 'choices', option_type)

    if option_type not in AUTOCOMPLETE_OPTION_TYPES:
        _not_applicable(path, option, 'autocomplete', option_type)

    if option_type != ApplicationCommandOptionType.CHANNEL:
        _not_applicable(path, option, 'channel_types', option_type)

    if option_type not in NUMERIC_OPTION_TYPES:
        _not_applicable(path, option, 'min_value', option_type)
        _not_applicable(path, option, 'max_value', option_type)

    if option_type != ApplicationCommandOptionType.STRING:
        _not_applicable(path, option, 'min_length', option_type)
        _not_applicable(path, option, 'max_length', option_type)

    if option_type not in SUBCOMMAND_OPTION_TYPES:
        _not_applicable(path, option, 'options', option_type)

    if option.choices and option.autocomplete:
        raise MutuallyExclusiveFields(path, 'choices', 'autocomplete')

    if is_not_missing(option.choices):
        if len(option.choices) > MAX_CHOICES:
            raise TooManyChoices(
                f'{path}.choices', len(option.choices), MAX_CHOICES)

        for index, choice in enumerate(option.choices):
            validate_choice(choice, option_type, f'{path}.choices[{index}]')

    _check_value_range(path, option)
    _check_length_range(path, option)

    if option_type in SUBCOMMAND_OPTION_TYPES:
        _check_options(
            f'{path}.options',
            option.options or [],
            depth + 1,
            option_type
        )


def _check_nesting(
    path: str,
    option_type: ApplicationCommandOptionType,
    depth: int,
    parent_type: ApplicationCommandOptionType | None
) -> None:
    if (
        parent_type == ApplicationCommandOptionType.SUB_COMMAND_GROUP and
        option_type != ApplicationCommandOptionType.SUB_COMMAND
    ):
        raise IllegalNesting(
            path, depth, 'subcommand groups can only contain subcommands')

    match option_type:
        case ApplicationCommandOptionType.SUB_COMMAND_GROUP if depth != 1:
            raise IllegalNesting(
                path, depth, 'subcommand groups must be top level')
        case ApplicationCommandOptionType.SUB_COMMAND if (
            depth != 1 and
            parent_type != ApplicationCommandOptionType.SUB_COMMAND_GROUP
        ):
            raise IllegalNesting(
                path, depth, 'subcommands can only be nested in a subcommand group')


def _check_value_range(path: str, option: ApplicationCommandOption) -> None:
    for field in ('min_value', 'max_value'):
        value = getattr(option, field)

        match value:
            case float() if not isfinite(value):
                raise ValueOutOfRange(
                    f'{path}.{field}', value, 'a finite number')
            case int() if not JSON_SAFE_MIN <= value <= JSON_SAFE_MAX:
                raise ValueOutOfRange(
                    f'{path}.{field}', value, 'a json-safe integer')

    if (
        is_not_missing(option.min_value) and
        is_not_missing(option.max_value) and
        option.min_value > option.max_value
    ):
        raise NumericRangeInverted(path, option.min_value, option.max_value)


def _check_length_range(path: str, option: ApplicationCommandOption) -> None:
    if is_not_missing(option.min_length):
        _check_bound(f'{path}.min_length', option.min_length, MIN_LENGTH_RANGE)

    if is_not_missing(option.max_length):
        _check_bound(f'{path}.max_length', option.max_length, MAX_LENGTH_RANGE)

    if (
        is_not_missing(option.min_length) and
        is_not_missing(option.max_length) and
        option.min_length > option.max_length
    ):
        raise NumericRangeInverted(path, option.min_length, option.max_length)


def _not_applicable(
    path: str,
    option: ApplicationCommandOption,
    field: str,
    option_type: ApplicationCommandOptionType
) -> None:
    if is_not_missing(getattr(option, field)):
        raise FieldNotApplicableForType(f'{path}.{field}', field, option_type)


def _check_name(path: str, name: str, chat_input: bool) -> None:
    _check_length(path, name, NAME_LENGTH)

    # ? user and message command names may contain spaces and capitals
    if not chat_input:
        return

    if COMMAND_NAME_PATTERN.match(name) is None or name != name.lower():
        raise InvalidName(path, name)


def _check_length(path: str, value: str, allowed: tuple[int, int]) -> None:
    _check_bound(path, len(value), allowed)


def _check_bound(path: str, actual: int, allowed: tuple[int, int]) -> None:
    if not allowed[0] <= actual <= allowed[1]:
        raise LengthOutOfRange(path, actual, allowed)


def _check_localizations(
    path: str,
    localizations: Optional[dict[str, str]],
    check: Callable[[str, str], None]
) -> None:
    if not is_not_missing(localizations):
        return

    for locale, value in localizations.items():
        if locale not in _LOCALES:
            raise InvalidLocale(path, locale)

        check(f'{path}.{locale}', value)
