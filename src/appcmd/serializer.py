from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from enum import Enum

from pydantic import BaseModel
from orjson import dumps, JSONEncodeError
import logfire

from .missing import MISSING, _MissingType, is_not_missing
from .errors import SerializationError
from .models import (
    ApplicationCommand,
    ApplicationCommandOption,
    ApplicationCommandOptionChoice
)


__all__ = (
    'FIELDS',
    'as_payload',
    'serialize',
    'serialize_many',
)


# ? (attribute, wire key) in output order; MISSING attributes are omitted
FIELDS: dict[type[BaseModel], tuple[tuple[str, str], ...]] = {
    ApplicationCommand: (
        ('name', 'name'),
        ('name_localizations', 'name_localizations'),
        ('description', 'description'),
        ('description_localizations', 'description_localizations'),
        ('options', 'options'),
        ('default_member_permissions', 'default_member_permissions'),
        ('dm_permission', 'dm_permission'),
        ('default_permission', 'default_permission'),
        ('interaction_type', 'type'),
        ('nsfw', 'nsfw'),
    ),
    ApplicationCommandOption: (
        ('option_type', 'type'),
        ('name', 'name'),
        ('name_localizations', 'name_localizations'),
        ('description', 'description'),
        ('description_localizations', 'description_localizations'),
        ('required', 'required'),
        ('choices', 'choices'),
        ('options', 'options'),
        ('channel_types', 'channel_types'),
        ('min_value', 'min_value'),
        ('max_value', 'max_value'),
        ('min_length', 'min_length'),
        ('max_length', 'max_length'),
        ('autocomplete', 'autocomplete'),
    ),
    ApplicationCommandOptionChoice: (
        ('name', 'name'),
        ('name_localizations', 'name_localizations'),
        ('value', 'value'),
    ),
}


def _serialize(value: Any) -> Any:  # noqa: ANN401
    match value:
        case BaseModel():
            return as_payload(value)
        case dict():
            return filter_missing(value)
        case list() | set() | tuple():
            return [
                _serialize(i)
                for i in value]
        case Enum():
            return value.value
        case _MissingType():
            return MISSING

    return value


def filter_missing(data: dict) -> dict:
    filtered = {}

    for k, v in data.items():
        if is_not_missing(value := _serialize(v)):
            filtered[k.value if isinstance(k, Enum) else k] = value

    return filtered


def as_payload(model: BaseModel) -> dict:
    """Render a model to its wire dict, omitting absent fields."""
    return filter_missing({
        key: getattr(model, attribute)
        for attribute, key in FIELDS[type(model)]
    })


def _dumps(data: Any, name: str) -> str:  # noqa: ANN401
    try:
        return dumps(data).decode()
    except JSONEncodeError as e:
        logfire.error(
            'failed to serialize {command_name}',
            command_name=name,
            _exc_info=e
        )
        raise SerializationError(str(e)) from e


def serialize(command: ApplicationCommand) -> str:
    """Render a validated command to compact JSON.

    Assumes `validate` has already passed; invalid input still renders,
    discord will just reject it.
    """
    return _dumps(as_payload(command), command.name)


def serialize_many(commands: Iterable[ApplicationCommand]) -> str:
    commands = list(commands)

    return _dumps(
        [as_payload(command) for command in commands],
        ', '.join(command.name for command in commands)
    )
