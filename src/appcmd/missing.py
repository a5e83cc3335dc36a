from __future__ import annotations

from typing import Any, Literal, TypeGuard, TYPE_CHECKING

from pydantic_core import CoreSchema, core_schema

if TYPE_CHECKING:
    from pydantic import GetJsonSchemaHandler, GetCoreSchemaHandler
    from pydantic.json_schema import JsonSchemaValue


__all__ = (
    'MISSING',
    'Optional',
    '_MissingType',
    'is_not_missing',
)


class _MissingType:
    """Marks a field that was never given; rendered by leaving the key out."""

    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)

        return cls._instance

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return 'MISSING'

    def __reduce__(self) -> str:
        return 'MISSING'

    def __copy__(self) -> _MissingType:
        return self

    def __deepcopy__(
        self,
        _: Any  # noqa: ANN401
    ) -> _MissingType:
        return self

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,  # noqa: ANN401
        _handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        # ? json input never produces MISSING, only an omitted key does
        return core_schema.json_or_python_schema(
            json_schema=core_schema.none_schema(),
            python_schema=core_schema.is_instance_schema(cls),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda _: None
            )
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {'type': 'null'}


def is_not_missing[T](value: T | _MissingType) -> TypeGuard[T]:
    return value is not MISSING


MISSING = _MissingType()

type Optional[T] = T | _MissingType
"""A field that may be left out of the wire payload entirely"""
