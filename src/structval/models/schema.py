"""Immutable schema descriptors. One frozen dataclass per variant of the union."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Any, ClassVar

# Bounds used when a range is left unspecified. An infinite number must
# still fall outside the default range.
MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -(2**53 - 1)


class SchemaKind(StrEnum):
    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"
    ARRAY = "array"
    OBJECT = "object"
    VALUE = "value"


class _Missing(Enum):
    """Marker for a value that is absent, as opposed to ``None`` (null)."""

    MISSING = "MISSING"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing.MISSING


@dataclass(frozen=True)
class BooleanSchema:
    """A ``bool`` value."""

    kind: ClassVar[SchemaKind] = SchemaKind.BOOLEAN

    required: bool = False
    nullable: bool = False


@dataclass(frozen=True)
class StringSchema:
    """A ``str`` with inclusive length bounds and an optional search pattern."""

    kind: ClassVar[SchemaKind] = SchemaKind.STRING

    min: int = 0
    max: int = MAX_SAFE_INTEGER
    pattern: str | re.Pattern[str] | None = None
    required: bool = True
    nullable: bool = False


@dataclass(frozen=True)
class NumberSchema:
    """A real number with inclusive bounds, optionally restricted to whole values."""

    kind: ClassVar[SchemaKind] = SchemaKind.NUMBER

    min: float = MIN_SAFE_INTEGER
    max: float = MAX_SAFE_INTEGER
    integer: bool = False
    required: bool = True
    nullable: bool = False


@dataclass(frozen=True)
class ArraySchema:
    """A list or tuple whose every element matches ``schema``."""

    kind: ClassVar[SchemaKind] = SchemaKind.ARRAY

    schema: Schema
    min: int = 0
    max: int = MAX_SAFE_INTEGER
    required: bool = True
    nullable: bool = False


@dataclass(frozen=True)
class ObjectSchema:
    """A mapping with declared properties, checked in declaration order.

    Keys present on the value but not declared here are ignored.
    """

    kind: ClassVar[SchemaKind] = SchemaKind.OBJECT

    properties: Mapping[str, Schema]
    required: bool = True
    nullable: bool = False


@dataclass(frozen=True)
class ValueSchema:
    """One of a fixed set of literal values."""

    kind: ClassVar[SchemaKind] = SchemaKind.VALUE

    values: tuple[Any, ...]
    required: bool = True
    nullable: bool = False


Schema = BooleanSchema | StringSchema | NumberSchema | ArraySchema | ObjectSchema | ValueSchema
