"""Constructor functions for schema descriptors.

Each constructor takes the variant's structural argument (if any) and
keyword options overriding the documented defaults::

    User = object({
        "username": string(min=1, max=32, pattern=r"^[a-z0-9_]+$"),
        "age": number(min=0, integer=True, required=False),
        "roles": array(value(["admin", "member"]), min=1),
    })

Arguments are stored as given. Inconsistent options such as ``min > max``
are accepted here and simply make every value fail at validation time.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from structval.models.schema import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    Schema,
    StringSchema,
    ValueSchema,
)

__all__ = ["array", "boolean", "number", "object", "string", "value"]


def boolean(*, required: bool = False, nullable: bool = False) -> BooleanSchema:
    return BooleanSchema(required=required, nullable=nullable)


def string(
    *,
    min: int = 0,
    max: int = MAX_SAFE_INTEGER,
    pattern: str | re.Pattern[str] | None = None,
    required: bool = True,
    nullable: bool = False,
) -> StringSchema:
    return StringSchema(min=min, max=max, pattern=pattern, required=required, nullable=nullable)


def number(
    *,
    min: float = MIN_SAFE_INTEGER,
    max: float = MAX_SAFE_INTEGER,
    integer: bool = False,
    required: bool = True,
    nullable: bool = False,
) -> NumberSchema:
    return NumberSchema(min=min, max=max, integer=integer, required=required, nullable=nullable)


def array(
    schema: Schema,
    *,
    min: int = 0,
    max: int = MAX_SAFE_INTEGER,
    required: bool = True,
    nullable: bool = False,
) -> ArraySchema:
    return ArraySchema(schema=schema, min=min, max=max, required=required, nullable=nullable)


def object(
    properties: Mapping[str, Schema],
    *,
    required: bool = True,
    nullable: bool = False,
) -> ObjectSchema:
    """Describe a mapping. The copy of ``properties`` keeps insertion order."""
    return ObjectSchema(
        properties=MappingProxyType(dict(properties)),
        required=required,
        nullable=nullable,
    )


def value(
    values: Iterable[Any],
    *,
    required: bool = True,
    nullable: bool = False,
) -> ValueSchema:
    return ValueSchema(values=tuple(values), required=required, nullable=nullable)
