"""Recursive validation of a value against a schema descriptor tree."""

from __future__ import annotations

import logging
import math
import numbers
import re
from collections.abc import Mapping
from typing import Any, assert_never

from structval.exceptions import SchemaDefinitionError, ValueRejectedError
from structval.loader import SourceMap
from structval.models.errors import ErrorKind, ErrorTree, SchemaError, ValidationResult, Violation
from structval.models.schema import (
    MISSING,
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    Schema,
    StringSchema,
    ValueSchema,
)
from structval.report import count_errors, flatten
from structval.settings import get_settings

logger = logging.getLogger("structval.validator")

ROOT_KEY = "$"

_DESCRIPTORS = (BooleanSchema, StringSchema, NumberSchema, ArraySchema, ObjectSchema, ValueSchema)


def add_error(
    errors: ErrorTree,
    kind: ErrorKind,
    message: str,
    key: str,
    nested: ErrorTree | None = None,
) -> SchemaError:
    """Append an error under ``key``, creating the key's list on first use."""
    entry = SchemaError(type=kind, message=message, errors=nested)
    errors.setdefault(key, []).append(entry)
    return entry


def validate(
    schema: Schema,
    key: str,
    value: Any,
    errors: ErrorTree | None = None,
    *,
    max_depth: int | None = None,
) -> ErrorTree:
    """Validate ``value`` against ``schema`` and record violations under ``key``.

    Every violation in the value is reported, not only the first one.
    Errors are added to ``errors`` when given, otherwise to a new tree;
    the tree is returned either way and is empty when the value conforms::

        errors = validate(User, "User", {"username": "Bob"})

    ``max_depth`` bounds array/object nesting (default from settings);
    a container at that depth gets a ``DEPTH_ERROR`` instead of having
    its children checked.

    Raises ``SchemaDefinitionError`` if the schema tree contains anything
    other than a descriptor.
    """
    if errors is None:
        errors = {}
    if max_depth is None:
        max_depth = get_settings().max_depth
    _validate(schema, key, value, errors, 0, max_depth)
    return errors


def _validate(
    schema: Schema,
    key: str,
    value: Any,
    errors: ErrorTree,
    depth: int,
    max_depth: int,
) -> None:
    if not isinstance(schema, _DESCRIPTORS):
        raise SchemaDefinitionError(
            f"Unsupported schema descriptor at key '{key}': {type(schema).__name__}"
        )
    if value is MISSING:
        if schema.required:
            add_error(errors, ErrorKind.KEY_ERROR, "Key is required.", key)
        return
    if value is None and schema.nullable:
        return

    match schema:
        case BooleanSchema():
            if not isinstance(value, bool):
                add_error(errors, ErrorKind.TYPE_ERROR, "Not a boolean.", key)

        case StringSchema(min=lo, max=hi, pattern=pattern):
            if not isinstance(value, str):
                add_error(errors, ErrorKind.TYPE_ERROR, "Not a string.", key)
                return
            if not lo <= len(value) <= hi:
                add_error(
                    errors, ErrorKind.RANGE_ERROR, f"String is out of range. ({lo}-{hi})", key
                )
            if pattern is not None and re.search(pattern, value) is None:
                add_error(errors, ErrorKind.PATTERN_ERROR, "Pattern test failed.", key)

        case NumberSchema(min=lo, max=hi, integer=integer):
            if not _is_number(value):
                add_error(errors, ErrorKind.TYPE_ERROR, "Not a number.", key)
                return
            if _is_nan(value):
                add_error(errors, ErrorKind.NUMBER_ERROR, "Not a valid number (NaN).", key)
                return
            if integer and not _is_whole(value):
                add_error(errors, ErrorKind.NUMBER_ERROR, "Not an integer.", key)
            if not lo <= value <= hi:
                add_error(
                    errors, ErrorKind.RANGE_ERROR, f"Number is out of range. ({lo}-{hi})", key
                )

        case ArraySchema(schema=item_schema, min=lo, max=hi):
            if not isinstance(value, (list, tuple)):
                add_error(errors, ErrorKind.TYPE_ERROR, "Not an array.", key)
                return
            if not lo <= len(value) <= hi:
                add_error(
                    errors, ErrorKind.RANGE_ERROR, f"Array is out of range. ({lo}-{hi})", key
                )
            children = [(str(i), item_schema, item) for i, item in enumerate(value)]
            _descend(errors, key, ErrorKind.ARRAY_ERROR, children, depth, max_depth)

        case ObjectSchema(properties=properties):
            if not isinstance(value, Mapping):
                add_error(errors, ErrorKind.TYPE_ERROR, "Not an object.", key)
                return
            children = [
                (name, prop_schema, value.get(name, MISSING))
                for name, prop_schema in properties.items()
            ]
            _descend(errors, key, ErrorKind.OBJECT_ERROR, children, depth, max_depth)

        case ValueSchema(values=values):
            if not any(_strict_equals(allowed, value) for allowed in values):
                add_error(errors, ErrorKind.VALUE_ERROR, "Value mismatch.", key)

        case _:
            assert_never(schema)


def _descend(
    errors: ErrorTree,
    key: str,
    kind: ErrorKind,
    children: list[tuple[str, Schema, Any]],
    depth: int,
    max_depth: int,
) -> None:
    """Validate children into a tree owned by this node; attach it only if non-empty."""
    if not children:
        return
    if depth >= max_depth:
        logger.warning("Nesting depth limit (%d) reached at key '%s'", max_depth, key)
        add_error(
            errors, ErrorKind.DEPTH_ERROR, f"Maximum nesting depth exceeded. ({max_depth})", key
        )
        return
    nested: ErrorTree = {}
    for child_key, child_schema, child_value in children:
        _validate(child_schema, child_key, child_value, nested, depth + 1, max_depth)
    if nested:
        add_error(errors, kind, "An error occurred.", key, nested=nested)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_nan(value: Any) -> bool:
    # No float conversion: huge ints and fractions would overflow.
    return bool(value != value)


def _is_whole(value: Any) -> bool:
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, numbers.Rational):
        return value.denominator == 1
    return math.isfinite(value) and value == math.floor(value)


def _strict_equals(expected: Any, actual: Any) -> bool:
    """Equality without cross-type coercion.

    Booleans only equal booleans, numbers only equal numbers (``1 == 1.0``,
    NaN equals NaN), and nothing else equals a number.
    """
    if isinstance(expected, bool) or isinstance(actual, bool):
        return isinstance(expected, bool) and isinstance(actual, bool) and expected == actual
    if _is_number(expected) and _is_number(actual):
        return expected == actual or (_is_nan(expected) and _is_nan(actual))
    if _is_number(expected) or _is_number(actual):
        return False
    return bool(expected == actual)


class SchemaValidator:
    """Validates values against schemas and packages the outcome.

    Thin stateless facade over :func:`validate`; one instance can be shared
    across threads since every call builds its own error tree.
    """

    def __init__(self, max_depth: int | None = None, root_key: str = ROOT_KEY) -> None:
        self.max_depth = max_depth if max_depth is not None else get_settings().max_depth
        self.root_key = root_key

    def validate(self, schema: Schema, value: Any) -> ValidationResult:
        errors = validate(schema, self.root_key, value, max_depth=self.max_depth)
        logger.debug(
            "Validated value against %s schema: %d error(s)",
            schema.kind,
            count_errors(errors),
        )
        return ValidationResult(valid=not errors, errors=errors)

    def is_valid(self, schema: Schema, value: Any) -> bool:
        return not validate(schema, self.root_key, value, max_depth=self.max_depth)

    def violations(
        self, schema: Schema, value: Any, source_map: SourceMap | None = None
    ) -> list[Violation]:
        """Validate and return every leaf error with its full path."""
        errors = validate(schema, self.root_key, value, max_depth=self.max_depth)
        return flatten(errors, source_map=source_map)

    def ensure_valid(self, schema: Schema, value: Any) -> None:
        """Raise ``ValueRejectedError`` unless ``value`` conforms to ``schema``."""
        errors = validate(schema, self.root_key, value, max_depth=self.max_depth)
        if errors:
            raise ValueRejectedError(errors, flatten(errors))
