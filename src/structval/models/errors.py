"""Structured error models: the error tree and its flattened form."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class ErrorKind(StrEnum):
    KEY_ERROR = "KEY_ERROR"
    TYPE_ERROR = "TYPE_ERROR"
    RANGE_ERROR = "RANGE_ERROR"
    PATTERN_ERROR = "PATTERN_ERROR"
    NUMBER_ERROR = "NUMBER_ERROR"
    VALUE_ERROR = "VALUE_ERROR"
    ARRAY_ERROR = "ARRAY_ERROR"
    OBJECT_ERROR = "OBJECT_ERROR"
    DEPTH_ERROR = "DEPTH_ERROR"

    @property
    def is_aggregate(self) -> bool:
        return self in (ErrorKind.ARRAY_ERROR, ErrorKind.OBJECT_ERROR)


class SchemaError(BaseModel):
    """A single violation recorded under one key of an error tree.

    Aggregate kinds (``ARRAY_ERROR``, ``OBJECT_ERROR``) carry the child
    tree in ``errors``.
    """

    type: ErrorKind
    message: str
    errors: dict[str, list[SchemaError]] | None = None


# Key (property name or decimal array index) -> errors at that key, in check order.
ErrorTree = dict[str, list[SchemaError]]


class ValidationResult(BaseModel):
    """Result of validating one value."""

    valid: bool
    errors: ErrorTree = {}


class SourceSpan(BaseModel):
    """Points to a location in a loaded document."""

    file: str
    line: int
    column: int


class Violation(BaseModel):
    """One error from a tree, addressed by its full path."""

    path: str
    type: ErrorKind
    message: str
    span: SourceSpan | None = None
