"""Schema descriptors and error models for structval."""

from structval.models.errors import (
    ErrorKind,
    ErrorTree,
    SchemaError,
    SourceSpan,
    ValidationResult,
    Violation,
)
from structval.models.schema import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    MISSING,
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    Schema,
    SchemaKind,
    StringSchema,
    ValueSchema,
)

__all__ = [
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    "MISSING",
    "ArraySchema",
    "BooleanSchema",
    "ErrorKind",
    "ErrorTree",
    "NumberSchema",
    "ObjectSchema",
    "Schema",
    "SchemaError",
    "SchemaKind",
    "SourceSpan",
    "StringSchema",
    "ValidationResult",
    "ValueSchema",
    "Violation",
]
