"""structval: declarative validation of structured values.

Build a schema once with the constructors in :mod:`structval.schema`, then
validate any number of values against it::

    from structval import schema as s
    from structval import validate

    User = s.object({"username": s.string(min=1, max=32)})
    errors = validate(User, "User", {"username": ""})
"""

from structval.exceptions import (
    DocumentSafetyError,
    SchemaDefinitionError,
    StructvalError,
    ValueRejectedError,
)
from structval.loader import DocumentLoader, SourceMap
from structval.models.errors import (
    ErrorKind,
    ErrorTree,
    SchemaError,
    SourceSpan,
    ValidationResult,
    Violation,
)
from structval.models.schema import MISSING, Schema, SchemaKind
from structval.report import count_errors, flatten, has_errors, iter_violations
from structval.schema import array, boolean, number, object, string, value
from structval.validator import ROOT_KEY, SchemaValidator, add_error, validate

__version__ = "0.1.0"

__all__ = [
    "MISSING",
    "ROOT_KEY",
    "DocumentLoader",
    "DocumentSafetyError",
    "ErrorKind",
    "ErrorTree",
    "Schema",
    "SchemaDefinitionError",
    "SchemaError",
    "SchemaKind",
    "SchemaValidator",
    "SourceMap",
    "SourceSpan",
    "StructvalError",
    "ValidationResult",
    "ValueRejectedError",
    "Violation",
    "add_error",
    "array",
    "boolean",
    "count_errors",
    "flatten",
    "has_errors",
    "iter_violations",
    "number",
    "object",
    "string",
    "validate",
    "value",
]
