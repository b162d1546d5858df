"""Exception hierarchy for structval.

Data violations are never raised; they are returned as an error tree.
These exceptions cover programmer errors, unsafe documents and the
opt-in ``SchemaValidator.ensure_valid`` check.
"""

from __future__ import annotations

from structval.models.errors import ErrorTree, Violation


class StructvalError(Exception):
    """Base class for all structval exceptions."""


class SchemaDefinitionError(StructvalError, TypeError):
    """Raised when a schema tree contains something that is not a descriptor."""


class DocumentSafetyError(StructvalError):
    """Raised when a document violates loader safety limits.

    Distinct from parse errors: these indicate potentially malicious input
    (anchor expansion, oversized documents, excessive node counts).
    """


class ValueRejectedError(StructvalError, ValueError):
    """Raised by ``ensure_valid`` when a value does not conform to its schema."""

    def __init__(self, errors: ErrorTree, violations: list[Violation]) -> None:
        self.errors = errors
        self.violations = violations
        shown = "; ".join(f"{v.path}: {v.message}" for v in violations[:5])
        more = f" (+{len(violations) - 5} more)" if len(violations) > 5 else ""
        super().__init__(f"Value failed validation with {len(violations)} error(s): {shown}{more}")
