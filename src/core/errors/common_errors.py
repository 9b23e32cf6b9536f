"""Common error classes used across all layers.

These are generic errors that don't belong to any specific area of the
facade. Specialised errors (unknown versions, missing APIs) derive from them.

Error Types:
- ValidationError: Input validation failures (e.g. malformed version text)
- NotFoundError: Resource not found

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(ValidationError(
        code=ErrorCode.INVALID_VERSION,
        message='invalid version "1.x"',
        field="version",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (public_api, ...).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str
