"""Public API facade error types.

Returned (never raised) by version and name queries against the
compatibility registry, bundles and versioned proxies.

Messages keep the exact wording hosts and plugins grep for:
    invalid <product> version "<version>"
    <product> "<name>" (<version>) was not found

Usage:
    from src.domain.errors import UnknownVersionError
    from src.core.result import Failure

    return Failure(error=UnknownVersionError.for_version("host public api", "9.9.9"))
"""

from dataclasses import dataclass
from typing import Self

from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError


@dataclass(frozen=True, slots=True, kw_only=True)
class PublicApiError(DomainError):
    """Base class for public API query failures.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        details: Additional context.
    """

    pass  # Inherits all fields from DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class UnknownVersionError(PublicApiError):
    """The requested version is not registered under any key.

    Attributes:
        requested: The version representation the caller supplied.
    """

    requested: str

    @classmethod
    def for_version(cls, product_name: str, requested: str) -> Self:
        """Build the error for an unregistered version key.

        Args:
            product_name: Display name of the public API product.
            requested: Version representation that was looked up.
        """
        return cls(
            code=ErrorCode.UNKNOWN_VERSION,
            message=f'invalid {product_name} version "{requested}"',
            requested=requested,
        )

    @classmethod
    def nothing_registered(cls, product_name: str) -> Self:
        """Build the error for a latest-version query on an empty registry."""
        return cls(
            code=ErrorCode.UNKNOWN_VERSION,
            message=f"no {product_name} version has been registered",
            requested="latest",
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiNotFoundError(NotFoundError, PublicApiError):
    """The version is known but no API was resolved for the name.

    Attributes:
        resource_type: Always "public_api".
        resource_id: The API name.
        version: Canonical version of the bundle that lacks the name.
    """

    version: str

    @classmethod
    def for_name(cls, product_name: str, name: str, version: str) -> Self:
        """Build the error for a name missing from a bundle.

        Args:
            product_name: Display name of the public API product.
            name: API name that was requested.
            version: Canonical version of the bundle that was searched.
        """
        return cls(
            code=ErrorCode.API_NOT_FOUND,
            message=f'{product_name} "{name}" ({version}) was not found',
            resource_type="public_api",
            resource_id=name,
            version=version,
        )
