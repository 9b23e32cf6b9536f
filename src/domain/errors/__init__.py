"""Domain errors package.

Usage:
    from src.domain.errors import ApiNotFoundError, PublicApiError, UnknownVersionError
"""

from src.domain.errors.public_api_error import (
    ApiNotFoundError,
    PublicApiError,
    UnknownVersionError,
)

__all__ = [
    "ApiNotFoundError",
    "PublicApiError",
    "UnknownVersionError",
]
