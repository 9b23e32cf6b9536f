"""Result types for railway-oriented programming.

Version queries, name lookups and version parsing can all fail in ordinary,
expected ways (an unknown version, a name that was never resolved). Those
outcomes are returned as data instead of being raised, so callers can never
be aborted by a bad query.

Usage:
    from src.domain.versioning import parse_version

    result = parse_version("1.2")
    match result:
        case Success(value=triple):
            print(triple.canonical)  # "1.2.0"
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
