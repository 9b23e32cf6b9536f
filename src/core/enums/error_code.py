"""Error codes (machine-readable) for the public API facade.

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*)
- Resolution errors (UNKNOWN_*, *_NOT_FOUND)
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_VERSION = "invalid_version"

    # Resolution errors
    UNKNOWN_VERSION = "unknown_version"
    API_NOT_FOUND = "api_not_found"
