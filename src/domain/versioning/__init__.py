"""Version parsing, encoding and registry key conversion.

Usage:
    from src.domain.versioning import VersionTriple, parse_version, registration_keys
"""

from src.domain.versioning.version_keys import (
    code_key,
    major_key,
    major_minor_key,
    normalize_key,
    query_key,
    registration_keys,
    triple_key,
)
from src.domain.versioning.version_triple import (
    MAX_ENCODABLE_COMPONENT,
    VersionEncodingError,
    VersionTriple,
    encode_version,
    parse_version,
)

__all__ = [
    "MAX_ENCODABLE_COMPONENT",
    "VersionEncodingError",
    "VersionTriple",
    "code_key",
    "encode_version",
    "major_key",
    "major_minor_key",
    "normalize_key",
    "parse_version",
    "query_key",
    "registration_keys",
    "triple_key",
]
