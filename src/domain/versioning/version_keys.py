"""Registry key conversions.

The compatibility registry stores every bundle under several
representations of its version. All of them are normalized to one key
type, a string, so lookups never depend on whether the caller passed an
int or a str.

Key Forms (version 1.0.1):
    "1.0.1"   canonical triple
    "10001"   encoded version number
    "1"       bare major (int 1 and str "1" both normalize here)
    "1.0"     major.minor

Encoded numbers share the integer key space with bare majors, exactly as
an int-keyed table would: v(10001) finds version 1.0.1.
"""

from src.domain.versioning.version_triple import VersionTriple, encode_version


def major_key(major: int) -> str:
    """Key for a bare major version."""
    return str(major)


def major_minor_key(major: int, minor: int) -> str:
    """Key for a "major.minor" version."""
    return f"{major}.{minor}"


def triple_key(major: int, minor: int, patch: int) -> str:
    """Key for a fully qualified "major.minor.patch" version."""
    return f"{major}.{minor}.{patch}"


def code_key(code: int) -> str:
    """Key for an encoded ``MMmmpp`` version number."""
    return str(code)


def normalize_key(key: int | str) -> str:
    """Normalize a caller-supplied key to the registry's key type.

    Args:
        key: Int (major or encoded number) or str in any key form.

    Returns:
        Normalized string key.

    Raises:
        ValueError: If key is a bool, a negative int, or neither int nor str.
    """
    if isinstance(key, bool) or not isinstance(key, int | str):
        raise ValueError(f"Unsupported version key type: {type(key).__name__}")
    if isinstance(key, int):
        if key < 0:
            raise ValueError(f"Version key cannot be negative: {key}")
        return str(key)
    return key.strip()


def registration_keys(triple: VersionTriple) -> tuple[str, ...]:
    """All keys a bundle for ``triple`` is registered under.

    Order: canonical, encoded number, major int, stringified major,
    major.minor. The int and str major normalize to the same key, so the
    result is de-duplicated while keeping that order.

    Raises:
        VersionEncodingError: If a component does not fit the encoding.
    """
    full = triple.with_defaults()
    keys = (
        triple_key(full.major, full.minor, full.patch),  # type: ignore[arg-type]
        code_key(encode_version(full)),
        major_key(full.major),
        normalize_key(str(full.major)),
        major_minor_key(full.major, full.minor),  # type: ignore[arg-type]
    )
    return tuple(dict.fromkeys(keys))


def query_key(
    major: int | None = None,
    minor: int | None = None,
    patch: int | None = None,
) -> str | None:
    """Most specific key for a version query.

    Patch only counts when minor is given, and minor only when major is
    given. ``None`` means the caller asked for the latest version.

    Example:
        >>> query_key(1, 0, 1)
        '1.0.1'
        >>> query_key(1, None, 5)
        '1'
        >>> query_key() is None
        True
    """
    if major is None:
        return None
    if minor is None:
        return normalize_key(major)
    if patch is None:
        return major_minor_key(major, minor)
    return triple_key(major, minor, patch)
