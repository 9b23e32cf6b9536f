"""Version triple value object, version parsing and numeric encoding.

A public API generation is identified by a (major, minor, patch) triple.
Parsing keeps missing components absent (``None``) so each call site can
choose its own defaulting policy; a triple used as a registry key is always
fully qualified via ``with_defaults()``.

Numeric Encoding:
    ``encode_version`` zero-pads each component to two digits and
    concatenates them as ``MMmmpp`` (1.0.1 -> 10001). Components above 99
    would collide, so the encoder refuses them with VersionEncodingError
    instead of widening the format.

Usage:
    from src.core.result import Success
    from src.domain.versioning import encode_version, parse_version

    result = parse_version("2.1")
    if isinstance(result, Success):
        triple = result.value.with_defaults()
        triple.canonical          # "2.1.0"
        encode_version(triple)    # 20100
"""

import re
from dataclasses import dataclass
from typing import Self

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success

# ASCII digits only; str.isdigit() would also accept other unicode digits.
_DIGITS = re.compile(r"[0-9]+")

MAX_ENCODABLE_COMPONENT = 99


class VersionEncodingError(ValueError):
    """Raised when a version component does not fit the two-digit encoding."""

    def __init__(self, component: str, value: int) -> None:
        """Initialize encoding error.

        Args:
            component: Name of the offending component (major/minor/patch).
            value: The out-of-range value.
        """
        super().__init__(
            f"Cannot encode {component}={value}: components must be "
            f"<= {MAX_ENCODABLE_COMPONENT} for the MMmmpp version number"
        )
        self.component = component
        self.value = value


@dataclass(frozen=True, slots=True)
class VersionTriple:
    """Immutable (major, minor, patch) version identifier.

    ``minor`` and ``patch`` may be absent; absence is distinct from zero.

    Attributes:
        major: Major version (non-negative).
        minor: Minor version, or None when not supplied.
        patch: Patch version, or None when not supplied.

    Raises:
        ValueError: If a component is negative or not an int, or if patch is
            given without minor.
    """

    major: int
    minor: int | None = None
    patch: int | None = None

    def __post_init__(self) -> None:
        """Validate components."""
        for component, value in (
            ("major", self.major),
            ("minor", self.minor),
            ("patch", self.patch),
        ):
            if value is None and component != "major":
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Version {component} must be an int: {value!r}")
            if value < 0:
                raise ValueError(f"Version {component} cannot be negative: {value}")

        if self.patch is not None and self.minor is None:
            raise ValueError("Version patch requires a minor component")

    @property
    def is_complete(self) -> bool:
        """Whether all three components are present."""
        return self.minor is not None and self.patch is not None

    def with_defaults(self) -> Self:
        """Return a fully qualified triple (missing components become 0)."""
        if self.is_complete:
            return self
        return type(self)(self.major, self.minor or 0, self.patch or 0)

    @property
    def canonical(self) -> str:
        """Canonical "major.minor.patch" string (missing components as 0)."""
        full = self.with_defaults()
        return f"{full.major}.{full.minor}.{full.patch}"

    def __str__(self) -> str:
        """Render only the components that are present ("1", "1.2", "1.2.3")."""
        return ".".join(
            str(part) for part in (self.major, self.minor, self.patch) if part is not None
        )


def _invalid(text: str) -> Failure[ValidationError]:
    return Failure(
        error=ValidationError(
            code=ErrorCode.INVALID_VERSION,
            message=f'invalid version "{text}"',
            field="version",
        )
    )


def parse_version(text: str) -> Result[VersionTriple, ValidationError]:
    """Parse a dotted numeric version string.

    The text is split on its first and second "." only, giving one to three
    segments. Each segment must consist of ASCII digits. Anything past the
    second dot stays part of the patch segment, so "1.2.3.4" fails because
    "3.4" is not a number.

    Args:
        text: Version text such as "1", "1.2" or "1.2.3".

    Returns:
        Success(VersionTriple) with absent components left as None, or
        Failure(ValidationError) with code INVALID_VERSION.

    Example:
        >>> parse_version("1.2")
        Success(value=VersionTriple(major=1, minor=2, patch=None))
        >>> isinstance(parse_version("a.b"), Failure)
        True
    """
    if not isinstance(text, str):
        return _invalid(str(text))

    segments = text.split(".", 2)
    if not all(_DIGITS.fullmatch(segment) for segment in segments):
        return _invalid(text)

    numbers = [int(segment) for segment in segments]
    numbers.extend([None] * (3 - len(numbers)))
    major, minor, patch = numbers
    return Success(value=VersionTriple(major, minor, patch))  # type: ignore[arg-type]


def encode_version(triple: VersionTriple) -> int:
    """Encode a version as the integer ``MMmmpp``.

    Args:
        triple: Version to encode; missing components count as 0.

    Returns:
        Encoded version number (e.g. 1.0.1 -> 10001, 2.0.0 -> 20000).

    Raises:
        VersionEncodingError: If any component is greater than 99.
    """
    full = triple.with_defaults()
    for component, value in (
        ("major", full.major),
        ("minor", full.minor),
        ("patch", full.patch),
    ):
        if value > MAX_ENCODABLE_COMPONENT:  # type: ignore[operator]
            raise VersionEncodingError(component, value)  # type: ignore[arg-type]

    return int(f"{full.major:02d}{full.minor:02d}{full.patch:02d}")
