"""Unit tests for VersionTriple, parse_version and encode_version.

Tests cover:
- Parsing 1, 2 and 3 segment versions (absent parts stay None)
- Rejection of non-digit, empty and extra segments
- VersionTriple validation and defaulting
- MMmmpp encoding and its two-digit precondition

Architecture:
- Unit tests for domain value object (no dependencies)
"""

import pytest

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Success
from src.domain.versioning import (
    VersionEncodingError,
    VersionTriple,
    encode_version,
    parse_version,
)


# =============================================================================
# Parsing
# =============================================================================


@pytest.mark.unit
class TestParseVersion:
    """Test parse_version()."""

    def test_parses_full_triple(self):
        """Test "1.2.3" parses to (1, 2, 3)."""
        result = parse_version("1.2.3")

        assert isinstance(result, Success)
        assert result.value == VersionTriple(1, 2, 3)

    def test_parses_major_minor_leaving_patch_absent(self):
        """Test "1.2" parses to (1, 2, None)."""
        result = parse_version("1.2")

        assert isinstance(result, Success)
        assert result.value == VersionTriple(1, 2, None)
        assert result.value.patch is None

    def test_parses_major_only(self):
        """Test "5" parses to (5, None, None)."""
        result = parse_version("5")

        assert isinstance(result, Success)
        assert (result.value.major, result.value.minor, result.value.patch) == (5, None, None)

    def test_leading_zeros_are_digits(self):
        """Test zero-padded segments parse as numbers."""
        result = parse_version("01.02.03")

        assert isinstance(result, Success)
        assert result.value == VersionTriple(1, 2, 3)

    @pytest.mark.parametrize(
        "text",
        ["a.b", "1.x", "", "1.", ".1", "1..2", "-1", "1.2.-3", " 1.2", "1.2 ", "v1", "1.2.3\n"],
    )
    def test_rejects_non_digit_segments(self, text):
        """Test any non-digit or empty segment makes the whole parse fail."""
        result = parse_version(text)

        assert isinstance(result, Failure)

    def test_extra_segment_fails_digit_check(self):
        """Test "1.2.3.4" is invalid: the patch segment is "3.4"."""
        result = parse_version("1.2.3.4")

        assert isinstance(result, Failure)

    def test_rejects_non_ascii_digits(self):
        """Test unicode digits are not accepted."""
        result = parse_version("١.2")  # ARABIC-INDIC DIGIT ONE

        assert isinstance(result, Failure)

    def test_failure_carries_validation_error(self):
        """Test failure is a ValidationError quoting the input."""
        result = parse_version("a.b")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_VERSION
        assert result.error.field == "version"
        assert '"a.b"' in result.error.message

    def test_non_string_input_fails(self):
        """Test non-str input is reported as invalid, not raised."""
        result = parse_version(None)  # type: ignore[arg-type]

        assert isinstance(result, Failure)


# =============================================================================
# VersionTriple
# =============================================================================


@pytest.mark.unit
class TestVersionTriple:
    """Test VersionTriple value object."""

    def test_with_defaults_fills_zeros(self):
        """Test missing components default to 0."""
        assert VersionTriple(2).with_defaults() == VersionTriple(2, 0, 0)
        assert VersionTriple(2, 1).with_defaults() == VersionTriple(2, 1, 0)

    def test_with_defaults_returns_self_when_complete(self):
        """Test complete triple is returned unchanged."""
        triple = VersionTriple(1, 2, 3)

        assert triple.with_defaults() is triple

    def test_absence_is_distinct_from_zero(self):
        """Test (1, None, None) != (1, 0, 0)."""
        assert VersionTriple(1) != VersionTriple(1, 0, 0)
        assert not VersionTriple(1).is_complete
        assert VersionTriple(1, 0, 0).is_complete

    def test_str_renders_present_components(self):
        """Test str() only renders supplied components."""
        assert str(VersionTriple(1)) == "1"
        assert str(VersionTriple(1, 2)) == "1.2"
        assert str(VersionTriple(1, 2, 3)) == "1.2.3"

    def test_canonical_is_fully_qualified(self):
        """Test canonical form always has three components."""
        assert VersionTriple(1).canonical == "1.0.0"
        assert VersionTriple(1, 2).canonical == "1.2.0"

    def test_rejects_negative_component(self):
        """Test negative components raise ValueError."""
        with pytest.raises(ValueError, match="negative"):
            VersionTriple(1, -1)

    def test_rejects_bool_component(self):
        """Test bools are not accepted as ints."""
        with pytest.raises(ValueError, match="int"):
            VersionTriple(True)  # type: ignore[arg-type]

    def test_rejects_patch_without_minor(self):
        """Test patch requires minor."""
        with pytest.raises(ValueError, match="minor"):
            VersionTriple(1, None, 3)

    def test_is_immutable(self):
        """Test triple cannot be modified."""
        triple = VersionTriple(1, 2, 3)

        with pytest.raises(AttributeError):
            triple.major = 5  # type: ignore[misc]


# =============================================================================
# Encoding
# =============================================================================


@pytest.mark.unit
class TestEncodeVersion:
    """Test encode_version()."""

    @pytest.mark.parametrize(
        ("triple", "expected"),
        [
            (VersionTriple(1, 0, 0), 10000),
            (VersionTriple(1, 0, 1), 10001),
            (VersionTriple(2, 0, 0), 20000),
            (VersionTriple(0, 0, 1), 1),
            (VersionTriple(12, 34, 56), 123456),
            (VersionTriple(99, 99, 99), 999999),
        ],
    )
    def test_encodes_two_digit_components(self, triple, expected):
        """Test MMmmpp encoding."""
        assert encode_version(triple) == expected

    def test_missing_components_encode_as_zero(self):
        """Test partial triples are defaulted before encoding."""
        assert encode_version(VersionTriple(3)) == 30000

    @pytest.mark.parametrize(
        ("triple", "component"),
        [
            (VersionTriple(100, 0, 0), "major"),
            (VersionTriple(1, 100, 0), "minor"),
            (VersionTriple(1, 0, 100), "patch"),
        ],
    )
    def test_rejects_components_above_99(self, triple, component):
        """Test the encoding precondition is enforced, not widened."""
        with pytest.raises(VersionEncodingError) as exc_info:
            encode_version(triple)

        assert exc_info.value.component == component
        assert exc_info.value.value == 100
        assert isinstance(exc_info.value, ValueError)
