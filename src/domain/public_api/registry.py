"""Compatibility registry - every addressable version of the public API.

Each registered bundle is stored under five representations of its version
(canonical triple, encoded number, bare major as int and as str, and
"major.minor"), all normalized to string keys, so any of them resolves with
one dict read.

Registration Policy:
    - Registering only adds or overwrites keys. An earlier bundle keeps its
      own canonical key even after a later version takes over its major and
      major.minor keys.
    - The latest pointer always moves to the most recently registered
      bundle. Declaration order wins over numeric order: registering 2.0.0
      then 1.0.0 makes 1.0.0 the latest.
    - Registration happens once, sequentially, at startup. ``freeze()`` ends
      that phase; afterwards the registry is read-only and safe to share.

Usage:
    registry.v()          # latest bundle
    registry.v(1)         # most recently registered 1.x bundle
    registry.v(1, 0)      # most recently registered 1.0.x bundle
    registry.v(1, 0, 0)   # exactly 1.0.0
    registry.lookup(10001)  # bundle for 1.0.1 (encoded number)
"""

from __future__ import annotations

from collections.abc import Iterator

from src.core.result import Failure, Result, Success
from src.domain.errors import PublicApiError, UnknownVersionError
from src.domain.public_api.bundle import ApiBundle
from src.domain.versioning import normalize_key, parse_version, query_key, registration_keys


class RegistryFrozenError(RuntimeError):
    """Raised when registering a bundle after startup has completed."""


class CompatibilityRegistry:
    """Multi-keyed, append-only map from version keys to API bundles.

    Attributes:
        product_name: Display name used in error messages.
    """

    def __init__(self, *, product_name: str) -> None:
        """Initialize an empty registry.

        Args:
            product_name: Display name of the public API ("host public api").
        """
        self.product_name = product_name
        self._bundles: dict[str, ApiBundle] = {}
        self._registered: list[ApiBundle] = []
        self._latest: ApiBundle | None = None
        self._frozen = False

    # =========================================================================
    # Startup (write) phase
    # =========================================================================

    def register(self, bundle: ApiBundle) -> tuple[str, ...]:
        """Install a bundle under all of its version keys and make it latest.

        Args:
            bundle: Bundle produced for one declared version.

        Returns:
            The keys the bundle was installed under.

        Raises:
            RegistryFrozenError: If called after freeze().
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register {self.product_name} {bundle.sdk_version}: "
                "registry is frozen"
            )

        keys = registration_keys(bundle.sdk_version_triple)
        for key in keys:
            self._bundles[key] = bundle
        self._registered.append(bundle)
        self._latest = bundle
        return keys

    def freeze(self) -> None:
        """End the startup phase; further registration raises."""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        """Whether the startup phase has ended."""
        return self._frozen

    # =========================================================================
    # Queries (read-only)
    # =========================================================================

    def lookup(self, key: int | str) -> ApiBundle | None:
        """Return the bundle registered under ``key``, if any.

        Args:
            key: Any key form: "1.0.1", 10001, 1, "1", "1.0".

        Returns:
            The bundle, or None when the key is unknown or malformed.
        """
        try:
            normalized = normalize_key(key)
        except ValueError:
            return None
        return self._bundles.get(normalized)

    def latest(self) -> ApiBundle | None:
        """Return the most recently registered bundle (None before any)."""
        return self._latest

    def v(
        self,
        major: int | None = None,
        minor: int | None = None,
        patch: int | None = None,
    ) -> Result[ApiBundle, UnknownVersionError]:
        """Query a bundle by (possibly partial) version.

        With no arguments the latest bundle is returned. Otherwise the most
        specific key the arguments allow is looked up: patch only counts with
        minor, minor only with major.

        Args:
            major: Major version.
            minor: Minor version.
            patch: Patch version.

        Returns:
            Success(ApiBundle), or Failure(UnknownVersionError) quoting the
            key that was looked up.
        """
        try:
            key = query_key(major, minor, patch)
        except ValueError:
            key = ".".join(str(part) for part in (major, minor, patch) if part is not None)
            return Failure(error=UnknownVersionError.for_version(self.product_name, key))

        if key is None:
            if self._latest is None:
                return Failure(error=UnknownVersionError.nothing_registered(self.product_name))
            return Success(value=self._latest)

        bundle = self._bundles.get(key)
        if bundle is None:
            return Failure(error=UnknownVersionError.for_version(self.product_name, key))
        return Success(value=bundle)

    def query(self, text: str) -> Result[ApiBundle, PublicApiError]:
        """Query a bundle by version text ("2", "1.0", "1.0.1").

        Args:
            text: Dotted version text; parsed without defaulting, so "1.0"
                looks up the major.minor key.

        Returns:
            Same as v(); unparseable text yields UnknownVersionError quoting
            the raw text.
        """
        parsed = parse_version(text)
        if isinstance(parsed, Failure):
            return Failure(error=UnknownVersionError.for_version(self.product_name, str(text)))
        triple = parsed.value
        return self.v(triple.major, triple.minor, triple.patch)

    def keys(self) -> tuple[str, ...]:
        """Every registered key, in insertion order."""
        return tuple(self._bundles)

    def versions(self) -> tuple[str, ...]:
        """Canonical version of every registered bundle, in declaration order."""
        return tuple(bundle.sdk_version for bundle in self._registered)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int | str):
            return False
        return self.lookup(key) is not None

    def __len__(self) -> int:
        return len(self._registered)

    def __iter__(self) -> Iterator[ApiBundle]:
        return iter(self._registered)

    def __repr__(self) -> str:
        return (
            f"CompatibilityRegistry(product_name={self.product_name!r}, "
            f"versions={list(self.versions())}, frozen={self._frozen})"
        )
