"""API bundle: every named API proxy resolved for one declared version.

Bundles are produced once per declared version during startup and never
change afterwards. A name the loader could not resolve is kept in the bundle
with no proxy, and asking for it returns ApiNotFoundError.

Usage:
    result = bundle.get("cache")      # or bundle["cache"]
    match result:
        case Success(value=cache):
            cache.get("key")
        case Failure(error=error):
            logger.warning("public_api_missing", reason=error.message)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from src.core.result import Failure, Result, Success
from src.domain.errors import ApiNotFoundError, UnknownVersionError
from src.domain.public_api.proxy import VersionedProxy
from src.domain.versioning import VersionTriple

if TYPE_CHECKING:
    from src.domain.public_api.registry import CompatibilityRegistry


@dataclass(frozen=True, kw_only=True, eq=False)
class ApiBundle:
    """Immutable set of versioned proxies for one declared version.

    Attributes:
        product_name: Display name of the public API ("host public api").
        product_version: Version string of the host product itself.
        product_version_num: Encoded host product version.
        sdk_version_triple: Declared version this bundle was resolved at.
        sdk_version: Canonical "major.minor.patch" of the declared version.
        sdk_version_num: Encoded declared version (MMmmpp).
        apis: Read-only mapping of API name to proxy (None when unresolved).
    """

    product_name: str
    product_version: str
    product_version_num: int
    sdk_version_triple: VersionTriple
    sdk_version: str
    sdk_version_num: int
    apis: Mapping[str, VersionedProxy | None]
    registry: CompatibilityRegistry = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        """Freeze the API mapping."""
        if not isinstance(self.apis, MappingProxyType):
            object.__setattr__(self, "apis", MappingProxyType(dict(self.apis)))

    def get(self, name: str) -> Result[VersionedProxy, ApiNotFoundError]:
        """Return the proxy for an API name.

        Args:
            name: API name (e.g. "cache", "upstream.response").

        Returns:
            Success(VersionedProxy), or Failure(ApiNotFoundError) when the
            name was never resolved at this version.
        """
        proxy = self.apis.get(name)
        if proxy is None:
            return Failure(
                error=ApiNotFoundError.for_name(self.product_name, name, self.sdk_version)
            )
        return Success(value=proxy)

    def __getitem__(self, name: str) -> Result[VersionedProxy, ApiNotFoundError]:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return self.apis.get(name) is not None  # type: ignore[call-overload]

    def __iter__(self) -> Iterator[str]:
        return iter(self.apis)

    @property
    def names(self) -> tuple[str, ...]:
        """Every declared API name, in resolution order."""
        return tuple(self.apis)

    @property
    def available_names(self) -> tuple[str, ...]:
        """Names that resolved to a proxy."""
        return tuple(name for name, proxy in self.apis.items() if proxy is not None)

    @property
    def missing_names(self) -> tuple[str, ...]:
        """Names the loader could not resolve at this version."""
        return tuple(name for name, proxy in self.apis.items() if proxy is None)

    def v(
        self,
        major: int | None = None,
        minor: int | None = None,
        patch: int | None = None,
    ) -> Result[ApiBundle, UnknownVersionError]:
        """Query the registry for another version's bundle (see CompatibilityRegistry.v)."""
        return self.registry.v(major, minor, patch)
