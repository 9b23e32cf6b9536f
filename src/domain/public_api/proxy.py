"""Versioned proxies around public API values.

A VersionedProxy wraps one API value for one name at one version. It
forwards attribute reads and (when the value is callable) invocation to the
wrapped value, and adds identity metadata plus ``v()``, which re-resolves the
same API name at another version through the compatibility registry.

API Shapes:
    The capability check happens once, when the proxy is built:
    - STRUCTURED: attribute/item reads forward (modules, objects, mappings)
    - CALLABLE: invocation forwards (functions, methods, partials)
    - BOTH: both forward (classes, instances defining __call__)
    Scalars (None, numbers, strings, bytes) cannot be wrapped.

Shadowing:
    ``name``, ``version``, ``version_num``, ``shape`` and ``v`` belong to the
    proxy. An underlying field with one of those names is still reachable
    with ``proxy["name"]``.

Usage:
    proxy = build_proxy(name="cache", triple=VersionTriple(1, 0, 0),
                        value=cache_module, registry=registry)
    proxy.version       # "1.0.0"
    proxy.size          # reads cache_module.size on every access
    proxy.v(2)          # Result with the "cache" proxy of the latest 2.x bundle
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from src.core.result import Failure, Result
from src.domain.versioning import VersionTriple, encode_version

if TYPE_CHECKING:
    from src.domain.errors import PublicApiError
    from src.domain.public_api.registry import CompatibilityRegistry


class ApiShape(str, Enum):
    """What a wrapped API value supports."""

    STRUCTURED = "structured"
    CALLABLE = "callable"
    BOTH = "both"

    @property
    def is_structured(self) -> bool:
        """Whether attribute/item reads are forwarded."""
        return self in (ApiShape.STRUCTURED, ApiShape.BOTH)

    @property
    def is_callable(self) -> bool:
        """Whether invocation is forwarded."""
        return self in (ApiShape.CALLABLE, ApiShape.BOTH)


_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex)


def classify_api(value: Any) -> ApiShape | None:
    """Determine the shape of an API value.

    Args:
        value: Value returned by the module loader.

    Returns:
        The ApiShape, or None for values that cannot be wrapped (scalars).
    """
    if value is None or isinstance(value, _SCALAR_TYPES):
        return None
    if inspect.isroutine(value) or isinstance(value, functools.partial):
        return ApiShape.CALLABLE
    if callable(value):
        return ApiShape.BOTH
    return ApiShape.STRUCTURED


class VersionedProxy:
    """Read-only forwarding wrapper for one API name at one version.

    Attributes:
        name: API name this proxy was built for (e.g. "cache").
        version: Canonical "major.minor.patch" string.
        version_num: Encoded MMmmpp version number.
        shape: ApiShape of the wrapped value.
    """

    __slots__ = ("_name", "_triple", "_version_num", "_target", "_shape", "_registry")

    def __init__(
        self,
        *,
        name: str,
        triple: VersionTriple,
        target: Any,
        shape: ApiShape,
        registry: CompatibilityRegistry,
    ) -> None:
        """Initialize the proxy.

        Args:
            name: API name.
            triple: Version the proxy is tagged with (missing parts become 0).
            target: The wrapped API value.
            shape: Capabilities of ``target`` (see classify_api).
            registry: Registry used by v() to reach other versions.
        """
        full = triple.with_defaults()
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_triple", full)
        object.__setattr__(self, "_version_num", encode_version(full))
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_shape", shape)
        object.__setattr__(self, "_registry", registry)

    @property
    def name(self) -> str:
        """API name."""
        return self._name

    @property
    def version(self) -> str:
        """Canonical "major.minor.patch" version string."""
        return self._triple.canonical

    @property
    def version_num(self) -> int:
        """Encoded MMmmpp version number."""
        return self._version_num

    @property
    def shape(self) -> ApiShape:
        """Capabilities of the wrapped value."""
        return self._shape

    def v(
        self,
        major: int | None = None,
        minor: int | None = None,
        patch: int | None = None,
    ) -> Result[VersionedProxy, PublicApiError]:
        """Resolve this same API name at another version.

        Args:
            major: Major version, or None for the latest version.
            minor: Minor version (ignored without major).
            patch: Patch version (ignored without minor).

        Returns:
            Success with the other version's proxy for this name, or Failure
            with UnknownVersionError / ApiNotFoundError.
        """
        bundle_result = self._registry.v(major, minor, patch)
        if isinstance(bundle_result, Failure):
            return bundle_result
        return bundle_result.value.get(self._name)

    def __getattr__(self, attribute: str) -> Any:
        # Only reached when normal lookup fails; dunders and our own slots
        # are never forwarded.
        if attribute in VersionedProxy.__slots__ or (
            attribute.startswith("__") and attribute.endswith("__")
        ):
            raise AttributeError(attribute)
        if not self._shape.is_structured:
            raise AttributeError(
                f'"{self._name}" ({self.version}) is a callable API '
                f"and has no attribute {attribute!r}"
            )
        target = self._target
        if isinstance(target, Mapping):
            try:
                return target[attribute]
            except KeyError:
                raise AttributeError(attribute) from None
        return getattr(target, attribute)

    def __getitem__(self, key: Any) -> Any:
        if not self._shape.is_structured:
            raise TypeError(f'"{self._name}" ({self.version}) is not subscriptable')
        target = self._target
        if isinstance(target, Mapping) or hasattr(type(target), "__getitem__"):
            return target[key]
        try:
            return getattr(target, key)
        except AttributeError:
            raise KeyError(key) from None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if not self._shape.is_callable:
            raise TypeError(f'"{self._name}" ({self.version}) is not callable')
        return self._target(*args, **kwargs)

    def __setattr__(self, attribute: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, attribute: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __dir__(self) -> list[str]:
        own = {"name", "version", "version_num", "shape", "v"}
        if not self._shape.is_structured:
            return sorted(own)
        if isinstance(self._target, Mapping):
            forwarded = {key for key in self._target if isinstance(key, str)}
        else:
            forwarded = {attr for attr in dir(self._target) if not attr.startswith("__")}
        return sorted(own | forwarded)

    def __repr__(self) -> str:
        return f"<VersionedProxy {self._name} {self.version} ({self._shape.value})>"


def build_proxy(
    *,
    name: str,
    triple: VersionTriple,
    value: Any,
    registry: CompatibilityRegistry,
) -> VersionedProxy | None:
    """Wrap an API value in a VersionedProxy.

    Args:
        name: API name.
        triple: Version to tag the proxy with.
        value: API value returned by the module loader.
        registry: Registry the proxy's v() queries.

    Returns:
        The proxy, or None when the value cannot be wrapped (a scalar).
    """
    shape = classify_api(value)
    if shape is None:
        return None
    return VersionedProxy(
        name=name, triple=triple, target=value, shape=shape, registry=registry
    )


def carry_forward(proxy: VersionedProxy, registry: CompatibilityRegistry) -> VersionedProxy:
    """Re-wrap a proxy's value for another bundle.

    The new proxy keeps the original identity metadata (name, version), so a
    name inherited from an earlier version still reports that version, but
    it is a separate instance owned by the new bundle.
    """
    return VersionedProxy(
        name=proxy._name,
        triple=proxy._triple,
        target=proxy._target,
        shape=proxy._shape,
        registry=registry,
    )
