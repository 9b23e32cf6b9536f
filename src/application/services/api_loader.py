"""API loader - resolve one API name at one version.

Walks a fallback ladder of module paths from most to least specific and
wraps the first value found in a VersionedProxy.

Fallback Ladder (namespace "host.public", name "cache", version 1.2.3):
    1. host.public.01.02.03.cache   proxy tagged 1.2.3
    2. host.public.01.02.cache      proxy tagged 1.2.0
    3. host.public.01.cache         proxy tagged 1.0.0
    4. latest registered bundle's "cache" proxy, re-wrapped with its own
       version; the ladder stops here whenever a bundle is registered
    5. host.public.cache            proxy tagged 1.2.3 (only reached for the
       first declared version)
    Nothing found -> None; the bundle records the name as missing.

Probe Outcomes:
    Each rung yields ProbeFound, ProbeAbsent or ProbeError. Absence is
    ordinary control flow (debug log). An error is logged as a warning with
    the exception details, then the ladder continues exactly as for
    absence.

Reference:
    - src/domain/protocols/module_loader_protocol.py
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.module_loader_protocol import ModuleLoaderProtocol
from src.domain.public_api import (
    CompatibilityRegistry,
    ProbeAbsent,
    ProbeError,
    ProbeFound,
    ProbeOutcome,
    VersionedProxy,
    build_proxy,
    carry_forward,
)
from src.domain.versioning import VersionTriple


def _is_absent(error: ModuleNotFoundError, path: str) -> bool:
    """Whether a ModuleNotFoundError is about ``path`` itself or a parent package.

    A ModuleNotFoundError naming some other module means the candidate exists
    but one of its own imports is missing, which is a load failure.
    """
    missing = error.name
    if not missing:
        return True
    return path == missing or path.startswith(f"{missing}.")


class ApiLoader:
    """Resolve API names to versioned proxies through the fallback ladder.

    Dependencies (injected via constructor):
        - ModuleLoaderProtocol: Loads a value by dotted path
        - CompatibilityRegistry: Source of the latest bundle (rung 4) and the
          registry every built proxy queries
        - LoggerProtocol: Structured logging

    Example:
        >>> loader = ApiLoader(
        ...     module_loader=InMemoryModuleLoader({"host.public.01.cache": cache}),
        ...     registry=registry,
        ...     namespace="host.public",
        ...     logger=get_logger(),
        ... )
        >>> loader.resolve("cache", 1, 0, 0).version
        '1.0.0'
    """

    def __init__(
        self,
        *,
        module_loader: ModuleLoaderProtocol,
        registry: CompatibilityRegistry,
        namespace: str,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize loader with dependencies.

        Args:
            module_loader: Module loading collaborator.
            registry: Registry under construction.
            namespace: Dotted prefix of every candidate path.
            logger: Logger protocol implementation from container.
        """
        self._module_loader = module_loader
        self._registry = registry
        self._namespace = namespace.rstrip(".")
        self._logger = logger

    @property
    def namespace(self) -> str:
        """Dotted prefix of every candidate path."""
        return self._namespace

    def module_path(
        self,
        name: str,
        major: int,
        minor: int | None = None,
        patch: int | None = None,
    ) -> str:
        """Versioned candidate path with two-digit zero-padded segments.

        Example:
            >>> loader.module_path("cache", 1, 2, 3)
            'host.public.01.02.03.cache'
            >>> loader.module_path("cache", 1)
            'host.public.01.cache'
        """
        segments = [f"{major:02d}"]
        if minor is not None:
            segments.append(f"{minor:02d}")
            if patch is not None:
                segments.append(f"{patch:02d}")
        return ".".join([self._namespace, *segments, name])

    def global_path(self, name: str) -> str:
        """Unversioned candidate path."""
        return f"{self._namespace}.{name}"

    def probe(self, path: str) -> ProbeOutcome:
        """Try to load one candidate path.

        Args:
            path: Dotted module path.

        Returns:
            ProbeFound, ProbeAbsent or ProbeError.
        """
        try:
            value = self._module_loader.load(path)
        except ModuleNotFoundError as e:
            if _is_absent(e, path):
                return ProbeAbsent(path=path)
            return ProbeError(path=path, error=e)
        except Exception as e:
            return ProbeError(path=path, error=e)
        return ProbeFound(path=path, value=value)

    def resolve(
        self,
        name: str,
        major: int,
        minor: int | None = None,
        patch: int | None = None,
    ) -> VersionedProxy | None:
        """Resolve ``name`` at a version.

        Args:
            name: API name (e.g. "cache", "upstream.response").
            major: Major version.
            minor: Minor version (None counts as 0 for tagging).
            patch: Patch version (None counts as 0 for tagging).

        Returns:
            The proxy, or None when no rung produced a wrappable value.
        """
        full = VersionTriple(major, minor, patch if minor is not None else None).with_defaults()
        ladder = (
            (self.module_path(name, full.major, full.minor, full.patch), full),
            (self.module_path(name, full.major, full.minor), VersionTriple(full.major, full.minor, 0)),
            (self.module_path(name, full.major), VersionTriple(full.major, 0, 0)),
        )

        for path, tagged in ladder:
            if (found := self._attempt(name, path)) is not None:
                return self._wrap(name, tagged, found)

        latest = self._registry.latest()
        if latest is not None:
            previous = latest.apis.get(name)
            if previous is None:
                self._logger.debug(
                    "public_api_not_inherited",
                    api=name,
                    version=full.canonical,
                    latest_version=latest.sdk_version,
                )
                return None
            self._logger.debug(
                "public_api_inherited",
                api=name,
                version=full.canonical,
                inherited_version=previous.version,
            )
            return carry_forward(previous, self._registry)

        path = self.global_path(name)
        if (found := self._attempt(name, path)) is not None:
            return self._wrap(name, full, found)

        return None

    def _attempt(self, name: str, path: str) -> ProbeFound | None:
        outcome = self.probe(path)
        match outcome:
            case ProbeFound():
                self._logger.debug("public_api_probe_found", api=name, path=path)
                return outcome
            case ProbeAbsent():
                self._logger.debug("public_api_probe_absent", api=name, path=path)
            case ProbeError(error=error):
                self._logger.warning(
                    "public_api_probe_failed",
                    api=name,
                    path=path,
                    error_type=type(error).__name__,
                    error_message=str(error),
                )
        return None

    def _wrap(self, name: str, triple: VersionTriple, found: ProbeFound) -> VersionedProxy | None:
        proxy = build_proxy(name=name, triple=triple, value=found.value, registry=self._registry)
        if proxy is None:
            self._logger.warning(
                "public_api_value_unwrappable",
                api=name,
                path=found.path,
                value_type=type(found.value).__name__,
            )
        return proxy
