"""Bundle assembler - build the compatibility registry at startup.

For every declared version, in declaration order:
    1. Parse the version text (missing components default to 0)
    2. Resolve every declared API name through the ApiLoader, in order
    3. Freeze the results into an ApiBundle
    4. Register the bundle (which also makes it the latest)

When all versions are registered the registry is frozen and returned. The
registry is passed explicitly to whoever needs it; nothing is stored in
module-level state.

Failure Policy:
    An API name that cannot be resolved is recorded as missing in its
    bundle and reported lazily (ApiNotFoundError) when queried. Only
    configuration mistakes raise: an empty version list, a version string
    that does not parse, or a component that does not fit the MMmmpp
    encoding.

Usage:
    registry = initialize(
        versions=["1.0.0", "1.0.1", "2.0.0"],
        api_names=["cache", "log"],
        module_loader=ImportlibModuleLoader(),
        namespace="host.public",
        product_name="host",
        product_version="3.4.0",
        logger=get_logger(),
    )
    cache = registry.v(1).value.get("cache")
"""

from collections.abc import Sequence

from src.application.services.api_loader import ApiLoader
from src.core.result import Failure
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.module_loader_protocol import ModuleLoaderProtocol
from src.domain.public_api import ApiBundle, CompatibilityRegistry, VersionedProxy
from src.domain.versioning import VersionTriple, encode_version, parse_version

PUBLIC_API_SUFFIX = "public api"


def product_display_name(product_name: str) -> str:
    """Display name used in bundles and error messages ("host public api")."""
    return f"{product_name} {PUBLIC_API_SUFFIX}"


def parse_declared_version(text: str) -> VersionTriple:
    """Parse a declared version, defaulting missing components to 0.

    Args:
        text: Declared version text ("1", "1.2", "1.2.3").

    Returns:
        Fully qualified VersionTriple.

    Raises:
        ValueError: If the text is not a valid version or does not fit the
            MMmmpp encoding.
    """
    result = parse_version(text)
    if isinstance(result, Failure):
        raise ValueError(f"Declared {result.error.message}")
    triple = result.value.with_defaults()
    encode_version(triple)
    return triple


class BundleAssembler:
    """Assemble one ApiBundle per declared version.

    Dependencies (injected via constructor):
        - ApiLoader: Resolves each name through the fallback ladder
        - CompatibilityRegistry: Registry the bundles' proxies query
        - LoggerProtocol: Structured logging

    Example:
        >>> assembler = BundleAssembler(
        ...     loader=loader,
        ...     registry=registry,
        ...     api_names=["cache", "log"],
        ...     product_version="3.4.0",
        ...     logger=logger,
        ... )
        >>> bundle = assembler.assemble(VersionTriple(1, 0, 0))
    """

    def __init__(
        self,
        *,
        loader: ApiLoader,
        registry: CompatibilityRegistry,
        api_names: Sequence[str],
        product_version: str,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize assembler with dependencies.

        Args:
            loader: ApiLoader sharing ``registry``.
            registry: Registry under construction.
            api_names: API names to resolve for every version, in order.
            product_version: Version of the host product (e.g. "3.4.0").
            logger: Logger protocol implementation from container.

        Raises:
            ValueError: If product_version is not a valid version.
        """
        self._loader = loader
        self._registry = registry
        self._api_names = tuple(api_names)
        self._product_version = product_version
        self._product_version_num = encode_version(parse_declared_version(product_version))
        self._logger = logger

    def assemble(self, triple: VersionTriple) -> ApiBundle:
        """Resolve every declared API name at ``triple``.

        Args:
            triple: Declared version (missing components count as 0).

        Returns:
            The assembled bundle (not yet registered).
        """
        full = triple.with_defaults()
        apis: dict[str, VersionedProxy | None] = {}
        for name in self._api_names:
            apis[name] = self._loader.resolve(name, full.major, full.minor, full.patch)

        return ApiBundle(
            product_name=self._registry.product_name,
            product_version=self._product_version,
            product_version_num=self._product_version_num,
            sdk_version_triple=full,
            sdk_version=full.canonical,
            sdk_version_num=encode_version(full),
            apis=apis,
            registry=self._registry,
        )

    def assemble_and_register(self, triple: VersionTriple) -> ApiBundle:
        """Assemble a bundle and register it as the latest version."""
        bundle = self.assemble(triple)
        keys = self._registry.register(bundle)

        self._logger.info(
            "public_api_version_registered",
            version=bundle.sdk_version,
            version_num=bundle.sdk_version_num,
            keys=list(keys),
            resolved=len(bundle.available_names),
        )
        if bundle.missing_names:
            self._logger.info(
                "public_api_names_missing",
                version=bundle.sdk_version,
                names=list(bundle.missing_names),
            )
        return bundle


def initialize(
    *,
    versions: Sequence[str],
    api_names: Sequence[str],
    module_loader: ModuleLoaderProtocol,
    namespace: str,
    product_name: str,
    product_version: str,
    logger: LoggerProtocol,
) -> CompatibilityRegistry:
    """Build, freeze and return the compatibility registry.

    Args:
        versions: Declared version strings, registered in this order.
        api_names: API names resolved at every version, in this order.
        module_loader: Module loading collaborator.
        namespace: Dotted prefix of every candidate module path.
        product_name: Host product name ("host" -> "host public api").
        product_version: Host product version string.
        logger: Logger protocol implementation.

    Returns:
        Frozen CompatibilityRegistry.

    Raises:
        ValueError: If no versions are declared or a declared version (or
            the product version) is invalid.
    """
    if not versions:
        raise ValueError("At least one public API version must be declared")

    # Validate all declared versions before resolving anything.
    triples = [parse_declared_version(text) for text in versions]

    registry = CompatibilityRegistry(product_name=product_display_name(product_name))
    loader = ApiLoader(
        module_loader=module_loader,
        registry=registry,
        namespace=namespace,
        logger=logger,
    )
    assembler = BundleAssembler(
        loader=loader,
        registry=registry,
        api_names=api_names,
        product_version=product_version,
        logger=logger,
    )

    for triple in triples:
        assembler.assemble_and_register(triple)

    registry.freeze()
    latest = registry.latest()
    logger.info(
        "public_api_registry_frozen",
        versions=list(registry.versions()),
        latest_version=latest.sdk_version if latest else None,
    )
    return registry
