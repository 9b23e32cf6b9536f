"""Public API registry factory.

Builds the compatibility registry once per process from Settings, using the
container's logger and module loader. Hosts that need a different loader
(or several registries) call ``initialize`` directly instead.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings
from src.core.container.infrastructure import get_logger, get_module_loader

if TYPE_CHECKING:
    from src.domain.public_api import CompatibilityRegistry


@lru_cache()
def get_public_api() -> "CompatibilityRegistry":
    """Return the frozen compatibility registry singleton (app-scoped).

    Returns:
        CompatibilityRegistry: Registry for every declared version.

    Usage:
        registry = get_public_api()
        match registry.v(1, 0):
            case Success(value=bundle):
                cache = bundle.get("cache")
    """
    from src.application.services.bundle_assembler import initialize

    return initialize(
        versions=settings.public_api_versions,
        api_names=settings.public_api_names,
        module_loader=get_module_loader(),
        namespace=settings.public_api_namespace,
        product_name=settings.product_name,
        product_version=settings.product_version,
        logger=get_logger(),
    )
