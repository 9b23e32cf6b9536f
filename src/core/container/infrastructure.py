"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console)
- Module loading (importlib)

Reference:
    The container is the composition root: it is the only place that picks
    concrete adapters for the domain protocols.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.module_loader_protocol import ModuleLoaderProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Renderer selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )
    return ConsoleAdapter(use_json=env != "development", level=settings.log_level)


@lru_cache()
def get_module_loader() -> "ModuleLoaderProtocol":
    """Return the module loader singleton (app-scoped).

    Returns:
        ModuleLoaderProtocol: importlib-backed loader.

    Usage:
        loader = get_module_loader()
        cache_module = loader.load("host.public.01.cache")
    """
    from src.infrastructure.loading.importlib_loader import ImportlibModuleLoader

    return ImportlibModuleLoader()
