"""Module loader adapters (implement ModuleLoaderProtocol).

Usage:
    from src.infrastructure.loading import ImportlibModuleLoader, InMemoryModuleLoader
"""

from src.infrastructure.loading.importlib_loader import ImportlibModuleLoader
from src.infrastructure.loading.in_memory_loader import InMemoryModuleLoader

__all__ = ["ImportlibModuleLoader", "InMemoryModuleLoader"]
