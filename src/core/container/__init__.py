"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_public_api

The container is organized into modules:
- infrastructure: Logging and module loading
- public_api: Compatibility registry built from Settings
"""

from src.core.container.infrastructure import get_logger, get_module_loader
from src.core.container.public_api import get_public_api

__all__ = [
    "get_logger",
    "get_module_loader",
    "get_public_api",
]
