"""Domain protocols (ports) package.

This package contains protocol definitions the domain and application
layers depend on. Infrastructure adapters implement these protocols without
inheritance.

Usage:
    from src.domain.protocols import LoggerProtocol, ModuleLoaderProtocol
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.module_loader_protocol import ModuleLoaderProtocol

__all__ = [
    "LoggerProtocol",
    "ModuleLoaderProtocol",
]
