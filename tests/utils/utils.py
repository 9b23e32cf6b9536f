"""Utility functions for testing.

Provides helpers for building registries from in-memory module maps and
sample API values of each shape.
"""

from collections.abc import Mapping, Sequence
from typing import Any
from unittest.mock import MagicMock

from src.application.services.bundle_assembler import initialize
from src.domain.public_api import CompatibilityRegistry
from src.infrastructure.loading import InMemoryModuleLoader

NAMESPACE = "host.public"
PRODUCT = "host"
PRODUCT_DISPLAY_NAME = "host public api"


class CallableRecord:
    """Structured value that is also callable (ApiShape.BOTH)."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        self.level = "info"

    def __call__(self, message: str) -> str:
        return f"{self.prefix}{message}"


def build_registry(
    modules: Mapping[str, Any],
    *,
    versions: Sequence[str] = ("1.0.0",),
    api_names: Sequence[str] = ("cache", "log"),
    logger: Any = None,
) -> CompatibilityRegistry:
    """Build a frozen registry from a path -> value mapping.

    Args:
        modules: Module map served by an InMemoryModuleLoader.
        versions: Declared versions (registration order).
        api_names: Declared API names.
        logger: Logger to use (default: fresh MagicMock).

    Returns:
        Frozen CompatibilityRegistry.

    Usage:
        registry = build_registry(
            {"host.public.01.cache": SimpleNamespace(size=10)},
            versions=["1.0.0", "2.0.0"],
        )
    """
    return initialize(
        versions=list(versions),
        api_names=list(api_names),
        module_loader=InMemoryModuleLoader(modules),
        namespace=NAMESPACE,
        product_name=PRODUCT,
        product_version="3.4.0",
        logger=logger if logger is not None else MagicMock(),
    )
