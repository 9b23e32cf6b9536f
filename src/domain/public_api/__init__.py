"""Versioned public API facade: proxies, bundles and the compatibility registry.

Usage:
    from src.domain.public_api import ApiBundle, CompatibilityRegistry, VersionedProxy
"""

from src.domain.public_api.bundle import ApiBundle
from src.domain.public_api.probe import ProbeAbsent, ProbeError, ProbeFound, ProbeOutcome
from src.domain.public_api.proxy import (
    ApiShape,
    VersionedProxy,
    build_proxy,
    carry_forward,
    classify_api,
)
from src.domain.public_api.registry import CompatibilityRegistry, RegistryFrozenError

__all__ = [
    "ApiBundle",
    "ApiShape",
    "CompatibilityRegistry",
    "ProbeAbsent",
    "ProbeError",
    "ProbeFound",
    "ProbeOutcome",
    "RegistryFrozenError",
    "VersionedProxy",
    "build_proxy",
    "carry_forward",
    "classify_api",
]
