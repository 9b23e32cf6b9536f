"""Application services for assembling the public API.

Usage:
    from src.application.services import ApiLoader, BundleAssembler, initialize
"""

from src.application.services.api_loader import ApiLoader
from src.application.services.bundle_assembler import (
    BundleAssembler,
    initialize,
    parse_declared_version,
    product_display_name,
)

__all__ = [
    "ApiLoader",
    "BundleAssembler",
    "initialize",
    "parse_declared_version",
    "product_display_name",
]
