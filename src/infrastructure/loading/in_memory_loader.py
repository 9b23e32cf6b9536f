"""Dict-backed module loader.

Implements ModuleLoaderProtocol over a plain mapping of dotted paths to API
values. Hosts that assemble their APIs programmatically (and tests) use it
instead of laying out packages on disk.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


class InMemoryModuleLoader:
    """Serve API values from a path -> value mapping.

    Values that are exceptions (instances or classes) are raised on load,
    which lets callers simulate a module that exists but fails to import.

    Example:
        >>> loader = InMemoryModuleLoader({"host.public.01.cache": {"size": 10}})
        >>> loader.load("host.public.01.cache")
        {'size': 10}
    """

    def __init__(self, modules: Mapping[str, Any] | None = None) -> None:
        """Initialize the loader.

        Args:
            modules: Mapping of dotted path to API value.
        """
        self._modules: Mapping[str, Any] = MappingProxyType(dict(modules or {}))
        self.requested: list[str] = []

    def load(self, path: str) -> Any:
        """Return the value published at ``path``.

        Args:
            path: Dotted module path.

        Raises:
            ModuleNotFoundError: If ``path`` is not in the mapping.
        """
        self.requested.append(path)
        try:
            value = self._modules[path]
        except KeyError:
            raise ModuleNotFoundError(f"No module named {path!r}", name=path) from None

        if isinstance(value, BaseException) or (
            isinstance(value, type) and issubclass(value, BaseException)
        ):
            raise value
        return value

    @property
    def paths(self) -> tuple[str, ...]:
        """Every path this loader can serve."""
        return tuple(self._modules)
