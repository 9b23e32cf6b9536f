"""ModuleLoaderProtocol - port to the host's module-loading mechanism.

The facade never knows where API modules physically live. It hands a dotted
path to a loader and either receives the API value or learns that nothing
exists at that path.

Contract:
    - load(path) returns the API value published at ``path``.
    - A path with nothing behind it raises ModuleNotFoundError whose
      ``name`` is the path (or one of its parent packages).
    - Any other exception is a genuine load failure; the API loader records
      it and still moves on to the next candidate path.

Architecture:
- Domain layer protocol (no infrastructure imports)
- Implemented by ImportlibModuleLoader and InMemoryModuleLoader
  in src/infrastructure/loading/

Usage:
    class ApiLoader:
        def __init__(self, *, module_loader: ModuleLoaderProtocol, ...):
            self._module_loader = module_loader
"""

from typing import Any, Protocol


class ModuleLoaderProtocol(Protocol):
    """Protocol for loading a public API value by dotted path.

    Example:
        >>> loader: ModuleLoaderProtocol = InMemoryModuleLoader(
        ...     {"host.public.01.cache": cache_api}
        ... )
        >>> loader.load("host.public.01.cache") is cache_api
        True
    """

    def load(self, path: str) -> Any:
        """Load the API value published at ``path``.

        Args:
            path: Dotted module path (e.g. "host.public.01.00.cache").

        Returns:
            The API value (module, object, mapping or callable).

        Raises:
            ModuleNotFoundError: If nothing is published at ``path``.
        """
        ...
