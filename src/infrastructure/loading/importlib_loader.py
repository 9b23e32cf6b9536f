"""Module loader backed by the Python import system.

Implements ModuleLoaderProtocol with ``importlib.import_module``. Candidate
paths such as ``host.public.01.00.cache`` use zero-padded numeric package
names; those are not valid identifiers for an ``import`` statement but
import_module resolves them like any other package directory.

Published Value:
    A module may publish something other than itself by defining
    ``__api__`` (for example a callable logger). Otherwise the module
    object is the API value.

    # host/public/01/log.py
    def log(message, **fields): ...
    __api__ = log
"""

import importlib
from typing import Any

API_ATTRIBUTE = "__api__"


class ImportlibModuleLoader:
    """Load API values with importlib.

    Implementation intentionally does NOT inherit from ModuleLoaderProtocol
    (PEP 544 structural subtyping).

    Example:
        >>> loader = ImportlibModuleLoader()
        >>> loader.load("host.public.01.cache")
        <module 'host.public.01.cache' from '...'>
    """

    def load(self, path: str) -> Any:
        """Import ``path`` and return its published API value.

        Args:
            path: Dotted module path.

        Returns:
            ``module.__api__`` when defined, else the module itself.

        Raises:
            ModuleNotFoundError: If the module (or a parent package) is missing.
            Exception: Anything the module raises while executing.
        """
        module = importlib.import_module(path)
        return getattr(module, API_ATTRIBUTE, module)
