"""Outcomes of probing a single candidate module path.

The API loader walks a ladder of candidate paths. Each step produces one of
three outcomes instead of a bare success flag, so a missing module (expected,
try the next rung) is never confused with a module that exists but failed
to load (unexpected, logged, then the next rung is tried anyway).
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class ProbeFound:
    """A value was loaded from ``path``."""

    path: str
    value: Any


@dataclass(frozen=True, slots=True, kw_only=True)
class ProbeAbsent:
    """Nothing is published at ``path``."""

    path: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ProbeError:
    """Loading ``path`` raised something other than "module not found".

    Attributes:
        path: Candidate module path.
        error: The exception raised by the module loader.
    """

    path: str
    error: Exception


type ProbeOutcome = ProbeFound | ProbeAbsent | ProbeError
