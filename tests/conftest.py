"""Pytest configuration and shared fixtures.

Provides:
1. A MagicMock logger standing in for LoggerProtocol
2. Simple API values (structured and callable)
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_logger():
    """MagicMock standing in for LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def cache_api():
    """Structured API value with a ``size`` field."""
    return SimpleNamespace(size=128, get=lambda key: f"cached:{key}")


@pytest.fixture
def log_api():
    """Plain callable API value."""

    def log(message: str, *, level: str = "info") -> str:
        return f"[{level}] {message}"

    return log
