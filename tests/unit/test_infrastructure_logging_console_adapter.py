"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details on error/critical
- Context binding
- Renderer and level configuration

Architecture:
- Unit tests with mocked structlog
- NO real logging output
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter


@pytest.fixture
def mock_structlog():
    """Patched structlog module with a MagicMock logger."""
    with patch("src.infrastructure.logging.console_adapter.structlog") as mock_module:
        mock_module.get_logger.return_value = MagicMock()
        yield mock_module


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("method", ["debug", "info", "warning"])
    def test_forwards_event_and_context(self, mock_structlog, method):
        """Test level methods forward the event name and context unchanged."""
        adapter = ConsoleAdapter()

        getattr(adapter, method)("public_api_probe_absent", api="cache", path="host.public.01.cache")

        getattr(mock_structlog.get_logger.return_value, method).assert_called_once_with(
            "public_api_probe_absent", api="cache", path="host.public.01.cache"
        )

    def test_error_adds_exception_details(self, mock_structlog):
        """Test error() flattens the exception into error_type/error_message."""
        adapter = ConsoleAdapter()

        adapter.error("public_api_startup_failed", error=ValueError("bad version"), version="1.x")

        mock_structlog.get_logger.return_value.error.assert_called_once_with(
            "public_api_startup_failed",
            version="1.x",
            error_type="ValueError",
            error_message="bad version",
        )

    def test_critical_without_exception(self, mock_structlog):
        """Test critical() logs context only when no exception is given."""
        adapter = ConsoleAdapter()

        adapter.critical("public_api_unavailable", namespace="host.public")

        mock_structlog.get_logger.return_value.critical.assert_called_once_with(
            "public_api_unavailable", namespace="host.public"
        )


@pytest.mark.unit
class TestConsoleAdapterContextBinding:
    """Test bind() and with_context()."""

    def test_bind_returns_new_adapter(self, mock_structlog):
        """Test bind() wraps the bound structlog logger."""
        bound_logger = MagicMock()
        mock_structlog.get_logger.return_value.bind.return_value = bound_logger
        adapter = ConsoleAdapter()

        bound = adapter.bind(version="1.0.0")
        bound.info("public_api_version_registered")

        assert bound is not adapter
        mock_structlog.get_logger.return_value.bind.assert_called_once_with(version="1.0.0")
        bound_logger.info.assert_called_once_with("public_api_version_registered")

    def test_with_context_is_alias_for_bind(self, mock_structlog):
        """Test with_context() binds the same way."""
        adapter = ConsoleAdapter()

        adapter.with_context(api="log")

        mock_structlog.get_logger.return_value.bind.assert_called_once_with(api="log")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer_when_requested(self, mock_structlog):
        """Test use_json=True appends the JSON renderer."""
        ConsoleAdapter(use_json=True)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value
        mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_by_default(self, mock_structlog):
        """Test the human-readable renderer is the default."""
        ConsoleAdapter()

        mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)

    def test_level_filters_bound_logger(self, mock_structlog):
        """Test the level name is converted for the filtering logger."""
        ConsoleAdapter(level="warning")

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(logging.WARNING)
