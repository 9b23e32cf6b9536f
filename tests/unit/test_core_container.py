"""Unit tests for container factory functions.

Tests cover:
- get_logger(): renderer selection by ENVIRONMENT, level from settings
- get_module_loader(): importlib-backed singleton
- get_public_api(): registry built from settings

Architecture:
- Unit tests with mocked settings and adapters
- Each test clears the lru_cache of the factory it exercises
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from src.core.container import get_logger, get_module_loader, get_public_api
from src.infrastructure.loading import ImportlibModuleLoader, InMemoryModuleLoader


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset container singletons around every test."""
    for factory in (get_logger, get_module_loader, get_public_api):
        factory.cache_clear()
    yield
    for factory in (get_logger, get_module_loader, get_public_api):
        factory.cache_clear()


@pytest.mark.unit
class TestGetLogger:
    """Test get_logger() container function."""

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [("development", False), ("testing", True), ("ci", True), ("production", True)],
    )
    def test_renderer_follows_environment(self, environment, use_json):
        """Test human-readable logs only in development."""
        with patch("src.core.container.infrastructure.settings") as mock_settings:
            mock_settings.environment = environment
            mock_settings.log_level = "DEBUG"

            with patch(
                "src.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                logger = get_logger()

        mock_console.assert_called_once_with(use_json=use_json, level="DEBUG")
        assert logger is mock_console.return_value

    def test_singleton(self):
        """Test get_logger() returns the same instance."""
        with patch(
            "src.infrastructure.logging.console_adapter.ConsoleAdapter"
        ) as mock_console:
            mock_console.side_effect = lambda **_: MagicMock()

            assert get_logger() is get_logger()
            mock_console.assert_called_once()


@pytest.mark.unit
class TestGetModuleLoader:
    """Test get_module_loader() container function."""

    def test_returns_importlib_loader_singleton(self):
        """Test the default loader uses the import system."""
        loader = get_module_loader()

        assert isinstance(loader, ImportlibModuleLoader)
        assert get_module_loader() is loader


@pytest.mark.unit
class TestGetPublicApi:
    """Test get_public_api() container function."""

    def test_builds_registry_from_settings(self):
        """Test declared versions and names come from settings."""
        module_loader = InMemoryModuleLoader(
            {"acme.public.01.cache": SimpleNamespace(size=1)}
        )
        fake_settings = SimpleNamespace(
            public_api_versions=["1.0.0", "2.0.0"],
            public_api_names=["cache"],
            public_api_namespace="acme.public",
            product_name="acme",
            product_version="1.2.3",
        )

        with (
            patch("src.core.container.public_api.settings", fake_settings),
            patch(
                "src.core.container.public_api.get_module_loader",
                return_value=module_loader,
            ),
            patch("src.core.container.public_api.get_logger", return_value=MagicMock()),
        ):
            registry = get_public_api()

        assert registry.is_frozen is True
        assert registry.product_name == "acme public api"
        assert registry.versions() == ("1.0.0", "2.0.0")
        assert registry.v(2).value.get("cache").value.size == 1
        assert registry.v().value.product_version == "1.2.3"

    def test_singleton(self):
        """Test the registry is built once per process."""
        fake_settings = SimpleNamespace(
            public_api_versions=["1.0.0"],
            public_api_names=[],
            public_api_namespace="acme.public",
            product_name="acme",
            product_version="1.0.0",
        )

        with (
            patch("src.core.container.public_api.settings", fake_settings),
            patch(
                "src.core.container.public_api.get_module_loader",
                return_value=InMemoryModuleLoader(),
            ),
            patch("src.core.container.public_api.get_logger", return_value=MagicMock()),
        ):
            assert get_public_api() is get_public_api()
