"""Unit tests for glossa.logging.setup module."""

import pytest

from glossa.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        """configure_logging returns a logger with the usual methods."""
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "debug")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_configure_logging_accepts_overrides(self, mock_settings):
        """configure_logging accepts log_level and is_production."""
        assert configure_logging(settings=mock_settings, log_level="DEBUG") is not None
        assert configure_logging(settings=mock_settings, is_production=True) is not None

    def test_configure_logging_idempotent(self, mock_settings):
        """Multiple configure_logging calls are safe."""
        assert configure_logging(settings=mock_settings) is not None
        assert configure_logging(settings=mock_settings) is not None


@pytest.mark.unit
class TestGetLoggers:
    """Test suite for logger accessors."""

    def test_get_module_logger(self):
        """get_module_logger returns a usable logger."""
        logger = get_module_logger()
        logger.debug("test_event", key="value")
