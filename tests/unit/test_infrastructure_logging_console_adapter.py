"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods (debug, info, warning, error)
- Error details extraction
- Context binding
- Renderer and level selection

Architecture:
- Unit tests with mocked structlog
- NO real logging output
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from uadetect.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "uadetect.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("method", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, method):
        """Test level methods forward message and structured context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, method)("User agent classified", device_type="tablet")

            getattr(mock_logger, method).assert_called_once_with(
                "User agent classified",
                device_type="tablet",
            )

    def test_error_without_exception(self):
        """Test error() forwards context unchanged."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("Device detector construction failed", reason="bad table")

            mock_logger.error.assert_called_once_with(
                "Device detector construction failed",
                reason="bad table",
            )

    def test_error_with_exception_adds_details(self):
        """Test error() expands an exception into type and message."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("Detection failed", error=ValueError("boom"), user_agent="x")

            mock_logger.error.assert_called_once_with(
                "Detection failed",
                user_agent="x",
                error_type="ValueError",
                error_message="boom",
            )


@pytest.mark.unit
class TestConsoleAdapterBind:
    """Test context binding."""

    def test_bind_returns_new_adapter_with_bound_logger(self):
        """Test bind() wraps the structlog bound logger."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(component="device_detector")
            bound.info("Device detector ready")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(component="device_detector")
            bound_logger.info.assert_called_once_with("Device detector ready")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer_when_requested(self):
        """Test use_json selects the JSON renderer."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            processors = mock_structlog.configure.call_args[1]["processors"]
            assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value

    def test_console_renderer_by_default(self):
        """Test human-readable output by default."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            processors = mock_structlog.configure.call_args[1]["processors"]
            assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value

    @pytest.mark.parametrize(
        ("level_name", "level"),
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("bogus", logging.INFO)],
    )
    def test_log_level_filtering(self, level_name, level):
        """Test the level name selects the filtering threshold."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(log_level=level_name)

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(level)
