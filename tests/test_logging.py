import logging
import os
from unittest.mock import patch

from saudi_id.logging import LoggingSettings, setup_logging


def test_setup_logging_default_level() -> None:
    """Test that the default log level is WARNING."""
    with patch("saudi_id.logging.log_settings", LoggingSettings()):
        with patch("logging.StreamHandler") as mock_handler:
            with patch("logging.basicConfig") as mock_basic_config:
                setup_logging()
                mock_handler.return_value.setLevel.assert_called_with(logging.WARNING)
                mock_basic_config.assert_called_once_with(level=logging.NOTSET, handlers=[mock_handler.return_value])


def test_setup_logging_custom_level() -> None:
    """Test that a custom log level is used."""
    with patch("saudi_id.logging.log_settings", LoggingSettings(log_level="DEBUG")):
        with patch("logging.StreamHandler") as mock_handler:
            with patch("logging.basicConfig") as mock_basic_config:
                setup_logging()
                mock_handler.return_value.setLevel.assert_called_with(logging.DEBUG)
                mock_basic_config.assert_called_once()


def test_log_level_from_environment() -> None:
    with patch.dict(os.environ, {"SAUDI_ID_LOG_LEVEL": "ERROR"}):
        assert LoggingSettings().log_level == "ERROR"


def test_setup_logging_explicit_level() -> None:
    """Test that a level passed in wins over the settings."""
    with patch("saudi_id.logging.log_settings", LoggingSettings(log_level="ERROR")):
        with patch("logging.StreamHandler") as mock_handler:
            with patch("logging.basicConfig"):
                setup_logging("INFO")
                mock_handler.return_value.setLevel.assert_called_with(logging.INFO)
