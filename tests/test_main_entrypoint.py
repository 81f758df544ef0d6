"""
Tests for main.py - Main Entry Point

Tests for the main entry point including:
- Logging configuration
- Container creation and lifecycle
- Error handling
"""

import json
import logging
from unittest.mock import MagicMock, mock_open, patch

import pytest

from audio_streaming.main import cli, main
from audio_streaming.utils.logging import setup_logging


class TestLoggingSetup:
    """Tests for logging configuration."""

    def _make_valid_config(self) -> dict:
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": {},
            "loggers": {"audio_streaming": {"level": "DEBUG"}},
            "root": {"level": "INFO", "handlers": []},
        }

    def test_dictconfig_called_when_json_exists(self):
        """Should call dictConfig when logging_config.json exists."""
        config = self._make_valid_config()
        m = mock_open(read_data=json.dumps(config))
        with (
            patch("builtins.open", m),
            patch("logging.config.dictConfig") as mock_dc,
        ):
            setup_logging()

            mock_dc.assert_called_once_with(config)

    def test_fallback_to_basicconfig_when_json_missing(self):
        """Should fallback to basicConfig when logging_config.json is missing."""
        with (
            patch("builtins.open", side_effect=FileNotFoundError),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging()

            mock_bc.assert_called_once()
            assert mock_bc.call_args[1]["level"] == logging.INFO

    def test_fallback_to_basicconfig_when_json_malformed(self):
        """Should fallback to basicConfig when JSON is malformed."""
        m = mock_open(read_data="{invalid json")
        with (
            patch("builtins.open", m),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging()

            mock_bc.assert_called_once()

    def test_explicit_config_path(self, tmp_path):
        config_path = tmp_path / "logging.json"
        config_path.write_text(json.dumps(self._make_valid_config()), encoding="utf-8")
        with patch("logging.config.dictConfig") as mock_dc:
            setup_logging("DEBUG", config_path=config_path)

            mock_dc.assert_called_once_with(self._make_valid_config())

    def test_root_logger_level_overridden_by_settings(self):
        """Should override root logger level with the provided log_level."""
        root = logging.getLogger()
        previous = root.level
        m = mock_open(read_data=json.dumps(self._make_valid_config()))
        try:
            with (
                patch("builtins.open", m),
                patch("logging.config.dictConfig"),
            ):
                setup_logging("WARNING")

            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)

    def test_shipped_config_is_valid_json(self):
        from audio_streaming.utils.logging import DEFAULT_LOGGING_CONFIG_PATH

        config = json.loads(DEFAULT_LOGGING_CONFIG_PATH.read_text(encoding="utf-8"))
        assert config["version"] == 1
        assert "colored" in config["formatters"]


class TestMain:
    """Tests for the main() lifecycle."""

    @pytest.fixture(autouse=True)
    def _no_logging_setup(self):
        with patch("audio_streaming.main.setup_logging"):
            yield

    def test_main_runs_full_lifecycle(self, test_settings):
        with patch("audio_streaming.config.settings.get_settings", return_value=test_settings):
            assert main() == 0

        assert test_settings.storage.catalog_path.is_file()

    def test_main_initializes_and_shuts_down_container(self, test_settings):
        container = MagicMock()
        container.catalog.recommend.return_value = []
        with (
            patch("audio_streaming.config.settings.get_settings", return_value=test_settings),
            patch(
                "audio_streaming.config.container.create_container", return_value=container
            ) as mock_create,
        ):
            assert main() == 0

        mock_create.assert_called_once_with(test_settings)
        container.initialize.assert_called_once()
        container.shutdown.assert_called_once()
        container.catalog.recommend.assert_called_once_with(
            test_settings.catalog.recommendation_limit
        )

    def test_main_returns_1_on_unexpected_error(self, test_settings):
        container = MagicMock()
        container.initialize.side_effect = RuntimeError("boom")
        with (
            patch("audio_streaming.config.settings.get_settings", return_value=test_settings),
            patch("audio_streaming.config.container.create_container", return_value=container),
        ):
            assert main() == 1

    def test_cli_exits_with_main_status(self):
        with patch("audio_streaming.main.main", return_value=0):
            with pytest.raises(SystemExit) as exc_info:
                cli()

        assert exc_info.value.code == 0
