"""
Unit tests for settings and logging setup (config.py, logging_config.py).
"""

import io

import pytest
import structlog

from block_zapper.config import Settings
from block_zapper.logging_config import get_logger, setup_logging


@pytest.mark.unit
class TestSettings:

    def test_mock_settings(self, mock_settings):
        assert mock_settings.log_json is False
        assert mock_settings.default_zap_mode == "selective"
        assert mock_settings.default_keep_media is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_ZAP_MODE", "mega")
        monkeypatch.setenv("DEFAULT_KEEP_MEDIA", "false")
        monkeypatch.setenv("OUTPUT_INDENT", "4")

        settings = Settings()

        assert settings.default_zap_mode == "mega"
        assert settings.default_keep_media is False
        assert settings.output_indent == 4


@pytest.mark.unit
class TestLogging:

    def test_setup_logging_writes_json_to_stderr(self, capsys):
        setup_logging()
        get_logger("block_zapper.test").info("test_event", answer=42)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert '"event": "test_event"' in captured.err
        assert '"answer": 42' in captured.err

    def test_debug_filtered_at_info(self, capsys):
        setup_logging()
        structlog.get_logger("block_zapper.test").debug("hidden_event")

        assert "hidden_event" not in capsys.readouterr().err

    def test_explicit_level_and_console_renderer(self, capsys):
        setup_logging(log_level="debug", log_json=False)
        get_logger("block_zapper.test").debug("visible_event", key="value")

        err = capsys.readouterr().err
        assert "visible_event" in err
        assert "key=value" in err
        assert "{" not in err

    def test_custom_stream(self, capsys):
        stream = io.StringIO()
        setup_logging(stream=stream)
        get_logger("block_zapper.test").warning("to_stream")

        assert '"event": "to_stream"' in stream.getvalue()
        assert capsys.readouterr().err == ""
