"""
Unit tests for configuration and logging setup.
"""

import logging

import pytest
from pydantic import ValidationError

from ctf_wordlist.core.config import Config, get_config, reload_config
from ctf_wordlist.core.logger import (
    configure_logging,
    get_component_logger,
    get_logger,
)


class TestConfig:
    """Settings loading."""

    def test_defaults(self):
        config = Config()

        assert config.log_level == "INFO"
        assert config.fetch.timeout == 10.0
        assert config.fetch.requests_per_second == 1.0
        assert config.fetch.user_agent.startswith("Mozilla/5.0")
        assert config.output.output_directory == "."
        assert not config.is_debug_mode()

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CTF_WORDLIST_FETCH__TIMEOUT", "3")
        monkeypatch.setenv("CTF_WORDLIST_OUTPUT__OUTPUT_DIRECTORY", "/tmp/lists")
        monkeypatch.setenv("CTF_WORDLIST_DEBUG", "true")

        config = Config()

        assert config.fetch.timeout == 3.0
        assert config.output.output_directory == "/tmp/lists"
        assert config.is_debug_mode()

    def test_log_level_is_normalized(self):
        assert Config(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Config(log_level="verbose")

    def test_invalid_timeout(self):
        with pytest.raises(ValidationError):
            Config(fetch={"timeout": 0})

    def test_reload_config(self, monkeypatch):
        monkeypatch.setenv("CTF_WORDLIST_LOG_LEVEL", "warning")
        try:
            reloaded = reload_config()
            assert reloaded is get_config()
            assert reloaded.log_level == "WARNING"
        finally:
            monkeypatch.delenv("CTF_WORDLIST_LOG_LEVEL")
            reload_config()


class TestLogging:
    """Logger configuration."""

    def test_component_logger_name(self):
        assert get_component_logger("engine").name == "ctf_wordlist.engine"

    def test_log_file_receives_records(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        configure_logging(level="DEBUG", log_file=log_file, rich_console=False)
        try:
            get_component_logger("engine").debug("engine ready")
            for handler in get_logger().handlers:
                handler.flush()

            assert "engine ready" in log_file.read_text(encoding="utf-8")
        finally:
            configure_logging(level="INFO", rich_console=False)

    def test_reconfigure_replaces_handlers(self):
        """Test configuring twice leaves one console handler at the new level."""
        configure_logging(level="INFO", rich_console=False)
        configure_logging(level="WARNING", rich_console=False)
        logger = get_logger()

        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

        configure_logging(level="INFO", rich_console=False)
