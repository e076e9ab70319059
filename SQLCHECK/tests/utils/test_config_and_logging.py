"""Tests for YAML configuration loading and logging setup."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

import logging

import pytest

from SQLCHECK.config import (
    CLISettings,
    LoggingSettings,
    find_config_file,
    get_cli_settings,
    get_config,
    get_logging_settings,
    load_config,
)
from SQLCHECK.utils.logging import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestBundledConfig:
    def test_bundled_file_exists(self):
        assert find_config_file().name == "config.yaml"
    
    def test_sections(self):
        config = load_config()
        assert "logging" in config
        assert "cli" in config
        assert get_config("cli")["exit_command"] == "exit"
    
    def test_missing_section_is_empty(self):
        assert get_config("no_such_section") == {}
    
    def test_settings_models(self):
        assert isinstance(get_logging_settings(), LoggingSettings)
        cli = get_cli_settings()
        assert isinstance(cli, CLISettings)
        assert cli.exit_command == "exit"
        assert cli.show_tokens is True


class TestCustomConfig:
    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("cli:\n  prompt: 'sql> '\n  show_tokens: false\n", encoding="utf-8")
        cli = get_cli_settings(str(path))
        assert cli.prompt == "sql> "
        assert cli.show_tokens is False
        assert cli.exit_command == "exit"
    
    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(str(path)) == {}
        assert get_logging_settings(str(path)) == LoggingSettings()
    
    def test_null_section_gives_defaults(self, tmp_path):
        path = tmp_path / "null.yaml"
        path.write_text("cli:\nlogging:\n  level: DEBUG\n", encoding="utf-8")
        assert get_cli_settings(str(path)) == CLISettings()
        assert get_logging_settings(str(path)).level == "DEBUG"
    
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "absent.yaml"))


class TestSetupLogging:
    @staticmethod
    def own_handlers(root):
        return [h for h in root.handlers if getattr(h, "_sqlcheck_handler", False)]
    
    def test_console_handler_and_level(self, restore_root_logger):
        root = setup_logging(level="debug", format_type="simple")
        assert root is restore_root_logger
        assert root.level == logging.DEBUG
        assert len(self.own_handlers(root)) == 1
    
    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        setup_logging(level="chatty")
        assert restore_root_logger.level == logging.INFO
    
    def test_repeated_setup_replaces_only_own_handlers(self, restore_root_logger):
        foreign = logging.NullHandler()
        restore_root_logger.addHandler(foreign)
        setup_logging(level="INFO")
        setup_logging(level="WARNING", format_type="detailed")
        assert foreign in restore_root_logger.handlers
        own = self.own_handlers(restore_root_logger)
        assert len(own) == 1
        assert "%(funcName)s" in own[0].formatter._fmt
    
    def test_file_handler(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "run.log"
        setup_logging(level="INFO", log_to_file=True, log_file=str(log_file))
        get_logger("SQLCHECK.test").info("hello file")
        for handler in restore_root_logger.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")
    
    def test_get_logger_name(self):
        assert get_logger("SQLCHECK.utils.sql").name == "SQLCHECK.utils.sql"
