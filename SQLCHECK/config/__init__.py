"""Configuration loading for SQLCHECK."""

from .loader import (
    CLISettings,
    LoggingSettings,
    find_config_file,
    get_cli_settings,
    get_config,
    get_logging_settings,
    load_config,
)

__all__ = [
    "CLISettings",
    "LoggingSettings",
    "find_config_file",
    "get_cli_settings",
    "get_config",
    "get_logging_settings",
    "load_config",
]
