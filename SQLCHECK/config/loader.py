"""Load configuration from YAML file."""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class LoggingSettings(BaseModel):
    """`logging` section of config.yaml."""

    level: str = Field("WARNING", description="Logging level name")
    format_type: str = Field("simple", description="'simple' or 'detailed'")
    log_to_file: bool = Field(False, description="Whether to also log to a file")
    log_file: Optional[str] = Field(None, description="Log file path, relative to the SQLCHECK root")


class CLISettings(BaseModel):
    """`cli` section of config.yaml."""

    prompt: str = Field("> ", description="Prompt shown before each query")
    exit_command: str = Field("exit", description="Line that ends the interactive loop")
    show_tokens: bool = Field(True, description="Echo the token stream before the verdict")


def find_config_file(config_path: Optional[str] = None) -> Path:
    """Find config.yaml file in config directory (or at an explicit path)."""
    if config_path:
        config_file = Path(config_path)
    else:
        config_file = Path(__file__).parent / "config.yaml"
    
    if not config_file.exists():
        raise FileNotFoundError(
            f"config.yaml not found at {config_file}. "
            f"Please create the configuration file."
        )
    
    return config_file


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from config.yaml.
    
    Args:
        config_path: Optional explicit path; defaults to the bundled config.yaml
    
    Returns:
        dict: Configuration dictionary
        
    Raises:
        FileNotFoundError: If config.yaml is not found
        yaml.YAMLError: If YAML parsing fails
    """
    config_file = find_config_file(config_path)
    
    with open(config_file, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)
    
    return config or {}


def get_config(section: Optional[str] = None, config_path: Optional[str] = None) -> Any:
    """
    Get configuration value(s).
    
    Args:
        section: Optional section name (e.g., "logging", "cli")
                 If None, returns entire config
        config_path: Optional explicit path to a config file
        
    Returns:
        Configuration value or dictionary
    """
    config = load_config(config_path)
    
    if section is None:
        return config
    
    return config.get(section) or {}


def get_logging_settings(config_path: Optional[str] = None) -> LoggingSettings:
    """Return the validated `logging` section."""
    return LoggingSettings(**get_config("logging", config_path))


def get_cli_settings(config_path: Optional[str] = None) -> CLISettings:
    """Return the validated `cli` section."""
    return CLISettings(**get_config("cli", config_path))
