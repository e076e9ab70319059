"""Setup logging configuration for the sqlcheck command line."""

import logging
import sys
from pathlib import Path
from typing import List, Optional


DEFAULT_LOG_FILE = "logs/sqlcheck.log"

FORMATS = {
    "simple": ("%(levelname)s | %(name)s | %(message)s", None),
    "detailed": (
        "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
        "%Y-%m-%d %H:%M:%S",
    ),
}

# Marks handlers installed here so a second setup_logging() call replaces
# only its own handlers and leaves foreign ones (e.g. pytest's) in place.
_HANDLER_MARK = "_sqlcheck_handler"


def _resolve_log_path(log_file: Optional[str]) -> Path:
    # Relative paths are resolved against the SQLCHECK package root
    path = Path(log_file or DEFAULT_LOG_FILE)
    if path.is_absolute():
        return path
    sqlcheck_root = Path(__file__).parent.parent.parent
    return sqlcheck_root / path


def _build_handlers(log_level: int, formatter: logging.Formatter, log_path: Optional[Path]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)
    return handlers


def setup_logging(
    level: str = "INFO",
    format_type: str = "simple",
    log_to_file: bool = False,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the root logger for a sqlcheck run.

    Args:
        level: Logging level name; unknown names fall back to INFO
        format_type: "simple" or "detailed" (unknown values use "simple")
        log_to_file: Whether to also write to a log file
        log_file: Path to the log file (relative to SQLCHECK root); defaults to DEFAULT_LOG_FILE

    Returns:
        logging.Logger: The configured root logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    fmt, datefmt = FORMATS.get(format_type, FORMATS["simple"])
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in [h for h in root_logger.handlers if getattr(h, _HANDLER_MARK, False)]:
        root_logger.removeHandler(handler)
        handler.close()

    log_path = _resolve_log_path(log_file) if log_to_file else None
    for handler in _build_handlers(log_level, formatter, log_path):
        root_logger.addHandler(handler)

    if log_path is not None:
        root_logger.debug(f"Logging to {log_path}")
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically for __name__)."""
    return logging.getLogger(name)
