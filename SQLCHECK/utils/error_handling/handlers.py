"""Standardized error handling for SQLCHECK validation.

Provides consistent error logging with query context.
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass, field

from SQLCHECK.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ErrorContext:
    """Context information for error handling."""
    query: str
    stage: str
    statement: Optional[str] = None
    token_count: Optional[int] = None
    additional_context: Dict[str, Any] = field(default_factory=dict)


def _preview(query: str, limit: int = 60) -> str:
    text = " ".join(query.split())
    return text if len(text) <= limit else text[: limit - 3] + "..."


def log_error_with_context(
    error: Exception,
    context: ErrorContext,
    level: str = "debug"
) -> None:
    """
    Log error with full context information.
    
    Validation failures are expected outcomes, so they default to DEBUG.
    
    Args:
        error: The exception that occurred
        context: Error context information
        level: Log level ("debug", "info", "warning", "error")
    """
    log_msg_parts = [f"Validation failed at {context.stage} stage", f"Query: {_preview(context.query)}"]
    
    if context.statement:
        log_msg_parts.append(f"Statement: {context.statement}")
    if context.token_count is not None:
        log_msg_parts.append(f"Tokens: {context.token_count}")
    
    log_msg = " | ".join(log_msg_parts)
    first_line = str(error).splitlines()[0] if str(error) else type(error).__name__
    
    if level == "error":
        logger.error(f"{log_msg}: {first_line}")
    elif level == "warning":
        logger.warning(f"{log_msg}: {first_line}")
    elif level == "info":
        logger.info(f"{log_msg}: {first_line}")
    else:
        logger.debug(f"{log_msg}: {first_line}")
    
    if context.additional_context:
        logger.debug(f"Additional context: {context.additional_context}")


