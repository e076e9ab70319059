"""Centralized error handling for SQL validation.

This module provides Pydantic-based error details for every validation phase
and the exceptions that carry them:
- Lexical errors (tokenization)         -> SQLLexError
- Syntax errors (grammar validation)    -> SQLSyntaxError
- Arity errors (INSERT column/value count) -> SQLArityError
- Type errors (INSERT value vs. inferred column type) -> SQLTypeError

All error messages are generated from the structured detail models.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field


class ErrorKind(str, Enum):
    """The four failure kinds a validation can end with."""
    LEX = "LexError"
    SYNTAX = "SyntaxError"
    ARITY = "ArityError"
    TYPE = "TypeError"


class LexicalErrorDetail(BaseModel):
    """Lexical analysis error (tokenization phase)."""
    
    message: str = Field(description="Error message")
    position: Optional[int] = Field(None, description="0-based offset where the error occurred")
    invalid_char: Optional[str] = Field(None, description="Character that caused the error")
    context: Optional[str] = Field(None, description="Context snippet showing error location")
    
    def format_message(self) -> str:
        """Format a comprehensive lexical error message."""
        parts = [f"Lexical error: {self.message}"]
        
        if self.position is not None:
            parts.append(f"Location: position {self.position}")
        
        if self.invalid_char:
            parts.append(f"Invalid character: {self.invalid_char!r}")
            if ord(self.invalid_char[0]) > 127:
                parts.append(f"Character code: U+{ord(self.invalid_char[0]):04X}")
        
        if self.context:
            parts.append(f"Context:\n{self.context}")
        
        suggestions = self._get_suggestions()
        if suggestions:
            parts.append("Suggestions:")
            parts.extend(f"  - {s}" for s in suggestions)
        
        return "\n".join(parts)
    
    def _get_suggestions(self) -> List[str]:
        suggestions = []
        if self.invalid_char == "!":
            suggestions.append("Use '!=' or '<>' for inequality.")
        elif self.invalid_char == '"':
            suggestions.append("String literals use single quotes: 'text'.")
        elif self.invalid_char == ".":
            suggestions.append("Decimal numbers need at least one digit after '.'.")
        elif self.invalid_char == "'":
            suggestions.append("Add the closing single quote to the string literal.")
        return suggestions


class SyntaxErrorDetail(BaseModel):
    """Syntax analysis error (grammar validation phase)."""
    
    message: str = Field(description="Error message")
    position: Optional[int] = Field(None, description="0-based offset of the offending token")
    found: Optional[str] = Field(None, description="Token that was found")
    expected: Optional[List[str]] = Field(None, description="List of expected tokens")
    suggestion: Optional[str] = Field(None, description="Suggested keyword for a misspelled one")
    
    def format_message(self) -> str:
        """Format a syntax error message."""
        parts = [f"Syntax error: {self.message}"]
        
        if self.position is not None:
            parts.append(f"Location: position {self.position}")
        
        if self.found:
            parts.append(f"Found: {self.found}")
        
        if self.expected:
            if len(self.expected) == 1:
                parts.append(f"Expected: {self.expected[0]}")
            elif len(self.expected) <= 5:
                parts.append(f"Expected one of: {', '.join(self.expected)}")
            else:
                parts.append(f"Expected one of: {', '.join(self.expected[:5])} (and {len(self.expected) - 5} more)")
        
        return "\n".join(parts)


class SemanticErrorDetail(BaseModel):
    """Detailed semantic validation error (INSERT arity and type checks)."""
    
    error_type: str = Field(description="Type/category of error (e.g., 'Type Mismatch', 'Arity Mismatch')")
    message: str = Field(description="Error message")
    identifier: Optional[str] = Field(None, description="Column the error refers to")
    expected_type: Optional[str] = Field(None, description="Expected type (if applicable)")
    actual_type: Optional[str] = Field(None, description="Actual kind found (if applicable)")
    expected_count: Optional[int] = Field(None, description="Number of columns (arity errors)")
    actual_count: Optional[int] = Field(None, description="Number of values (arity errors)")
    suggestion: Optional[str] = Field(None, description="Suggestion for fixing the error")
    
    def format_message(self) -> str:
        """Format a semantic error message."""
        parts = [f"[{self.error_type}] {self.message}"]
        
        if self.identifier:
            parts.append(f"  Column: {self.identifier}")
        
        if self.suggestion:
            parts.append(f"  Suggestion: {self.suggestion}")
        
        return "\n".join(parts)
    
    @classmethod
    def create_arity_mismatch(cls, column_count: int, value_count: int) -> SemanticErrorDetail:
        """Create a column/value count mismatch error."""
        return cls(
            error_type="Arity Mismatch",
            message=f"Column count ({column_count}) does not match value count ({value_count}).",
            expected_count=column_count,
            actual_count=value_count,
            suggestion="Provide exactly one value per listed column.",
        )
    
    @classmethod
    def create_type_mismatch(
        cls,
        column: str,
        expected_type: str,
        actual_type: str,
    ) -> SemanticErrorDetail:
        """Create a value/column type mismatch error."""
        return cls(
            error_type="Type Mismatch",
            message=f"Type mismatch for column '{column}'. Expected {expected_type} but got {actual_type}.",
            identifier=column,
            expected_type=expected_type,
            actual_type=actual_type,
        )


ErrorDetail = Union[LexicalErrorDetail, SyntaxErrorDetail, SemanticErrorDetail]


class SQLValidationError(Exception):
    """Base class for every validation failure; wraps a structured detail."""

    kind: ErrorKind

    def __init__(self, detail: ErrorDetail):
        self.detail = detail
        super().__init__(detail.format_message())

    @property
    def message(self) -> str:
        return self.detail.message

    def __str__(self) -> str:
        return self.detail.format_message()


class SQLLexError(SQLValidationError):
    """Unterminated string literal or unexpected character."""
    kind = ErrorKind.LEX


class SQLSyntaxError(SQLValidationError):
    """Grammar violation, possibly with a keyword suggestion."""
    kind = ErrorKind.SYNTAX


class SQLArityError(SQLValidationError):
    """INSERT column count differs from value count."""
    kind = ErrorKind.ARITY


class SQLTypeError(SQLValidationError):
    """INSERT value kind incompatible with the inferred column type."""
    kind = ErrorKind.TYPE


def create_lexical_error(
    message: str,
    position: Optional[int] = None,
    invalid_char: Optional[str] = None,
    context: Optional[str] = None,
) -> SQLLexError:
    """Factory function to create a lexical error."""
    return SQLLexError(LexicalErrorDetail(
        message=message,
        position=position,
        invalid_char=invalid_char,
        context=context,
    ))


def create_syntax_error(
    message: str,
    position: Optional[int] = None,
    found: Optional[str] = None,
    expected: Optional[List[str]] = None,
    suggestion: Optional[str] = None,
) -> SQLSyntaxError:
    """Factory function to create a syntax error."""
    return SQLSyntaxError(SyntaxErrorDetail(
        message=message,
        position=position,
        found=found,
        expected=expected,
        suggestion=suggestion,
    ))
