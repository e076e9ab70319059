"""Pydantic models for SQL validation pipeline results.

This module defines structured data models for the result of each stage:
- Lexer: TokenizationResult
- Grammar validator: ParseResult
- Full pipeline: ValidationResult

None of the models carry timestamps: validating the same text twice yields
equal results.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import ErrorKind, SQLValidationError


class ValidationStage(str, Enum):
    """Stages of the SQL validation pipeline."""
    LEXICAL = "lexical"
    SYNTAX = "syntax"
    SEMANTIC = "semantic"


def stage_for_kind(kind: ErrorKind) -> ValidationStage:
    if kind is ErrorKind.LEX:
        return ValidationStage.LEXICAL
    if kind is ErrorKind.SYNTAX:
        return ValidationStage.SYNTAX
    return ValidationStage.SEMANTIC


# ============================================================================
# Lexer Models
# ============================================================================

class TokenModel(BaseModel):
    """Pydantic model for a SQL token."""
    
    kind: str = Field(description="Token kind (e.g., 'SELECT', 'IDENTIFIER', 'COMMA')")
    lexeme: str = Field(description="Exact source text (string literals without quotes)")
    position: int = Field(0, description="0-based offset of the token in the input")
    
    model_config = ConfigDict(frozen=True)


class TokenizationResult(BaseModel):
    """Result of lexical analysis (tokenization) phase."""
    
    success: bool = Field(description="Whether tokenization succeeded")
    tokens: List[TokenModel] = Field(default_factory=list, description="Tokens produced, END_OF_INPUT included")
    original_text: str = Field(description="Text that was tokenized")
    token_count: int = Field(0, description="Number of tokens, END_OF_INPUT included")
    error: Optional[str] = Field(None, description="Formatted error message if tokenization failed")
    error_position: Optional[int] = Field(None, description="Offset where the error occurred")
    
    @classmethod
    def from_tokens(cls, tokens: List[Any], text: str) -> TokenizationResult:
        """Create TokenizationResult from a list of Token objects."""
        token_models = [
            TokenModel(kind=token.kind.value, lexeme=token.lexeme, position=token.position)
            for token in tokens
        ]
        return cls(
            success=True,
            tokens=token_models,
            original_text=text,
            token_count=len(token_models),
        )
    
    @classmethod
    def from_error(cls, text: str, error: SQLValidationError) -> TokenizationResult:
        """Create TokenizationResult from a lexical error."""
        return cls(
            success=False,
            original_text=text,
            error=str(error),
            error_position=getattr(error.detail, "position", None),
        )


# ============================================================================
# Grammar Validator Models
# ============================================================================

class ParseResult(BaseModel):
    """Result of grammar validation (syntax + INSERT semantic checks)."""
    
    success: bool = Field(description="Whether the statement validated")
    statement: Optional[str] = Field(None, description="Validated statement kind (SELECT, INSERT, ...)")
    error: Optional[str] = Field(None, description="Formatted error message if validation failed")
    error_kind: Optional[ErrorKind] = Field(None, description="Kind of the failure")
    
    @classmethod
    def from_success(cls, statement: str) -> ParseResult:
        return cls(success=True, statement=statement)
    
    @classmethod
    def from_error(cls, error: SQLValidationError) -> ParseResult:
        return cls(success=False, error=str(error), error_kind=error.kind)


# ============================================================================
# Full Pipeline Model
# ============================================================================

class ValidationResult(BaseModel):
    """Verdict of the validation façade: ok, or exactly one diagnostic."""
    
    ok: bool = Field(description="Whether the query passed every check")
    diagnostics: List[str] = Field(default_factory=list, description="Diagnostic messages (one on failure, none on success)")
    query: str = Field("", description="Query text that was checked")
    statement: Optional[str] = Field(None, description="Validated statement kind")
    error_kind: Optional[ErrorKind] = Field(None, description="Kind of the failure")
    stage_failed: Optional[ValidationStage] = Field(None, description="First stage that failed (None if all passed)")
    token_count: int = Field(0, description="Tokens produced by the lexer (0 if lexing failed)")
    
    @classmethod
    def from_success(cls, query: str, statement: str, token_count: int) -> ValidationResult:
        return cls(ok=True, query=query, statement=statement, token_count=token_count)
    
    @classmethod
    def from_error(cls, query: str, error: SQLValidationError, token_count: int = 0) -> ValidationResult:
        return cls(
            ok=False,
            diagnostics=[str(error)],
            query=query,
            error_kind=error.kind,
            stage_failed=stage_for_kind(error.kind),
            token_count=token_count,
        )
    
    def get_summary(self) -> str:
        """One-line summary used by the command line shell."""
        if self.ok:
            return "SQL query is valid."
        return f"Error: {self.diagnostics[0]}" if self.diagnostics else "Error: validation failed."
