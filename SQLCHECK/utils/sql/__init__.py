"""SQL statement validation for a small SELECT/INSERT/UPDATE/DELETE subset.

This package provides:
- A lexer (tokenize_sql) - converts query text -> tokens
- A grammar validator (validate_tokens) - LL(1) recursive descent over tokens,
  with INSERT arity and heuristic type checks and first-keyword typo suggestions
- Pydantic models for structured results
- The validation façade (check_sql / check) - runs both and reports the first failure

Nothing is ever executed; the package only answers "is this statement well formed?".
"""

from .errors import (
    ErrorKind,
    LexicalErrorDetail,
    SemanticErrorDetail,
    SQLArityError,
    SQLLexError,
    SQLSyntaxError,
    SQLTypeError,
    SQLValidationError,
    SyntaxErrorDetail,
)
from .grammar import STATEMENT_GRAMMAR
from .lexer import tokenize_sql
from .models import ParseResult, TokenizationResult, TokenModel, ValidationResult, ValidationStage
from .pipeline import check, check_many, check_sql
from .tokens import Token, TokenKind
from .type_inference import Column, DataType, infer_column_type, is_value_compatible
from .validator import GrammarValidator, validate_tokens
from .vocabulary import DEFAULT_VOCABULARY, KEYWORD_ORDER, KeywordVocabulary

__all__ = [
    # Lexer
    "tokenize_sql",
    "Token",
    "TokenKind",
    # Vocabulary
    "KeywordVocabulary",
    "DEFAULT_VOCABULARY",
    "KEYWORD_ORDER",
    # Grammar validator
    "GrammarValidator",
    "validate_tokens",
    "STATEMENT_GRAMMAR",
    # Type inference
    "DataType",
    "Column",
    "infer_column_type",
    "is_value_compatible",
    # Façade
    "check_sql",
    "check",
    "check_many",
    # Pydantic models
    "TokenModel",
    "TokenizationResult",
    "ParseResult",
    "ValidationResult",
    "ValidationStage",
    # Errors
    "ErrorKind",
    "SQLValidationError",
    "SQLLexError",
    "SQLSyntaxError",
    "SQLArityError",
    "SQLTypeError",
    "LexicalErrorDetail",
    "SyntaxErrorDetail",
    "SemanticErrorDetail",
]
