"""SQL validation pipeline: the façade over lexer and grammar validator.

check_sql() runs:
1. Tokenization (lexer)
2. Grammar validation, including INSERT arity/type checks (validator)

The first failure of either stage becomes the single diagnostic of a failed
ValidationResult; nothing escapes as an exception. Each call builds its own
tokens and cursor, so calls are independent and safe to run in parallel.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from SQLCHECK.utils.error_handling import ErrorContext, log_error_with_context
from SQLCHECK.utils.logging import get_logger

from .errors import SQLValidationError
from .lexer import tokenize_sql
from .models import ValidationResult, stage_for_kind
from .validator import validate_tokens
from .vocabulary import DEFAULT_VOCABULARY, KeywordVocabulary

logger = get_logger(__name__)


def check_sql(
    sql: str,
    vocabulary: Optional[KeywordVocabulary] = None,
) -> ValidationResult:
    """Validate one query and return the verdict.
    
    Args:
        sql: The query text, passed verbatim
        vocabulary: Keyword table (defaults to DEFAULT_VOCABULARY)
    
    Returns:
        ValidationResult with ok=True and no diagnostics, or ok=False and
        exactly one diagnostic describing the first failure
    
    Example:
        >>> check_sql("SELECT * FROM users;").ok
        True
        >>> check_sql("SELEC * FROM users;").diagnostics[0].splitlines()[0]
        "Syntax error: Unknown keyword 'SELEC'. Did you mean 'SELECT'?"
    """
    sql = sql or ""
    vocab = DEFAULT_VOCABULARY if vocabulary is None else vocabulary
    tokens = []
    try:
        tokens = tokenize_sql(sql, vocabulary=vocab)
        statement = validate_tokens(tokens, vocabulary=vocab)
    except SQLValidationError as e:
        log_error_with_context(
            e,
            ErrorContext(
                query=sql,
                stage=stage_for_kind(e.kind).value,
                token_count=len(tokens) if tokens else None,
            ),
        )
        return ValidationResult.from_error(sql, e, token_count=len(tokens))

    logger.debug(f"Query valid: {statement.value} ({len(tokens)} tokens)")
    return ValidationResult.from_success(sql, statement.value, len(tokens))


# Name used by callers that treat the façade as `check(sql)`
check = check_sql


def check_many(
    queries: Iterable[str],
    vocabulary: Optional[KeywordVocabulary] = None,
) -> List[ValidationResult]:
    """Validate a batch of queries in order, each one independently."""
    results = [check_sql(query, vocabulary=vocabulary) for query in queries]
    failed = sum(1 for r in results if not r.ok)
    logger.debug(f"Checked {len(results)} queries, {failed} failed")
    return results
