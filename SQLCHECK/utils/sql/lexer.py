"""Lexer/tokenizer for the SQLCHECK statement subset.

This module provides pure tokenization, independent of grammar validation.
Terminals are matched by a Lark basic lexer built from SQL_LEXER_GRAMMAR;
words are then classified as keywords or identifiers against a
KeywordVocabulary.

Architecture:
- Lexer: text -> tokens (this module)
- Grammar validator: tokens -> verdict (validator.py)
- Pipeline: runs both and reports the first failure (pipeline.py)
"""

from __future__ import annotations

from typing import List, Optional, Union

from lark import Lark, UnexpectedCharacters

from SQLCHECK.utils.logging import get_logger

from .errors import SQLLexError, create_lexical_error
from .grammar import SQL_LEXER_GRAMMAR
from .models import TokenizationResult
from .tokens import Token, TokenKind
from .vocabulary import DEFAULT_VOCABULARY, KeywordVocabulary

logger = get_logger(__name__)


_LEXER_CACHE: dict = {}


def _get_lexer() -> Lark:
    """Get the Lark instance used for tokenization.

    The grammar is fixed, so a single instance is built and reused.
    """
    cached = _LEXER_CACHE.get("default")
    if cached is not None:
        return cached
    lexer = Lark(
        SQL_LEXER_GRAMMAR,
        parser="lalr",
        lexer="basic",
        start="start",
    )
    _LEXER_CACHE["default"] = lexer
    return lexer


def _context_snippet(text: str, position: int) -> str:
    """Return the line around `position` with a caret under it."""
    line_start = text.rfind("\n", 0, position) + 1
    line_end = text.find("\n", position)
    if line_end == -1:
        line_end = len(text)
    start = max(line_start, position - 20)
    end = min(line_end, position + 20)
    snippet = text[start:end]
    pointer = " " * (position - start) + "^"
    return f"  {snippet}\n  {pointer}"


def _lex_error(text: str, exc: UnexpectedCharacters) -> SQLLexError:
    position = exc.pos_in_stream
    char = text[position] if position < len(text) else exc.char
    if char == "'":
        message = "Unterminated string literal."
    else:
        message = f"Unexpected character: {char}"
    return create_lexical_error(
        message=message,
        position=position,
        invalid_char=char,
        context=_context_snippet(text, position),
    )


def _classify(lark_token, vocabulary: KeywordVocabulary) -> Token:
    token_type = str(lark_token.type)
    value = str(lark_token.value)
    position = lark_token.start_pos or 0
    if token_type == "WORD":
        keyword = vocabulary.lookup(value)
        return Token(keyword or TokenKind.IDENTIFIER, value, position)
    if token_type == "STRING_LITERAL":
        # Trim the surrounding quotes
        return Token(TokenKind.STRING_LITERAL, value[1:-1], position)
    return Token(TokenKind(token_type), value, position)


def tokenize_sql(
    text: str,
    vocabulary: Optional[KeywordVocabulary] = None,
    return_model: bool = False,
) -> Union[List[Token], TokenizationResult]:
    """Tokenize a SQL string into a list of typed tokens.

    Args:
        text: The query text to tokenize
        vocabulary: Keyword table used to classify words (defaults to DEFAULT_VOCABULARY)
        return_model: If True, returns TokenizationResult instead of raising

    Returns:
        If return_model=False: list of Token ending with exactly one END_OF_INPUT
        If return_model=True: TokenizationResult describing success or the error

    Raises:
        SQLLexError: unterminated string literal or unexpected character
            (only when return_model=False)
    """
    text = text or ""
    vocab = DEFAULT_VOCABULARY if vocabulary is None else vocabulary

    try:
        tokens = [_classify(t, vocab) for t in _get_lexer().lex(text)]
    except UnexpectedCharacters as e:
        error = _lex_error(text, e)
        logger.debug(f"Tokenization failed at position {error.detail.position}: {error.message}")
        if return_model:
            return TokenizationResult.from_error(text, error)
        raise error from None

    tokens.append(Token(TokenKind.END_OF_INPUT, "", len(text)))
    logger.debug(f"Tokenized {len(text)} characters into {len(tokens)} tokens")

    if return_model:
        return TokenizationResult.from_tokens(tokens, text)
    return tokens
