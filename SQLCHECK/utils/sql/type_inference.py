"""Heuristic column type inference for INSERT statements.

Types are guessed from column naming conventions only; there is no schema.
The string word list is checked before the number word list, so a name that
matches both (e.g. "price_code") is a string column.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .tokens import TokenKind


class DataType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    UNKNOWN = "unknown"


STRING_COLUMN_WORDS: Tuple[str, ...] = (
    "name", "firstname", "lastname", "email", "address", "city", "state",
    "country", "description", "title", "username", "password", "phone",
    "status", "type", "color", "url", "code",
)

NUMBER_COLUMN_WORDS: Tuple[str, ...] = (
    "id", "age", "count", "amount", "price", "quantity", "total", "number",
    "size", "width", "height", "weight", "duration", "score", "rating",
)


@dataclass(frozen=True)
class Column:
    name: str
    expected_type: DataType


def _matches_any(name: str, words: Tuple[str, ...]) -> bool:
    return any(name == word or word in name for word in words)


def infer_column_type(column_name: str) -> DataType:
    """Guess a column's type from its name."""
    lower_name = column_name.lower()
    if _matches_any(lower_name, STRING_COLUMN_WORDS):
        return DataType.STRING
    if _matches_any(lower_name, NUMBER_COLUMN_WORDS):
        return DataType.NUMBER
    return DataType.UNKNOWN


def is_value_compatible(value_kind: TokenKind, expected_type: DataType) -> bool:
    """Check a value token kind against an inferred column type.

    IDENTIFIER values stand in for expressions or placeholders and are
    accepted wherever a string or number is.
    """
    if expected_type is DataType.STRING:
        return value_kind in (TokenKind.STRING_LITERAL, TokenKind.IDENTIFIER)
    if expected_type is DataType.NUMBER:
        return value_kind in (TokenKind.NUMBER, TokenKind.IDENTIFIER)
    if expected_type is DataType.DATE:
        return value_kind is TokenKind.STRING_LITERAL
    # BOOLEAN and UNKNOWN accept anything
    return True


def describe_value_kind(value_kind: TokenKind) -> str:
    if value_kind is TokenKind.STRING_LITERAL:
        return "string"
    if value_kind is TokenKind.NUMBER:
        return "number"
    return "identifier"
