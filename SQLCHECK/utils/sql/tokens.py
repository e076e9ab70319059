"""Token definitions shared by the lexer and the grammar validator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    # Statement keywords
    SELECT = "SELECT"
    FROM = "FROM"
    WHERE = "WHERE"
    INSERT = "INSERT"
    INTO = "INTO"
    VALUES = "VALUES"
    UPDATE = "UPDATE"
    SET = "SET"
    DELETE = "DELETE"
    # Logical operators
    AND = "AND"
    OR = "OR"
    NOT = "NOT"
    # Comparison operators
    EQUAL = "EQUAL"
    LESS_THAN = "LESS_THAN"
    GREATER_THAN = "GREATER_THAN"
    LESS_EQUAL = "LESS_EQUAL"
    GREATER_EQUAL = "GREATER_EQUAL"
    NOT_EQUAL = "NOT_EQUAL"
    # Punctuation
    COMMA = "COMMA"
    SEMICOLON = "SEMICOLON"
    LEFT_PAREN = "LEFT_PAREN"
    RIGHT_PAREN = "RIGHT_PAREN"
    ASTERISK = "ASTERISK"
    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING_LITERAL = "STRING_LITERAL"
    NUMBER = "NUMBER"
    END_OF_INPUT = "END_OF_INPUT"


COMPARISON_KINDS = frozenset({
    TokenKind.EQUAL,
    TokenKind.LESS_THAN,
    TokenKind.GREATER_THAN,
    TokenKind.LESS_EQUAL,
    TokenKind.GREATER_EQUAL,
    TokenKind.NOT_EQUAL,
})

VALUE_KINDS = frozenset({TokenKind.STRING_LITERAL, TokenKind.NUMBER, TokenKind.IDENTIFIER})


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    position: int = 0

    def describe(self) -> str:
        """Human-readable form used in diagnostics ("end of input", "'FROM'", ...)."""
        if self.kind is TokenKind.END_OF_INPUT:
            return "end of input"
        if self.kind is TokenKind.STRING_LITERAL:
            return f"'{self.lexeme}' (string)"
        return f"'{self.lexeme}'"
