"""Keyword vocabulary: the fixed table of reserved words.

The vocabulary is built once and never mutated, so the lexer and the grammar
validator can share a single instance across threads. Iteration order is the
declared keyword order; keyword suggestions rely on it to break ties.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from .tokens import TokenKind


KEYWORD_ORDER: Tuple[TokenKind, ...] = (
    TokenKind.SELECT,
    TokenKind.FROM,
    TokenKind.WHERE,
    TokenKind.INSERT,
    TokenKind.INTO,
    TokenKind.VALUES,
    TokenKind.UPDATE,
    TokenKind.SET,
    TokenKind.DELETE,
    TokenKind.AND,
    TokenKind.OR,
    TokenKind.NOT,
)


class KeywordVocabulary:
    """Immutable mapping from uppercased keyword spelling to token kind."""

    __slots__ = ("_entries",)

    def __init__(self, keywords: Iterable[Tuple[str, TokenKind]]):
        entries = {}
        for spelling, kind in keywords:
            entries[spelling.upper()] = kind
        self._entries: Mapping[str, TokenKind] = MappingProxyType(entries)

    @classmethod
    def from_kinds(cls, kinds: Iterable[TokenKind]) -> KeywordVocabulary:
        return cls((kind.value, kind) for kind in kinds)

    def lookup(self, word: str) -> Optional[TokenKind]:
        """Return the keyword kind for `word` (any casing), or None."""
        return self._entries.get(word.upper())

    def spellings(self) -> Tuple[str, ...]:
        """Keyword spellings in declaration order."""
        return tuple(self._entries.keys())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"KeywordVocabulary({list(self._entries)})"


DEFAULT_VOCABULARY = KeywordVocabulary.from_kinds(KEYWORD_ORDER)
