"""Similarity helpers (edit distance, keyword suggestion)."""

from .keyword_suggestion import (
    levenshtein_distance,
    suggest_keyword,
    suggestion_tolerance,
)

__all__ = [
    "levenshtein_distance",
    "suggest_keyword",
    "suggestion_tolerance",
]
