"""Helper functions for suggesting a keyword when a query starts with a typo.

Used by the grammar validator on the first token of a statement only.
"""

from typing import Iterable, List, Optional, Tuple


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character inserts, deletes and substitutions turning `a` into `b`."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (ca != cb),
            ))
        previous = current
    return previous[-1]


def suggestion_tolerance(word: str) -> int:
    """Largest edit distance still worth suggesting for `word`."""
    return max(2, len(word) // 3)


def rank_keywords(word: str, keywords: Iterable[str]) -> List[Tuple[str, int]]:
    """Return (keyword, distance) pairs sorted by distance; ties keep input order."""
    scored = [(keyword, levenshtein_distance(word, keyword)) for keyword in keywords]
    return sorted(scored, key=lambda pair: pair[1])


def suggest_keyword(word: str, keywords: Iterable[str]) -> Optional[str]:
    """
    Propose the closest keyword for a misspelled word.
    
    Args:
        word: Unknown word, already uppercased by the caller
        keywords: Keyword spellings in a fixed order (first one wins on ties)
        
    Returns:
        The closest keyword if its distance is within suggestion_tolerance(word), else None
    """
    if not word:
        return None
    ranked = rank_keywords(word, keywords)
    if not ranked:
        return None
    closest, distance = ranked[0]
    if distance <= suggestion_tolerance(word):
        return closest
    return None
