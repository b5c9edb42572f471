"""Lexical overlap scoring between the submission and candidate articles."""

from typing import Optional


def words_of(text: Optional[str]) -> set[str]:
    """Case-folded whitespace tokens of ``text``."""
    if not text:
        return set()
    return set(text.casefold().split())


def similarity(a: Optional[str], b: Optional[str]) -> float:
    """
    Jaccard overlap of the word sets of ``a`` and ``b``.

    Returns 0.0 when either side is empty or missing.

    Example:
        >>> similarity("Officials confirm vote", "officials confirm the vote")
        0.75
    """
    words_a = words_of(a)
    words_b = words_of(b)
    if not words_a or not words_b:
        return 0.0
    return len(words_a & words_b) / len(words_a | words_b)
