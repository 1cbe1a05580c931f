"""Keyword Formatting & Compaction — casing transforms and stopword removal.

Invariants:
    - format_keyword: KW = Title Case per space-separated word, kw = lowercase,
      Kw = first character upper and the rest lower; unknown mode returns input
    - compact_keyword never reorders words and never keeps a standalone stopword
    - STOPWORDS is immutable process-wide data

Design Decisions:
    - Title Case splits on single spaces (not runs): empty words survive as-is,
      so double spaces in a keyword are preserved
    - Compaction splits on whitespace, em-dash, pipe and ampersand; the result
      is space-joined, so a second pass only sees plain spaces
"""

import re

from adcopy.core.domain_types import KeywordFormat


STOPWORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "in", "on", "at", "to", "for", "of",
})

_SEPARATORS = re.compile(r"[\s—|&]+")


def format_keyword(keyword: str, mode: KeywordFormat | str) -> str:
    """Apply the casing named by the token (KW, kw, Kw) to the keyword."""
    if mode == KeywordFormat.TITLE:
        return " ".join(_capitalize(word) for word in keyword.split(" "))
    if mode == KeywordFormat.LOWER:
        return keyword.lower()
    if mode == KeywordFormat.SENTENCE:
        return _capitalize(keyword)
    return keyword


def compact_keyword(keyword: str) -> str:
    """Drop stopwords and separator punctuation, keep word order.

    "The Best Deals in Town" -> "Best Deals Town"
    """
    words = _SEPARATORS.split(keyword)
    kept = [w for w in words if w.lower() not in STOPWORDS]
    return " ".join(kept).strip()


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:].lower()
