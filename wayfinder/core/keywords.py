"""Keyword matching shared by the query analyzers and the court directory."""

import re
from collections.abc import Iterable
from functools import lru_cache


@lru_cache(maxsize=1024)
def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    # Latin keywords must start on a word boundary so "hi" does not fire on
    # "this"; short ones must also end on one so "ba" does not fire on "bank".
    # Devanagari has no reliable \b so it falls back to substring.
    if not keyword.isascii():
        return re.compile(re.escape(keyword))
    pattern = r"\b" + re.escape(keyword)
    if len(keyword) <= 3:
        pattern += r"\b"
    return re.compile(pattern)


def contains_keyword(text: str, keyword: str) -> bool:
    """Return True if keyword occurs in already-lowercased text."""
    return _keyword_pattern(keyword.lower()).search(text) is not None


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Return True if any keyword occurs in already-lowercased text."""
    return any(contains_keyword(text, keyword) for keyword in keywords)


def matching_keywords(text: str, keywords: Iterable[str]) -> list[str]:
    """Return the keywords that occur in already-lowercased text, in input order."""
    return [keyword for keyword in keywords if contains_keyword(text, keyword)]
