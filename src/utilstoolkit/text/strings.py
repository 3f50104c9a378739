"""
Pure text utilities - no external dependencies.

Functions for trimming, truncation, reversal and simple checks.
Non-string input yields an empty string unless noted otherwise.
"""

__all__ = [
    "capitalize",
    "trim",
    "reverse",
    "truncate",
    "repeat",
    "is_palindrome",
    "count_occurrences",
    "strip_punctuation",
    "is_empty",
    "has_only_whitespace",
]

import re
from typing import Any

_WHITESPACE = re.compile(r"\s+")
_NON_ALNUM = re.compile(r"[^a-z0-9]")
_PUNCTUATION = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")


def capitalize(text: Any) -> str:
    """
    Uppercase the first character, leaving the rest untouched.

    Example:
        >>> capitalize("hello World")
        'Hello World'
    """
    if not isinstance(text, str) or not text:
        return ""
    return text[0].upper() + text[1:]


def trim(text: Any, remove_all: bool = False) -> str:
    """
    Strip surrounding whitespace, or every whitespace character.

    Example:
        >>> trim("  a b  ")
        'a b'
        >>> trim("  a b  ", remove_all=True)
        'ab'
    """
    if not isinstance(text, str):
        return ""
    if remove_all:
        return _WHITESPACE.sub("", text)
    return text.strip()


def reverse(text: Any) -> str:
    """Reverse a string by code point."""
    if not isinstance(text, str):
        return ""
    return text[::-1]


def truncate(text: Any, length: int = 50, suffix: str = "...") -> Any:
    """
    Truncate text to length characters, appending suffix if truncated.

    Args:
        text: Text to truncate
        length: Number of characters kept before the suffix
        suffix: Suffix to add if truncated

    Returns:
        Truncated text with suffix, or the original value if it is short
        enough or not a string

    Example:
        >>> truncate("Hello World", 5)
        'Hello...'
    """
    if isinstance(text, str) and len(text) > length:
        return text[:length] + suffix
    return text


def repeat(text: Any, times: int = 1) -> str:
    """Repeat text times times."""
    if not isinstance(text, str):
        return ""
    return text * times


def is_palindrome(text: Any) -> bool:
    """
    Check for a palindrome, ignoring case and non-alphanumerics.

    Example:
        >>> is_palindrome("A man, a plan, a canal: Panama")
        True
    """
    if not isinstance(text, str):
        return False
    cleaned = _NON_ALNUM.sub("", text.lower())
    return cleaned == cleaned[::-1]


def count_occurrences(text: Any, sub: Any) -> int:
    """
    Count non-overlapping occurrences of sub in text.

    Returns 0 for non-string arguments or an empty sub.

    Example:
        >>> count_occurrences("banana", "an")
        2
    """
    if not isinstance(text, str) or not isinstance(sub, str) or not sub:
        return 0
    return text.count(sub)


def strip_punctuation(text: Any) -> str:
    """Remove common ASCII punctuation."""
    if not isinstance(text, str):
        return ""
    return _PUNCTUATION.sub("", text)


def is_empty(text: Any) -> bool:
    """True for empty or whitespace-only strings, and for non-strings."""
    if not isinstance(text, str):
        return True
    return len(text.strip()) == 0


def has_only_whitespace(text: Any) -> bool:
    """True for empty or whitespace-only strings; False for non-strings."""
    if not isinstance(text, str):
        return False
    return re.fullmatch(r"\s*", text) is not None
