"""HTML entity escaping for the five special characters."""

__all__ = [
    "escape_html",
    "unescape_html",
]

from typing import Any

# "&" is escaped first and unescaped last
_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_html(text: Any) -> str:
    """
    Escape &, <, >, " and ' as HTML entities.

    Example:
        >>> escape_html('<a href="x">Tom & Jerry</a>')
        '&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&lt;/a&gt;'
    """
    if not isinstance(text, str):
        return ""
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def unescape_html(text: Any) -> str:
    """
    Reverse escape_html; "&amp;" is decoded last.

    Example:
        >>> unescape_html("&amp;lt;")
        '&lt;'
    """
    if not isinstance(text, str):
        return ""
    for char, entity in reversed(_ESCAPES):
        text = text.replace(entity, char)
    return text
