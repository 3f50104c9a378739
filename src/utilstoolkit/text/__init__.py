"""
Text utilities subpackage - no external dependencies.

Pure functions for string manipulation, case conversion, and HTML escaping.
"""

from utilstoolkit.text.strings import (
    capitalize,
    trim,
    reverse,
    truncate,
    repeat,
    is_palindrome,
    count_occurrences,
    strip_punctuation,
    is_empty,
    has_only_whitespace,
)

from utilstoolkit.text.case import (
    to_camel_case,
    to_snake_case,
    to_kebab_case,
    to_pascal_case,
    to_title_case,
)

from utilstoolkit.text.html import (
    escape_html,
    unescape_html,
)

__all__ = [
    # strings
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
    # case
    "to_camel_case",
    "to_snake_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_title_case",
    # html
    "escape_html",
    "unescape_html",
]
