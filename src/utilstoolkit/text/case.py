"""Case conversion (camel, snake, kebab, Pascal, title)."""

__all__ = [
    "to_camel_case",
    "to_snake_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_title_case",
]

import re
from typing import Any

_SEPARATOR_RUN = re.compile(r"[-_\s]+(.)?")
_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")
_WHITESPACE = re.compile(r"\s+")
_WORD_START = re.compile(r"(^\w|[-_\s]\w)", re.ASCII)


def to_camel_case(text: Any) -> str:
    """
    Convert to camelCase.

    Example:
        >>> to_camel_case("hello-world_foo bar")
        'helloWorldFooBar'
    """
    if not isinstance(text, str) or not text:
        return ""
    joined = _SEPARATOR_RUN.sub(lambda m: m.group(1).upper() if m.group(1) else "", text)
    return re.sub(r"^[A-Z]", lambda m: m.group(0).lower(), joined)


def _split_words(text: str, separator: str) -> str:
    text = _WHITESPACE.sub(separator, text)
    return _LOWER_UPPER.sub(rf"\1{separator}\2", text).lower()


def to_snake_case(text: Any) -> str:
    """
    Convert to snake_case; hyphens are left as they are.

    Example:
        >>> to_snake_case("helloWorld foo")
        'hello_world_foo'
    """
    if not isinstance(text, str) or not text:
        return ""
    return _split_words(text, "_")


def to_kebab_case(text: Any) -> str:
    """
    Convert to kebab-case; underscores are left as they are.

    Example:
        >>> to_kebab_case("helloWorld foo")
        'hello-world-foo'
    """
    if not isinstance(text, str) or not text:
        return ""
    return _split_words(text, "-")


def to_pascal_case(text: Any) -> str:
    """
    Convert to PascalCase.

    Example:
        >>> to_pascal_case("hello-world foo")
        'HelloWorldFoo'
    """
    if not isinstance(text, str) or not text:
        return ""
    return _WORD_START.sub(lambda m: re.sub(r"[-_\s]", "", m.group(0)).upper(), text)


def to_title_case(text: Any) -> str:
    """
    Lowercase everything, then capitalize each space-separated word.

    Example:
        >>> to_title_case("hELLO wORLD")
        'Hello World'
    """
    if not isinstance(text, str) or not text:
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in text.lower().split(" "))
