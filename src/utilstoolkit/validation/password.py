"""Password rule checks."""

__all__ = [
    "PasswordRules",
    "is_valid_password",
    "is_strong_password",
]

import re
from dataclasses import dataclass
from typing import Any, Optional

_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"\d")
_SPECIAL = re.compile(r"[!@#$%^&*(),.?\":{}|<>]")
_STRONG = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[^\w\s]).{8,}")


@dataclass(frozen=True)
class PasswordRules:
    """
    Rules applied by is_valid_password.

    Attributes:
        min_length: Minimum number of characters (default 8)
        has_uppercase: Require an ASCII uppercase letter (default True)
        has_number: Require a digit (default True)
        has_special: Require one of !@#$%^&*(),.?":{}|<> (default True)
    """

    min_length: int = 8
    has_uppercase: bool = True
    has_number: bool = True
    has_special: bool = True


def is_valid_password(password: Any, rules: Optional[PasswordRules] = None) -> bool:
    """
    Check a password against a set of rules.

    Args:
        password: Candidate password
        rules: Rules to enforce (defaults to PasswordRules())

    Returns:
        True if every enabled rule is satisfied

    Example:
        >>> is_valid_password("Secret#123")
        True
        >>> is_valid_password("secret", PasswordRules(min_length=4, has_uppercase=False,
        ...                   has_number=False, has_special=False))
        True
    """
    if rules is None:
        rules = PasswordRules()

    if not isinstance(password, str) or len(password) < rules.min_length:
        return False
    if rules.has_uppercase and not _UPPERCASE.search(password):
        return False
    if rules.has_number and not _DIGIT.search(password):
        return False
    if rules.has_special and not _SPECIAL.search(password):
        return False
    return True


def is_strong_password(password: Any) -> bool:
    """At least 8 characters with lower, upper, digit and a symbol."""
    if not isinstance(password, str):
        return False
    return _STRONG.match(password) is not None
