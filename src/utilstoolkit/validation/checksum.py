"""Luhn checksum validation for card numbers."""

__all__ = ["is_valid_credit_card"]

import re
from typing import Any

_SEPARATORS = re.compile(r"[\s-]")


def is_valid_credit_card(card_number: Any) -> bool:
    """
    Validate a card number with the Luhn algorithm.

    Spaces and dashes are ignored; any other non-digit fails.

    Example:
        >>> is_valid_credit_card("4539 1488 0343 6467")
        True
        >>> is_valid_credit_card("4539 1488 0343 6468")
        False
    """
    if not isinstance(card_number, str):
        return False
    digits = _SEPARATORS.sub("", card_number)
    if not digits.isascii() or not digits.isdigit():
        return False

    checksum = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        checksum += digit
    return checksum % 10 == 0
