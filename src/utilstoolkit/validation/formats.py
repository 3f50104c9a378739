"""
Input format validators - requires loguru.

Every validator returns False for non-string input instead of raising.
"""

__all__ = [
    "PHONE_PATTERNS",
    "is_valid_email",
    "is_valid_phone",
    "is_valid_url",
    "is_valid_username",
    "is_numeric",
    "is_alpha",
    "is_alphanumeric",
    "is_valid_zip_code",
    "is_valid_ipv4",
    "is_valid_hex_color",
    "is_valid_date",
]

import math
import re
from datetime import date
from typing import Any, Dict
from urllib.parse import urlparse

from loguru import logger

from utilstoolkit.color.convert import is_valid_hex

PHONE_PATTERNS: Dict[str, re.Pattern[str]] = {
    "US": re.compile(r"(\+?1)?[-\s.]?\(?(\d{3})\)?[-\s.]?(\d{3})[-\s.]?(\d{4})"),
    "UK": re.compile(r"(\+?44|0)[-\s.]?(\d{2,4})[-\s.]?(\d{3,4})[-\s.]?(\d{3,4})"),
    "IN": re.compile(r"(\+91)?[6-9]\d{9}"),
}

_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_USERNAME = re.compile(r"[a-zA-Z0-9_]{3,20}")
_ALPHA = re.compile(r"[a-zA-Z]+")
_ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]+")
_ZIP_CODE = re.compile(r"\d{5}(-\d{4})?")
_OCTET = r"(?:25[0-5]|2[0-4]\d|1\d{2}|[1-9]?\d)"
_IPV4 = re.compile(rf"(?:{_OCTET}\.){{3}}{_OCTET}")
_ISO_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


def _full(pattern: re.Pattern[str], value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_valid_email(email: Any) -> bool:
    """
    Loose email shape check: local@domain.tld without whitespace.

    Example:
        >>> is_valid_email("user@example.com")
        True
        >>> is_valid_email("user@localhost")
        False
    """
    return _full(_EMAIL, email)


def is_valid_phone(phone: Any, country: str = "US") -> bool:
    """
    Validate a phone number for a country ("US", "UK" or "IN").

    Unknown country codes are checked against the US pattern.

    Example:
        >>> is_valid_phone("(555) 123-4567")
        True
        >>> is_valid_phone("+919876543210", "IN")
        True
    """
    pattern = PHONE_PATTERNS.get(country)
    if pattern is None:
        logger.debug(f"is_valid_phone: unknown country {country!r}, using US")
        pattern = PHONE_PATTERNS["US"]
    return _full(pattern, phone)


def is_valid_url(url: Any) -> bool:
    """
    Check for an absolute URL with a scheme and a network location.

    Example:
        >>> is_valid_url("https://example.com/path?q=1")
        True
        >>> is_valid_url("example.com")
        False
    """
    if not isinstance(url, str) or not url or url != url.strip():
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


def is_valid_username(username: Any) -> bool:
    """Letters, digits and underscores, 3 to 20 characters."""
    return _full(_USERNAME, username)


def is_numeric(value: Any) -> bool:
    """
    True for finite numbers and strings that parse as finite numbers.

    Booleans are rejected.

    Example:
        >>> is_numeric("3.14")
        True
        >>> is_numeric("inf")
        False
    """
    if isinstance(value, bool):
        return False
    if not isinstance(value, (int, float, str)):
        return False
    try:
        return math.isfinite(float(value))
    except (ValueError, OverflowError):
        return False


def is_alpha(text: Any) -> bool:
    """ASCII letters only, at least one."""
    return _full(_ALPHA, text)


def is_alphanumeric(text: Any) -> bool:
    """ASCII letters and digits only, at least one."""
    return _full(_ALPHANUMERIC, text)


def is_valid_zip_code(zip_code: Any) -> bool:
    """US ZIP code: 12345 or 12345-6789."""
    return _full(_ZIP_CODE, zip_code)


def is_valid_ipv4(ip: Any) -> bool:
    """
    Dotted-quad IPv4 address, octets 0-255 without leading zeros.

    Example:
        >>> is_valid_ipv4("192.168.0.1")
        True
        >>> is_valid_ipv4("256.0.0.1")
        False
    """
    return _full(_IPV4, ip)


def is_valid_hex_color(color: Any) -> bool:
    """3- or 6-digit hex color with optional "#"."""
    return is_valid_hex(color)


def is_valid_date(date_str: Any) -> bool:
    """
    YYYY-MM-DD string naming a real calendar day.

    Example:
        >>> is_valid_date("2024-02-29")
        True
        >>> is_valid_date("2023-02-29")
        False
    """
    if not isinstance(date_str, str):
        return False
    match = _ISO_DATE.fullmatch(date_str)
    if match is None:
        return False
    year, month, day = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True
