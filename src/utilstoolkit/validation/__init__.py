"""
Validation utilities subpackage - requires loguru and numpy.

Format validators, Luhn checksum, and password rules. All return booleans.
"""

from utilstoolkit.validation.formats import (
    PHONE_PATTERNS,
    is_valid_email,
    is_valid_phone,
    is_valid_url,
    is_valid_username,
    is_numeric,
    is_alpha,
    is_alphanumeric,
    is_valid_zip_code,
    is_valid_ipv4,
    is_valid_hex_color,
    is_valid_date,
)

from utilstoolkit.validation.password import (
    PasswordRules,
    is_valid_password,
    is_strong_password,
)

from utilstoolkit.validation.checksum import (
    is_valid_credit_card,
)

__all__ = [
    # formats
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
    # password
    "PasswordRules",
    "is_valid_password",
    "is_strong_password",
    # checksum
    "is_valid_credit_card",
]
