"""
utilstoolkit - Stateless helpers for colors, text, numbers, dates and validation.

This package is organized into focused subpackages:

- color/      Color model (requires loguru, numpy)
              - convert: hex_to_rgb, rgb_to_hex, rgb_to_hsl, hsl_to_hex, is_valid_hex
              - palette: generate_palette, invert_color, get_complementary_color,
                         adjust_brightness
              - contrast: relative_luminance, calculate_contrast, is_color_readable

- text/       Pure text utilities (no dependencies)
              - strings: capitalize, trim, truncate, is_palindrome, ...
              - case: to_camel_case, to_snake_case, to_kebab_case, ...
              - html: escape_html, unescape_html

- numeric/    Numbers (requires numpy)
              - arithmetic: gcd, lcm, factorial, is_prime, get_primes_up_to, ...
              - stats: average, median, mode, total

- validation/ Input validators (requires loguru, numpy)
              - formats: is_valid_email, is_valid_phone, is_valid_url, ...
              - password: PasswordRules, is_valid_password, is_strong_password
              - checksum: is_valid_credit_card

- dates/      Dates (requires loguru, numpy)
              - format: format_date, date_diff
              - periods: generate_calendar, add_months, get_week_number, ...

Bad input is reported with a sentinel (None, "", [] or False) rather than an
exception; factorial() on a negative number is the only function that raises.

Logging goes through loguru and is disabled for this package by default.
Call ``logger.enable("utilstoolkit")`` to see why inputs were rejected.

Usage:
    from utilstoolkit.color import calculate_contrast, is_color_readable
    from utilstoolkit.text import to_snake_case
    from utilstoolkit.validation import PasswordRules, is_valid_password
"""

__version__ = "0.1.0"

from loguru import logger

logger.disable("utilstoolkit")

# Convenience imports from color
from utilstoolkit.color import (
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    hsl_to_hex,
    generate_palette,
    calculate_contrast,
    is_valid_hex,
    invert_color,
    get_complementary_color,
    adjust_brightness,
    is_color_readable,
)

# Convenience imports from text
from utilstoolkit.text import (
    capitalize,
    truncate,
    to_camel_case,
    to_snake_case,
    to_kebab_case,
    escape_html,
)

# Convenience imports from validation
from utilstoolkit.validation import (
    PasswordRules,
    is_valid_email,
    is_valid_password,
    is_valid_credit_card,
)

# Convenience imports from dates
from utilstoolkit.dates import (
    format_date,
    date_diff,
)

__all__ = [
    "__version__",
    # color
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_hex",
    "generate_palette",
    "calculate_contrast",
    "is_valid_hex",
    "invert_color",
    "get_complementary_color",
    "adjust_brightness",
    "is_color_readable",
    # text
    "capitalize",
    "truncate",
    "to_camel_case",
    "to_snake_case",
    "to_kebab_case",
    "escape_html",
    # validation
    "PasswordRules",
    "is_valid_email",
    "is_valid_password",
    "is_valid_credit_card",
    # dates
    "format_date",
    "date_diff",
]
