"""
Command line front-end for utilstoolkit.

Each subcommand group mirrors a subpackage:

    utilstoolkit color contrast '#ffffff' '#000000'
    utilstoolkit color palette '#3498db' --count=3
    utilstoolkit text snake "helloWorld foo"
    utilstoolkit numeric primes 30
    utilstoolkit validate card "4539 1488 0343 6467"
    utilstoolkit dates calendar 2024 2
    utilstoolkit --verbose color to_rgb '#fff'

Arguments are parsed by fire, so hex colors should keep their "#" prefix
(a bare "000000" would be read as the integer 0).
"""

import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

import fire
from loguru import logger

from utilstoolkit import color, dates, numeric, text, validation


def configure_logging(verbose: bool = False) -> None:
    """Send this package's log records to stderr (DEBUG if verbose)."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")
    logger.enable("utilstoolkit")


def _parse_datetime(value: Any) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        logger.error(f"Not an ISO date: {value!r}")
        return None


class ColorCommands:
    """Hex/RGB/HSL conversion, palettes and contrast."""

    def to_rgb(self, hex_color: str) -> Optional[Dict[str, int]]:
        rgb = color.hex_to_rgb(str(hex_color))
        return rgb._asdict() if rgb else None

    def to_hex(self, r: float, g: float, b: float) -> str:
        return color.rgb_to_hex(r, g, b)

    def to_hsl(self, hex_color: str) -> Optional[Dict[str, int]]:
        rgb = color.hex_to_rgb(str(hex_color))
        return color.rgb_to_hsl(*rgb)._asdict() if rgb else None

    def from_hsl(self, h: float, s: float, l: float) -> str:  # noqa: E741
        return color.hsl_to_hex(h, s, l)

    def palette(self, base_color: str, count: int = 5) -> List[str]:
        return color.generate_palette(str(base_color), count)

    def contrast(self, color1: str, color2: str) -> Optional[float]:
        return color.calculate_contrast(str(color1), str(color2))

    def readable(
        self,
        color1: str,
        color2: str,
        level: str = "AA",
        text_size: str = "normal",
    ) -> bool:
        return color.is_color_readable(str(color1), str(color2), level, text_size)

    def invert(self, hex_color: str) -> Optional[str]:
        return color.invert_color(str(hex_color))

    def complement(self, hex_color: str) -> Optional[str]:
        return color.get_complementary_color(str(hex_color))

    def brightness(self, hex_color: str, percent: float) -> Optional[str]:
        return color.adjust_brightness(str(hex_color), percent)

    def valid(self, hex_color: str) -> bool:
        return color.is_valid_hex(str(hex_color))


class TextCommands:
    """Case conversion and string helpers."""

    def camel(self, value: str) -> str:
        return text.to_camel_case(str(value))

    def snake(self, value: str) -> str:
        return text.to_snake_case(str(value))

    def kebab(self, value: str) -> str:
        return text.to_kebab_case(str(value))

    def pascal(self, value: str) -> str:
        return text.to_pascal_case(str(value))

    def title(self, value: str) -> str:
        return text.to_title_case(str(value))

    def escape(self, value: str) -> str:
        return text.escape_html(str(value))

    def unescape(self, value: str) -> str:
        return text.unescape_html(str(value))

    def palindrome(self, value: str) -> bool:
        return text.is_palindrome(str(value))

    def truncate(self, value: str, length: int = 50, suffix: str = "...") -> str:
        return text.truncate(str(value), length, suffix)


class NumericCommands:
    """Arithmetic and statistics."""

    def gcd(self, a: int, b: int) -> int:
        return numeric.gcd(a, b)

    def lcm(self, a: int, b: int) -> int:
        return numeric.lcm(a, b)

    def factorial(self, n: int) -> Optional[int]:
        try:
            return numeric.factorial(n)
        except ValueError as e:
            logger.error(str(e))
            return None

    def is_prime(self, n: int) -> bool:
        return numeric.is_prime(n)

    def primes(self, limit: int) -> List[int]:
        return numeric.get_primes_up_to(limit)

    def stats(self, *values: float) -> Dict[str, Any]:
        return {
            "average": numeric.average(values),
            "median": numeric.median(values),
            "mode": numeric.mode(values),
            "total": numeric.total(values),
        }


class ValidateCommands:
    """Input validators."""

    def email(self, value: str) -> bool:
        return validation.is_valid_email(str(value))

    def phone(self, value: str, country: str = "US") -> bool:
        return validation.is_valid_phone(str(value), country)

    def url(self, value: str) -> bool:
        return validation.is_valid_url(str(value))

    def card(self, value: str) -> bool:
        return validation.is_valid_credit_card(str(value))

    def ipv4(self, value: str) -> bool:
        return validation.is_valid_ipv4(str(value))

    def date(self, value: str) -> bool:
        return validation.is_valid_date(str(value))

    def password(
        self,
        value: str,
        min_length: int = 8,
        has_uppercase: bool = True,
        has_number: bool = True,
        has_special: bool = True,
    ) -> bool:
        rules = validation.PasswordRules(
            min_length=min_length,
            has_uppercase=has_uppercase,
            has_number=has_number,
            has_special=has_special,
        )
        return validation.is_valid_password(str(value), rules)


class DatesCommands:
    """Date formatting and calendars. Dates are given in ISO format."""

    def format(self, value: str, fmt: str = "YYYY-MM-DD") -> str:
        parsed = _parse_datetime(value)
        return dates.format_date(parsed, fmt) if parsed else ""

    def diff(self, first: str, second: str, unit: str = "days") -> Optional[int]:
        a = _parse_datetime(first)
        b = _parse_datetime(second)
        return dates.date_diff(a, b, unit) if a and b else None

    def calendar(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> List[List[Optional[int]]]:
        return dates.generate_calendar(year, month)

    def week(self, value: str) -> Optional[int]:
        parsed = _parse_datetime(value)
        return dates.get_week_number(parsed) if parsed else None


class Toolkit:
    """Stateless helpers for colors, text, numbers, dates and validation."""

    def __init__(self, verbose: bool = False):
        configure_logging(verbose)
        self.color = ColorCommands()
        self.text = TextCommands()
        self.numeric = NumericCommands()
        self.validate = ValidateCommands()
        self.dates = DatesCommands()


def main() -> None:
    fire.Fire(Toolkit)


if __name__ == "__main__":
    main()
