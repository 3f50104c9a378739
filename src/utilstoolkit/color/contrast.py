"""
Luminance, contrast ratio and WCAG readability - requires loguru.

See https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio for the formulas.
"""

__all__ = [
    "WCAG_THRESHOLDS",
    "relative_luminance",
    "calculate_contrast",
    "is_color_readable",
]

from typing import Dict, Optional, Tuple

from loguru import logger

from utilstoolkit.color.convert import hex_to_rgb

# Minimum contrast ratio per (level, text size)
WCAG_THRESHOLDS: Dict[Tuple[str, str], float] = {
    ("AA", "normal"): 4.5,
    ("AA", "large"): 3.0,
    ("AAA", "normal"): 7.0,
    ("AAA", "large"): 4.5,
}

_LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


def _linearize(channel: int) -> float:
    value = channel / 255
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    """
    Relative luminance of an sRGB color, from 0 (black) to 1 (white).

    Example:
        >>> round(relative_luminance(255, 255, 255), 4)
        1.0
    """
    return sum(
        weight * _linearize(channel)
        for weight, channel in zip(_LUMINANCE_WEIGHTS, (r, g, b))
    )


def calculate_contrast(color1: str, color2: str) -> Optional[float]:
    """
    WCAG contrast ratio between two hex colors.

    Args:
        color1: 6-digit hex color
        color2: 6-digit hex color

    Returns:
        Ratio in [1, 21] (argument order does not matter), or None if
        either color is invalid

    Example:
        >>> round(calculate_contrast("#ffffff", "#000000"), 2)
        21.0
    """
    rgb1 = hex_to_rgb(color1)
    rgb2 = hex_to_rgb(color2)
    if rgb1 is None or rgb2 is None:
        return None

    lum1 = relative_luminance(*rgb1)
    lum2 = relative_luminance(*rgb2)
    brightest = max(lum1, lum2)
    darkest = min(lum1, lum2)
    return (brightest + 0.05) / (darkest + 0.05)


def is_color_readable(
    color1: str,
    color2: str,
    level: str = "AA",
    text_size: str = "normal",
) -> bool:
    """
    Check whether two colors meet a WCAG contrast level.

    Args:
        color1: Foreground hex color
        color2: Background hex color
        level: "AA" or "AAA"; anything else is never readable
        text_size: "large" or "normal"; unknown sizes count as normal

    Returns:
        True if the contrast ratio reaches the threshold

    Example:
        >>> is_color_readable("#ffffff", "#000000", "AAA")
        True
        >>> is_color_readable("#ffff00", "#ffffff")
        False
    """
    ratio = calculate_contrast(color1, color2)
    if ratio is None:
        return False

    size = "large" if text_size == "large" else "normal"
    threshold = WCAG_THRESHOLDS.get((level, size))
    if threshold is None:
        logger.debug(f"is_color_readable: unknown WCAG level {level!r}")
        return False
    return ratio >= threshold
