"""Color parsing, WCAG luminance and contrast helpers for theme validation."""

from __future__ import annotations

import math
import re
from typing import Optional, Sequence, Tuple

_HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}([0-9A-Fa-f]{2})?$")
_HEX_RGB_PREFIX_RE = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def validate_hex_color(color) -> bool:
    """Return True for ``#RRGGBB`` or ``#RRGGBBAA`` strings."""
    return isinstance(color, str) and _HEX_COLOR_RE.match(color) is not None


def hex_to_rgb(hex_color) -> Optional[Tuple[int, int, int]]:
    """Convert hex color to RGB tuple (0-255 range).

    Args:
        hex_color: Color in hex format, e.g. '#FF5500' or 'FF5500'. Only the
            first six digits are read, so an alpha suffix is ignored.

    Returns:
        Tuple of (R, G, B) values in 0-255 range, or None if unparseable
    """
    if not isinstance(hex_color, str):
        return None
    m = _HEX_RGB_PREFIX_RE.match(hex_color)
    if m is None:
        return None
    return (int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def _linearize(channel: int) -> float:
    c = channel / 255.0
    if c <= 0.03928:
        return c / 12.92
    return math.pow((c + 0.055) / 1.055, 2.4)


def relative_luminance(rgb: Sequence[int]) -> float:
    """WCAG 2.x relative luminance of an sRGB color (0.0-1.0)."""
    r, g, b = (_linearize(int(c)) for c in rgb[:3])
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(hex1, hex2) -> float:
    """WCAG contrast ratio between two hex colors.

    Returns 0.0 when either color cannot be parsed.
    """
    rgb1 = hex_to_rgb(hex1)
    rgb2 = hex_to_rgb(hex2)
    if rgb1 is None or rgb2 is None:
        return 0.0
    lum1 = relative_luminance(rgb1)
    lum2 = relative_luminance(rgb2)
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def interpolate_color(
    color1: Sequence[int], color2: Sequence[int], ratio: float
) -> Tuple[int, int, int]:
    """Linear blend of two RGB triples, floored per channel."""
    return (
        math.floor(color1[0] + (color2[0] - color1[0]) * ratio),
        math.floor(color1[1] + (color2[1] - color1[1]) * ratio),
        math.floor(color1[2] + (color2[2] - color1[2]) * ratio),
    )


__all__ = [
    "validate_hex_color",
    "hex_to_rgb",
    "relative_luminance",
    "contrast_ratio",
    "interpolate_color",
]
