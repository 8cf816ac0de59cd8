"""
python/themeforge/palette.py
PixelFactory palette, WCAG reference pairs and preview colors.

Palette entries carry the usage context reported when a color goes unused.
Contrast pairs are checked against the AA text threshold (4.5:1) except for
comments, which are intentionally dimmer.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from .colors import hex_to_rgb

AA_TEXT_RATIO = 4.5
COMMENT_COLOR = "#5f5f5f"
COMMENT_MIN_RATIO = 2.5


@dataclass(frozen=True)
class PaletteColor:
    hex: str
    usage: str


@dataclass(frozen=True)
class ContrastPair:
    foreground: str
    background: str
    min_ratio: float = AA_TEXT_RATIO

    def allowed_minimum(self) -> float:
        """Comment text is allowed to fall below the pair minimum."""
        if self.foreground.lower() == COMMENT_COLOR:
            return COMMENT_MIN_RATIO
        return self.min_ratio


PALETTE: Mapping[str, PaletteColor] = MappingProxyType({
    "bg1": PaletteColor("#121212", "primary background"),
    "bg2": PaletteColor("#1e1e1e", "secondary background"),
    "bg3": PaletteColor("#2a2a2a", "tertiary background"),
    "bg4": PaletteColor("#3a3a3a", "quaternary background"),
    "comment": PaletteColor("#5f5f5f", "comments"),
    "operator": PaletteColor("#FF8F2E", "operators & active elements"),
    "punctuation": PaletteColor("#7f7b66", "punctuation & borders"),
    "string": PaletteColor("#8A9E78", "strings & success"),
    "number": PaletteColor("#CF7F8F", "numbers & magenta"),
    "entity": PaletteColor("#798283", "entities & blue"),
    "keyword": PaletteColor("#ea603e", "keywords"),
    "storage": PaletteColor("#FFC62F", "storage & yellow"),
    "pointer": PaletteColor("#EBA96C", "pointers & orange"),
    "library": PaletteColor("#FF8F2E", "library functions"),
    "invalid": PaletteColor("#C71B00", "invalid/error states"),
})

CONTRAST_PAIRS: Tuple[ContrastPair, ...] = (
    ContrastPair("#798283", "#121212"),
    ContrastPair("#8A9E78", "#121212"),
    ContrastPair("#ea603e", "#121212"),
    ContrastPair("#FFC62F", "#1e1e1e"),
    ContrastPair("#FF8F2E", "#121212"),
    ContrastPair(COMMENT_COLOR, "#121212", 3.0),
)


def _rgb(name: str) -> Tuple[int, int, int]:
    rgb = hex_to_rgb(PALETTE[name].hex)
    if rgb is None:
        raise ValueError(f"Palette color {name!r} has invalid hex {PALETTE[name].hex!r}")
    return rgb


PREVIEW_COLORS: Mapping[str, Tuple[int, int, int]] = MappingProxyType({
    name: _rgb(name)
    for name in ("bg1", "bg2", "operator", "string", "keyword", "storage", "entity", "number")
})


__all__ = [
    "AA_TEXT_RATIO",
    "COMMENT_COLOR",
    "COMMENT_MIN_RATIO",
    "PaletteColor",
    "ContrastPair",
    "PALETTE",
    "CONTRAST_PAIRS",
    "PREVIEW_COLORS",
]
