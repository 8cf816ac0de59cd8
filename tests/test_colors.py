# tests/test_colors.py
# Unit tests for hex parsing, WCAG luminance/contrast and palette tables
# RELEVANT FILES: python/themeforge/colors.py, python/themeforge/palette.py
from __future__ import annotations

import pytest

from themeforge.colors import (
    contrast_ratio,
    hex_to_rgb,
    interpolate_color,
    relative_luminance,
    validate_hex_color,
)
from themeforge.palette import CONTRAST_PAIRS, PALETTE, PREVIEW_COLORS


@pytest.mark.parametrize("color", ["#121212", "#FF8F2E", "#ff8f2e", "#3a3a3a80", "#ABCDEFff"])
def test_valid_hex_colors(color: str) -> None:
    assert validate_hex_color(color)


@pytest.mark.parametrize("color", ["121212", "#12121", "#1212123", "#GG0000", "", "red", None, 0x121212])
def test_invalid_hex_colors(color) -> None:
    assert not validate_hex_color(color)


def test_hex_to_rgb() -> None:
    assert hex_to_rgb("#FF8F2E") == (255, 143, 46)
    assert hex_to_rgb("ff8f2e") == (255, 143, 46)
    # Alpha suffix is ignored
    assert hex_to_rgb("#12121280") == (18, 18, 18)
    assert hex_to_rgb("#zzz") is None
    assert hex_to_rgb(None) is None


def test_relative_luminance_extremes() -> None:
    assert relative_luminance((0, 0, 0)) == pytest.approx(0.0)
    assert relative_luminance((255, 255, 255)) == pytest.approx(1.0)


def test_contrast_ratio_black_white() -> None:
    assert contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0)
    assert contrast_ratio("#FFFFFF", "#000000") == pytest.approx(21.0)
    assert contrast_ratio("#777777", "#777777") == pytest.approx(1.0)


def test_contrast_ratio_unparseable_is_zero() -> None:
    assert contrast_ratio("nope", "#000000") == 0.0


def test_interpolate_color_floors_channels() -> None:
    assert interpolate_color((0, 0, 0), (255, 255, 255), 0.0) == (0, 0, 0)
    assert interpolate_color((0, 0, 0), (255, 255, 255), 1.0) == (255, 255, 255)
    assert interpolate_color((0, 10, 20), (3, 13, 23), 0.5) == (1, 11, 21)
    assert interpolate_color((10, 10, 10), (0, 0, 0), 0.25) == (7, 7, 7)


def test_palette_entries_are_valid_hex() -> None:
    assert len(PALETTE) == 15
    for entry in PALETTE.values():
        assert validate_hex_color(entry.hex)


def test_contrast_pairs_comment_floor() -> None:
    comment = [p for p in CONTRAST_PAIRS if p.foreground == "#5f5f5f"]
    assert len(comment) == 1
    assert comment[0].min_ratio == pytest.approx(3.0)
    assert comment[0].allowed_minimum() == pytest.approx(2.5)
    others = [p for p in CONTRAST_PAIRS if p.foreground != "#5f5f5f"]
    assert all(p.allowed_minimum() == pytest.approx(4.5) for p in others)


def test_preview_colors_match_palette() -> None:
    assert PREVIEW_COLORS["bg1"] == (0x12, 0x12, 0x12)
    assert PREVIEW_COLORS["operator"] == (0xFF, 0x8F, 0x2E)
    assert PREVIEW_COLORS["number"] == (0xCF, 0x7F, 0x8F)
    with pytest.raises(TypeError):
        PREVIEW_COLORS["bg1"] = (0, 0, 0)  # type: ignore[index]


def test_preview_color_lookup_rejects_bad_palette_hex(monkeypatch) -> None:
    from themeforge import palette

    monkeypatch.setattr(palette, "PALETTE", {"bg1": palette.PaletteColor("#12", "broken")})
    with pytest.raises(ValueError, match="bg1"):
        palette._rgb("bg1")
