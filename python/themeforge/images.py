# python/themeforge/images.py
# Marketplace preview composer: gradient and banded color functions fed to the PNG encoder
# Exists to produce placeholder icon/preview images from the theme palette
# RELEVANT FILES: python/themeforge/png.py, python/themeforge/palette.py, tests/test_images.py

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .colors import interpolate_color
from .config import ToolchainConfig
from .palette import PREVIEW_COLORS
from .png import ColorFn, encode_png, write_png

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class PreviewSpec:
    filename: str
    width: int
    height: int
    color_fn: ColorFn


def _band(colors: Sequence[RGB], index: int, fallback: RGB) -> RGB:
    # Band indices past the palette fall back instead of failing
    if 0 <= index < len(colors):
        return colors[index]
    return fallback


def icon_color(x: int, y: int, w: int, h: int) -> RGB:
    """Diagonal gradient from the primary background to the operator orange."""
    ratio = (x + y) / (w + h)
    return interpolate_color(PREVIEW_COLORS["bg1"], PREVIEW_COLORS["operator"], ratio)


def editor_color(x: int, y: int, w: int, h: int) -> RGB:
    """Five horizontal sections top to bottom."""
    c = PREVIEW_COLORS
    sections = (c["bg1"], c["bg2"], c["keyword"], c["string"], c["bg1"])
    return _band(sections, math.floor(y / h * len(sections)), c["bg1"])


def syntax_color(x: int, y: int, w: int, h: int) -> RGB:
    """Four vertical palette blocks left to right."""
    c = PREVIEW_COLORS
    blocks = (c["string"], c["keyword"], c["storage"], c["operator"])
    return _band(blocks, math.floor(x / w * len(blocks)), c["bg2"])


def terminal_color(x: int, y: int, w: int, h: int) -> RGB:
    """Six vertical bands in terminal ANSI-ish order."""
    c = PREVIEW_COLORS
    bands = (c["entity"], c["string"], c["keyword"], c["storage"], c["operator"], c["number"])
    return _band(bands, math.floor(x / w * len(bands)), c["bg1"])


PREVIEWS: Tuple[PreviewSpec, ...] = (
    PreviewSpec("icon.png", 128, 128, icon_color),
    PreviewSpec("preview-editor.png", 800, 600, editor_color),
    PreviewSpec("preview-syntax.png", 800, 400, syntax_color),
    PreviewSpec("preview-terminal.png", 800, 300, terminal_color),
)


def render_preview(spec: PreviewSpec) -> bytes:
    return encode_png(spec.width, spec.height, spec.color_fn)


def generate_images(config: ToolchainConfig, out_dir: Optional[Path] = None) -> List[Path]:
    """Encode every preview and write it into ``out_dir`` (images dir by default)."""
    target = Path(out_dir) if out_dir is not None else config.images_path
    written = []
    for spec in PREVIEWS:
        logger.info(f"Creating {spec.filename} ({spec.width}x{spec.height})")
        written.append(write_png(target / spec.filename, render_preview(spec)))
    return written


__all__ = [
    "PreviewSpec",
    "PREVIEWS",
    "icon_color",
    "editor_color",
    "syntax_color",
    "terminal_color",
    "render_preview",
    "generate_images",
]
