# python/themeforge/__init__.py
# Public Python API for the themeforge theme toolchain
# Exists to expose the PNG encoder, theme builder and validator from one import
# RELEVANT FILES: python/themeforge/png.py, python/themeforge/build.py, python/themeforge/validate.py, tests/test_version.py

from .png import (
    PNG_SIGNATURE,
    Image,
    crc32,
    make_chunk,
    iter_chunks,
    build_raw_scanlines,
    compress_scanlines,
    encode_png,
    encode_png_array,
    array_color_fn,
    write_png,
)
from .colors import (
    validate_hex_color,
    hex_to_rgb,
    relative_luminance,
    contrast_ratio,
    interpolate_color,
)
from .config import ToolchainConfig, load_toolchain_config
from .build import merge_themes, build_variant, build_all
from .validate import ValidationResult, validate_themes, format_results
from .images import PREVIEWS, render_preview, generate_images

# Version information
__version__ = "0.3.0"

__all__ = [
    "PNG_SIGNATURE",
    "Image",
    "crc32",
    "make_chunk",
    "iter_chunks",
    "build_raw_scanlines",
    "compress_scanlines",
    "encode_png",
    "encode_png_array",
    "array_color_fn",
    "write_png",
    "validate_hex_color",
    "hex_to_rgb",
    "relative_luminance",
    "contrast_ratio",
    "interpolate_color",
    "ToolchainConfig",
    "load_toolchain_config",
    "merge_themes",
    "build_variant",
    "build_all",
    "ValidationResult",
    "validate_themes",
    "format_results",
    "PREVIEWS",
    "render_preview",
    "generate_images",
    "__version__",
]
