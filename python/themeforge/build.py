"""
python/themeforge/build.py
Theme builder: base theme + variant overrides -> standalone theme files.

Each variant returns a plain override dict that ``merge_themes`` layers on
top of the base theme. Token colors are shared across variants and live in a
separate file; when that file is missing the variant is skipped.

Example
-------
>>> from themeforge.config import load_toolchain_config
>>> from themeforge import build
>>> cfg = load_toolchain_config({"root": "."})
>>> build.build_variant("studio", cfg)
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional

from .config import ToolchainConfig

logger = logging.getLogger(__name__)


def merge_themes(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Layer ``overrides`` on ``base``.

    Top-level keys are replaced, ``colors`` is merged key by key, and
    ``tokenColors`` from both sides are concatenated with base entries first.
    Neither input is mutated.
    """
    merged: Dict[str, Any] = {**base, **overrides}
    merged["colors"] = {**(base.get("colors") or {}), **(overrides.get("colors") or {})}
    merged["tokenColors"] = [*(base.get("tokenColors") or []), *(overrides.get("tokenColors") or [])]
    return merged


def _read_json(path: Path) -> Dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path.name}: expected a JSON object")
    return data


# -----------------------------------------------------------------------------
# Variant definitions
# -----------------------------------------------------------------------------

def dark_overrides(token_colors: List[Any]) -> Dict[str, Any]:
    """Dark variant: base UI colors plus shared syntax colors."""
    return {
        "name": "PixelFactory Dark",
        "uiTheme": "vs-dark",
        "tokenColors": token_colors,
    }


def studio_overrides(token_colors: List[Any]) -> Dict[str, Any]:
    """Studio variant: dark variant with a softer selection background."""
    return {
        "name": "PixelFactory Studio",
        "uiTheme": "vs-dark",
        "colors": {
            "editor.selectionBackground": "#3a3a3a",
        },
        "tokenColors": token_colors,
    }


_VARIANTS: Dict[str, Callable[[List[Any]], Dict[str, Any]]] = {
    "dark": dark_overrides,
    "studio": studio_overrides,
}

_OUTPUT_FILES: Dict[str, str] = {
    "dark": "PixelFactory.json",
    "studio": "PixelFactory-Studio.json",
}


def available() -> List[str]:
    """List variant names in build order."""
    return list(_VARIANTS.keys())


def output_file(name: str) -> str:
    key = str(name).strip().lower()
    if key not in _VARIANTS:
        raise ValueError(f"Unknown variant: {name!r}. Available: {', '.join(available())}")
    return _OUTPUT_FILES[key]


def build_variant(name: str, config: ToolchainConfig) -> Optional[Path]:
    """Build one variant and write it into the theme directory.

    Returns the written path, or None when the token-color file is missing.

    Raises
    ------
    ValueError
        If the variant is unknown or a source file is not a JSON object.
    FileNotFoundError
        If the base theme does not exist.
    """
    key = str(name).strip().lower()
    out_name = output_file(key)

    base = _read_json(config.base_theme_path)

    syntax_path = config.token_colors_path
    if not syntax_path.exists():
        logger.warning(f"{syntax_path.name} not found - skipping {out_name}")
        return None

    syntax = _read_json(syntax_path)
    merged = merge_themes(base, _VARIANTS[key](list(syntax.get("tokenColors") or [])))

    out_path = config.theme_path / out_name
    out_path.write_text(json.dumps(merged, indent=2), encoding="utf-8")
    logger.info(f"Built {out_name}")
    return out_path


def build_all(config: ToolchainConfig, names: Optional[List[str]] = None) -> List[Path]:
    """Build the requested variants, or every variant in registry order."""
    selected = available() if not names else [str(n).strip().lower() for n in names]
    for n in selected:
        output_file(n)
    built: List[Path] = []
    for n in selected:
        path = build_variant(n, config)
        if path is not None:
            built.append(path)
    return built


__all__ = [
    "merge_themes",
    "dark_overrides",
    "studio_overrides",
    "available",
    "output_file",
    "build_variant",
    "build_all",
]
