# python/themeforge/config.py
# Toolchain configuration: where themes, token colors and preview images live
# Exists so the CLI, builder, validator and composer resolve paths the same way
# RELEVANT FILES: python/themeforge/cli.py, python/themeforge/build.py, python/themeforge/validate.py, tests/test_config.py
from __future__ import annotations

import copy
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

ConfigSource = Union["ToolchainConfig", Mapping[str, Any], str, Path, None]

ROOT_ENV_VAR = "THEMEFORGE_ROOT"

DEFAULT_THEME_FILES: Tuple[str, ...] = (
    "Editor.json",
    "PixelFactory.json",
    "PixelFactory-Studio.json",
    "PixelFactory-Light.json",
    "PixelFactory-HighContrast.json",
)


def _default_root() -> Path:
    env = os.environ.get(ROOT_ENV_VAR)
    return Path(env) if env else Path.cwd()


def _to_path(value: Any, label: str) -> Path:
    if isinstance(value, (str, Path)):
        return Path(value)
    raise TypeError(f"{label} must be a path string, got {type(value).__name__}")


def _to_filename(value: Any, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{label} must be a non-empty file name")
    return value


@dataclass
class ToolchainConfig:
    root: Path = field(default_factory=_default_root)
    theme_dir: Path = Path("themes")
    images_dir: Path = Path("images")
    base_theme: str = "Editor.json"
    token_colors: str = "tokenColors.json"
    theme_files: Tuple[str, ...] = DEFAULT_THEME_FILES

    def resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.root / path

    @property
    def theme_path(self) -> Path:
        return self.resolve(self.theme_dir)

    @property
    def images_path(self) -> Path:
        return self.resolve(self.images_dir)

    @property
    def base_theme_path(self) -> Path:
        return self.theme_path / self.base_theme

    @property
    def token_colors_path(self) -> Path:
        return self.theme_path / self.token_colors

    def to_dict(self) -> dict:
        return {
            "root": str(self.root),
            "theme_dir": str(self.theme_dir),
            "images_dir": str(self.images_dir),
            "base_theme": self.base_theme,
            "token_colors": self.token_colors,
            "theme_files": list(self.theme_files),
        }

    def copy(self) -> "ToolchainConfig":
        return copy.deepcopy(self)

    def validate(self) -> None:
        if not self.theme_files:
            raise ValueError("theme_files must list at least one theme")
        for name in self.theme_files:
            _to_filename(name, "theme_files entry")
        if len(set(self.theme_files)) != len(self.theme_files):
            raise ValueError("theme_files entries must be unique")
        if not self.base_theme.lower().endswith(".json"):
            raise ValueError("base_theme must be a .json file")
        if not self.token_colors.lower().endswith(".json"):
            raise ValueError("token_colors must be a .json file")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["ToolchainConfig"] = None) -> "ToolchainConfig":
        base = copy.deepcopy(default) if default is not None else cls()
        if "root" in data:
            base.root = _to_path(data["root"], "root")
        if "theme_dir" in data:
            base.theme_dir = _to_path(data["theme_dir"], "theme_dir")
        if "images_dir" in data:
            base.images_dir = _to_path(data["images_dir"], "images_dir")
        if "base_theme" in data:
            base.base_theme = _to_filename(data["base_theme"], "base_theme")
        if "token_colors" in data:
            base.token_colors = _to_filename(data["token_colors"], "token_colors")
        if "theme_files" in data:
            value = data["theme_files"]
            if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
                raise TypeError("theme_files must be a list of file names")
            base.theme_files = tuple(value)
        return base


def _load_from_path(path: Path) -> Mapping[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in {".json", ""}:
        data = json.loads(text)
        if not isinstance(data, Mapping):
            raise TypeError(f"toolchain config must be a JSON object: {path}")
        return data
    raise ValueError(f"Unsupported toolchain config file format: {path}")


def load_toolchain_config(config: ConfigSource = None, overrides: Optional[Mapping[str, Any]] = None) -> ToolchainConfig:
    if isinstance(config, ToolchainConfig):
        cfg = config.copy()
    elif isinstance(config, Mapping):
        cfg = ToolchainConfig.from_mapping(config)
    elif isinstance(config, (str, Path)):
        path = Path(config)
        mapping = _load_from_path(path)
        cfg = ToolchainConfig.from_mapping(mapping)
        # A config file without an explicit root anchors relative paths next to itself
        if "root" not in mapping:
            cfg.root = path.resolve().parent
    elif config is None:
        cfg = ToolchainConfig()
    else:
        raise TypeError("config must be ToolchainConfig, mapping, path, or None")

    if overrides:
        present = {k: v for k, v in overrides.items() if v is not None}
        if present:
            cfg = ToolchainConfig.from_mapping(present, cfg)
    cfg.validate()
    return cfg


__all__ = [
    "ROOT_ENV_VAR",
    "DEFAULT_THEME_FILES",
    "ToolchainConfig",
    "load_toolchain_config",
]
