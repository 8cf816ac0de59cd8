# Ensure `import themeforge` works from a fresh clone by putting repo/python on sys.path.
# Shared fixtures lay out a small theme project (themes/ + tokenColors.json) under tmp_path.
import json
import sys
from pathlib import Path

import pytest


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _ensure_python_path():
    pkg_dir = _repo_root() / "python"
    if str(pkg_dir) not in sys.path:
        sys.path.insert(0, str(pkg_dir))


_ensure_python_path()

SCHEMA = "vscode://schemas/color-theme"

EDITOR_THEME = {
    "$schema": SCHEMA,
    "name": "PixelFactory Editor",
    "type": "dark",
    "colors": {
        "editor.background": "#121212",
        "sideBar.background": "#1e1e1e",
        "editorWidget.background": "#2a2a2a",
        "editor.selectionBackground": "#2a2a2a",
        "editor.lineHighlightBackground": "#3a3a3a",
        "focusBorder": "#FF8F2E",
        "panel.border": "#7f7b66",
        "errorForeground": "#C71B00",
    },
}

TOKEN_COLORS = {
    "tokenColors": [
        {"scope": "comment", "settings": {"foreground": "#5f5f5f", "fontStyle": "italic"}},
        {"scope": "string", "settings": {"foreground": "#8A9E78"}},
        {"scope": "constant.numeric", "settings": {"foreground": "#CF7F8F"}},
        {"scope": "entity.name", "settings": {"foreground": "#798283"}},
        {"scope": "keyword", "settings": {"foreground": "#ea603e"}},
        {"scope": "storage", "settings": {"foreground": "#FFC62F"}},
        {"scope": "keyword.operator.pointer", "settings": {"foreground": "#EBA96C"}},
    ]
}


def _write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def theme_project(tmp_path: Path) -> Path:
    """Project root with a base theme, token colors and the hand-written variants."""
    themes = tmp_path / "themes"
    _write_json(themes / "Editor.json", EDITOR_THEME)
    _write_json(themes / "tokenColors.json", TOKEN_COLORS)
    _write_json(themes / "PixelFactory-Light.json", {
        "$schema": SCHEMA,
        "name": "PixelFactory Light",
        "colors": {"editor.background": "#FAFAFA", "editor.foreground": "#121212"},
    })
    _write_json(themes / "PixelFactory-HighContrast.json", {
        "$schema": SCHEMA,
        "name": "PixelFactory High Contrast",
        "colors": {"editor.background": "#000000", "contrastBorder": "#FF8F2E"},
    })
    return tmp_path


@pytest.fixture
def write_json():
    return _write_json
