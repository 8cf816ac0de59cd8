"""
Theme validator

Checks theme files for:
- valid JSON syntax
- required properties ($schema, name)
- hex color format in ``colors`` and ``tokenColors``
- WCAG contrast of the reference foreground/background pairs
- palette colors that no theme uses

Every check returns a ``ValidationResult``; results are combined with
``merge`` instead of being accumulated on shared state.

Usage:
    python -m themeforge validate
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, FrozenSet, Iterable, Mapping, Set, Tuple

from .colors import contrast_ratio, validate_hex_color
from .config import ToolchainConfig
from .palette import CONTRAST_PAIRS, PALETTE, ContrastPair, PaletteColor

logger = logging.getLogger(__name__)

STAT_KEYS: Tuple[str, ...] = (
    "files_checked",
    "colors_validated",
    "contrast_checked",
    "issues_found",
)


def _stats(**counts: int) -> Mapping[str, int]:
    out = {key: 0 for key in STAT_KEYS}
    out.update(counts)
    return out


@dataclass(frozen=True)
class ValidationResult:
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    stats: Mapping[str, int] = field(default_factory=_stats)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def exit_code(self) -> int:
        return 1 if self.errors else 0

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        keys = list(self.stats) + [k for k in other.stats if k not in self.stats]
        return ValidationResult(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
            stats={k: self.stats.get(k, 0) + other.stats.get(k, 0) for k in keys},
        )

    @classmethod
    def combine(cls, results: Iterable["ValidationResult"]) -> "ValidationResult":
        total = cls()
        for result in results:
            total = total.merge(result)
        return total


def validate_theme_data(theme: Any, file_name: str) -> Tuple[ValidationResult, FrozenSet[str]]:
    """Validate an already-parsed theme.

    Returns the result and the set of upper-cased colors the theme uses.
    A theme that is not a JSON object has no properties, so it is reported
    as missing its schema and name.
    """
    if not isinstance(theme, Mapping):
        theme = {}

    errors = []
    warnings = []
    used: Set[str] = set()
    colors_validated = 0
    issues = 0

    schema = theme.get("$schema")
    if not isinstance(schema, str) or "color-theme" not in schema:
        warnings.append(f"{file_name}: Missing or invalid $schema")

    if not theme.get("name"):
        errors.append(f"{file_name}: Missing theme name")

    colors = theme.get("colors")
    if isinstance(colors, Mapping):
        for key, value in colors.items():
            colors_validated += 1
            if not validate_hex_color(value):
                errors.append(f'{file_name}: Invalid color "{value}" for key "{key}"')
                issues += 1
            if isinstance(value, str):
                used.add(value.upper())

    token_colors = theme.get("tokenColors")
    if isinstance(token_colors, list):
        for idx, token in enumerate(token_colors):
            settings = token.get("settings") if isinstance(token, Mapping) else None
            if not isinstance(settings, Mapping):
                continue
            for attr in ("foreground", "background"):
                value = settings.get(attr)
                if not value:
                    continue
                colors_validated += 1
                if not validate_hex_color(value):
                    errors.append(f'{file_name} tokenColors[{idx}]: Invalid {attr} color "{value}"')
                    issues += 1
                if isinstance(value, str):
                    used.add(value.upper())

    result = ValidationResult(
        errors=tuple(errors),
        warnings=tuple(warnings),
        stats=_stats(files_checked=1, colors_validated=colors_validated, issues_found=issues),
    )
    return result, frozenset(used)


def validate_theme_file(path: Path) -> Tuple[ValidationResult, FrozenSet[str]]:
    """Read, parse and validate one theme file.

    Unreadable files and JSON syntax errors are reported as errors and do not
    count as checked files.
    """
    path = Path(path)
    try:
        theme = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        return ValidationResult(errors=(f"{path.name}: {e}",)), frozenset()
    logger.debug(f"Validating {path.name}")
    return validate_theme_data(theme, path.name)


def validate_contrast(pairs: Iterable[ContrastPair] = CONTRAST_PAIRS) -> ValidationResult:
    """Check WCAG contrast for each reference pair (AA: 4.5:1 for text)."""
    warnings = []
    checked = 0
    for pair in pairs:
        ratio = contrast_ratio(pair.foreground, pair.background)
        checked += 1
        min_allowed = pair.allowed_minimum()
        if ratio < min_allowed:
            warnings.append(
                f"Contrast: {pair.foreground} on {pair.background} = {ratio:.2f}:1 (expected ≥{min_allowed:g}:1)"
            )
        else:
            logger.debug(f"{pair.foreground} on {pair.background} = {ratio:.2f}:1")
    return ValidationResult(warnings=tuple(warnings), stats=_stats(contrast_checked=checked))


def validate_orphaned_colors(
    used: Iterable[str], palette: Mapping[str, PaletteColor] = PALETTE
) -> ValidationResult:
    """Warn about palette entries that no validated theme uses."""
    used_upper = {c.upper() for c in used}
    warnings = tuple(
        f'Orphaned color: {name} ({entry.hex}) - "{entry.usage}"'
        for name, entry in palette.items()
        if entry.hex.upper() not in used_upper
    )
    return ValidationResult(warnings=warnings)


def validate_themes(config: ToolchainConfig) -> ValidationResult:
    """Validate every configured theme file, then contrast and palette usage."""
    results = []
    used: Set[str] = set()
    for name in config.theme_files:
        path = config.theme_path / name
        if not path.exists():
            results.append(ValidationResult(errors=(f"Missing required file: {name}",)))
            continue
        result, file_colors = validate_theme_file(path)
        results.append(result)
        used |= file_colors

    results.append(validate_contrast())
    results.append(validate_orphaned_colors(used))
    return ValidationResult.combine(results)


def format_results(result: ValidationResult) -> str:
    """Render a result as the human-readable validation report."""
    lines = [
        "=" * 50,
        "",
        "Validation Results:",
        "",
        f"Files checked:       {result.stats.get('files_checked', 0)}",
        f"Colors validated:    {result.stats.get('colors_validated', 0)}",
        f"Contrast pairs:      {result.stats.get('contrast_checked', 0)}",
    ]

    if not result.errors and not result.warnings:
        lines += ["", "✅ All validations passed!"]
        return "\n".join(lines)

    if result.errors:
        lines += ["", f"❌ Errors ({len(result.errors)}):"]
        lines += [f"   • {err}" for err in result.errors]

    if result.warnings:
        lines += ["", f"⚠️  Warnings ({len(result.warnings)}):"]
        lines += [f"   • {warn}" for warn in result.warnings]

    return "\n".join(lines)


__all__ = [
    "STAT_KEYS",
    "ValidationResult",
    "validate_theme_data",
    "validate_theme_file",
    "validate_contrast",
    "validate_orphaned_colors",
    "validate_themes",
    "format_results",
]
