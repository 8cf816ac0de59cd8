from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

import argparse
import logging
import sys

from . import build as _build
from .config import load_toolchain_config
from .images import generate_images
from .validate import format_results, validate_themes

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="themeforge",
        description="Build, validate and preview editor color themes",
    )
    parser.add_argument("--root", type=Path, default=None,
                        help="Project root holding the themes/ and images/ directories")
    parser.add_argument("--config", type=Path, default=None,
                        help="JSON toolchain config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p_build = sub.add_parser("build", help="Merge the base theme with variant overrides")
    p_build.add_argument("--variant", action="append", choices=_build.available(), default=None,
                         help="Variant to build (repeatable; default: all)")

    sub.add_parser("validate", help="Validate theme files, contrast and palette usage")

    p_images = sub.add_parser("images", help="Generate marketplace preview PNGs")
    p_images.add_argument("--out", type=Path, default=None,
                          help="Output directory (default: <root>/images)")

    sub.add_parser("all", help="Run build, images and validate in order")
    return parser.parse_args(argv)


def _run_build(cfg, variants: Optional[List[str]]) -> int:
    built = _build.build_all(cfg, variants)
    print(f"✓ Built {len(built)} theme(s)")
    return 0


def _run_images(cfg, out: Optional[Path]) -> int:
    written = generate_images(cfg, out)
    print(f"✓ Generated {len(written)} preview image(s) in {written[0].parent if written else cfg.images_path}")
    return 0


def _run_validate(cfg) -> int:
    result = validate_themes(cfg)
    print(format_results(result))
    return result.exit_code


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format='%(levelname)s: %(message)s')

    try:
        cfg = load_toolchain_config(args.config, {"root": args.root})
        if args.command == "build":
            return _run_build(cfg, args.variant)
        if args.command == "images":
            return _run_images(cfg, args.out)
        if args.command == "validate":
            return _run_validate(cfg)
        # all
        _run_build(cfg, None)
        _run_images(cfg, None)
        return _run_validate(cfg)
    except (OSError, ValueError, TypeError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
