"""
Preview image checker

Confirms that generated preview PNGs decode with an independent reader and
have the structure the encoder promises.

Checks:
- signature, chunk order (IHDR, IDAT, IEND) and chunk CRCs
- file decodes with Pillow as 8-bit RGB
- dimensions match the expected preview size, when known

Usage:
    python -m themeforge.tools.check_images <image_path>...

RELEVANT FILES: python/themeforge/png.py, python/themeforge/images.py
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..images import PREVIEWS
from ..png import iter_chunks

EXPECTED_CHUNKS = [b"IHDR", b"IDAT", b"IEND"]

_EXPECTED_SIZES: Dict[str, Tuple[int, int]] = {
    spec.filename: (spec.width, spec.height) for spec in PREVIEWS
}


def check_png_file(image_path: Path, expected_size: Optional[Tuple[int, int]] = None) -> dict:
    """
    Check one PNG file.

    Args:
        image_path: Path to PNG file
        expected_size: (width, height) the image must have; looked up from the
            preview table by file name when omitted

    Returns:
        dict with check results:
        {
            "valid": bool,
            "errors": list[str],
            "warnings": list[str],
            "stats": dict,
        }
    """
    results = {
        "valid": True,
        "errors": [],
        "warnings": [],
        "stats": {},
    }

    if not image_path.exists():
        results["valid"] = False
        results["errors"].append(f"File does not exist: {image_path}")
        return results

    data = image_path.read_bytes()
    results["stats"]["file_size_bytes"] = len(data)

    try:
        chunk_types = [typ for typ, _ in iter_chunks(data)]
    except ValueError as e:
        results["valid"] = False
        results["errors"].append(f"Malformed PNG structure: {e}")
        return results

    results["stats"]["chunks"] = [t.decode("ascii", "replace") for t in chunk_types]
    if chunk_types != EXPECTED_CHUNKS:
        results["warnings"].append(
            f"Unexpected chunk sequence: {results['stats']['chunks']} (expected IHDR, IDAT, IEND)"
        )

    try:
        from PIL import Image
        img = Image.open(image_path)
        img.load()
    except Exception as e:
        results["valid"] = False
        results["errors"].append(f"Failed to decode image: {e}")
        return results

    width, height = img.size
    results["stats"]["width"] = width
    results["stats"]["height"] = height
    results["stats"]["mode"] = img.mode

    if img.mode != "RGB":
        results["valid"] = False
        results["errors"].append(f"Expected RGB mode, got {img.mode}")

    if expected_size is None:
        expected_size = _EXPECTED_SIZES.get(image_path.name)
    if expected_size is not None and (width, height) != tuple(expected_size):
        results["valid"] = False
        results["errors"].append(
            f"Dimension mismatch: expected {expected_size[0]}×{expected_size[1]}, got {width}×{height}"
        )

    arr = np.asarray(img)
    results["stats"]["unique_colors"] = int(len(np.unique(arr.reshape(-1, arr.shape[-1]), axis=0)))

    raw_size = height * (1 + 3 * width)
    results["stats"]["raw_scanline_size"] = raw_size
    if len(data) > raw_size + 1024:
        results["warnings"].append(
            f"File size ({len(data)} bytes) exceeds uncompressed scanlines ({raw_size} bytes)"
        )

    return results


def format_check_line(image_path: Path, results: dict) -> str:
    """One status line per image, followed by its indented problems."""
    stats = results["stats"]
    status = "ok" if results["valid"] else "FAILED"
    line = f"{image_path.name}: {status}"
    if "width" in stats:
        line += f" ({stats['width']}×{stats['height']} {stats['mode']}, {stats['unique_colors']} colors)"
    lines = [line]
    lines += [f"  error: {e}" for e in results["errors"]]
    lines += [f"  warning: {w}" for w in results["warnings"]]
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Check each image and return the number that failed."""
    parser = argparse.ArgumentParser(
        description="Check generated preview PNGs decode and match their expected size"
    )
    parser.add_argument("images", nargs="+", type=Path, help="PNG files to check")
    args = parser.parse_args(argv)

    failed = 0
    for path in args.images:
        results = check_png_file(path)
        print(format_check_line(path, results))
        if not results["valid"]:
            failed += 1
    print(f"{len(args.images) - failed}/{len(args.images)} images passed")
    return failed


if __name__ == "__main__":
    sys.exit(main())
