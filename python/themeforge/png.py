# python/themeforge/png.py
# Minimal PNG writer for 8-bit truecolor images built from a per-pixel callback
# Exists to synthesize preview artifacts without an imaging library
# RELEVANT FILES: python/themeforge/images.py, python/themeforge/tools/check_images.py, tests/test_png_encoder.py

from __future__ import annotations

import logging
import operator
import struct
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Sequence, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

ColorFn = Callable[[int, int, int, int], Sequence[int]]

PNG_SIGNATURE = bytes([137, 80, 78, 71, 13, 10, 26, 10])

_CRC_POLY = 0xEDB88320
_MAX_DIM = 2**31 - 1  # PNG stores dimensions as non-negative 31-bit integers

BIT_DEPTH = 8
COLOR_TYPE_TRUECOLOR = 2
FILTER_NONE = 0


# -----------------------------------------------------------------------------
# Checksum and chunk framing
# -----------------------------------------------------------------------------

def crc32(data: bytes) -> int:
    """IEEE 802.3 CRC-32 as used by PNG chunk trailers (bit-exact with zlib.crc32)."""
    crc = 0xFFFFFFFF
    for byte in data:
        crc ^= byte
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ _CRC_POLY
            else:
                crc >>= 1
    return (crc ^ 0xFFFFFFFF) & 0xFFFFFFFF


def _chunk_type_bytes(chunk_type: Union[bytes, str]) -> bytes:
    if isinstance(chunk_type, str):
        try:
            typ = chunk_type.encode("ascii")
        except UnicodeEncodeError as e:
            raise ValueError(f"chunk type must be ASCII, got {chunk_type!r}") from e
    elif isinstance(chunk_type, (bytes, bytearray)):
        typ = bytes(chunk_type)
        if any(b > 0x7F for b in typ):
            raise ValueError(f"chunk type must be ASCII, got {typ!r}")
    else:
        raise ValueError(f"chunk type must be str or bytes, got {type(chunk_type).__name__}")
    if len(typ) != 4:
        raise ValueError(f"chunk type must be exactly 4 characters, got {len(typ)} ({chunk_type!r})")
    return typ


def make_chunk(chunk_type: Union[bytes, str], payload: bytes) -> bytes:
    """Frame ``payload`` as a PNG chunk: length, type, payload, CRC of type+payload."""
    typ = _chunk_type_bytes(chunk_type)
    payload = bytes(payload)
    length = struct.pack(">I", len(payload))
    crc = struct.pack(">I", crc32(typ + payload))
    return length + typ + payload + crc


def iter_chunks(data: bytes) -> Iterator[Tuple[bytes, bytes]]:
    """Walk an encoded PNG buffer, yielding ``(type, payload)`` pairs.

    Verifies the signature, every declared length and every CRC. Pixel data is
    not decoded.

    Raises:
        ValueError: on a bad signature, truncated chunk or CRC mismatch
    """
    data = bytes(data)
    if data[:8] != PNG_SIGNATURE:
        raise ValueError("missing PNG signature")
    pos = 8
    while pos < len(data):
        if pos + 8 > len(data):
            raise ValueError(f"truncated chunk header at offset {pos}")
        (length,) = struct.unpack(">I", data[pos:pos + 4])
        typ = data[pos + 4:pos + 8]
        end = pos + 8 + length
        if end + 4 > len(data):
            raise ValueError(f"chunk {typ!r} at offset {pos} overruns buffer")
        payload = data[pos + 8:end]
        (stored_crc,) = struct.unpack(">I", data[end:end + 4])
        if stored_crc != crc32(typ + payload):
            raise ValueError(f"CRC mismatch in chunk {typ!r} at offset {pos}")
        yield typ, payload
        pos = end + 4


# -----------------------------------------------------------------------------
# Scanlines
# -----------------------------------------------------------------------------

def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got bool")
    try:
        i = operator.index(value)
    except TypeError as e:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}") from e
    if i <= 0:
        raise ValueError(f"{name} must be > 0, got {i}")
    if i > _MAX_DIM:
        raise ValueError(f"{name} must be <= {_MAX_DIM}, got {i}")
    return i


def _pixel_bytes(color, x: int, y: int) -> bytes:
    try:
        channels = list(color)
    except TypeError as e:
        raise ValueError(f"color at ({x}, {y}) must be an RGB sequence, got {color!r}") from e
    if len(channels) != 3:
        raise ValueError(f"color at ({x}, {y}) must have exactly 3 channels, got {len(channels)}")
    out = bytearray(3)
    for i, value in enumerate(channels):
        if isinstance(value, bool):
            raise ValueError(f"color at ({x}, {y}) has non-integer channel {value!r}")
        try:
            v = operator.index(value)
        except TypeError as e:
            raise ValueError(f"color at ({x}, {y}) has non-integer channel {value!r}") from e
        if not 0 <= v <= 255:
            raise ValueError(f"color at ({x}, {y}) has channel {v} outside 0..255")
        out[i] = v
    return bytes(out)


def build_raw_scanlines(width: int, height: int, color_fn: ColorFn) -> bytes:
    """Serialize pixels row by row, each row prefixed with filter byte 0.

    The result always has ``height * (1 + 3 * width)`` bytes.
    """
    width = _check_dimension("width", width)
    height = _check_dimension("height", height)
    if not callable(color_fn):
        raise TypeError(f"color_fn must be callable, got {type(color_fn).__name__}")

    raw = bytearray()
    for y in range(height):
        raw.append(FILTER_NONE)
        for x in range(width):
            raw += _pixel_bytes(color_fn(x, y, width, height), x, y)
    return bytes(raw)


def compress_scanlines(raw: bytes) -> bytes:
    """zlib-wrapped DEFLATE at default settings."""
    return zlib.compress(raw)


# -----------------------------------------------------------------------------
# Encoder
# -----------------------------------------------------------------------------

def _ihdr_payload(width: int, height: int) -> bytes:
    return struct.pack(
        ">IIBBBBB",
        width,
        height,
        BIT_DEPTH,
        COLOR_TYPE_TRUECOLOR,
        0,  # compression
        0,  # filter
        0,  # interlace
    )


def encode_png(width: int, height: int, color_fn: ColorFn) -> bytes:
    """Encode an 8-bit RGB image as a complete PNG byte string.

    Args:
        width: Image width in pixels (>= 1)
        height: Image height in pixels (>= 1)
        color_fn: ``(x, y, width, height) -> (r, g, b)`` with channels in 0..255

    Returns:
        Signature followed by exactly one IHDR, one IDAT and one IEND chunk.

    Raises:
        TypeError: non-integer dimensions or a non-callable color_fn
        ValueError: non-positive dimensions or an invalid pixel color
    """
    width = _check_dimension("width", width)
    height = _check_dimension("height", height)

    raw = build_raw_scanlines(width, height, color_fn)
    compressed = compress_scanlines(raw)
    logger.debug(f"Encoded {width}x{height} scanlines: raw={len(raw)} bytes, deflated={len(compressed)} bytes")

    chunks = [
        make_chunk(b"IHDR", _ihdr_payload(width, height)),
        make_chunk(b"IDAT", compressed),
        make_chunk(b"IEND", b""),
    ]
    return PNG_SIGNATURE + b"".join(chunks)


@dataclass(frozen=True)
class Image:
    """Dimensions plus a pure color function; lives for one encode call."""

    width: int
    height: int
    color_fn: ColorFn

    def __post_init__(self):
        _check_dimension("width", self.width)
        _check_dimension("height", self.height)
        if not callable(self.color_fn):
            raise TypeError(f"color_fn must be callable, got {type(self.color_fn).__name__}")

    def encode(self) -> bytes:
        return encode_png(self.width, self.height, self.color_fn)


def _as_rgb_array(image) -> np.ndarray:
    arr = np.asarray(image)
    if arr.dtype != np.uint8:
        if not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"expected an integer array, got dtype {arr.dtype}")
        if arr.size and (arr.min() < 0 or arr.max() > 255):
            raise ValueError("array values must be within 0..255")
        arr = arr.astype(np.uint8)
    if arr.ndim == 2:
        # gray -> RGB
        arr = np.repeat(arr[:, :, None], 3, axis=2)
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError(f"expected (H, W) or (H, W, 3) array, got shape {arr.shape}")
    return arr


def array_color_fn(image) -> ColorFn:
    """Adapt an ``(H, W, 3)`` uint8 array into a color function."""
    arr = _as_rgb_array(image)

    def color_at(x: int, y: int, width: int, height: int) -> Tuple[int, int, int]:
        r, g, b = arr[y, x]
        return int(r), int(g), int(b)

    return color_at


def encode_png_array(image) -> bytes:
    """Encode an ``(H, W)`` grayscale or ``(H, W, 3)`` RGB array."""
    arr = _as_rgb_array(image)
    height, width = arr.shape[:2]
    return encode_png(width, height, array_color_fn(arr))


def write_png(path: Union[str, Path], data: bytes) -> Path:
    """Write an encoded PNG buffer to ``path``, creating parent directories."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(data)
    logger.info(f"Wrote {out} ({len(data)} bytes)")
    return out


__all__ = [
    "PNG_SIGNATURE",
    "ColorFn",
    "Image",
    "crc32",
    "make_chunk",
    "iter_chunks",
    "build_raw_scanlines",
    "compress_scanlines",
    "encode_png",
    "array_color_fn",
    "encode_png_array",
    "write_png",
]
