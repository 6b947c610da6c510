"""Encoding helpers built on Pillow."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Iterable, Tuple

from PIL import Image

Size = Tuple[int, int]

ICO_SIZES: Tuple[Size, ...] = ((32, 32),)


def encode_png(image: Image.Image) -> bytes:
    """Return PNG bytes for *image* without text or time chunks.

    Pillow only writes ancillary chunks when asked, so rendering the same
    scene twice yields byte-identical files.
    """

    buffer = BytesIO()
    image.save(buffer, format="PNG", optimize=True)
    return buffer.getvalue()


def save_png(image: Image.Image, path: Path) -> Path:
    path.write_bytes(encode_png(image))
    return path


def save_ico(png_path: Path, ico_path: Path, sizes: Iterable[Size] = ICO_SIZES) -> Path:
    """Pack the PNG at *png_path* into an icon container."""

    with Image.open(png_path) as image:
        image.save(ico_path, format="ICO", sizes=list(sizes))
    return ico_path


def save_webp(image: Image.Image, path: Path, quality: int) -> Path:
    image.save(path, format="WEBP", quality=quality, method=6)
    return path


def save_min_png(image: Image.Image, path: Path, compress_level: int) -> Path:
    """Lossless recompression of a PNG."""

    image.save(path, format="PNG", compress_level=compress_level)
    return path


def save_min_jpeg(image: Image.Image, path: Path, quality: int) -> Path:
    """Requantise a JPEG with optimised Huffman tables."""

    if image.mode not in ("RGB", "L"):
        image = image.convert("RGB")
    image.save(path, format="JPEG", quality=quality, optimize=True, progressive=True)
    return path
