"""Cuts a photo into square puzzle pieces."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

logger = logging.getLogger(__name__)


def load_image(path: str | Path) -> Image.Image:
    with Image.open(path) as img:
        img.load()
        return img.convert("RGB")


def crop_to_square(image: Image.Image) -> Image.Image:
    """Crop *image* to a square around its centre, keeping the shorter side."""
    w, h = image.size
    side = min(w, h)
    x = (w - side) // 2
    y = (h - side) // 2
    return image.crop((x, y, x + side, y + side))


def split_image(image: Image.Image, size: int) -> list[Image.Image]:
    """Slice *image* into ``size * size`` row-major square pieces.

    The image is centre-cropped to a square first.  Pixels left over when the
    side does not divide evenly are dropped from the right and bottom edges.
    """
    if size < 2:
        raise ValueError(f"Grid size must be at least 2, got {size}.")

    square = crop_to_square(image)
    piece = square.width // size
    if piece == 0:
        raise ValueError(
            f"Image of {image.width}×{image.height} px is too small "
            f"for a {size}×{size} grid."
        )
    logger.info(
        "Splitting %d×%d image into %d×%d pieces of %d px",
        image.width, image.height, size, size, piece,
    )

    pieces: list[Image.Image] = []
    for row in range(size):
        for col in range(size):
            x, y = col * piece, row * piece
            pieces.append(square.crop((x, y, x + piece, y + piece)))
    return pieces


def puzzle_tiles(image: Image.Image, size: int) -> list[Image.Image]:
    """Return the pieces handed to the puzzle: all but the bottom-right one."""
    return split_image(image, size)[:-1]
