from photofinish.backend.imaging.splitter import (
    crop_to_square,
    load_image,
    puzzle_tiles,
    split_image,
)

__all__ = ["crop_to_square", "load_image", "puzzle_tiles", "split_image"]
