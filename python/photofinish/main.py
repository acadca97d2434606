"""PhotoFinish — a photo sliding puzzle.

Usage::

    photofinish                                # interactive menu
    photofinish -f rich -s 4                   # Rich terminal, 4×4
    photofinish -f pygame -i holiday.jpg       # Pygame GUI with your photo
    photofinish -f pygame --seed 7 -v          # reproducible shuffle, debug log
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from types import ModuleType
from typing import Optional

import typer
from PIL import UnidentifiedImageError
from rich.logging import RichHandler

from photofinish.backend.engine.gameplay.engine import MAX_SIZE, MIN_SIZE

ROOT = Path(__file__).resolve().parent.parent  # python/
PROJECT_ROOT = ROOT.parent
ASSETS_DIR = PROJECT_ROOT / "assets" / "images"

_IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".webp"}

logger = logging.getLogger("photofinish")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.rich: "photofinish.frontend.cli.rich.app",
    Frontend.pygame: "photofinish.frontend.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _default_image() -> Path | None:
    """Return the first photo under ``assets/images``, if there is one."""
    if not ASSETS_DIR.is_dir():
        return None
    photos = sorted(p for p in ASSETS_DIR.iterdir() if p.suffix.lower() in _IMAGE_SUFFIXES)
    return photos[0] if photos else None


def _load_frontend(frontend: Frontend) -> ModuleType:
    return importlib.import_module(_RUNNERS[frontend])


def _launch(frontend: Frontend, size: int, image: Path | None, seed: int | None) -> None:
    mod = _load_frontend(frontend)
    logger.debug("Launching %s frontend (size=%d, seed=%s)", frontend, size, seed)
    if frontend is Frontend.pygame:
        try:
            mod.run(size=size, image_path=image or _default_image(), seed=seed)
        except UnidentifiedImageError as exc:
            raise typer.BadParameter(str(exc), param_hint="--image") from exc
    else:
        mod.run(size=size, seed=seed)


def _ask_size() -> int:
    raw = input(f"  Grid size ({MIN_SIZE}-{MAX_SIZE}, default {MIN_SIZE}): ").strip()
    try:
        size = int(raw or MIN_SIZE)
        if not MIN_SIZE <= size <= MAX_SIZE:
            raise ValueError
    except ValueError:
        print(f"  Invalid size — using {MIN_SIZE}.")
        size = MIN_SIZE
    return size


def _menu_loop(image: Path | None, seed: int | None) -> None:
    while True:
        print()
        print("  ====================================")
        print("        P H O T O   F I N I S H       ")
        print("  ====================================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Pygame GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return
        if choice == "1":
            _launch(Frontend.rich, _ask_size(), image, seed)
        elif choice == "2":
            _launch(Frontend.pygame, MIN_SIZE, image, seed)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    size: int = typer.Option(
        MIN_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    image: Optional[Path] = typer.Option(
        None, "-i", "--image",
        exists=True, dir_okay=False, readable=True,
        help="Photo to cut into tiles (Pygame only).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for a reproducible layout.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine activity.",
    ),
) -> None:
    """PhotoFinish — slide the tiles of a photo back into place."""
    _configure_logging(verbose)

    if frontend is None:
        _menu_loop(image, seed)
        return

    _launch(frontend, size, image, seed)


if __name__ == "__main__":
    app()
