"""Pygame frontend driven headless through synthetic mouse events."""

from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402
from PIL import Image  # noqa: E402

from photofinish.backend.models.board import Direction  # noqa: E402
from photofinish.frontend.gui.pygame.app import (  # noqa: E402
    TILE_GAP,
    PygameApp,
    _Screen,
    tile_px,
)


@pytest.fixture
def app():
    photo = Image.new("RGB", (120, 90), (200, 10, 10))
    gui = PygameApp(4, photo, "red.png", seed=21)
    gui._start_game()
    yield gui
    pygame.quit()


def _event(kind: int, **attrs) -> pygame.event.Event:
    return pygame.event.Event(kind, **attrs)


def _drag(app: PygameApp, index: int, dx: int, dy: int) -> None:
    start = app._tile_rect(index).center
    end = (start[0] + dx, start[1] + dy)
    app._ev_game(_event(pygame.MOUSEBUTTONDOWN, pos=start, button=1))
    app._ev_game(_event(pygame.MOUSEMOTION, pos=end, rel=(dx, dy), buttons=(1, 0, 0)))
    app._ev_game(_event(pygame.MOUSEBUTTONUP, pos=end, button=1))


def _slide_vector(direction: Direction, distance: int) -> tuple[int, int]:
    return {
        Direction.UP: (0, -distance),
        Direction.DOWN: (0, distance),
        Direction.LEFT: (-distance, 0),
        Direction.RIGHT: (distance, 0),
    }[direction]


def _neighbour(app: PygameApp) -> tuple[int, Direction]:
    engine = app._engine
    assert engine is not None
    tile = min(engine.get_adjacent_indices(engine.empty_index))
    direction = engine.get_valid_move_direction(tile)
    assert direction is not None
    return tile, direction


def test_tile_px_fits_the_board() -> None:
    for size in range(3, 8):
        assert size * tile_px(size) + (size - 1) * TILE_GAP <= 460


def test_start_game_cuts_the_photo(app: PygameApp) -> None:
    assert app._screen is _Screen.PLAYING
    assert len(app._tiles) == 15
    assert app._tiles[0].get_size() == (tile_px(4), tile_px(4))


def test_long_drag_moves_tile(app: PygameApp) -> None:
    tile, direction = _neighbour(app)
    _drag(app, tile, *_slide_vector(direction, tile_px(4)))
    assert app._engine.empty_index == tile
    assert app._drag_index is None


def test_short_drag_snaps_back(app: PygameApp) -> None:
    tile, direction = _neighbour(app)
    before = list(app._engine.slots)
    _drag(app, tile, *_slide_vector(direction, tile_px(4) // 4))
    assert app._engine.slots == before


def test_drag_offset_follows_constraint(app: PygameApp) -> None:
    tile, direction = _neighbour(app)
    start = app._tile_rect(tile).center
    dx, dy = _slide_vector(direction, 1000)
    app._ev_game(_event(pygame.MOUSEBUTTONDOWN, pos=start, button=1))
    app._ev_game(
        _event(pygame.MOUSEMOTION, pos=(start[0] + dx, start[1] + dy), rel=(dx, dy), buttons=(1, 0, 0))
    )
    reach = tile_px(4) + TILE_GAP
    assert abs(app._drag_offset.dx) + abs(app._drag_offset.dy) == reach
    app._draw_game()


def test_arrow_key_moves(app: PygameApp) -> None:
    engine = app._engine
    target = engine.tile_index_for(Direction.UP)
    key = pygame.K_UP
    if target is None:
        target = engine.tile_index_for(Direction.DOWN)
        key = pygame.K_DOWN
    app._ev_game(_event(pygame.KEYDOWN, key=key, mod=0, unicode=""))
    assert engine.empty_index == target
