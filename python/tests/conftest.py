"""Shared fixtures: small boards with the gap in a known place."""

from __future__ import annotations

import random

import pytest

from photofinish.backend.engine.gameplay import PuzzleEngine
from photofinish.backend.models.board import Board

TILE = 100.0
SPACING = 2.0


def engine_with_empty_at(size: int, empty: int) -> PuzzleEngine[int]:
    """Return an unshuffled engine whose gap sits at slot *empty*."""
    tiles: list[int | None] = list(range(size * size - 1))
    tiles.insert(empty, None)
    board = Board.from_slots(size, tiles)
    return PuzzleEngine.from_board(board, tile_size=TILE, spacing=SPACING)


@pytest.fixture
def centre_3x3() -> PuzzleEngine[int]:
    """3×3 board with the gap in the middle (slot 4)."""
    return engine_with_empty_at(3, 4)


@pytest.fixture
def corner_3x3() -> PuzzleEngine[int]:
    """3×3 board with the gap top-left (slot 0)."""
    return engine_with_empty_at(3, 0)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def make_engine():
    """Factory fixture: ``make_engine(size, empty)``."""
    return engine_with_empty_at
