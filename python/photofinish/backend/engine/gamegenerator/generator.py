"""Generates solvable photo puzzle boards."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import TypeVar

from photofinish.backend.models.board import Board

T = TypeVar("T")

SHUFFLE_MOVES = 1000

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by walking the gap from the solved state."""

    @staticmethod
    def board(size: int, tiles: Sequence[T]) -> Board[T]:
        """Return the unshuffled board: *tiles* in order, gap in the last slot."""
        if len(tiles) != size * size - 1:
            raise ValueError(
                f"Expected {size * size - 1} tiles for a {size}×{size} board, "
                f"got {len(tiles)}."
            )
        return Board.from_slots(size, [*tiles, None])

    @staticmethod
    def scramble(
        board: Board[T],
        rng: random.Random | None = None,
        moves: int = SHUFFLE_MOVES,
    ) -> list[int]:
        """Scramble *board* in-place using random legal moves.

        Each step swaps the gap with a uniformly chosen neighbour, so the
        result is always reachable from the starting layout.  Returns the
        indices the gap visited, in order.
        """
        rng = rng or random.Random()
        path: list[int] = []

        for _ in range(moves):
            empty = board.empty_index
            neighbors = sorted(board.adjacent_indices(empty))
            if not neighbors:
                continue
            target = rng.choice(neighbors)
            board.swap(empty, target)
            path.append(target)

        logger.debug(
            "Scrambled %d×%d board with %d moves", board.size, board.size, len(path)
        )
        return path

    @staticmethod
    def generate(
        size: int,
        tiles: Sequence[T],
        rng: random.Random | None = None,
    ) -> Board[T]:
        """Return a shuffled, solvable board of the given size."""
        board = GameGenerator.board(size, tiles)
        GameGenerator.scramble(board, rng)
        return board
