"""Core gameplay logic — classifies drags, clamps offsets and commits swaps."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import Generic, TypeVar

from photofinish.backend.engine.gamegenerator import SHUFFLE_MOVES, GameGenerator
from photofinish.backend.models.board import Board, Direction, Offset

T = TypeVar("T")

DEFAULT_SPACING = 2.0
MIN_SIZE = 3
MAX_SIZE = 7

SIZE_LABELS: dict[int, str] = {
    3: "Small",
    4: "Medium",
    5: "Large",
    6: "Epic",
    7: "Gigantic",
}

logger = logging.getLogger(__name__)


def _clamped(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class PuzzleEngine(Generic[T]):
    """Owns one puzzle session: the grid and the drag/commit rules.

    The caller supplies ``size * size - 1`` tile references in solved
    (row-major) order; the engine appends the empty slot and, unless
    ``shuffle=False``, scrambles the board straight away.

    A drag gesture maps onto two calls: :meth:`get_constrained_offset` on
    every update (never mutates) and :meth:`commit_if_threshold_crossed` once
    when the gesture ends.
    """

    def __init__(
        self,
        size: int,
        tiles: Sequence[T],
        *,
        tile_size: float,
        spacing: float = DEFAULT_SPACING,
        rng: random.Random | None = None,
        shuffle: bool = True,
    ) -> None:
        self.board: Board[T] = GameGenerator.board(size, tiles)
        self.goal: tuple[T | None, ...] = tuple(self.board.slots)
        self.tile_size = tile_size
        self.spacing = spacing
        self._rng = rng or random.Random()
        if shuffle:
            self.shuffle()

    @classmethod
    def from_board(
        cls,
        board: Board[T],
        *,
        tile_size: float,
        spacing: float = DEFAULT_SPACING,
        rng: random.Random | None = None,
    ) -> PuzzleEngine[T]:
        """Wrap an existing layout; its current order is taken as the goal."""
        tiles = [s for s in board.slots if s is not None]
        engine = cls(
            board.size, tiles, tile_size=tile_size, spacing=spacing,
            rng=rng, shuffle=False,
        )
        engine.board = board
        engine.goal = tuple(board.slots)
        return engine

    # -- grid -----------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def slots(self) -> list[T | None]:
        return self.board.slots

    @property
    def empty_index(self) -> int:
        return self.board.empty_index

    @property
    def is_solved(self) -> bool:
        return tuple(self.board.slots) == self.goal

    def get_adjacent_indices(self, index: int) -> set[int]:
        return self.board.adjacent_indices(index)

    def shuffle(self) -> list[int]:
        """Walk the gap through :data:`SHUFFLE_MOVES` random legal moves."""
        return GameGenerator.scramble(self.board, self._rng, SHUFFLE_MOVES)

    # -- move rules -----------------------------------------------------------

    def get_valid_move_direction(self, tile_index: int) -> Direction | None:
        """Return the way the tile at *tile_index* may slide, if any.

        ``None`` means the tile is not next to the gap.
        """
        self.board.check_index(tile_index)
        empty = self.board.empty_index
        if tile_index not in self.board.adjacent_indices(empty):
            return None

        tile_row, tile_col = self.board.position(tile_index)
        empty_row, empty_col = self.board.position(empty)

        if tile_row == empty_row:
            return Direction.RIGHT if tile_col < empty_col else Direction.LEFT
        return Direction.DOWN if tile_row < empty_row else Direction.UP

    def tile_index_for(self, direction: Direction) -> int | None:
        """Return the index of the tile that would slide *direction* into the gap."""
        # UP    -> tile below the gap
        # DOWN  -> tile above the gap
        # LEFT  -> tile right of the gap
        # RIGHT -> tile left of the gap
        offsets = {
            Direction.UP: (1, 0),
            Direction.DOWN: (-1, 0),
            Direction.LEFT: (0, 1),
            Direction.RIGHT: (0, -1),
        }
        dr, dc = offsets[direction]
        er, ec = self.board.position(self.board.empty_index)
        tr, tc = er + dr, ec + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None
        return self.board.index_at(tr, tc)

    # -- drag gesture ---------------------------------------------------------

    def get_constrained_offset(
        self, tile_index: int, raw_translation: tuple[float, float]
    ) -> Offset:
        """Confine a live drag to the straight line between tile and gap."""
        direction = self.get_valid_move_direction(tile_index)
        if direction is None:
            return Offset(0.0, 0.0)

        dx, dy = raw_translation
        reach = self.tile_size + self.spacing

        if direction is Direction.UP:
            return Offset(0.0, _clamped(dy, -reach, 0.0))
        if direction is Direction.DOWN:
            return Offset(0.0, _clamped(dy, 0.0, reach))
        if direction is Direction.LEFT:
            return Offset(_clamped(dx, -reach, 0.0), 0.0)
        return Offset(_clamped(dx, 0.0, reach), 0.0)

    def commit_if_threshold_crossed(
        self, tile_index: int, constrained_translation: tuple[float, float]
    ) -> bool:
        """Swap the tile into the gap if the drag went past half a tile.

        Returns True when the swap was applied.  A short drag leaves the
        board untouched; snapping the tile back is up to the caller.
        """
        direction = self.get_valid_move_direction(tile_index)
        if direction is None:
            return False

        dx, dy = constrained_translation
        if direction in (Direction.UP, Direction.DOWN):
            distance = abs(dy)
        else:
            distance = abs(dx)

        if distance <= self.tile_size / 2:
            return False

        empty = self.board.empty_index
        self.board.swap(tile_index, empty)
        logger.debug("Moved tile %d %s into slot %d", tile_index, direction, empty)
        return True

    # -- discrete moves -------------------------------------------------------

    def full_translation(self, direction: Direction) -> Offset:
        """Return the translation that carries a tile all the way into the gap."""
        reach = self.tile_size + self.spacing
        return {
            Direction.UP: Offset(0.0, -reach),
            Direction.DOWN: Offset(0.0, reach),
            Direction.LEFT: Offset(-reach, 0.0),
            Direction.RIGHT: Offset(reach, 0.0),
        }[direction]

    def move(self, direction: Direction) -> bool:
        """Slide the tile next to the gap in *direction*.

        E.g. ``Direction.UP`` moves the tile **below** the gap upward.
        Returns True if the move was valid.
        """
        tile_index = self.tile_index_for(direction)
        if tile_index is None:
            return False
        return self.commit_if_threshold_crossed(
            tile_index, self.full_translation(direction)
        )

    def move_tile(self, tile_index: int) -> bool:
        """Slide the tile at *tile_index* into the gap if they are adjacent."""
        direction = self.get_valid_move_direction(tile_index)
        if direction is None:
            return False
        return self.commit_if_threshold_crossed(
            tile_index, self.full_translation(direction)
        )
