"""Board model for the photo sliding puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")


class Direction(StrEnum):
    """The direction a *tile* slides, never the direction the gap moves."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Offset(NamedTuple):
    """A 2-D drag translation in screen coordinates (``dy`` grows downwards)."""

    dx: float = 0.0
    dy: float = 0.0


@dataclass
class Board(Generic[T]):
    """Represents the sliding puzzle board.

    Slots are stored as a flat row-major list.  ``None`` is the empty slot;
    every other entry is an opaque tile reference.
    """

    size: int
    slots: list[T | None]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_slots(cls, size: int, slots: list[T | None]) -> Board[T]:
        """Create a board from a flat row-major slot list.

        Example::

            Board.from_slots(3, [0, 1, 2, 3, 4, 5, 6, 7, None])
        """
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        if len(slots) != size * size:
            raise ValueError(
                f"Expected {size * size} slots for a {size}×{size} board, "
                f"got {len(slots)}."
            )
        empties = sum(1 for s in slots if s is None)
        if empties != 1:
            raise ValueError(f"Expected exactly one empty slot, found {empties}.")
        return cls(size=size, slots=list(slots))

    # -- geometry -------------------------------------------------------------

    def check_index(self, index: int) -> None:
        if not 0 <= index < self.size * self.size:
            raise IndexError(
                f"Slot index {index} out of range for "
                f"{self.size * self.size} slots."
            )

    def position(self, index: int) -> tuple[int, int]:
        """Return the ``(row, col)`` of a flat slot index."""
        self.check_index(index)
        return index // self.size, index % self.size

    def index_at(self, row: int, col: int) -> int:
        return row * self.size + col

    def adjacent_indices(self, index: int) -> set[int]:
        """Return the indices orthogonally adjacent to *index* within bounds."""
        row, col = self.position(index)
        adjacent: set[int] = set()
        if row > 0:
            adjacent.add(index - self.size)
        if row < self.size - 1:
            adjacent.add(index + self.size)
        if col > 0:
            adjacent.add(index - 1)
        if col < self.size - 1:
            adjacent.add(index + 1)
        return adjacent

    # -- queries --------------------------------------------------------------

    @property
    def empty_index(self) -> int:
        try:
            return self.slots.index(None)
        except ValueError:
            raise RuntimeError("Board has no empty slot.") from None

    def get_tile(self, row: int, col: int) -> T | None:
        return self.slots[self.index_at(row, col)]

    def swap(self, a: int, b: int) -> None:
        self.check_index(a)
        self.check_index(b)
        self.slots[a], self.slots[b] = self.slots[b], self.slots[a]

    def copy(self) -> Board[T]:
        return Board(size=self.size, slots=self.slots[:])
