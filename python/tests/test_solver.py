"""Solvability checks — parity against hand-built layouts."""

from __future__ import annotations

import pytest

from photofinish.backend.engine.gamesolver import Solver
from photofinish.backend.models.board import Board

GOAL_3x3 = [1, 2, 3, 4, 5, 6, 7, 8, None]
GOAL_4x4 = [*range(1, 16), None]


@pytest.mark.parametrize(
    ("slots", "expected"),
    [
        (GOAL_3x3, True),
        ([1, 2, 3, 4, 5, 6, 7, None, 8], True),     # one legal move away
        ([1, 2, 3, 4, None, 6, 7, 5, 8], True),     # two legal moves away
        ([2, 1, 3, 4, 5, 6, 7, 8, None], False),    # single tile swap
        ([1, 2, 3, 4, 5, 6, 8, 7, None], False),    # the classic 15-puzzle swap
    ],
)
def test_is_solvable_3x3(slots: list, expected: bool) -> None:
    board = Board.from_slots(3, slots)
    assert Solver.is_solvable(board, GOAL_3x3) is expected


def test_is_solvable_even_grid_accounts_for_gap_row() -> None:
    # gap moved up one row: an odd permutation with an odd gap distance
    slots = GOAL_4x4[:]
    slots[11], slots[15] = slots[15], slots[11]
    assert Solver.is_solvable(Board.from_slots(4, slots), GOAL_4x4)

    # two tiles exchanged, gap untouched: unsolvable
    swapped = GOAL_4x4[:]
    swapped[13], swapped[14] = swapped[14], swapped[13]
    assert not Solver.is_solvable(Board.from_slots(4, swapped), GOAL_4x4)


def test_is_solvable_rejects_foreign_tiles() -> None:
    board = Board.from_slots(2, ["a", "b", "z", None])
    assert not Solver.is_solvable(board, ["a", "b", "c", None])


def test_is_solvable_rejects_length_mismatch() -> None:
    board = Board.from_slots(2, [1, 2, 3, None])
    with pytest.raises(ValueError, match="Goal has 9 slots"):
        Solver.is_solvable(board, GOAL_3x3)


def test_is_solved() -> None:
    assert Solver.is_solved(Board.from_slots(3, GOAL_3x3), GOAL_3x3)
    assert not Solver.is_solved(
        Board.from_slots(3, [1, 2, 3, 4, 5, 6, 7, None, 8]), GOAL_3x3
    )
