"""Solvability checks for photo puzzle layouts."""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from photofinish.backend.models.board import Board


class Solver:
    """Stateless checks — all methods are static."""

    @staticmethod
    def is_solved(board: Board, goal: Sequence[Hashable | None]) -> bool:
        return list(board.slots) == list(goal)

    @staticmethod
    def is_solvable(board: Board, goal: Sequence[Hashable | None]) -> bool:
        """Return True if *board* can reach *goal* through legal moves.

        Every legal move is a transposition that also moves the gap by one
        step, so the permutation parity (gap included) must equal the parity
        of the gap's Manhattan distance from its goal slot.
        """
        if len(goal) != len(board.slots):
            raise ValueError(
                f"Goal has {len(goal)} slots, board has {len(board.slots)}."
            )
        goal_index = {tile: i for i, tile in enumerate(goal)}
        if len(goal_index) != len(goal) or set(board.slots) != set(goal_index):
            return False

        perm = [goal_index[tile] for tile in board.slots]

        # parity = (n - number of cycles) % 2
        seen = [False] * len(perm)
        cycles = 0
        for start in range(len(perm)):
            if seen[start]:
                continue
            cycles += 1
            i = start
            while not seen[i]:
                seen[i] = True
                i = perm[i]
        perm_parity = (len(perm) - cycles) % 2

        n = board.size
        er, ec = divmod(board.empty_index, n)
        gr, gc = divmod(goal_index[None], n)
        gap_parity = (abs(er - gr) + abs(ec - gc)) % 2

        return perm_parity == gap_parity
