"""Generates solved and scrambled boards."""

from __future__ import annotations

import random

from slidegraph.models.board import Board
from slidegraph.models.grid import ShapeCache


class BoardGenerator:
    """Creates boards by walking legal moves away from the solved state."""

    @staticmethod
    def solved(columns: int, rows: int, shapes: ShapeCache | None = None) -> Board:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        cells = columns * rows
        flat = list(range(1, cells)) + [0]
        return Board.from_flat(columns, rows, flat, blank=0, shapes=shapes)

    @staticmethod
    def scramble(
        board: Board, moves: int, rng: random.Random | None = None
    ) -> Board:
        """Return *board* after *moves* random slides.

        A slide never immediately undoes the previous one unless it is the
        only slide available.
        """
        if moves < 0:
            raise ValueError(f"Move count must be non-negative, got {moves}.")
        rng = rng or random.Random()
        prev_blank = None

        for _ in range(moves):
            blank = board.blank_location
            neighbors = list(board.shape.neighbors(blank))
            if not neighbors:
                break
            if prev_blank in neighbors and len(neighbors) > 1:
                neighbors.remove(prev_blank)
            target = rng.choice(neighbors)
            board = board.with_swap(blank, target)
            prev_blank = blank

        return board
