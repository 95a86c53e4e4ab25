"""Builds puzzle boards: the fixed starting layout and random valid layouts."""

from __future__ import annotations

import random

from backend.models.board import PIECE_COUNTS, BoardState


class BoardGenerator:
    """Creates boards for the solver and the test-suite."""

    # Starting layout, one bitmask per piece kind (bit i = cell i).
    INITIAL_STRAIGHT = 0b10000011000001
    INITIAL_DIAGONAL = 0b00000000011110
    INITIAL_JUMPER = 0b00111100000000
    INITIAL_TARGET = 0b00000000100000

    @staticmethod
    def initial() -> BoardState:
        """Return the puzzle's starting board (gap on cell 12)::

            +------+
            |RBBBBn|
            |RRNNNN|
            | R+---+
            +--+
        """
        return BoardState.from_masks(
            BoardGenerator.INITIAL_STRAIGHT,
            BoardGenerator.INITIAL_DIAGONAL,
            BoardGenerator.INITIAL_JUMPER,
            BoardGenerator.INITIAL_TARGET,
        )

    @staticmethod
    def random(rng: random.Random | None = None) -> BoardState:
        """Return a random valid board.

        The board need not be reachable from :meth:`initial`.
        """
        rng = rng or random.Random()
        cells = [piece for piece, count in PIECE_COUNTS.items() for _ in range(count)]
        rng.shuffle(cells)
        return BoardState(tuple(cells))
