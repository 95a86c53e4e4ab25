"""Board model for the gap puzzle.

The board is a 6×3 grid with four cells missing from the bottom row,
leaving 14 playable cells indexed row-major::

     0  1  2  3  4  5
     6  7  8  9 10 11
    12 13

Thirteen pieces fill 13 of the 14 cells; the remaining cell is the gap.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import StrEnum

BOARD_WIDTH = 6
BOARD_HEIGHT = 3
BOARD_SIZE = 14
GOAL_CELL = 12


class Piece(StrEnum):
    """Cell contents.  The value is the symbol used when rendering."""

    EMPTY = " "
    STRAIGHT = "R"
    DIAGONAL = "B"
    JUMPER = "N"
    TARGET = "n"


# Number of each piece on a valid board.
PIECE_COUNTS: dict[Piece, int] = {
    Piece.STRAIGHT: 4,
    Piece.DIAGONAL: 4,
    Piece.JUMPER: 4,
    Piece.TARGET: 1,
    Piece.EMPTY: 1,
}


# -- geometry -----------------------------------------------------------------


def is_on_board(x: int, y: int) -> bool:
    """Return True if column *x*, row *y* is one of the 14 playable cells."""
    if not (0 <= x < BOARD_WIDTH and 0 <= y < BOARD_HEIGHT):
        return False
    return not (x >= 2 and y >= 2)


def to_xy(index: int) -> tuple[int, int]:
    return index % BOARD_WIDTH, index // BOARD_WIDTH


def to_index(x: int, y: int) -> int:
    return x + y * BOARD_WIDTH


# -- board state --------------------------------------------------------------


@dataclass(frozen=True)
class BoardState:
    """An immutable assignment of pieces to the 14 cells.

    ``cells[i]`` is the piece on cell *i*.  Construction checks the piece
    counts, so every instance holds exactly one gap and one target.
    """

    cells: tuple[Piece, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != BOARD_SIZE:
            raise ValueError(
                f"Expected {BOARD_SIZE} cells, got {len(self.cells)}."
            )
        counts = Counter(self.cells)
        for piece, expected in PIECE_COUNTS.items():
            if counts[piece] != expected:
                raise ValueError(
                    f"Expected {expected} {piece.name.lower()} cell(s), "
                    f"got {counts[piece]}."
                )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_masks(
        cls, straight: int, diagonal: int, jumper: int, target: int
    ) -> BoardState:
        """Create a board from four disjoint cell bitmasks (bit *i* = cell *i*).

        Example::

            BoardState.from_masks(0b10000011000001, 0b11110,
                                  0b111100000000, 0b100000)
        """
        masks = (
            (Piece.STRAIGHT, straight),
            (Piece.DIAGONAL, diagonal),
            (Piece.JUMPER, jumper),
            (Piece.TARGET, target),
        )
        cells: list[Piece] = []
        for i in range(BOARD_SIZE):
            owners = [piece for piece, mask in masks if mask >> i & 1]
            if len(owners) > 1:
                raise ValueError(f"Cell {i} is claimed by {len(owners)} pieces.")
            cells.append(owners[0] if owners else Piece.EMPTY)
        return cls(tuple(cells))

    @classmethod
    def from_string(cls, text: str) -> BoardState:
        """Create a board from its 14 symbols in row-major order.

        Example::

            BoardState.from_string("RBBBBnRRNNNN R")
        """
        try:
            return cls(tuple(Piece(ch) for ch in text))
        except ValueError as exc:
            raise ValueError(f"Invalid board string {text!r}: {exc}") from exc

    # -- queries --------------------------------------------------------------

    def piece_at(self, cell: int) -> Piece:
        return self.cells[cell]

    @property
    def gap(self) -> int:
        return self.cells.index(Piece.EMPTY)

    @property
    def target(self) -> int:
        return self.cells.index(Piece.TARGET)

    def mask(self, piece: Piece) -> int:
        """Return the bitmask of cells holding *piece*."""
        bits = 0
        for i, p in enumerate(self.cells):
            if p is piece:
                bits |= 1 << i
        return bits

    def to_string(self) -> str:
        return "".join(self.cells)

    # -- transitions ----------------------------------------------------------

    def moved(self, source: int, destination: int) -> BoardState:
        """Return a new board with the piece on *source* moved to *destination*.

        *destination* must be the gap.
        """
        if self.cells[destination] is not Piece.EMPTY:
            raise ValueError(f"Destination cell {destination} is not the gap.")
        if self.cells[source] is Piece.EMPTY:
            raise ValueError(f"Source cell {source} is empty.")
        cells = list(self.cells)
        cells[destination] = cells[source]
        cells[source] = Piece.EMPTY
        return BoardState(tuple(cells))
