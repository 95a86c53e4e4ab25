"""Move rules — which pieces may enter the gap, and applying moves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.models.board import GOAL_CELL, BoardState, Piece, is_on_board, to_index, to_xy


class MoveKind(StrEnum):
    STRAIGHT = "straight"
    DIAGONAL = "diagonal"
    JUMP = "jump"


# Offsets from the gap to the source cell, in the order moves are tried.
OFFSETS: tuple[tuple[MoveKind, tuple[tuple[int, int], ...]], ...] = (
    (MoveKind.STRAIGHT, ((-1, 0), (1, 0), (0, -1), (0, 1))),
    (MoveKind.DIAGONAL, ((-1, -1), (1, -1), (-1, 1), (1, 1))),
    (
        MoveKind.JUMP,
        ((-1, -2), (1, -2), (-2, -1), (2, -1), (-2, 1), (2, 1), (-1, 2), (1, 2)),
    ),
)

ELIGIBLE: dict[MoveKind, frozenset[Piece]] = {
    MoveKind.STRAIGHT: frozenset({Piece.STRAIGHT}),
    MoveKind.DIAGONAL: frozenset({Piece.DIAGONAL}),
    MoveKind.JUMP: frozenset({Piece.JUMPER, Piece.TARGET}),
}

_OFFSETS_BY_KIND: dict[MoveKind, tuple[tuple[int, int], ...]] = dict(OFFSETS)


@dataclass(frozen=True)
class Move:
    """A piece of *kind* moving from cell *source* into the gap at *destination*."""

    kind: MoveKind
    source: int
    destination: int


# -- rules --------------------------------------------------------------------


def _source_cell(gap: int, dx: int, dy: int) -> int | None:
    x, y = to_xy(gap)
    sx, sy = x + dx, y + dy
    if not is_on_board(sx, sy):
        return None
    return to_index(sx, sy)


def is_legal(board: BoardState, move: Move) -> bool:
    """Return True if *move* can be played on *board*.

    The source must be on the board, hold a piece the move kind allows,
    and be one of the kind's offsets away from the gap, which must be the
    destination.
    """
    if move.destination != board.gap:
        return False
    if not 0 <= move.source < len(board.cells):
        return False
    if board.piece_at(move.source) not in ELIGIBLE[move.kind]:
        return False
    gx, gy = to_xy(move.destination)
    sx, sy = to_xy(move.source)
    return (sx - gx, sy - gy) in _OFFSETS_BY_KIND[move.kind]


def candidate_moves(board: BoardState) -> list[Move]:
    """Return every legal move on *board* in the fixed search order."""
    gap = board.gap
    moves: list[Move] = []
    for kind, offsets in OFFSETS:
        eligible = ELIGIBLE[kind]
        for dx, dy in offsets:
            source = _source_cell(gap, dx, dy)
            if source is None:
                continue
            if board.piece_at(source) in eligible:
                moves.append(Move(kind, source, gap))
    return moves


def apply_move(board: BoardState, move: Move) -> BoardState:
    """Return the board after *move*.  The input board is not modified."""
    return board.moved(move.source, move.destination)


class GamePlay:
    """Plays moves on a board one at a time."""

    def __init__(self, board: BoardState, goal_cell: int = GOAL_CELL) -> None:
        self.board = board
        self.goal_cell = goal_cell
        self.moves: int = 0

    def move(self, move: Move) -> bool:
        """Apply *move* if it is legal.  Returns True if it was applied."""
        if not is_legal(self.board, move):
            return False
        self.board = apply_move(self.board, move)
        self.moves += 1
        return True

    def move_between(self, after: BoardState) -> bool:
        """Apply whichever legal move turns the current board into *after*."""
        for candidate in candidate_moves(self.board):
            if apply_move(self.board, candidate) == after:
                return self.move(candidate)
        return False

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.target == self.goal_cell
