"""Move rules — candidate generation order, legality and replay."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from backend.engine.gamegenerator import BoardGenerator
from backend.engine.gameplay import GamePlay, Move, MoveKind, apply_move, candidate_moves, is_legal
from backend.engine.gameplay.game import ELIGIBLE, OFFSETS
from backend.models.board import BoardState, Piece, is_on_board, to_index

# No piece can enter the gap on cell 13:
#   orthogonal 12, 7 hold diagonal-movers; diagonal 6, 8 hold straight-movers;
#   jump sources 0, 2, 9 hold a straight-mover, a straight-mover, a diagonal-mover.
STUCK = "RBRNNNRBRBNnB "


# -- candidate moves ----------------------------------------------------------


def test_initial_candidates_in_search_order() -> None:
    moves = candidate_moves(BoardGenerator.initial())
    assert moves == [
        Move(MoveKind.STRAIGHT, 13, 12),
        Move(MoveKind.STRAIGHT, 6, 12),
        Move(MoveKind.JUMP, 8, 12),
    ]


def test_stuck_board_has_no_moves() -> None:
    assert candidate_moves(BoardState.from_string(STUCK)) == []


def test_target_moves_like_a_jumper() -> None:
    board = BoardState.from_string("RBBBBNRRnNNN R")
    assert Move(MoveKind.JUMP, 8, 12) in candidate_moves(board)


def test_off_board_sources_are_skipped() -> None:
    # Gap on cell 13: the straight source to its right would be (2, 2).
    board = BoardState.from_string("RBBBBnRRNNNNR ")
    sources = {move.source for move in candidate_moves(board)}
    assert sources <= {12, 7, 6, 8, 0, 2, 9}
    assert Move(MoveKind.STRAIGHT, 12, 13) in candidate_moves(board)


@pytest.mark.parametrize("seed", range(50))
def test_moves_preserve_invariants(seed: int) -> None:
    board = BoardGenerator.random(random.Random(seed))
    for move in candidate_moves(board):
        assert is_legal(board, move)
        after = apply_move(board, move)
        assert Counter(after.cells) == Counter(board.cells)
        assert after.gap == move.source
        assert after.piece_at(move.destination) == board.piece_at(move.source)


# -- legality -----------------------------------------------------------------


@pytest.mark.parametrize(
    "move",
    [
        Move(MoveKind.STRAIGHT, 7, 12),   # not orthogonally adjacent
        Move(MoveKind.DIAGONAL, 13, 12),  # straight-mover, wrong kind
        Move(MoveKind.JUMP, 1, 12),       # diagonal-mover on a jump square
        Move(MoveKind.STRAIGHT, 13, 6),   # destination is not the gap
        Move(MoveKind.JUMP, 20, 12),      # source off the board
    ],
)
def test_illegal_moves(move: Move) -> None:
    assert not is_legal(BoardGenerator.initial(), move)


def test_every_offset_of_a_kind_is_legal() -> None:
    # Gap on 8 = (2, 1): every straight and diagonal neighbour is on the board.
    board = BoardState.from_string("RBBBBnRR NNNNR")
    for kind, offsets in OFFSETS:
        for dx, dy in offsets:
            source = to_index(2 + dx, 1 + dy) if is_on_board(2 + dx, 1 + dy) else None
            if source is None or board.piece_at(source) not in ELIGIBLE[kind]:
                continue
            assert is_legal(board, Move(kind, source, 8))
    assert is_legal(board, Move(MoveKind.STRAIGHT, 7, 8))
    assert not is_legal(board, Move(MoveKind.JUMP, 7, 8))


# -- replay -------------------------------------------------------------------


def test_game_play_counts_legal_moves_only() -> None:
    game = GamePlay(BoardGenerator.initial())
    assert not game.move(Move(MoveKind.DIAGONAL, 7, 12))
    assert game.move(Move(MoveKind.JUMP, 8, 12))
    assert game.moves == 1
    assert game.board.piece_at(12) is Piece.JUMPER
    assert game.board.gap == 8


def test_game_play_detects_goal() -> None:
    game = GamePlay(BoardState.from_string("RBBBBNRRnNNN R"))
    assert not game.is_won
    assert game.move_between(BoardState.from_string("RBBBBNRR NNNnR"))
    assert game.is_won
