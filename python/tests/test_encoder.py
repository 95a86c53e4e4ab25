"""Board encoder — bijection, key range and consistency faults."""

from __future__ import annotations

import logging
import random

import pytest

from backend.engine.encoding import MAX_KEY, BoardEncoder, EncodingError
from backend.engine.gamegenerator import BoardGenerator
from backend.engine.gameplay import apply_move, candidate_moves
from backend.models.board import BoardState

INITIAL_KEY = (4192 << 15) | (7 << 6) | (15 << 1) | 0


# -- helpers ------------------------------------------------------------------


def _reachable(depth: int) -> set[BoardState]:
    """Boards within *depth* moves of the starting board."""
    frontier = {BoardGenerator.initial()}
    seen = set(frontier)
    for _ in range(depth):
        frontier = {
            apply_move(board, move)
            for board in frontier
            for move in candidate_moves(board)
        } - seen
        seen |= frontier
    return seen


_REACHABLE = sorted(_reachable(6), key=BoardState.to_string)
_RANDOM = [BoardGenerator.random(random.Random(seed)) for seed in range(200)]


# -- encode -------------------------------------------------------------------


def test_initial_key() -> None:
    # straight 0b10000011000001 >> 1, diagonal slots 0-3, jumper slots 1-4,
    # target in slot 0.
    assert BoardEncoder.encode(BoardGenerator.initial()) == INITIAL_KEY == 137_363_934


def test_max_key_bound_is_tight() -> None:
    board = BoardState.from_string("BBBBnNNNN RRRR")
    key = BoardEncoder.encode(board)
    assert key >> 18 == 0b1111000000
    assert key < MAX_KEY
    assert MAX_KEY == 0b1111000001 << 18


def test_reachable_sample_is_large_enough() -> None:
    assert len(_REACHABLE) > 20


@pytest.mark.parametrize("board", _REACHABLE + _RANDOM, ids=BoardState.to_string)
def test_round_trip(board: BoardState) -> None:
    key = BoardEncoder.encode(board)
    assert 0 <= key < MAX_KEY
    assert BoardEncoder.decode(key, strict=True) == board
    assert BoardEncoder.encode(BoardEncoder.decode(key)) == key
    assert BoardEncoder.is_valid_key(key)


def test_distinct_boards_get_distinct_keys() -> None:
    boards = set(_REACHABLE) | set(_RANDOM)
    keys = {BoardEncoder.encode(board) for board in boards}
    assert len(keys) == len(boards)


# -- decode faults ------------------------------------------------------------


def test_zero_key_falls_back_to_starting_board(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="backend.engine.encoding.encoder"):
        board = BoardEncoder.decode(0)
    assert board == BoardGenerator.initial()
    assert "does not encode a board" in caplog.text


@pytest.mark.parametrize("key", [0, -1, MAX_KEY, MAX_KEY + 12345, 1 << 40])
def test_strict_decode_rejects_invalid_keys(key: int) -> None:
    assert not BoardEncoder.is_valid_key(key)
    with pytest.raises(EncodingError):
        BoardEncoder.decode(key, strict=True)


def test_wrong_population_is_a_fault() -> None:
    # Five visible straight-mover bits cannot be patched back to four.
    key = (0b11111 << 15) | (7 << 6) | (15 << 1)
    with pytest.raises(EncodingError, match="straight"):
        BoardEncoder.decode(key, strict=True)
    assert BoardEncoder.decode(key) == BoardGenerator.initial()


def test_encoding_error_is_value_error() -> None:
    assert issubclass(EncodingError, ValueError)
