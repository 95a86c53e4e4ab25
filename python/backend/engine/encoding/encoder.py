"""Dense integer keys for board states.

A board is packed into 28 bits, one field per piece kind, each field a bit
pattern over the cells not already claimed by an earlier kind:

    field            slots  pieces  key bits
    straight-movers  14     4       13
    diagonal-movers  10     4       9
    jumpers          6      4       5
    target           2      1       1

Since each field's population is fixed, the bit for slot 0 is implied and
is dropped (``bits >> 1``).  Decoding restores it: if the visible bits do
not already hold the expected population, slot 0 must have been set.

The keys are small enough to index a flat table directly, see
:data:`MAX_KEY`.
"""

from __future__ import annotations

import logging

from backend.engine.gamegenerator import BoardGenerator
from backend.models.board import BOARD_SIZE, BoardState, Piece

logger = logging.getLogger(__name__)

# (piece, slots, population) in packing order, most significant first.
_FIELDS: tuple[tuple[Piece, int, int], ...] = (
    (Piece.STRAIGHT, 14, 4),
    (Piece.DIAGONAL, 10, 4),
    (Piece.JUMPER, 6, 4),
    (Piece.TARGET, 2, 1),
)

KEY_BITS = sum(slots - 1 for _, slots, _ in _FIELDS)

# Highest straight-mover field is cells 10..13, i.e. 0b1111000000 in the
# top ten key bits; every key is strictly below the next value up.
MAX_KEY = 0b1111000001 << (KEY_BITS - 10)


class EncodingError(ValueError):
    """Raised by a strict decode of a key no valid board encodes to."""


class BoardEncoder:
    """Stateless codec between :class:`BoardState` and integer keys."""

    @staticmethod
    def encode(board: BoardState) -> int:
        """Return the key of *board*, in ``[0, MAX_KEY)``."""
        cells = board.cells
        candidates = range(BOARD_SIZE)
        key = 0
        for piece, slots, _ in _FIELDS:
            bits = 0
            rest: list[int] = []
            for slot, cell in enumerate(candidates):
                if cells[cell] is piece:
                    bits |= 1 << slot
                else:
                    rest.append(cell)
            key = (key << (slots - 1)) | (bits >> 1)
            candidates = rest
        return key

    @staticmethod
    def decode(key: int, *, strict: bool = False) -> BoardState:
        """Return the board encoded by *key*.

        A key outside ``[0, MAX_KEY)`` or with a field of the wrong
        population is a consistency fault.  With *strict* the fault raises
        :class:`EncodingError`; otherwise it is logged and the starting
        board is returned.
        """
        try:
            fields = BoardEncoder._split(key)
        except EncodingError:
            if strict:
                raise
            logger.warning(f"Key {key} does not encode a board, using the starting board")
            return BoardGenerator.initial()

        cells = [Piece.EMPTY] * BOARD_SIZE
        candidates = list(range(BOARD_SIZE))
        for (piece, _, _), bits in zip(_FIELDS, fields):
            rest: list[int] = []
            for slot, cell in enumerate(candidates):
                if bits >> slot & 1:
                    cells[cell] = piece
                else:
                    rest.append(cell)
            candidates = rest
        return BoardState(tuple(cells))

    @staticmethod
    def is_valid_key(key: int) -> bool:
        try:
            BoardEncoder._split(key)
        except EncodingError:
            return False
        return True

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _split(key: int) -> list[int]:
        """Unpack *key* into the full slot bit pattern of each field."""
        if not 0 <= key < MAX_KEY:
            raise EncodingError(f"Key {key} is outside [0, {MAX_KEY}).")
        fields: list[int] = []
        rest = key
        for piece, slots, population in reversed(_FIELDS):
            width = slots - 1
            bits = (rest & ((1 << width) - 1)) << 1
            rest >>= width
            if bits.bit_count() != population:
                bits |= 1
            if bits.bit_count() != population:
                raise EncodingError(
                    f"Key {key}: {piece.name.lower()} field holds "
                    f"{bits.bit_count()} piece(s), expected {population}."
                )
            fields.append(bits)
        fields.reverse()
        return fields
