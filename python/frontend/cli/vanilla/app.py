"""Vanilla terminal frontend — no third-party dependencies.

Prints each board of the solution as plain ASCII, tracing the board's
L-shaped outline::

    +------+
    |RBBBBn|
    |RRNNNN|
    | R+---+
    +--+
"""

from __future__ import annotations

from backend.engine.gamestate import SearchResult
from backend.models.board import BOARD_WIDTH, BoardState


# -- board rendering ----------------------------------------------------------


def render_board(board: BoardState) -> str:
    """Return the board as a five-line ASCII drawing (no trailing newline)."""
    text = board.to_string()
    top = text[:BOARD_WIDTH]
    middle = text[BOARD_WIDTH : 2 * BOARD_WIDTH]
    bottom = text[2 * BOARD_WIDTH :]
    return "\n".join(
        [
            "+------+",
            f"|{top}|",
            f"|{middle}|",
            f"|{bottom}+---+",
            "+--+",
        ]
    )


def render_result(result: SearchResult) -> str:
    if not result.is_solved:
        return (
            "\nNO SOLUTION: the goal cannot be reached from the starting board "
            f"({result.states_seen} states searched).\n"
        )
    lines = ["", "SOLUTION FOUND:", ""]
    lines.extend(render_board(board) for board in result.path)
    lines.append("")
    lines.append(
        f"{result.moves} moves, {result.states_seen} states searched "
        f"in {result.elapsed:.1f}s."
    )
    return "\n".join(lines) + "\n"


# -- public entry point -------------------------------------------------------


def run(result: SearchResult) -> None:
    """Print the outcome of a search."""
    print(render_result(result), end="")
