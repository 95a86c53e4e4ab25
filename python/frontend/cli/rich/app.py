"""Rich terminal frontend — coloured pieces inside panels.

Uses the ``rich`` library for styled output; the board outline is the
same as the vanilla frontend's.
"""

from __future__ import annotations

from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from backend.engine.gamestate import SearchResult
from backend.models.board import BOARD_WIDTH, BoardState, Piece

console = Console()

_STYLES: dict[Piece, str] = {
    Piece.EMPTY: "",
    Piece.STRAIGHT: "bold cyan",
    Piece.DIAGONAL: "bold yellow",
    Piece.JUMPER: "bold white",
    Piece.TARGET: "bold red",
}


# -- board rendering ----------------------------------------------------------


def _append_cells(text: Text, cells: tuple[Piece, ...]) -> None:
    for piece in cells:
        text.append(piece.value, style=_STYLES[piece])


def render_board(board: BoardState) -> Text:
    """Return a Rich Text drawing of the board."""
    cells = board.cells
    text = Text(style="bright_blue")
    text.append("+------+\n|")
    _append_cells(text, cells[:BOARD_WIDTH])
    text.append("|\n|")
    _append_cells(text, cells[BOARD_WIDTH : 2 * BOARD_WIDTH])
    text.append("|\n|")
    _append_cells(text, cells[2 * BOARD_WIDTH :])
    text.append("+---+\n+--+")
    return text


def _legend() -> Text:
    legend = Text()
    for piece, name in (
        (Piece.STRAIGHT, "straight"),
        (Piece.DIAGONAL, "diagonal"),
        (Piece.JUMPER, "jumper"),
        (Piece.TARGET, "target"),
    ):
        legend.append(f"  {piece.value}", style=_STYLES[piece])
        legend.append(f" {name}", style="dim")
    return legend


# -- result screens -----------------------------------------------------------


def _draw_solution(result: SearchResult) -> None:
    steps = [
        Group(Text(f"#{i}", style="dim"), render_board(board))
        for i, board in enumerate(result.path)
    ]
    summary = Text()
    summary.append(f"  {result.moves}", style="bold green")
    summary.append(" moves   ", style="dim")
    summary.append(str(result.states_seen), style="bold yellow")
    summary.append(" states searched   ", style="dim")
    summary.append(f"{result.elapsed:.1f}s", style="bold yellow")

    panel = Panel(
        Columns(steps, padding=(1, 3)),
        title="[bold green]Solution found[/bold green]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(panel)
    console.print(Align.center(summary))
    console.print(Align.center(_legend()))


def _draw_exhausted(result: SearchResult) -> None:
    panel = Panel(
        Text.from_markup(
            "[red]No solution:[/red] the goal cannot be reached from the "
            f"starting board.\n[dim]{result.states_seen} states searched.[/dim]"
        ),
        title="[bold red]Exhausted[/bold red]",
        border_style="red",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


# -- public entry point -------------------------------------------------------


def run(result: SearchResult) -> None:
    """Print the outcome of a search."""
    if result.is_solved:
        _draw_solution(result)
    else:
        _draw_exhausted(result)
