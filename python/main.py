#!/usr/bin/env python3
"""Gap Puzzle solver.

Usage::

    python main.py                 # solve, plain ASCII output
    python main.py -f rich         # Rich terminal output
    python main.py -t dense -v     # flat predecessor table, debug logging
    python main.py -g 0            # search for a different goal cell

Exits 0 when a solution is found and 1 when the goal is unreachable.
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import SolverConfig  # noqa: E402
from backend.engine.gamesolver import SearchEngine, TableKind  # noqa: E402
from backend.models.board import BOARD_SIZE, GOAL_CELL  # noqa: E402

logger = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_EXHAUSTED = 1
EXIT_NO_MEMORY = 2


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to print the result.",
    ),
    goal_cell: int = typer.Option(
        GOAL_CELL, "-g", "--goal-cell",
        min=0, max=BOARD_SIZE - 1,
        help="Cell the target piece must reach (0-13).",
    ),
    table: TableKind = typer.Option(
        TableKind.SPARSE, "-t", "--table",
        help="Predecessor table: sparse (dict) or dense (flat array, ~1 GB).",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Solve the gap puzzle by breadth-first search."""
    config = SolverConfig(
        goal_cell=goal_cell,
        table=table,
        log_level="DEBUG" if verbose else "WARNING",
    )
    logging.basicConfig(
        level=config.level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        engine = SearchEngine.from_config(config)
    except MemoryError:
        logger.error("Cannot allocate the dense predecessor table")
        typer.echo("Not enough memory for the dense table; try --table sparse.", err=True)
        raise typer.Exit(code=EXIT_NO_MEMORY)

    result = engine.run()
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(result)

    if not result.is_solved:
        raise typer.Exit(code=EXIT_EXHAUSTED)


if __name__ == "__main__":
    app()
