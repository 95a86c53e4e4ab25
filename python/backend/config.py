"""Solver settings shared by the CLI and the search engine."""

import logging
from dataclasses import dataclass

from backend.engine.gamesolver.table import TableKind
from backend.models.board import BOARD_SIZE, GOAL_CELL


@dataclass
class SolverConfig:
    """Goal cell, predecessor table backend and log level for one solver run."""

    goal_cell: int = GOAL_CELL
    table: TableKind = TableKind.SPARSE
    log_level: str = "WARNING"

    def validate(self) -> None:
        if not 0 <= self.goal_cell < BOARD_SIZE:
            raise ValueError(
                f"goal_cell must be in [0, {BOARD_SIZE}), got {self.goal_cell}."
            )
        self.table = TableKind(self.table)
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level {self.log_level!r}.")

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())
