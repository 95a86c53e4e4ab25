"""Lifecycle and outcome of a single search run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from backend.models.board import BoardState


class SearchStatus(StrEnum):
    INIT = "init"
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass
class SearchResult:
    """What a finished search found.

    ``path`` runs from the starting board to the goal board inclusive and
    is empty when the search is exhausted.
    """

    status: SearchStatus
    path: list[BoardState] = field(default_factory=list)
    states_seen: int = 0
    states_expanded: int = 0
    elapsed: float = 0.0

    @property
    def is_solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def moves(self) -> int | None:
        """Number of moves in the solution, or ``None`` if there is none."""
        if not self.is_solved:
            return None
        return len(self.path) - 1
