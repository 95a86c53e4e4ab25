"""Breadth-first solver for the gap puzzle.

Every move costs one, so the first path BFS finds to a goal board is a
shortest one.  States are handled as encoded keys; the predecessor table
doubles as the visited set and the parent links used to rebuild the path.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import TYPE_CHECKING

from backend.engine.encoding import BoardEncoder
from backend.engine.gamegenerator import BoardGenerator
from backend.engine.gameplay import apply_move, candidate_moves
from backend.engine.gamesolver.table import PredecessorTable, SparseTable, make_table
from backend.engine.gamestate import SearchResult, SearchStatus
from backend.models.board import BOARD_SIZE, GOAL_CELL, BoardState

if TYPE_CHECKING:
    from backend.config import SolverConfig

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 100_000


class SearchEngine:
    """One breadth-first search run from *initial* to a goal board.

    A goal board has the target piece on *goal_cell*.  The engine owns its
    queue and predecessor table; both are dropped once :meth:`run` ends.
    """

    def __init__(
        self,
        initial: BoardState | None = None,
        goal_cell: int = GOAL_CELL,
        table: PredecessorTable | None = None,
    ) -> None:
        if not 0 <= goal_cell < BOARD_SIZE:
            raise ValueError(f"goal_cell must be in [0, {BOARD_SIZE}), got {goal_cell}.")
        self.initial = initial if initial is not None else BoardGenerator.initial()
        self.goal_cell = goal_cell
        self.status = SearchStatus.INIT
        self._table: PredecessorTable | None = table if table is not None else SparseTable()
        self._queue: deque[int] = deque()
        self._initial_key = BoardEncoder.encode(self.initial)
        self._expanded = 0
        self._result: SearchResult | None = None

    @classmethod
    def from_config(
        cls, config: SolverConfig, initial: BoardState | None = None
    ) -> SearchEngine:
        config.validate()
        return cls(initial, goal_cell=config.goal_cell, table=make_table(config.table))

    # -- public API -----------------------------------------------------------

    def run(self) -> SearchResult:
        """Search until a goal board is found or the queue runs dry.

        Calling ``run`` again returns the first result.
        """
        if self._result is not None:
            return self._result

        start = time.perf_counter()
        logger.info(f"Searching from {self.initial.to_string()!r} for goal cell {self.goal_cell}")
        self.status = SearchStatus.RUNNING

        table = self._table
        table.record_if_unseen(self._initial_key, None)
        goal_key: int | None = None
        if self._is_goal(self.initial):
            goal_key = self._initial_key
        else:
            self._queue.append(self._initial_key)

        while goal_key is None and self._queue:
            goal_key = self._expand(self._queue.popleft())

        if goal_key is None:
            self.status = SearchStatus.EXHAUSTED
            path: list[BoardState] = []
        else:
            self.status = SearchStatus.SOLVED
            path = self._reconstruct(goal_key)

        self._result = SearchResult(
            status=self.status,
            path=path,
            states_seen=len(table),
            states_expanded=self._expanded,
            elapsed=time.perf_counter() - start,
        )
        logger.info(
            f"Search {self.status}: {self._result.states_seen} states seen, "
            f"{self._expanded} expanded in {self._result.elapsed:.2f}s"
        )

        self._table = None
        self._queue.clear()
        return self._result

    # -- helpers --------------------------------------------------------------

    def _is_goal(self, board: BoardState) -> bool:
        return board.target == self.goal_cell

    def _expand(self, key: int) -> int | None:
        """Queue the unseen successors of *key*.  Returns a goal key if one is reached."""
        table = self._table
        board = BoardEncoder.decode(key, strict=True)
        self._expanded += 1
        if self._expanded % PROGRESS_EVERY == 0:
            logger.debug(
                f"Expanded {self._expanded} states, {len(table)} seen, "
                f"{len(self._queue)} queued"
            )

        for move in candidate_moves(board):
            successor = apply_move(board, move)
            successor_key = BoardEncoder.encode(successor)
            if table.record_if_unseen(successor_key, key):
                self._queue.append(successor_key)
            if self._is_goal(successor):
                return successor_key
        return None

    def _reconstruct(self, goal_key: int) -> list[BoardState]:
        """Follow predecessors from *goal_key* back to the start, oldest first."""
        keys = [goal_key]
        while keys[-1] != self._initial_key:
            parent = self._table.predecessor_of(keys[-1])
            if parent is None:
                raise RuntimeError(f"Predecessor chain broken at key {keys[-1]}.")
            keys.append(parent)
        return [BoardEncoder.decode(k, strict=True) for k in reversed(keys)]
