"""Predecessor tables — the visited set and parent links of a search.

Both tables keep the first predecessor recorded for a key and never
overwrite it; a later write would break the shortest-path chains.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from array import array
from enum import StrEnum

from backend.engine.encoding import MAX_KEY

logger = logging.getLogger(__name__)


class TableKind(StrEnum):
    SPARSE = "sparse"
    DENSE = "dense"


class PredecessorTable(ABC):
    """Maps each visited key to the key it was first reached from.

    The root of the search is recorded with ``parent=None``.
    """

    @abstractmethod
    def record_if_unseen(self, key: int, parent: int | None) -> bool:
        """Record *parent* for *key* unless *key* was already seen.

        Returns True if the key was new.
        """

    @abstractmethod
    def predecessor_of(self, key: int) -> int | None:
        """Return the parent of *key*, or ``None`` for the root or an unseen key."""

    @abstractmethod
    def __contains__(self, key: int) -> bool: ...

    @abstractmethod
    def __len__(self) -> int: ...


class SparseTable(PredecessorTable):
    """Dict-backed table; grows with the number of visited states."""

    def __init__(self) -> None:
        self._parents: dict[int, int | None] = {}

    def record_if_unseen(self, key: int, parent: int | None) -> bool:
        if key in self._parents:
            return False
        self._parents[key] = parent
        return True

    def predecessor_of(self, key: int) -> int | None:
        return self._parents.get(key)

    def __contains__(self, key: int) -> bool:
        return key in self._parents

    def __len__(self) -> int:
        return len(self._parents)


class DenseTable(PredecessorTable):
    """Flat array indexed directly by key, allocated once up front.

    Entries hold ``parent + 1`` so that 0 always means unvisited, whatever
    key 0 decodes to.  The root holds ``_ROOT``.
    """

    _ROOT = 0xFFFFFFFF

    def __init__(self, size: int = MAX_KEY) -> None:
        if not 0 < size < self._ROOT:
            raise ValueError(f"Table size must be in (0, {self._ROOT}), got {size}.")
        logger.debug(f"Allocating dense predecessor table of {size} entries")
        self._slots = array("I", [0]) * size
        self._count = 0

    def record_if_unseen(self, key: int, parent: int | None) -> bool:
        if self._slots[key]:
            return False
        self._slots[key] = self._ROOT if parent is None else parent + 1
        self._count += 1
        return True

    def predecessor_of(self, key: int) -> int | None:
        value = self._slots[key]
        if value == 0 or value == self._ROOT:
            return None
        return value - 1

    def __contains__(self, key: int) -> bool:
        return self._slots[key] != 0

    def __len__(self) -> int:
        return self._count


def make_table(kind: TableKind | str = TableKind.SPARSE) -> PredecessorTable:
    if TableKind(kind) is TableKind.DENSE:
        return DenseTable()
    return SparseTable()
