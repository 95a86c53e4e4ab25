from backend.engine.gamesolver.solver import SearchEngine
from backend.engine.gamesolver.table import (
    DenseTable,
    PredecessorTable,
    SparseTable,
    TableKind,
    make_table,
)

__all__ = [
    "DenseTable",
    "PredecessorTable",
    "SearchEngine",
    "SparseTable",
    "TableKind",
    "make_table",
]
