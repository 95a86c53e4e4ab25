from backend.models.board import GOAL_CELL, BoardState, Piece

__all__ = ["GOAL_CELL", "BoardState", "Piece"]
