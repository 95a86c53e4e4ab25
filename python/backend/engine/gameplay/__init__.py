from backend.engine.gameplay.game import (
    GamePlay,
    Move,
    MoveKind,
    apply_move,
    candidate_moves,
    is_legal,
)

__all__ = ["GamePlay", "Move", "MoveKind", "apply_move", "candidate_moves", "is_legal"]
