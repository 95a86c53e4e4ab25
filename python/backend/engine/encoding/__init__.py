from backend.engine.encoding.encoder import (
    MAX_KEY,
    BoardEncoder,
    EncodingError,
)

__all__ = ["MAX_KEY", "BoardEncoder", "EncodingError"]
