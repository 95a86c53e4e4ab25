from backend.engine.gamestate.state import SearchResult, SearchStatus

__all__ = ["SearchResult", "SearchStatus"]
