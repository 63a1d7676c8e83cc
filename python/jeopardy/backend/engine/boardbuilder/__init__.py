from jeopardy.backend.engine.boardbuilder.builder import DEFAULT_POOL_SIZE, BoardBuilder

__all__ = ["DEFAULT_POOL_SIZE", "BoardBuilder"]
