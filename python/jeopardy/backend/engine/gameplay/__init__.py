from jeopardy.backend.engine.gameplay.game import GamePlay

__all__ = ["GamePlay"]
