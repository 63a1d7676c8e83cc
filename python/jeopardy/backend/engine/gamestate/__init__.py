from jeopardy.backend.engine.gamestate.state import SessionManager

__all__ = ["SessionManager"]
