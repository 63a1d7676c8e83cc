"""Exceptions raised by the trivia game backend."""


class JeopardyError(Exception):
    """Base exception for the trivia game."""
    pass


class DataSourceError(JeopardyError):
    """Raised when trivia data cannot be fetched or is unusable.

    Covers transport failures, malformed responses, and pools or
    categories too small for the requested board.
    """
    pass


class ConfigError(JeopardyError, ValueError):
    """Raised when a configuration value is invalid."""
    pass
