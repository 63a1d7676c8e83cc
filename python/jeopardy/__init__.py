"""Trivia board game: fetch categories, reveal questions then answers."""

__version__ = "0.1.0"
