from __future__ import annotations


class GameOverError(RuntimeError):
    """Raised when a move is submitted after the game has been decided."""
