from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .pieces import Side

WINNING_SCORE = 12


@dataclass
class Score:
    """Pieces captured by each side so far."""

    light: int = 0
    dark: int = 0

    def get(self, side: Side) -> int:
        return self.dark if side is Side.DARK else self.light

    def add(self, side: Side) -> int:
        if side is Side.DARK:
            self.dark += 1
        else:
            self.light += 1
        return self.get(side)

    def winner(self, target: int = WINNING_SCORE) -> Optional[Side]:
        if self.dark >= target:
            return Side.DARK
        if self.light >= target:
            return Side.LIGHT
        return None

    def __str__(self) -> str:
        return f"X: {self.dark} <=> 0: {self.light}"
