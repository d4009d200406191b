from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def opponent(self) -> "Side":
        return Side.DARK if self is Side.LIGHT else Side.LIGHT

    @property
    def forward(self) -> int:
        """Row delta of a step toward the opponent's back row."""
        return 1 if self is Side.DARK else -1

    @property
    def far_row(self) -> int:
        return 7 if self is Side.DARK else 0


class Rank(Enum):
    MAN = "man"
    KING = "king"


@dataclass(frozen=True, slots=True)
class Piece:
    side: Side
    rank: Rank = Rank.MAN

    @property
    def is_king(self) -> bool:
        return self.rank is Rank.KING

    def promote(self) -> "Piece":
        return Piece(self.side, Rank.KING)

    def belongs_to(self, side: Side) -> bool:
        # Men and kings of one side are interchangeable here.
        return self.side is side

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "M"
        return f"{piece_type}({self.side.name})"


def Man(side: Side) -> Piece:
    return Piece(side, Rank.MAN)


def King(side: Side) -> Piece:
    return Piece(side, Rank.KING)
