from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

BOARD_SIZE = 8

Coordinate = tuple[int, int]


class MoveResult(Enum):
    INVALID = "invalid"
    PLAIN = "plain"
    CAPTURE = "capture"


@dataclass(frozen=True, slots=True)
class Move:
    start: Coordinate
    end: Coordinate
    captured: Optional[Coordinate] = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        connector = " x " if self.is_capture else " - "
        return connector.join(f"{row},{col}" for row, col in (self.start, self.end))


def out_of_bounds(point: Coordinate) -> bool:
    row, col = point
    return not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE)


def offset(point: Coordinate, d_row: int, d_col: int) -> Coordinate:
    return (point[0] + d_row, point[1] + d_col)
