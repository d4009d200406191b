from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.move import BOARD_SIZE, Coordinate

ROW_LETTERS = "ABCDEFGH"

_TOKEN = re.compile(r"[A-H][0-8]")


class CoordinateError(ValueError):
    """Input that does not name a square on the board."""


class CoordinateModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int = Field(..., ge=0, lt=BOARD_SIZE)
    col: int = Field(..., ge=0, lt=BOARD_SIZE)

    def as_tuple(self) -> Coordinate:
        return (self.row, self.col)


def parse_coordinate(text: str) -> Coordinate:
    """Turn a token such as ``"C3"`` into ``(row, col)``.

    The letter picks the row (A = 0) and the digit the column, matching the
    labels printed around the board. Case and surrounding whitespace are
    ignored.
    """
    token = text.strip().upper()
    if not _TOKEN.fullmatch(token):
        raise CoordinateError("Invalid format; example: A6, a2 etc. try again..")
    try:
        model = CoordinateModel(row=ROW_LETTERS.index(token[0]), col=int(token[1]))
    except ValidationError as exc:
        raise CoordinateError("Invalid tile, try again..") from exc
    return model.as_tuple()


def format_coordinate(point: Coordinate) -> str:
    row, col = point
    return f"{ROW_LETTERS[row]}{col}"
