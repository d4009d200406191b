from __future__ import annotations

from typing import Iterator, Optional, Sequence

from .move import BOARD_SIZE, Coordinate, out_of_bounds
from .pieces import Piece, Rank, Side


SquareState = Optional[tuple[str, str]]
BoardState = tuple[tuple[SquareState, ...], ...]

START_ROWS = 3

_ROW_GLYPHS = {
    "x": Piece(Side.DARK, Rank.MAN),
    "X": Piece(Side.DARK, Rank.KING),
    "o": Piece(Side.LIGHT, Rank.MAN),
    "O": Piece(Side.LIGHT, Rank.KING),
}


class Board:
    def __init__(self) -> None:
        self.board: list[list[Optional[Piece]]] = [
            [None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]
        self.boardSize = BOARD_SIZE
        self._set_start_pieces()

    @classmethod
    def empty(cls) -> "Board":
        board = cls.__new__(cls)
        board.boardSize = BOARD_SIZE
        board.board = [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """Build a board from eight strings of eight glyphs.

        ``x``/``X`` are a dark man/king, ``o``/``O`` a light man/king and
        ``.`` (or a space) an empty square. Row 0 comes first.
        """
        if len(rows) != BOARD_SIZE or any(len(line) != BOARD_SIZE for line in rows):
            raise ValueError(f"Expected {BOARD_SIZE} rows of {BOARD_SIZE} squares.")
        board = cls.empty()
        for row, line in enumerate(rows):
            for col, glyph in enumerate(line):
                if glyph in ". ":
                    continue
                try:
                    board.board[row][col] = _ROW_GLYPHS[glyph]
                except KeyError as exc:
                    raise ValueError(f"Unknown square glyph {glyph!r} at row {row}, col {col}.") from exc
        return board

    def to_state(self) -> BoardState:
        return tuple(
            tuple(
                None if piece is None else (piece.side.value, piece.rank.value)
                for piece in line
            )
            for line in self.board
        )

    def getPiece(self, row: int, col: int) -> Optional[Piece]:
        if self._is_within_bounds(row, col):
            return self.board[row][col]
        return None

    def setPiece(self, row: int, col: int, piece: Optional[Piece]) -> None:
        if not self._is_within_bounds(row, col):
            raise ValueError(f"Square ({row}, {col}) is outside the board.")
        self.board[row][col] = piece

    def at(self, point: Coordinate) -> Optional[Piece]:
        return self.getPiece(*point)

    def is_empty(self, point: Coordinate) -> bool:
        return not out_of_bounds(point) and self.at(point) is None

    def clear(self, point: Coordinate) -> None:
        self.setPiece(point[0], point[1], None)

    def squares(self) -> Iterator[tuple[Coordinate, Optional[Piece]]]:
        """Yield every square in row-major order."""
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                yield (row, col), self.board[row][col]

    def getAllPieces(self, side: Optional[Side] = None) -> list[tuple[Coordinate, Piece]]:
        pieces: list[tuple[Coordinate, Piece]] = []
        for point, piece in self.squares():
            if piece is None:
                continue
            if side is not None and not piece.belongs_to(side):
                continue
            pieces.append((point, piece))
        return pieces

    def count(self, side: Side) -> int:
        return len(self.getAllPieces(side))

    def movePiece(self, start: Coordinate, end: Coordinate) -> Piece:
        piece = self.at(start)
        if piece is None:
            raise ValueError(f"No piece at row {start[0]}, col {start[1]}.")
        moved = self._handle_promotion(piece, end)
        self.setPiece(end[0], end[1], moved)
        self.clear(start)
        return moved

    def copy(self) -> "Board":
        new_board = Board.empty()
        new_board.board = [list(line) for line in self.board]
        return new_board

    def _handle_promotion(self, piece: Piece, end: Coordinate) -> Piece:
        if not piece.is_king and end[0] == piece.side.far_row:
            return piece.promote()
        return piece

    def _set_start_pieces(self) -> None:
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                if (row + col) % 2 == 1:
                    if row < START_ROWS:
                        self.board[row][col] = Piece(Side.DARK)
                    elif row >= self.boardSize - START_ROWS:
                        self.board[row][col] = Piece(Side.LIGHT)

    def _is_within_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.boardSize and 0 <= col < self.boardSize
