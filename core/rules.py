"""Move legality, capture resolution and the forced-capture rule.

Men step diagonally forward one square; kings also step diagonally backward
(one square only). Any piece may jump an adjacent opposing piece in any of
the four diagonal directions, landing on the empty square beyond it. Only a
single jump is made per turn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from .board import Board
from .move import Coordinate, Move, MoveResult, offset, out_of_bounds
from .pieces import Piece, Side
from .score import Score

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveCheck:
    result: MoveResult
    captured: Optional[Coordinate] = None
    reason: str = ""

    @property
    def is_valid(self) -> bool:
        return self.result is not MoveResult.INVALID


def _jump_directions(side: Side) -> tuple[tuple[int, int], ...]:
    f = side.forward
    # forward-right, forward-left, backward-left, backward-right
    return ((f, -f), (f, f), (-f, f), (-f, -f))


def step_squares(start: Coordinate, side: Side, is_king: bool) -> list[Coordinate]:
    """Single diagonal steps open to a piece, ignoring occupancy."""
    f = side.forward
    deltas = [(f, -f), (f, f)]
    if is_king:
        deltas += [(-f, f), (-f, -f)]
    squares = [offset(start, d_row, d_col) for d_row, d_col in deltas]
    return [square for square in squares if not out_of_bounds(square)]


def jump_squares(start: Coordinate, side: Side) -> Iterator[tuple[Coordinate, Coordinate]]:
    """Yield ``(landing, jumped)`` pairs that stay on the board."""
    for d_row, d_col in _jump_directions(side):
        landing = offset(start, 2 * d_row, 2 * d_col)
        if out_of_bounds(landing):
            continue
        yield landing, offset(start, d_row, d_col)


def _is_opponent(piece: Optional[Piece], side: Side) -> bool:
    return piece is not None and piece.belongs_to(side.opponent)


def classify_move(board: Board, start: Coordinate, end: Coordinate, side: Side) -> MoveCheck:
    """Decide whether ``start -> end`` is legal for ``side`` without touching the board."""
    if out_of_bounds(start):
        return MoveCheck(MoveResult.INVALID, reason="Out of bounds or same location!")
    piece = board.at(start)
    if piece is None or not piece.belongs_to(side):
        return MoveCheck(MoveResult.INVALID, reason="That is not your piece!")
    if start == end or out_of_bounds(end):
        return MoveCheck(MoveResult.INVALID, reason="Out of bounds or same location!")
    if board.at(end) is not None:
        return MoveCheck(MoveResult.INVALID, reason="Spot already taken!")

    for landing, jumped in jump_squares(start, side):
        if end == landing and _is_opponent(board.at(jumped), side):
            return MoveCheck(MoveResult.CAPTURE, captured=jumped)

    if end in step_squares(start, side, piece.is_king):
        return MoveCheck(MoveResult.PLAIN)

    return MoveCheck(MoveResult.INVALID, reason="Pieces move one square diagonally or jump an opponent.")


def check_move(board: Board, start: Coordinate, end: Coordinate, side: Side, score: Score) -> MoveResult:
    """Check a move and, when it is a capture, apply the capture at once.

    A ``CAPTURE`` verdict removes the jumped piece from ``board`` and credits
    ``side`` in ``score`` before returning. The moving piece itself is not
    relocated; that is :func:`apply_move`'s job. Every other verdict leaves
    both untouched. Use :func:`classify_move` for a side-effect free query.
    """
    verdict = classify_move(board, start, end, side)
    if verdict.result is MoveResult.CAPTURE and verdict.captured is not None:
        board.clear(verdict.captured)
        total = score.add(side)
        logger.debug("%s captured on %s (score %d)", side.name, verdict.captured, total)
    elif verdict.result is MoveResult.INVALID:
        logger.debug("Rejected %s -> %s for %s: %s", start, end, side.name, verdict.reason)
    return verdict.result


def apply_move(board: Board, start: Coordinate, end: Coordinate) -> Piece:
    """Relocate the piece on ``start`` to ``end``, promoting a man on its far row.

    No legality checks are made; call only after :func:`check_move` returned
    ``PLAIN`` or ``CAPTURE``.
    """
    before = board.at(start)
    moved = board.movePiece(start, end)
    if before is not None and not before.is_king and moved.is_king:
        logger.info("%s man promoted to king on %s", moved.side.name, end)
    return moved


def capture_moves(board: Board, side: Side) -> list[Move]:
    moves: list[Move] = []
    for start, _ in board.getAllPieces(side):
        for landing, jumped in jump_squares(start, side):
            if board.at(landing) is None and _is_opponent(board.at(jumped), side):
                moves.append(Move(start, landing, captured=jumped))
    return moves


def capture_available(board: Board, side: Side) -> bool:
    """Return True if any piece of ``side`` can jump right now. Never mutates."""
    for start, piece in board.squares():
        if piece is None or not piece.belongs_to(side):
            continue
        for landing, jumped in jump_squares(start, side):
            if board.at(landing) is None and _is_opponent(board.at(jumped), side):
                return True
    return False
