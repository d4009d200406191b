from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .board import Board
from .errors import GameOverError
from .move import Coordinate, Move, MoveResult
from .pieces import Side
from .rules import apply_move, capture_available, capture_moves, check_move, classify_move
from .score import WINNING_SCORE, Score

logger = logging.getLogger(__name__)


class TurnStatus(str, Enum):
    INVALID = "invalid"
    MUST_CAPTURE = "must_capture"
    MOVED = "moved"
    CAPTURED = "captured"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class TurnOutcome:
    status: TurnStatus
    result: MoveResult
    side: Side
    captured: Optional[Coordinate] = None
    promoted: bool = False
    reason: str = ""

    @property
    def accepted(self) -> bool:
        return self.status in (TurnStatus.MOVED, TurnStatus.CAPTURED, TurnStatus.GAME_OVER)


class Game:
    """One local session: the board, the score and whose turn it is."""

    def __init__(self, board: Optional[Board] = None, *, first: Side = Side.LIGHT):
        self.board = board if board is not None else Board()
        self.score = Score()
        self.current_player = first
        self.winner: Optional[Side] = None

    def reset(self):
        self.board = Board()
        self.score = Score()
        self.current_player = Side.LIGHT
        self.winner = None

    def switchTurn(self):
        self.current_player = self.current_player.opponent

    def isGameOver(self) -> bool:
        return self.winner is not None

    def getWinner(self) -> Optional[Side]:
        return self.winner

    @property
    def must_capture(self) -> bool:
        return capture_available(self.board, self.current_player)

    def captureMoves(self) -> list[Move]:
        return capture_moves(self.board, self.current_player)

    def ownsPiece(self, point: Coordinate) -> bool:
        piece = self.board.at(point)
        return piece is not None and piece.belongs_to(self.current_player)

    def play_move(self, start: Coordinate, end: Coordinate) -> TurnOutcome:
        if self.winner is not None:
            raise GameOverError(f"Game is over; {self.winner.name} has won.")

        side = self.current_player
        # Evaluated on the board as the previous turn left it.
        capture_pending = capture_available(self.board, side)

        verdict = classify_move(self.board, start, end, side)
        if verdict.result is MoveResult.INVALID:
            return TurnOutcome(TurnStatus.INVALID, verdict.result, side, reason=verdict.reason)
        if verdict.result is MoveResult.PLAIN and capture_pending:
            logger.debug("%s tried %s -> %s with a capture pending", side.name, start, end)
            return TurnOutcome(
                TurnStatus.MUST_CAPTURE,
                verdict.result,
                side,
                reason="Remember: You must score if possible!",
            )

        result = check_move(self.board, start, end, side, self.score)
        before = self.board.at(start)
        moved = apply_move(self.board, start, end)
        promoted = before is not None and not before.is_king and moved.is_king
        logger.info("%s moved %s -> %s (%s)", side.name, start, end, result.value)

        if result is MoveResult.CAPTURE:
            if self.score.winner(WINNING_SCORE) is side:
                self.winner = side
                logger.info("%s wins with score %s", side.name, self.score)
                return TurnOutcome(TurnStatus.GAME_OVER, result, side, verdict.captured, promoted)
            self.switchTurn()
            return TurnOutcome(TurnStatus.CAPTURED, result, side, verdict.captured, promoted)

        self.switchTurn()
        return TurnOutcome(TurnStatus.MOVED, result, side, promoted=promoted)
