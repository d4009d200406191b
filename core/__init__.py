"""Core checkers engine package."""

from .board import Board
from .errors import GameOverError
from .game import Game, TurnOutcome, TurnStatus
from .move import BOARD_SIZE, Coordinate, Move, MoveResult, out_of_bounds
from .pieces import King, Man, Piece, Rank, Side
from .rules import apply_move, capture_available, check_move, classify_move
from .score import WINNING_SCORE, Score

__all__ = [
	"Board",
	"Game",
	"GameOverError",
	"TurnOutcome",
	"TurnStatus",
	"BOARD_SIZE",
	"Coordinate",
	"Move",
	"MoveResult",
	"out_of_bounds",
	"Piece",
	"Side",
	"Rank",
	"Man",
	"King",
	"apply_move",
	"capture_available",
	"check_move",
	"classify_move",
	"Score",
	"WINNING_SCORE",
]
