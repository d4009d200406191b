from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from core.board import Board  # noqa: E402
from core.errors import GameOverError  # noqa: E402
from core.game import Game, TurnStatus  # noqa: E402
from core.move import MoveResult  # noqa: E402
from core.pieces import King, Man, Side  # noqa: E402
from core.score import WINNING_SCORE, Score  # noqa: E402


def _capture_position() -> Board:
    board = Board.empty()
    board.setPiece(2, 2, Man(Side.DARK))
    board.setPiece(3, 3, Man(Side.LIGHT))
    board.setPiece(7, 0, Man(Side.LIGHT))
    return board


class TurnFlowTests(unittest.TestCase):
    def test_light_moves_first_and_turn_passes(self) -> None:
        game = Game()
        self.assertEqual(game.current_player, Side.LIGHT)

        outcome = game.play_move((5, 0), (4, 1))
        self.assertEqual(outcome.status, TurnStatus.MOVED)
        self.assertEqual(outcome.result, MoveResult.PLAIN)
        self.assertEqual(outcome.side, Side.LIGHT)
        self.assertTrue(outcome.accepted)
        self.assertEqual(game.current_player, Side.DARK)
        self.assertEqual(game.board.getPiece(4, 1), Man(Side.LIGHT))

    def test_invalid_move_keeps_turn_and_board(self) -> None:
        game = Game()
        before = game.board.to_state()

        outcome = game.play_move((5, 0), (3, 0))
        self.assertEqual(outcome.status, TurnStatus.INVALID)
        self.assertFalse(outcome.accepted)
        self.assertTrue(outcome.reason)
        self.assertEqual(game.current_player, Side.LIGHT)
        self.assertEqual(game.board.to_state(), before)

    def test_cannot_move_opponents_piece(self) -> None:
        game = Game()
        outcome = game.play_move((2, 1), (3, 0))
        self.assertEqual(outcome.status, TurnStatus.INVALID)
        self.assertEqual(game.current_player, Side.LIGHT)

    def test_reset_restores_opening(self) -> None:
        game = Game()
        game.play_move((5, 0), (4, 1))
        game.reset()
        self.assertEqual(game.board.to_state(), Board().to_state())
        self.assertEqual(game.current_player, Side.LIGHT)
        self.assertEqual(game.score, Score())
        self.assertIsNone(game.winner)


class CaptureFlowTests(unittest.TestCase):
    def test_capture_scores_and_ends_turn(self) -> None:
        game = Game(_capture_position(), first=Side.DARK)

        outcome = game.play_move((2, 2), (4, 4))
        self.assertEqual(outcome.status, TurnStatus.CAPTURED)
        self.assertEqual(outcome.result, MoveResult.CAPTURE)
        self.assertEqual(outcome.captured, (3, 3))
        self.assertIsNone(game.board.getPiece(3, 3))
        self.assertIsNone(game.board.getPiece(2, 2))
        self.assertEqual(game.board.getPiece(4, 4), Man(Side.DARK))
        self.assertEqual(game.score.dark, 1)
        self.assertEqual(game.score.light, 0)
        self.assertEqual(game.current_player, Side.LIGHT)
        self.assertIsNone(game.winner)

    def test_plain_move_rejected_while_capture_pending(self) -> None:
        board = _capture_position()
        board.setPiece(2, 6, Man(Side.DARK))
        game = Game(board, first=Side.DARK)
        before = board.to_state()

        self.assertTrue(game.must_capture)
        outcome = game.play_move((2, 6), (3, 7))
        self.assertEqual(outcome.status, TurnStatus.MUST_CAPTURE)
        self.assertEqual(outcome.result, MoveResult.PLAIN)
        self.assertFalse(outcome.accepted)
        self.assertEqual(game.board.to_state(), before)
        self.assertEqual(game.current_player, Side.DARK)

        self.assertEqual(game.play_move((2, 2), (4, 4)).status, TurnStatus.CAPTURED)

    def test_forced_capture_uses_post_capture_board(self) -> None:
        board = Board.empty()
        board.setPiece(2, 2, Man(Side.DARK))
        board.setPiece(3, 3, Man(Side.LIGHT))
        board.setPiece(6, 6, Man(Side.LIGHT))
        game = Game(board, first=Side.DARK)

        game.play_move((2, 2), (4, 4))
        # The dark man now sits on (4, 4); light cannot jump it from (6, 6).
        self.assertFalse(game.must_capture)
        self.assertEqual(game.play_move((6, 6), (5, 5)).status, TurnStatus.MOVED)
        self.assertTrue(game.must_capture)
        self.assertEqual([str(m) for m in game.captureMoves()], ["4,4 x 6,6"])

    def test_promotion_reported(self) -> None:
        board = Board.empty()
        board.setPiece(6, 1, Man(Side.DARK))
        board.setPiece(0, 7, Man(Side.LIGHT))
        game = Game(board, first=Side.DARK)

        outcome = game.play_move((6, 1), (7, 2))
        self.assertEqual(outcome.status, TurnStatus.MOVED)
        self.assertTrue(outcome.promoted)
        self.assertEqual(game.board.getPiece(7, 2), King(Side.DARK))


class GameOverTests(unittest.TestCase):
    def test_twelfth_capture_wins(self) -> None:
        game = Game(_capture_position(), first=Side.DARK)
        game.score.dark = WINNING_SCORE - 1

        outcome = game.play_move((2, 2), (4, 4))
        self.assertEqual(outcome.status, TurnStatus.GAME_OVER)
        self.assertEqual(game.score.dark, WINNING_SCORE)
        self.assertTrue(game.isGameOver())
        self.assertEqual(game.getWinner(), Side.DARK)
        self.assertEqual(game.current_player, Side.DARK)

    def test_no_moves_after_game_over(self) -> None:
        game = Game(_capture_position(), first=Side.DARK)
        game.score.dark = WINNING_SCORE - 1
        game.play_move((2, 2), (4, 4))
        before = game.board.to_state()

        with self.assertRaises(GameOverError):
            game.play_move((7, 0), (6, 1))
        self.assertEqual(game.board.to_state(), before)

    def test_light_can_win_too(self) -> None:
        board = Board.empty()
        board.setPiece(5, 4, Man(Side.LIGHT))
        board.setPiece(4, 5, King(Side.DARK))
        game = Game(board)
        game.score.light = WINNING_SCORE - 1

        outcome = game.play_move((5, 4), (3, 6))
        self.assertEqual(outcome.status, TurnStatus.GAME_OVER)
        self.assertEqual(game.winner, Side.LIGHT)


if __name__ == "__main__":
    unittest.main()
