from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from core.game import Game, TurnStatus
from core.move import Coordinate
from core.pieces import Piece, Rank, Side

from .coordinates import ROW_LETTERS, CoordinateError, format_coordinate, parse_coordinate
from .settings import TerminalSettings

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J\x1b[H"
RULE = "==============================="

GLYPHS: dict[tuple[Side, Rank], str] = {
    (Side.DARK, Rank.MAN): "X",
    (Side.DARK, Rank.KING): "X̂",
    (Side.LIGHT, Rank.MAN): "0",
    (Side.LIGHT, Rank.KING): "Ō",
}


class InputClosedError(RuntimeError):
    """The terminal stopped delivering input."""


def glyph(piece: Optional[Piece]) -> str:
    if piece is None:
        return " "
    return GLYPHS[(piece.side, piece.rank)]


def side_glyph(side: Side) -> str:
    return GLYPHS[(side, Rank.MAN)]


class TerminalSession:
    """Line-oriented front end that drives a :class:`Game` to its end."""

    def __init__(
        self,
        game: Optional[Game] = None,
        settings: Optional[TerminalSettings] = None,
        *,
        input_fn: Callable[[], str] = input,
        output: Optional[TextIO] = None,
    ) -> None:
        self.game = game if game is not None else Game()
        self.settings = settings if settings is not None else TerminalSettings()
        self.input_fn = input_fn
        self.output = output if output is not None else sys.stdout

    # output -------------------------------------------------------------

    def write(self, text: str = "") -> None:
        print(text, file=self.output)

    def clear(self) -> None:
        if self.settings.clear_screen:
            self.output.write(CLEAR_SCREEN)

    def _banner(self) -> None:
        self.write(RULE)
        self.write("          CHECKERS")
        self.write("          --------")

    def render_board(self) -> str:
        lines = ["   " + "  ".join(str(col) for col in range(self.game.board.boardSize))]
        for row in range(self.game.board.boardSize):
            cells = "".join(f"[{glyph(self.game.board.getPiece(row, col))}]" for col in range(self.game.board.boardSize))
            lines.append(f"{ROW_LETTERS[row]} {cells}")
        return "\n".join(lines)

    def draw_board(self) -> None:
        self.clear()
        self._banner()
        score = self.game.score
        self.write(f"  Score X: {score.dark} <=> Score 0: {score.light}")
        self.write(RULE)
        self.write(self.render_board())

    def show_result(self) -> None:
        winner = self.game.getWinner()
        self.clear()
        self._banner()
        if winner is not None:
            self.write(f"{side_glyph(winner)} WINS THE GAME! Congratulations!")
        score = self.game.score
        self.write(f"  Final Score: X: {score.dark} <=>  0: {score.light}")
        self.write(RULE)
        self.prompt_keypress()

    # input --------------------------------------------------------------

    def read_line(self) -> str:
        try:
            return self.input_fn()
        except (EOFError, OSError) as exc:
            raise InputClosedError("Input stream closed.") from exc

    def prompt_keypress(self) -> None:
        self.write("Press enter to continue...")
        self.read_line()

    def _ask_square(self, prompt: str, accept: Callable[[Coordinate], bool]) -> Coordinate:
        while True:
            self.write(prompt)
            try:
                point = parse_coordinate(self.read_line())
            except CoordinateError as exc:
                self.write(str(exc))
                continue
            if accept(point):
                return point
            self.write("Invalid tile, try again..")

    def ask_move(self) -> tuple[Coordinate, Coordinate]:
        self.write("================")
        self.write(f"[{side_glyph(self.game.current_player)}] is playing!")
        jumps = self.game.captureMoves()
        if jumps:
            options = ", ".join(f"{format_coordinate(m.start)} -> {format_coordinate(m.end)}" for m in jumps)
            self.write(f"You must capture: {options}")

        start = self._ask_square("Please enter your next piece to move", self.game.ownsPiece)
        end = self._ask_square("Where do you want to move it?", self.game.board.is_empty)
        return start, end

    # loop ---------------------------------------------------------------

    def play_turn(self) -> TurnStatus:
        self.draw_board()
        start, end = self.ask_move()
        outcome = self.game.play_move(start, end)
        if outcome.status is TurnStatus.INVALID:
            self.write("========================")
            self.write("Invalid move! Try again.")
            if outcome.reason:
                self.write(outcome.reason)
            self.write("========================")
            self.prompt_keypress()
        elif outcome.status is TurnStatus.MUST_CAPTURE:
            self.write(outcome.reason)
            self.prompt_keypress()
        return outcome.status

    def run(self) -> int:
        logger.debug("Session started, %s to move", self.game.current_player.name)
        while not self.game.isGameOver():
            self.play_turn()
        self.show_result()
        return 0
