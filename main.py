from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from core.game import Game
from ui.settings import TerminalSettings
from ui.terminal import InputClosedError, TerminalSession

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Play two-player checkers in the terminal.")
	parser.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns.")
	parser.add_argument(
		"--log-level",
		default="warning",
		type=str.lower,
		choices=["debug", "info", "warning", "error", "critical"],
		help="Diagnostic log level (written to stderr).",
	)
	return parser.parse_args(argv)


def setup_logging(level: str) -> None:
	logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
	args = parse_args(argv)
	settings = TerminalSettings(clear_screen=not args.no_clear, log_level=args.log_level)
	setup_logging(settings.log_level)

	session = TerminalSession(Game(), settings)
	try:
		return session.run()
	except InputClosedError as exc:
		print(f"\n{exc} Exiting.", file=sys.stderr)
		return 1
	except KeyboardInterrupt:
		print("\nGame aborted.", file=sys.stderr)
		return 130


if __name__ == "__main__":
	sys.exit(main())
