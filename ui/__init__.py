"""Terminal front end for the checkers engine."""

from .coordinates import CoordinateError, format_coordinate, parse_coordinate
from .settings import TerminalSettings
from .terminal import InputClosedError, TerminalSession

__all__ = [
	"CoordinateError",
	"format_coordinate",
	"parse_coordinate",
	"TerminalSettings",
	"InputClosedError",
	"TerminalSession",
]
