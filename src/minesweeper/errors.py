"""
Exceptions raised by the Minesweeper rules engine.
"""
from typing import Tuple


class MinesweeperError(Exception):
    """Base class for all rules engine errors."""


class InvalidDifficultyConfig(MinesweeperError, ValueError):
    """Board dimensions or mine count cannot form a playable board."""


class OutOfBoundsCoordinate(MinesweeperError, IndexError):
    """A coordinate lies outside the board."""

    def __init__(self, coordinate: Tuple[int, int], width: int, height: int) -> None:
        self.coordinate = coordinate
        self.width = width
        self.height = height
        super().__init__(
            f"Coordinate {coordinate} is outside a {width}x{height} board"
        )


class ActionOnTerminalSession(MinesweeperError):
    """An open or flag action arrived after the game was decided."""


class SessionInProgress(MinesweeperError):
    """A terminal-only view was requested before the game ended."""
