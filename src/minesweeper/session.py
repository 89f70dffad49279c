"""
Game session module.

A GameSession owns one board for one game, applies open and flag
actions to it, and decides the outcome. Starting a new game means
building a new session.
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import FrozenSet, List, Optional, Tuple, Union

import numpy as np

from .board import Board, BoardConfig, Difficulty
from .errors import ActionOnTerminalSession, SessionInProgress
from .layout import Coordinate, RandomSource
from .tile import RevealState, TileView

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Action Results
# ============================================================================

@dataclass(frozen=True)
class OpenResult:
    """
    Outcome of an open action.

    Attributes:
        changed: (coordinate, new state) for every tile that changed,
            in reveal order.
        status: Game status after the action.
    """

    changed: Tuple[Tuple[Coordinate, RevealState], ...]
    status: GameStatus

    @property
    def changed_coordinates(self) -> FrozenSet[Coordinate]:
        return frozenset(coordinate for coordinate, _ in self.changed)


@dataclass(frozen=True)
class FlagResult:
    """Outcome of a flag toggle."""

    coordinate: Coordinate
    state: RevealState
    changed: bool


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One game of Minesweeper.

    All mutation goes through open() and toggle_flag(). Once the game
    is won or lost both become no-ops, or raise ActionOnTerminalSession
    when called with strict=True.
    """

    def __init__(self, board: Board, difficulty: Optional[Difficulty] = None) -> None:
        self._board = board
        self.difficulty = difficulty
        self._status = GameStatus.IN_PROGRESS

    # ========================================================================
    # Game Actions
    # ========================================================================

    def open(self, coordinate: Coordinate, strict: bool = False) -> OpenResult:
        """
        Open a tile, cascading through empty regions.

        Args:
            coordinate: (x, y) of the tile.
            strict: Raise instead of ignoring actions on a finished game.

        Returns:
            Changed tiles and the resulting status. Opening a flagged or
            already revealed tile changes nothing.

        Raises:
            OutOfBoundsCoordinate: If the coordinate is off the board.
            ActionOnTerminalSession: If strict and the game is over.
        """
        x, y = coordinate
        self._board.check_position(x, y)
        if self._reject_if_over("open", coordinate, strict):
            return OpenResult((), self._status)

        revealed = self._board.reveal(x, y)
        if revealed:
            self._evaluate_outcome(coordinate)
        return OpenResult(
            tuple((position, RevealState.REVEALED) for position in revealed),
            self._status,
        )

    def toggle_flag(self, coordinate: Coordinate, strict: bool = False) -> FlagResult:
        """
        Flag a hidden tile or unflag a flagged one.

        Revealed tiles are left unchanged. Flags have no effect on the
        outcome.

        Raises:
            OutOfBoundsCoordinate: If the coordinate is off the board.
            ActionOnTerminalSession: If strict and the game is over.
        """
        x, y = coordinate
        self._board.check_position(x, y)
        if self._reject_if_over("flag", coordinate, strict):
            return FlagResult(coordinate, self._board.view(x, y).state, False)

        changed = self._board.toggle_flag(x, y)
        return FlagResult(coordinate, self._board.view(x, y).state, changed)

    def _reject_if_over(self, action: str, coordinate: Coordinate, strict: bool) -> bool:
        if self._status == GameStatus.IN_PROGRESS:
            return False
        if strict:
            raise ActionOnTerminalSession(
                f"Cannot {action} {coordinate}: game already {self._status.name}"
            )
        logger.debug("Ignoring %s on %s after game %s", action, coordinate, self._status.name)
        return True

    def _evaluate_outcome(self, coordinate: Coordinate) -> None:
        """Apply loss before win; only called after tiles changed."""
        x, y = coordinate
        if self._board.view(x, y).is_mine:
            self._status = GameStatus.LOST
            logger.info("Game lost: mine opened at %s", coordinate)
        elif self._board.all_safe_revealed:
            self._status = GameStatus.WON
            logger.info("Game won on %r", self._board)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_playing(self) -> bool:
        return self._status == GameStatus.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self._status == GameStatus.LOST

    @property
    def config(self) -> BoardConfig:
        return self._board.config

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def mine_count(self) -> int:
        return self._board.mine_count

    @property
    def revealed_count(self) -> int:
        """Revealed safe tiles."""
        return self._board.safe_revealed

    @property
    def safe_tiles_remaining(self) -> int:
        return self._board.config.safe_cells - self._board.safe_revealed

    @property
    def flags_placed(self) -> int:
        return self._board.flag_count

    @property
    def flags_remaining(self) -> int:
        """Mines minus flags; negative when over-flagged."""
        return self._board.mine_count - self._board.flag_count

    def tile_view(self, coordinate: Coordinate) -> TileView:
        """Get the visible state of a tile; content stays hidden until revealed."""
        x, y = coordinate
        return self._board.view(x, y)

    def valid_actions(self) -> List[Coordinate]:
        """Hidden tiles that may still be opened."""
        if not self.is_playing:
            return []
        return self._board.get_valid_actions()

    def snapshot(self) -> np.ndarray:
        """Copy of the visible board, indexed [y, x]."""
        return self._board.get_observation()

    # ========================================================================
    # Terminal Projections
    # ========================================================================

    def mine_positions(self) -> FrozenSet[Coordinate]:
        """Every mine on the board; only available once the game is over."""
        self._require_finished()
        return self._board.mine_positions

    def final_snapshot(self) -> np.ndarray:
        """Snapshot with all mines shown; only available once the game is over."""
        self._require_finished()
        return self._board.get_observation(show_mines=True)

    def _require_finished(self) -> None:
        if self._status == GameStatus.IN_PROGRESS:
            raise SessionInProgress("Mine positions are hidden until the game ends")

    def __repr__(self) -> str:
        name = self.difficulty.name if self.difficulty else "custom"
        return f"GameSession({name}, {self._board!r}, status={self._status.name})"


# ============================================================================
# Functional Interface
# ============================================================================

def new_session(
    difficulty: Union[Difficulty, BoardConfig],
    rng: RandomSource = None,
) -> GameSession:
    """
    Start a new game.

    Args:
        difficulty: A preset or a custom board configuration.
        rng: None, an int seed, or a random.Random instance.

    Returns:
        A session with mines placed and adjacency computed.
    """
    if isinstance(difficulty, Difficulty):
        preset: Optional[Difficulty] = difficulty
        config = difficulty.config
    else:
        preset = None
        config = difficulty
    session = GameSession(Board.random(config, rng), preset)
    logger.info(
        "New %s game: %dx%d with %d mines",
        preset.name if preset else "custom",
        config.width,
        config.height,
        config.num_mines,
    )
    return session


def open_tile(
    session: GameSession, coordinate: Coordinate, strict: bool = False
) -> OpenResult:
    """Open a tile on the session."""
    return session.open(coordinate, strict=strict)


def toggle_flag(
    session: GameSession, coordinate: Coordinate, strict: bool = False
) -> FlagResult:
    """Toggle the flag on a tile of the session."""
    return session.toggle_flag(coordinate, strict=strict)


def status(session: GameSession) -> GameStatus:
    """Get the session's game status."""
    return session.status


def tile_view(session: GameSession, coordinate: Coordinate) -> TileView:
    """Get the visible state of one tile."""
    return session.tile_view(coordinate)
