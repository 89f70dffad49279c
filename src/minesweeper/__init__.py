"""
Minesweeper rules engine.

Provides the board model, mine layout, reveal cascade, flagging and
win/loss evaluation, plus a Gymnasium adapter and a terminal front end.
"""
from .errors import (
    ActionOnTerminalSession,
    InvalidDifficultyConfig,
    MinesweeperError,
    OutOfBoundsCoordinate,
    SessionInProgress,
)
from .tile import RevealState, Tile, TileView
from .layout import compute_adjacency, generate_mine_layout, neighbors
from .board import Board, BoardConfig, Difficulty, BEGINNER, INTERMEDIATE, EXPERT
from .session import (
    FlagResult,
    GameSession,
    GameStatus,
    OpenResult,
    new_session,
    open_tile,
    status,
    tile_view,
    toggle_flag,
)
from .environment import MinesweeperEnv, render_ansi

__all__ = [
    "ActionOnTerminalSession",
    "InvalidDifficultyConfig",
    "MinesweeperError",
    "OutOfBoundsCoordinate",
    "SessionInProgress",
    "RevealState",
    "Tile",
    "TileView",
    "compute_adjacency",
    "generate_mine_layout",
    "neighbors",
    "Board",
    "BoardConfig",
    "Difficulty",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "FlagResult",
    "GameSession",
    "GameStatus",
    "OpenResult",
    "new_session",
    "open_tile",
    "status",
    "tile_view",
    "toggle_flag",
    "MinesweeperEnv",
    "render_ansi",
]
