"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, GameSession, Tile


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def corner_board() -> Board:
    """3x3 board with mines in opposite corners."""
    return Board.from_rows([
        "*..",
        "...",
        "..*",
    ])


@pytest.fixture
def empty_board() -> Board:
    """A board with no mines for cascade testing."""
    return Board.from_rows(["....."] * 5)


@pytest.fixture
def region_board() -> Board:
    """
    5x5 board with a mine column on the right.

    Columns 0-2 hold zeros, column 3 is the numbered border.
    """
    return Board.from_rows([
        "....*",
        "....*",
        "....*",
        "....*",
        "....*",
    ])


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def corner_session(corner_board: Board) -> GameSession:
    """Session over the corner board."""
    return GameSession(corner_board)


@pytest.fixture
def region_session(region_board: Board) -> GameSession:
    """Session over the region board."""
    return GameSession(region_board)


@pytest.fixture
def single_mine_session() -> GameSession:
    """2x2 board with one mine at (1, 1); every safe tile shows 1."""
    return GameSession(Board.from_rows(["..", ".*"]))


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def hidden_tile() -> Tile:
    """Create a hidden tile."""
    return Tile()


@pytest.fixture
def mine_tile() -> Tile:
    """Create a tile containing a mine."""
    return Tile(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
