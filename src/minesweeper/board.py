"""
Board module for Minesweeper game.

Implements the board model: configuration, tile grid, the reveal
cascade and flag toggling. Game outcome lives in the session module.
"""
import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, List, Sequence

import numpy as np

from .errors import InvalidDifficultyConfig, OutOfBoundsCoordinate
from .layout import (
    Coordinate,
    RandomSource,
    compute_adjacency,
    generate_mine_layout,
    neighbors,
)
from .tile import MINE_VALUE, Tile, TileView

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidDifficultyConfig("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidDifficultyConfig("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise InvalidDifficultyConfig(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)


class Difficulty(Enum):
    """Named board presets."""

    BEGINNER = BEGINNER
    INTERMEDIATE = INTERMEDIATE
    EXPERT = EXPERT

    @property
    def config(self) -> BoardConfig:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """Look up a preset by case-insensitive name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(member.name.lower() for member in cls)
            raise InvalidDifficultyConfig(
                f"Unknown difficulty {name!r} (choose from {choices})"
            ) from None


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Owns the grid of tiles. Mine content and adjacency counts are fixed
    at construction; afterwards only reveal and flag state change, and
    only through reveal() and toggle_flag().
    """

    def __init__(self, config: BoardConfig, mines: Iterable[Coordinate]) -> None:
        """
        Build a board with mines at the given positions.

        Args:
            config: Board dimensions and mine count.
            mines: Mine coordinates; must match config.num_mines.
        """
        self.config = config
        self._mines = frozenset(mines)
        for x, y in self._mines:
            self.check_position(x, y)
        if len(self._mines) != config.num_mines:
            raise InvalidDifficultyConfig(
                f"Expected {config.num_mines} mines, got {len(self._mines)}"
            )

        counts = compute_adjacency(config.width, config.height, self._mines)
        self._grid: List[List[Tile]] = [
            [
                Tile(is_mine=(x, y) in self._mines, adjacent_mines=counts[y][x])
                for x in range(config.width)
            ]
            for y in range(config.height)
        ]
        self._safe_revealed = 0

    @classmethod
    def random(cls, config: BoardConfig, rng: RandomSource = None) -> "Board":
        """Build a board with a freshly generated mine layout."""
        mines = generate_mine_layout(
            config.width, config.height, config.num_mines, rng
        )
        return cls(config, mines)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from text rows, '*' marking a mine.

        Example:
            Board.from_rows(["*..", "...", "..*"])
        """
        if not rows:
            raise InvalidDifficultyConfig("Board dimensions must be positive")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidDifficultyConfig("All rows must have the same width")
        mines = [
            (x, y)
            for y, row in enumerate(rows)
            for x, char in enumerate(row)
            if char == "*"
        ]
        return cls(BoardConfig(width, len(rows), len(mines)), mines)

    # ========================================================================
    # Geometry (Low-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mine_count(self) -> int:
        return self.config.num_mines

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def check_position(self, x: int, y: int) -> None:
        """Raise OutOfBoundsCoordinate unless (x, y) is on the board."""
        if not self.is_valid_position(x, y):
            raise OutOfBoundsCoordinate((x, y), self.config.width, self.config.height)

    def neighbors(self, x: int, y: int) -> List[Coordinate]:
        """Get valid neighboring positions of (x, y)."""
        return neighbors(x, y, self.config.width, self.config.height)

    def coordinates(self) -> Iterator[Coordinate]:
        """Iterate over every position in row-major order."""
        for y in range(self.config.height):
            for x in range(self.config.width):
                yield x, y

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> List[Coordinate]:
        """
        Reveal the tile at (x, y), cascading through zero tiles.

        Hidden tiles only; flagged or revealed tiles are left alone.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            Positions that changed to revealed, starting with (x, y).
            Empty if nothing changed.
        """
        self.check_position(x, y)
        tile = self._grid[y][x]
        if not tile.reveal():
            return []
        if tile.is_mine:
            return [(x, y)]

        self._safe_revealed += 1
        revealed = [(x, y)]
        if tile.adjacent_mines == 0:
            revealed.extend(self._cascade(x, y))
            logger.debug("Cascade from %s revealed %d tiles", (x, y), len(revealed))
        return revealed

    def _cascade(self, x: int, y: int) -> List[Coordinate]:
        """
        Breadth-first reveal of the zero region around (x, y).

        Numbered tiles on the border are revealed but not expanded.
        Mines and flagged tiles are never touched.
        """
        revealed = []
        visited = {(x, y)}
        queue = deque([(x, y)])
        while queue:
            current_x, current_y = queue.popleft()
            for position in self.neighbors(current_x, current_y):
                if position in visited:
                    continue
                visited.add(position)
                neighbor_x, neighbor_y = position
                neighbor = self._grid[neighbor_y][neighbor_x]
                if neighbor.is_mine or not neighbor.reveal():
                    continue
                self._safe_revealed += 1
                revealed.append(position)
                if neighbor.adjacent_mines == 0:
                    queue.append(position)
        return revealed

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a tile.

        Returns:
            True if flag was toggled, False if the tile is revealed.
        """
        self.check_position(x, y)
        return self._grid[y][x].toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def safe_revealed(self) -> int:
        """Number of revealed non-mine tiles."""
        return self._safe_revealed

    @property
    def all_safe_revealed(self) -> bool:
        return self._safe_revealed == self.config.safe_cells

    @property
    def mine_positions(self) -> FrozenSet[Coordinate]:
        return self._mines

    @property
    def flag_count(self) -> int:
        return sum(1 for row in self._grid for tile in row if tile.is_flagged)

    def view(self, x: int, y: int) -> TileView:
        """Get what may be shown of the tile at (x, y)."""
        self.check_position(x, y)
        return self._grid[y][x].view()

    def get_observation(self, show_mines: bool = False) -> np.ndarray:
        """
        Get board state as a numpy array indexed [y, x].

        Args:
            show_mines: Mark every mine as 9 whatever its state.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for y, row in enumerate(self._grid):
            for x, tile in enumerate(row):
                if show_mines and tile.is_mine:
                    obs[y, x] = MINE_VALUE
                else:
                    obs[y, x] = tile.to_observation()
        return obs

    def get_valid_actions(self) -> List[Coordinate]:
        """
        Get list of tiles that can be opened.

        Returns:
            List of (x, y) positions of hidden tiles.
        """
        return [
            (x, y) for x, y in self.coordinates() if self._grid[y][x].is_hidden
        ]

    def __repr__(self) -> str:
        return (
            f"Board(width={self.config.width}, height={self.config.height}, "
            f"mines={self.config.num_mines})"
        )
