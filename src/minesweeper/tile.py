"""
Tile module for Minesweeper game.

Represents individual tiles on the game board with their reveal state
(hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class RevealState(Enum):
    """Possible visual states of a tile."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


HIDDEN_VALUE = -1
FLAGGED_VALUE = -2
MINE_VALUE = 9


# ============================================================================
# Tile Views
# ============================================================================

@dataclass(frozen=True)
class TileView:
    """
    What the presentation layer is allowed to know about a tile.

    Content fields are only populated once the tile is revealed.

    Attributes:
        state: Current reveal state.
        adjacent_mines: Neighbouring mine count, or None unless revealed
            and not a mine.
        is_mine: True only for a revealed mine.
    """

    state: RevealState
    adjacent_mines: Optional[int] = None
    is_mine: bool = False


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass
class Tile:
    """
    Represents a single tile in the Minesweeper grid.

    Content (is_mine, adjacent_mines) is fixed when the board is built;
    only the state changes during play.

    Attributes:
        is_mine: Whether this tile contains a mine.
        adjacent_mines: Count of mines in neighboring tiles (0-8).
        state: Current visual state (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: RevealState = RevealState.HIDDEN

    def __post_init__(self) -> None:
        if not 0 <= self.adjacent_mines <= 8:
            raise ValueError(
                f"adjacent_mines must be between 0 and 8, got {self.adjacent_mines}"
            )

    def reveal(self) -> bool:
        """
        Reveal this tile.

        Returns:
            True if tile was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != RevealState.HIDDEN:
            return False
        self.state = RevealState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this tile.

        Returns:
            True if flag was toggled, False if tile is revealed.
        """
        if self.state == RevealState.REVEALED:
            return False
        if self.state == RevealState.HIDDEN:
            self.state = RevealState.FLAGGED
        else:
            self.state = RevealState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if tile is hidden."""
        return self.state == RevealState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if tile is revealed."""
        return self.state == RevealState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if tile is flagged."""
        return self.state == RevealState.FLAGGED

    def view(self) -> TileView:
        """Project the tile, hiding its content until revealed."""
        if not self.is_revealed:
            return TileView(self.state)
        if self.is_mine:
            return TileView(self.state, is_mine=True)
        return TileView(self.state, adjacent_mines=self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert tile to a snapshot value.

        Returns:
            -1: Hidden tile
            -2: Flagged tile
            0-8: Revealed tile with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == RevealState.HIDDEN:
            return HIDDEN_VALUE
        if self.state == RevealState.FLAGGED:
            return FLAGGED_VALUE
        if self.is_mine:
            return MINE_VALUE
        return self.adjacent_mines
