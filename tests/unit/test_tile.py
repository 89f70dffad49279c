"""
Unit tests for Tile class.

Tests tile state management, reveal/flag behavior, views and
snapshot values.
"""
import pytest
from minesweeper import RevealState, Tile, TileView


# ============================================================================
# Tile Initialization Tests
# ============================================================================

class TestTileInitialization:
    """Test tile creation and default values."""

    def test_default_tile_is_not_mine(self) -> None:
        """New tile should not be a mine by default."""
        tile = Tile()
        assert tile.is_mine is False

    def test_default_tile_is_hidden(self) -> None:
        """New tile should be hidden by default."""
        tile = Tile()
        assert tile.state == RevealState.HIDDEN
        assert tile.is_hidden is True

    def test_tile_with_adjacent_mines(self) -> None:
        """Can create a tile with adjacent mine count."""
        tile = Tile(adjacent_mines=5)
        assert tile.adjacent_mines == 5

    @pytest.mark.parametrize("count", [-1, 9])
    def test_adjacent_count_out_of_range_raises(self, count: int) -> None:
        """Adjacent counts outside 0-8 are rejected."""
        with pytest.raises(ValueError, match="between 0 and 8"):
            Tile(adjacent_mines=count)


# ============================================================================
# Tile Reveal Tests
# ============================================================================

class TestTileReveal:
    """Test tile reveal behavior."""

    def test_reveal_hidden_tile_returns_true(self, hidden_tile: Tile) -> None:
        """Revealing a hidden tile should succeed."""
        assert hidden_tile.reveal() is True
        assert hidden_tile.is_revealed is True

    def test_reveal_already_revealed_returns_false(
        self, hidden_tile: Tile
    ) -> None:
        """Revealing an already revealed tile should fail."""
        hidden_tile.reveal()
        assert hidden_tile.reveal() is False

    def test_reveal_flagged_tile_returns_false(self, hidden_tile: Tile) -> None:
        """Cannot reveal a flagged tile."""
        hidden_tile.toggle_flag()
        assert hidden_tile.reveal() is False
        assert hidden_tile.is_flagged is True


# ============================================================================
# Tile Flag Tests
# ============================================================================

class TestTileFlag:
    """Test tile flagging behavior."""

    def test_flag_changes_state_to_flagged(self, hidden_tile: Tile) -> None:
        """Flagging a tile should change its state."""
        assert hidden_tile.toggle_flag() is True
        assert hidden_tile.state == RevealState.FLAGGED

    def test_unflag_returns_to_hidden(self, hidden_tile: Tile) -> None:
        """Unflagging a tile should return it to hidden."""
        hidden_tile.toggle_flag()
        hidden_tile.toggle_flag()
        assert hidden_tile.state == RevealState.HIDDEN

    def test_flag_revealed_tile_returns_false(self, hidden_tile: Tile) -> None:
        """Cannot flag a revealed tile."""
        hidden_tile.reveal()
        assert hidden_tile.toggle_flag() is False
        assert hidden_tile.is_revealed is True


# ============================================================================
# Tile View Tests
# ============================================================================

class TestTileView:
    """Test what a tile exposes to the presentation layer."""

    def test_hidden_mine_view_hides_content(self, mine_tile: Tile) -> None:
        """A hidden mine looks like any hidden tile."""
        assert mine_tile.view() == TileView(RevealState.HIDDEN)
        assert mine_tile.view() == Tile(adjacent_mines=3).view()

    def test_flagged_view_hides_content(self, mine_tile: Tile) -> None:
        """A flagged mine does not reveal that it is a mine."""
        mine_tile.toggle_flag()
        view = mine_tile.view()
        assert view.is_mine is False
        assert view.adjacent_mines is None

    def test_revealed_number_view(self) -> None:
        """Revealed safe tile exposes its count."""
        tile = Tile(adjacent_mines=2)
        tile.reveal()
        assert tile.view() == TileView(RevealState.REVEALED, adjacent_mines=2)

    def test_revealed_mine_view(self, mine_tile: Tile) -> None:
        """Revealed mine is marked as a mine with no count."""
        mine_tile.reveal()
        assert mine_tile.view() == TileView(RevealState.REVEALED, is_mine=True)


# ============================================================================
# Tile Observation Tests
# ============================================================================

class TestTileObservation:
    """Test tile snapshot values."""

    def test_hidden_tile_observation_is_negative_one(
        self, hidden_tile: Tile
    ) -> None:
        """Hidden tile should return -1."""
        assert hidden_tile.to_observation() == -1

    def test_flagged_tile_observation_is_negative_two(
        self, hidden_tile: Tile
    ) -> None:
        """Flagged tile should return -2."""
        hidden_tile.toggle_flag()
        assert hidden_tile.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_tile_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed tile returns its adjacent mine count."""
        tile = Tile(adjacent_mines=count)
        tile.reveal()
        assert tile.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_tile: Tile) -> None:
        """Revealed mine should return 9."""
        mine_tile.reveal()
        assert mine_tile.to_observation() == 9
