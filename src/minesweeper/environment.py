"""
Gymnasium environment wrapper for Minesweeper.

Drives a GameSession through the standard RL interface; also hosts the
text renderer used by the command line.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, Difficulty
from .session import GameSession, new_session
from .tile import FLAGGED_VALUE, HIDDEN_VALUE, MINE_VALUE


# ============================================================================
# Text Rendering
# ============================================================================

def render_ansi(observation: np.ndarray, axes: bool = False) -> str:
    """
    Render a board snapshot as text.

    Args:
        observation: Array indexed [y, x] as produced by snapshot().
        axes: Prefix rows and columns with their indices.

    Returns:
        '.' hidden, 'F' flagged, '*' mine, ' ' zero, digits otherwise.
    """
    height, width = observation.shape
    lines = []
    if axes:
        lines.append("   " + " ".join(str(x % 10) for x in range(width)))

    for y in range(height):
        row_str = f"{y:2d} " if axes else ""
        for x in range(width):
            val = observation[y, x]
            if val == HIDDEN_VALUE:
                row_str += "."
            elif val == FLAGGED_VALUE:
                row_str += "F"
            elif val == MINE_VALUE:
                row_str += "*"
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += " "
        lines.append(row_str)

    return "\n".join(lines)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array indexed [y, x] where:
        - -1 = hidden tile
        - -2 = flagged tile
        - 0-8 = revealed tile with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i opens the tile at (i % width, i // width).

    Rewards:
        - +1 for revealing a safe tile
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Union[BoardConfig, Difficulty, None] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Preset or board configuration (default: beginner).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.difficulty = config if config is not None else Difficulty.BEGINNER
        self.config = (
            self.difficulty.config
            if isinstance(self.difficulty, Difficulty)
            else self.difficulty
        )
        self.render_mode = render_mode
        self.session: Optional[GameSession] = None

        self.observation_space = spaces.Box(
            low=FLAGGED_VALUE,
            high=MINE_VALUE,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # One action per tile
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game with a fresh session.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        layout_seed = int(self.np_random.integers(0, 2**32))
        self.session = new_session(self.difficulty, layout_seed)
        self._steps = 0

        return self.session.snapshot(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Tile index to open (y * width + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        session = self._require_session()
        self._steps += 1

        result = session.open(self.action_to_position(int(action)))
        if not result.changed:
            reward = -0.1
        elif session.is_won:
            reward = 10.0
        elif session.is_lost:
            reward = -10.0
        else:
            reward = 1.0

        terminated = not session.is_playing
        return session.snapshot(), reward, terminated, False, self._get_info()

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        return action % self.config.width, action // self.config.width

    def position_to_action(self, x: int, y: int) -> int:
        """Convert (x, y) position to flat action index."""
        return y * self.config.width + x

    def _require_session(self) -> GameSession:
        if self.session is None:
            raise RuntimeError("Call reset() before step()")
        return self.session

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        session = self._require_session()
        return {
            "steps": self._steps,
            "revealed": session.revealed_count,
            "total_safe": self.config.safe_cells,
            "game_state": session.status.name,
            "valid_actions": len(session.valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        session = self._require_session()
        obs = session.snapshot() if session.is_playing else session.final_snapshot()
        if self.render_mode == "ansi":
            return render_ansi(obs)
        if self.render_mode == "human":
            print(render_ansi(obs))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self._require_session().valid_actions():
            mask[self.position_to_action(x, y)] = True
        return mask
