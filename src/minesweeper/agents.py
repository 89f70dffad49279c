"""
Random agent for Minesweeper.

Serves as a baseline by selecting random valid actions.
"""
from typing import Optional

import numpy as np


class RandomAgent:
    """Agent that opens a uniformly random hidden tile."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = np.random.default_rng(seed)

    def select_action(self, valid_actions: np.ndarray) -> int:
        """
        Select a random valid action.

        Args:
            valid_actions: Boolean mask over flat tile indices.

        Returns:
            Random action index from valid actions.

        Raises:
            ValueError: If no action is valid.
        """
        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            raise ValueError("No valid actions to choose from")
        return int(self.rng.choice(valid_indices))
