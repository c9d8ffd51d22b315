"""
Gymnasium environment wrapper for Minesweeper.

Exposes a game manager through the standard RL interface.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import BASE_CONFIG, GameConfig
from .game_manager import GameManager, GameState
from .render import render_ansi


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i reveals the cell at (i // width, i % width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Game configuration (default: easy 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BASE_CONFIG
        self.render_mode = render_mode
        self._size = self.config.selected.width
        self._rng = random.Random()
        self.game = GameManager(self.config, rng=self._rng)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self._size, self._size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self._size * self._size)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a freshly generated board.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._rng.seed(seed)
        self.game = GameManager(self.config, rng=self._rng)
        self._steps = 0

        return self.game.get_board().get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal the cell behind ``action``.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        observation = self.game.get_board().get_observation()
        terminated = not self.game.is_playing

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        action = int(action)
        return action // self._size, action % self._size

    def _calculate_reward(self, row: int, col: int) -> float:
        cell = self.game.get_board().get_cell(row, col)
        if not cell.is_hidden or not self.game.is_playing:
            return -0.1

        state = self.game.reveal_block(row, col)
        if state == GameState.WON:
            return 10.0
        if state == GameState.LOST:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.game.get_board()
        return {
            "steps": self._steps,
            "revealed": board.get_revealed_blocks(),
            "total_revealable": self.game.total_revealable,
            "game_state": self.game.get_game_state().name,
            "valid_actions": len(board.get_hidden_positions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_ansi(self.game.get_board())
        if self.render_mode == "human":
            print(render_ansi(self.game.get_board()))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.game.get_board().get_hidden_positions():
            mask[row * self._size + col] = True
        return mask
