"""
Minesweeper engine.

Provides board generation, the flood reveal, and the game state machine
layered on top of them.
"""
from .cell import BlockType, Cell, CellSnapshot, CellState
from .config import (
    BASE_CONFIG,
    BEGINNER,
    EXPERT,
    INTERMEDIATE,
    BoardConfig,
    Difficulty,
    GameConfig,
)
from .errors import CoordinateError, InvalidConfigurationError, SweeperError
from .board import Board, RevealOutcome
from .game_manager import GameManager, GameState
from .render import render_ansi, render_solution
from .environment import MinesweeperEnv

__all__ = [
    "BlockType",
    "Cell",
    "CellSnapshot",
    "CellState",
    "BASE_CONFIG",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "BoardConfig",
    "Difficulty",
    "GameConfig",
    "SweeperError",
    "InvalidConfigurationError",
    "CoordinateError",
    "Board",
    "RevealOutcome",
    "GameManager",
    "GameState",
    "render_ansi",
    "render_solution",
    "MinesweeperEnv",
]
