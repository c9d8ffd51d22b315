"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import Board, BoardConfig, Cell, Difficulty, GameConfig, GameManager


def single_mode_config(size: int, num_mines: int) -> GameConfig:
    """Game configuration whose easy mode is a size x size board."""
    return GameConfig(
        difficulty=Difficulty.EASY,
        modes={Difficulty.EASY: BoardConfig(size, size, num_mines)},
    )


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible layouts."""
    return random.Random(1234)


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine in the top-left corner."""
    return Board.from_mines(3, [(0, 0)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.from_mines(5, [])


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board with a wall of mines down column 2.

    The left and right strips are separate regions; each has an empty
    column next to a numbered column.
    """
    return Board.from_mines(5, [(row, 2) for row in range(5)])


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def game_on():
    """Factory starting a game on a given board."""
    def make(board: Board) -> GameManager:
        config = single_mode_config(board.size, board.count_mines())
        return GameManager(config, board=board)
    return make


@pytest.fixture
def corner_mine_game(corner_mine_board: Board) -> GameManager:
    """Game on the 3x3 corner-mine board."""
    return GameManager(single_mode_config(3, 1), board=corner_mine_board)


@pytest.fixture
def mine_free_game() -> GameManager:
    """Game on a 4x4 board without mines."""
    return GameManager(single_mode_config(4, 0), board=Board.from_mines(4, []))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden empty cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell.mine()


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell.number(3)
    cell.reveal()
    return cell
