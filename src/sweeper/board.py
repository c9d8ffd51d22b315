"""
Board module for Minesweeper game.

Implements the square game board: mine placement, adjacency counts,
flagging, and the flood reveal that opens connected empty regions.
The board knows nothing about winning or losing; it reports a mine hit
through ``RevealOutcome`` and leaves the verdict to its owner.
"""
import logging
import random
from collections import deque
from enum import Enum, auto
from typing import Collection, Iterator, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell, CellSnapshot, CellState
from .config import BoardConfig
from .errors import CoordinateError, InvalidConfigurationError

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class RevealOutcome(Enum):
    """Result of a reveal request."""

    OK = auto()
    MINE_HIT = auto()


NEIGHBOR_OFFSETS: Tuple[Position, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def neighbors_of(row: int, col: int, size: int) -> Iterator[Position]:
    """Yield the grid-clamped neighbours of (row, col) on a size x size grid."""
    for delta_row, delta_col in NEIGHBOR_OFFSETS:
        new_row = row + delta_row
        new_col = col + delta_col
        if 0 <= new_row < size and 0 <= new_col < size:
            yield new_row, new_col


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Owns a square grid of cells. Cells leave the board only as
    ``CellSnapshot`` copies, so every state change goes through
    ``flag_block``, ``reveal_block`` or ``reveal_all_mines``.
    """

    def __init__(self, grid: List[List[Cell]]) -> None:
        """
        Wrap an already built grid.

        Args:
            grid: Square, row-major list of cells, all hidden.
        """
        size = len(grid)
        if size == 0 or any(len(row) != size for row in grid):
            raise InvalidConfigurationError(
                "Board grid must be square and non-empty"
            )
        self._grid = grid
        self._size = size
        self._total_blocks = size * size
        self._revealed_blocks = 0

    # ========================================================================
    # Construction (Low-level)
    # ========================================================================

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        num_mines: int,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Build a board with randomly placed mines.

        Cells are visited once in row-major order. Each becomes a mine with
        probability ``mines_left / (width * height)``; the denominator stays
        at the full cell count, so fewer than ``num_mines`` mines may end up
        on the board.

        Args:
            width: Number of columns, must equal ``height``.
            height: Number of rows.
            num_mines: Mines to try to place.
            rng: Random source; a fresh unseeded one when omitted.

        Raises:
            InvalidConfigurationError: Non-square or otherwise invalid size.
        """
        if width != height:
            raise InvalidConfigurationError("Width and height must be equal")
        config = BoardConfig(width, height, num_mines)
        mines = cls._place_mines(config, rng or random.Random())
        logger.debug(
            "Created %dx%d board: %d of %d requested mines placed",
            width, height, len(mines), num_mines,
        )
        return cls.from_mines(width, mines)

    @classmethod
    def from_mines(cls, size: int, mines: Collection[Position]) -> "Board":
        """
        Build a board with mines at the given positions.

        Args:
            size: Width and height of the board.
            mines: (row, col) positions holding a mine.
        """
        if size < 1:
            raise InvalidConfigurationError("Board dimensions must be positive")
        mine_set = set(mines)
        for row, col in mine_set:
            if not (0 <= row < size and 0 <= col < size):
                raise CoordinateError(row, col, size)

        grid = []
        for row in range(size):
            cells = []
            for col in range(size):
                if (row, col) in mine_set:
                    cells.append(Cell.mine())
                    continue
                adjacent = sum(
                    1 for position in neighbors_of(row, col, size)
                    if position in mine_set
                )
                cells.append(Cell.from_adjacent(adjacent))
            grid.append(cells)
        return cls(grid)

    @staticmethod
    def _place_mines(config: BoardConfig, rng: random.Random) -> Set[Position]:
        """Single forward pass of probabilistic mine placement."""
        total_cells = config.total_cells
        mines_left = config.num_mines
        mines = set()
        for row in range(config.height):
            for col in range(config.width):
                if rng.random() < mines_left / total_cells:
                    mines_left -= 1
                    mines.add((row, col))
        return mines

    # ========================================================================
    # Position Utilities (Low-level)
    # ========================================================================

    def is_valid_position(self, row: object, col: object) -> bool:
        """Check that (row, col) are integers inside the board."""
        for index in (row, col):
            if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
                return False
            if not 0 <= index < self._size:
                return False
        return True

    def _require_position(self, row: int, col: int) -> Cell:
        if not self.is_valid_position(row, col):
            raise CoordinateError(row, col, self._size)
        return self._grid[row][col]

    def neighbors(self, row: int, col: int) -> List[Position]:
        """Grid-clamped neighbour positions of (row, col)."""
        self._require_position(row, col)
        return list(neighbors_of(row, col, self._size))

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def flag_block(self, row: int, col: int) -> bool:
        """
        Toggle the flag on a hidden or flagged cell.

        Returns:
            True if the flag was toggled, False for revealed cells.
        """
        return self._require_position(row, col).toggle_flag()

    def reveal_block(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal a cell and cascade through empty regions.

        Flagged and revealed cells are left alone. A number cell is simply
        opened. A mine opens every mine and yields ``MINE_HIT``. An empty
        cell opens its neighbours, repeating for each empty neighbour until
        the connected region and its numbered border are revealed.

        Only empty cells add to the revealed counter; numbered cells opened
        directly or by a cascade do not.
        """
        self._require_position(row, col)

        pending = deque([(row, col)])
        opened_empty = 0
        while pending:
            current_row, current_col = pending.pop()
            cell = self._grid[current_row][current_col]
            if not cell.reveal():
                continue

            if cell.is_number:
                continue

            if cell.is_mine:
                self.reveal_all_mines()
                logger.debug("Mine hit at (%d, %d)", current_row, current_col)
                return RevealOutcome.MINE_HIT

            self._revealed_blocks += 1
            opened_empty += 1
            for neighbor_row, neighbor_col in neighbors_of(
                current_row, current_col, self._size
            ):
                if self._grid[neighbor_row][neighbor_col].is_hidden:
                    pending.append((neighbor_row, neighbor_col))

        if opened_empty > 1:
            logger.debug(
                "Cascade from (%d, %d) opened %d empty cells",
                row, col, opened_empty,
            )
        return RevealOutcome.OK

    def reveal_all_mines(self) -> None:
        """Reveal every mine on the board."""
        for cells in self._grid:
            for cell in cells:
                if cell.is_mine:
                    cell.state = CellState.REVEALED

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def size(self) -> int:
        return self._size

    @property
    def width(self) -> int:
        return self._size

    @property
    def height(self) -> int:
        return self._size

    def get_total_blocks(self) -> int:
        return self._total_blocks

    def get_revealed_blocks(self) -> int:
        """Number of empty cells opened so far."""
        return self._revealed_blocks

    def get_blocks(self) -> List[List[CellSnapshot]]:
        """Row-major snapshot of every cell, indexed ``[row][col]``."""
        return [[cell.snapshot() for cell in cells] for cells in self._grid]

    def get_cell(self, row: int, col: int) -> CellSnapshot:
        """Snapshot of the cell at (row, col)."""
        return self._require_position(row, col).snapshot()

    def count_mines(self) -> int:
        """Mines actually placed on the board."""
        return sum(cell.is_mine for cells in self._grid for cell in cells)

    def get_hidden_positions(self) -> List[Position]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions whose cell is hidden.
        """
        positions = []
        for row in range(self._size):
            for col in range(self._size):
                if self._grid[row][col].state == CellState.HIDDEN:
                    positions.append((row, col))
        return positions

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self._size, self._size), dtype=np.int8)
        for row in range(self._size):
            for col in range(self._size):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs
