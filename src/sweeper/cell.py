"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their content
(mine/number/empty) and visual state (hidden/revealed/flagged).
"""
from dataclasses import dataclass
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

class BlockType(Enum):
    """What a cell contains. Fixed once the grid is built."""

    MINE = auto()
    NUMBER = auto()
    EMPTY = auto()


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


MAX_ADJACENT = 8


# ============================================================================
# Read Helpers
# ============================================================================

class _CellView:
    """Read-only accessors shared by live cells and their snapshots."""

    kind: BlockType
    value: int
    state: CellState

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.kind == BlockType.MINE

    @property
    def is_number(self) -> bool:
        return self.kind == BlockType.NUMBER

    @property
    def is_empty(self) -> bool:
        return self.kind == BlockType.EMPTY

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.value


# ============================================================================
# Cell Data Classes
# ============================================================================

@dataclass(frozen=True)
class CellSnapshot(_CellView):
    """Immutable copy of a cell handed out to renderers and agents."""

    kind: BlockType
    value: int
    state: CellState


@dataclass
class Cell(_CellView):
    """
    Represents a single cell in the Minesweeper grid.

    Only ``state`` changes after construction; the board owning the cell
    never rewrites ``kind`` or ``value``.

    Attributes:
        kind: Mine, number or empty.
        value: Adjacent mine count (1-8) for number cells, 0 otherwise.
        state: Current visual state (hidden, revealed, or flagged).
    """

    kind: BlockType = BlockType.EMPTY
    value: int = 0
    state: CellState = CellState.HIDDEN

    def __post_init__(self) -> None:
        """Check that value agrees with kind."""
        if self.kind == BlockType.NUMBER:
            if not 1 <= self.value <= MAX_ADJACENT:
                raise ValueError(
                    f"Number cell value must be in [1, {MAX_ADJACENT}], "
                    f"got {self.value}"
                )
        elif self.value != 0:
            raise ValueError(f"{self.kind.name} cell cannot carry a value")

    @classmethod
    def mine(cls) -> "Cell":
        return cls(BlockType.MINE)

    @classmethod
    def empty(cls) -> "Cell":
        return cls(BlockType.EMPTY)

    @classmethod
    def number(cls, value: int) -> "Cell":
        return cls(BlockType.NUMBER, value)

    @classmethod
    def from_adjacent(cls, count: int) -> "Cell":
        """Build a safe cell from its adjacent mine count."""
        if count == 0:
            return cls.empty()
        return cls.number(count)

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def snapshot(self) -> CellSnapshot:
        return CellSnapshot(self.kind, self.value, self.state)
