"""Exceptions raised by the Minesweeper engine."""


class SweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfigurationError(SweeperError, ValueError):
    """Board or game settings that cannot produce a playable board."""


class CoordinateError(SweeperError, IndexError):
    """A (row, col) pair outside the board."""

    def __init__(self, row: object, col: object, size: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {size}x{size} board"
        )
        self.row = row
        self.col = col
        self.size = size
