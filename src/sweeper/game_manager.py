"""
Game manager for Minesweeper.

Wraps a single board with the playing/won/lost state machine.
"""
import logging
import random
from enum import Enum, auto
from typing import Optional

from .board import Board, RevealOutcome
from .config import BASE_CONFIG, GameConfig
from .errors import CoordinateError, InvalidConfigurationError

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Manager
# ============================================================================

class GameManager:
    """
    Owns one board and decides when the game is won or lost.

    Input is ignored once the game has left the playing state; both won
    and lost are final.
    """

    def __init__(
        self,
        config: GameConfig = BASE_CONFIG,
        board: Optional[Board] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Start a new game.

        Args:
            config: Game configuration; its selected difficulty sizes the board.
            board: Prebuilt board to play on instead of a random one.
            rng: Random source for mine placement.
        """
        self._config = config
        selected = config.selected
        if board is None:
            board = Board.create(
                selected.width, selected.height, selected.num_mines, rng
            )
        elif (board.width, board.height) != (selected.width, selected.height):
            raise InvalidConfigurationError(
                f"Board is {board.width}x{board.height} but "
                f"{config.difficulty.name} expects "
                f"{selected.width}x{selected.height}"
            )
        self._board = board
        self._game_state = GameState.PLAYING

    # ========================================================================
    # Game Actions
    # ========================================================================

    def flag_block(self, row: int, col: int) -> None:
        """Toggle a flag while the game is in progress."""
        self._check_position(row, col)
        if self._game_state != GameState.PLAYING:
            return
        self._board.flag_block(row, col)

    def reveal_block(self, row: int, col: int) -> GameState:
        """
        Reveal a cell while the game is in progress.

        Returns:
            The game state after the reveal.
        """
        self._check_position(row, col)
        if self._game_state != GameState.PLAYING:
            return self._game_state

        outcome = self._board.reveal_block(row, col)
        if outcome == RevealOutcome.MINE_HIT:
            self._finish(GameState.LOST)
        elif self._board.get_revealed_blocks() == self.total_revealable:
            self._finish(GameState.WON)
        return self._game_state

    def _check_position(self, row: int, col: int) -> None:
        if not self._board.is_valid_position(row, col):
            raise CoordinateError(row, col, self._board.size)

    def _finish(self, state: GameState) -> None:
        self._game_state = state
        logger.info(
            "Game %s after revealing %d of %d cells",
            state.name.lower(),
            self._board.get_revealed_blocks(),
            self.total_revealable,
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def total_revealable(self) -> int:
        """Cells to reveal for a win, based on the configured mine count."""
        return self._board.get_total_blocks() - self._config.selected.num_mines

    def get_board(self) -> Board:
        return self._board

    def get_game_state(self) -> GameState:
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST
