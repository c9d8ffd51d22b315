"""
Configuration for Minesweeper games.

Board dimensions, difficulty presets and the game-level configuration
that picks one of them.
"""
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Any, Dict, Mapping

from .errors import InvalidConfigurationError


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Mines requested for the board.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfigurationError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfigurationError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise InvalidConfigurationError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Cells that do not hold a mine, assuming every mine gets placed."""
        return self.total_cells - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(24, 24, 99)


# ============================================================================
# Game Configuration
# ============================================================================

class Difficulty(Enum):
    """Selectable difficulty levels."""

    EASY = auto()
    MEDIUM = auto()
    HARD = auto()

    @classmethod
    def parse(cls, name: str) -> "Difficulty":
        """Look up a difficulty by case-insensitive name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(member.name.lower() for member in cls)
            raise InvalidConfigurationError(
                f"Unknown difficulty {name!r} (choose from {choices})"
            ) from None


def _board_config_from(name: str, settings: Mapping[str, Any]) -> BoardConfig:
    """Build one mode's board configuration from plain data."""
    mines = settings.get("mines", settings.get("num_mines"))
    if mines is None:
        raise InvalidConfigurationError(
            f"Mode {name!r} is missing 'mines' (or 'num_mines')"
        )
    try:
        width = int(settings["width"])
        height = int(settings["height"])
        num_mines = int(mines)
    except KeyError as exc:
        raise InvalidConfigurationError(
            f"Mode {name!r} is missing {exc.args[0]!r}"
        ) from exc
    except (TypeError, ValueError) as exc:
        raise InvalidConfigurationError(
            f"Mode {name!r} has a non-integer setting: {exc}"
        ) from exc
    return BoardConfig(width=width, height=height, num_mines=num_mines)


def _default_modes() -> Dict[Difficulty, BoardConfig]:
    return {
        Difficulty.EASY: BEGINNER,
        Difficulty.MEDIUM: INTERMEDIATE,
        Difficulty.HARD: EXPERT,
    }


@dataclass(frozen=True)
class GameConfig:
    """
    Selected difficulty plus the board settings for every difficulty.

    Attributes:
        difficulty: Difficulty used when a game is created.
        modes: Board configuration for each difficulty.
    """

    difficulty: Difficulty = Difficulty.EASY
    modes: Mapping[Difficulty, BoardConfig] = field(
        default_factory=_default_modes
    )

    def __post_init__(self) -> None:
        if self.difficulty not in self.modes:
            raise InvalidConfigurationError(
                f"No board configured for difficulty {self.difficulty.name}"
            )

    @property
    def selected(self) -> BoardConfig:
        """Board configuration for the selected difficulty."""
        return self.modes[self.difficulty]

    def with_difficulty(self, difficulty: Difficulty) -> "GameConfig":
        return replace(self, difficulty=difficulty)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameConfig":
        """
        Build a configuration from plain data.

        Expected shape::

            {
                "difficulty": "easy",
                "modes": {"easy": {"width": 9, "height": 9, "mines": 10}},
            }

        Missing modes fall back to the presets. A listed mode needs width,
        height and a mine count under ``mines`` or ``num_mines``.
        """
        modes = _default_modes()
        for name, settings in data.get("modes", {}).items():
            modes[Difficulty.parse(name)] = _board_config_from(name, settings)
        difficulty = data.get("difficulty", Difficulty.EASY)
        if not isinstance(difficulty, Difficulty):
            difficulty = Difficulty.parse(str(difficulty))
        return cls(difficulty=difficulty, modes=modes)


BASE_CONFIG = GameConfig()
