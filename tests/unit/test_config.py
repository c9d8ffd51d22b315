"""
Unit tests for configuration classes.
"""
import pytest
from sweeper import (
    BASE_CONFIG,
    BEGINNER,
    EXPERT,
    INTERMEDIATE,
    BoardConfig,
    Difficulty,
    GameConfig,
    InvalidConfigurationError,
)


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_valid_config_creation(self) -> None:
        """Valid configuration should be created successfully."""
        config = BoardConfig(9, 9, 10)
        assert config.width == 9
        assert config.height == 9
        assert config.num_mines == 10
        assert config.total_cells == 81
        assert config.safe_cells == 71

    def test_zero_width_raises_error(self) -> None:
        """Width of 0 should raise."""
        with pytest.raises(InvalidConfigurationError, match="dimensions must be positive"):
            BoardConfig(0, 9, 10)

    def test_zero_height_raises_error(self) -> None:
        """Height of 0 should raise."""
        with pytest.raises(ValueError, match="dimensions must be positive"):
            BoardConfig(9, 0, 10)

    def test_negative_mines_raises_error(self) -> None:
        """Negative mine count should raise."""
        with pytest.raises(ValueError, match="cannot be negative"):
            BoardConfig(9, 9, -1)

    def test_too_many_mines_raises_error(self) -> None:
        """Too many mines should raise."""
        with pytest.raises(ValueError, match="Too many mines"):
            BoardConfig(3, 3, 10)

    def test_max_mines_is_valid(self) -> None:
        """Maximum valid mines should be accepted."""
        config = BoardConfig(3, 3, 8)
        assert config.num_mines == 8

    def test_presets_are_square(self) -> None:
        """Every preset can build a board."""
        for preset in (BEGINNER, INTERMEDIATE, EXPERT):
            assert preset.width == preset.height


# ============================================================================
# Game Configuration Tests
# ============================================================================

class TestGameConfig:
    """Test difficulty selection."""

    def test_base_config_selects_beginner(self) -> None:
        """Default configuration is the easy preset."""
        assert BASE_CONFIG.difficulty == Difficulty.EASY
        assert BASE_CONFIG.selected == BEGINNER

    def test_with_difficulty_returns_new_config(self) -> None:
        """Changing difficulty leaves the original untouched."""
        hard = BASE_CONFIG.with_difficulty(Difficulty.HARD)
        assert hard.selected == EXPERT
        assert BASE_CONFIG.difficulty == Difficulty.EASY

    def test_missing_mode_raises(self) -> None:
        """Selected difficulty needs a board configuration."""
        with pytest.raises(InvalidConfigurationError, match="No board configured"):
            GameConfig(
                difficulty=Difficulty.HARD,
                modes={Difficulty.EASY: BEGINNER},
            )

    @pytest.mark.parametrize("name", ["easy", "EASY", " Easy "])
    def test_parse_difficulty(self, name: str) -> None:
        """Difficulty names are case-insensitive."""
        assert Difficulty.parse(name) == Difficulty.EASY

    def test_parse_unknown_difficulty_raises(self) -> None:
        """Unknown names list the valid choices."""
        with pytest.raises(InvalidConfigurationError, match="easy, medium, hard"):
            Difficulty.parse("insane")

    def test_from_dict_overrides_mode(self) -> None:
        """Plain data overrides presets for the named modes."""
        config = GameConfig.from_dict({
            "difficulty": "medium",
            "modes": {"medium": {"width": 12, "height": 12, "mines": 20}},
        })
        assert config.difficulty == Difficulty.MEDIUM
        assert config.selected == BoardConfig(12, 12, 20)
        assert config.modes[Difficulty.EASY] == BEGINNER

    def test_from_dict_defaults(self) -> None:
        """Empty data gives the base configuration."""
        assert GameConfig.from_dict({}) == BASE_CONFIG

    def test_from_dict_validates_modes(self) -> None:
        """Invalid board settings are rejected while loading."""
        with pytest.raises(InvalidConfigurationError, match="Too many mines"):
            GameConfig.from_dict({
                "modes": {"easy": {"width": 2, "height": 2, "mines": 4}},
            })

    def test_from_dict_accepts_num_mines_key(self) -> None:
        """The dataclass field name works as the mine count key."""
        config = GameConfig.from_dict({
            "modes": {"easy": {"width": 5, "height": 5, "num_mines": 3}},
        })
        assert config.selected == BoardConfig(5, 5, 3)

    def test_from_dict_missing_mine_count_raises(self) -> None:
        """A misspelled mine key is not read as zero mines."""
        with pytest.raises(InvalidConfigurationError, match="missing 'mines'"):
            GameConfig.from_dict({
                "modes": {"easy": {"width": 9, "height": 9, "minse": 10}},
            })

    @pytest.mark.parametrize("missing", ["width", "height"])
    def test_from_dict_missing_dimension_raises(self, missing: str) -> None:
        """Dimensions are required for every listed mode."""
        settings = {"width": 9, "height": 9, "mines": 10}
        del settings[missing]
        with pytest.raises(InvalidConfigurationError, match=f"missing '{missing}'"):
            GameConfig.from_dict({"modes": {"easy": settings}})

    @pytest.mark.parametrize("value", ["nine", None, [9]])
    def test_from_dict_non_integer_raises(self, value: object) -> None:
        """Values that are not integers are configuration errors."""
        with pytest.raises(InvalidConfigurationError, match="non-integer"):
            GameConfig.from_dict({
                "modes": {"easy": {"width": value, "height": 9, "mines": 10}},
            })
