"""
Core types for the puzzle aggregation engine.

Every aggregation is defined over a closed set of exactly three games. The
"overall" time for a day only exists when all members of GameKey are present.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class GameKey(str, Enum):
    """The three tracked puzzle games."""
    ZIP = "ZIP"
    MINI_SUDOKU = "MINI_SUDOKU"
    QUEENS = "QUEENS"

    @property
    def label(self) -> str:
        """Human-readable game name."""
        return GAME_LABELS[self]


GAMES: Tuple[GameKey, ...] = (GameKey.ZIP, GameKey.MINI_SUDOKU, GameKey.QUEENS)

GAME_LABELS = {
    GameKey.ZIP: "Zip",
    GameKey.MINI_SUDOKU: "Mini Sudoku",
    GameKey.QUEENS: "Queens",
}

_GAME_VALUES = frozenset(game.value for game in GAMES)


def is_game_key(value) -> bool:
    """Check whether a value is one of the three game tags."""
    return isinstance(value, str) and value in _GAME_VALUES


@dataclass(frozen=True)
class ScoreRow:
    """One player's completion time for one game on one date."""
    player_id: int
    player_name: str
    date: str  # YYYY-MM-DD
    game: Union[GameKey, str]
    time_secs: int
