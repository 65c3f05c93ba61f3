"""Per-session game progress derived from board events."""
from dataclasses import dataclass
from typing import Optional

from tilematch.constants import DEFAULT_MAX_MOVES


@dataclass(slots=True)
class GameState:
    """Singleton component: running score and move budget.

    game_id/user_id identify the stored game record this session belongs to,
    if any; the board itself knows nothing about them.
    """
    score: int = 0
    moves_made: int = 0
    max_moves: int = DEFAULT_MAX_MOVES
    completed: bool = False
    game_id: Optional[int] = None
    user_id: Optional[int] = None

    @property
    def moves_left(self) -> int:
        return max(0, self.max_moves - self.moves_made)
