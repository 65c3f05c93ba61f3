from __future__ import annotations

from tilematch.systems.board_event_system import BoardEventSystem
from tilematch.systems.move_system import MoveSystem
from tilematch.systems.score_system import ScoreSystem
from tilematch.systems.selection_system import SelectionSystem

__all__ = [
    "BoardEventSystem",
    "MoveSystem",
    "ScoreSystem",
    "SelectionSystem",
]
