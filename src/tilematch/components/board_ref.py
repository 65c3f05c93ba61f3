from dataclasses import dataclass

from tilematch.engine.board import Board


@dataclass(slots=True)
class BoardRef:
    """Attaches the session's grid engine to the world."""
    board: Board
