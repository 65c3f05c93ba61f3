"""Match-3 grid engine."""

from .board import EMPTY, Board, Cell
from .errors import BoardError, BoardInvariantError, BoardReentryError, GeneratorExhaustedError
from .events import BoardEvent, BoardListener, Match, MatchEvent, RefillEvent
from .generators import (
    ConstantGenerator,
    CyclingGenerator,
    IterableGenerator,
    RandomTileGenerator,
    TileGenerator,
)
from .position import Position

__all__ = [
    "EMPTY",
    "Board",
    "BoardError",
    "BoardEvent",
    "BoardInvariantError",
    "BoardListener",
    "BoardReentryError",
    "Cell",
    "ConstantGenerator",
    "CyclingGenerator",
    "GeneratorExhaustedError",
    "IterableGenerator",
    "Match",
    "MatchEvent",
    "Position",
    "RandomTileGenerator",
    "RefillEvent",
    "TileGenerator",
]
