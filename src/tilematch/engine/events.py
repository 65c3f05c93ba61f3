"""Values the board hands to its listeners.

Listeners only ever see these immutable records, never the grid itself.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Generic, Tuple, TypeVar, Union

from tilematch.engine.position import Position

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Match(Generic[T]):
    """A run of identical values, positions ordered left-to-right or top-to-bottom."""
    matched: T
    positions: Tuple[Position, ...]


@dataclass(frozen=True, slots=True)
class MatchEvent(Generic[T]):
    kind: ClassVar[str] = "match"
    match: Match[T]


@dataclass(frozen=True, slots=True)
class RefillEvent:
    """Gravity and generator fill just completed."""
    kind: ClassVar[str] = "refill"


BoardEvent = Union[MatchEvent, RefillEvent]
BoardListener = Callable[[BoardEvent], None]
