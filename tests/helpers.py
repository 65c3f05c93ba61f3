from __future__ import annotations

import itertools
from typing import Any, Iterable, List, Sequence

from tilematch.engine.board import Board
from tilematch.engine.generators import IterableGenerator
from tilematch.events.bus import EventBus


def layout_generator(rows: Sequence[Sequence[Any]], refill: Iterable[Any] = ()) -> IterableGenerator:
    """Generator that yields ``rows`` row-major, then ``refill``."""
    values = [value for row in rows for value in row]
    return IterableGenerator(itertools.chain(values, refill))


def board_from_rows(rows: Sequence[Sequence[Any]], refill: Iterable[Any] = ()) -> Board:
    """Build a board whose initial grid is exactly ``rows``."""
    return Board(layout_generator(rows, refill), len(rows[0]), len(rows))


def record_events(bus: EventBus, names: Iterable[str]) -> List[tuple[str, dict]]:
    """Subscribe to each event name and collect (name, payload) in emission order."""
    received: List[tuple[str, dict]] = []
    for name in names:
        bus.subscribe(name, lambda sender, _name=name, **payload: received.append((_name, payload)))
    return received


# Swapping (1,1) with (2,1) clears the bottom row, the first refill lines up
# "x x x" on the top row, and the second refill settles the board.
TWO_PASS_LAYOUT = [
    ['c', 'd', 'c'],
    ['d', 'a', 'd'],
    ['a', 'b', 'a'],
]
TWO_PASS_REFILL = ['x', 'x', 'x', 'p', 'q', 'p']
TWO_PASS_RESULT = [
    ['p', 'q', 'p'],
    ['c', 'd', 'c'],
    ['d', 'b', 'd'],
]
