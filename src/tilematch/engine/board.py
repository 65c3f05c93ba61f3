"""Grid engine: swap validation, match detection and cascade resolution.

The board owns a ``height x width`` grid of tile values. A value is any object
with value equality; empty cells hold the ``EMPTY`` sentinel rather than
``None`` so falsy tile values (``0``, ``""``) are still tiles.
"""
from __future__ import annotations

from enum import Enum
from typing import Generic, List, Optional, Tuple, TypeVar, Union

from tilematch.constants import MATCH_LENGTH
from tilematch.engine.errors import BoardInvariantError, BoardReentryError
from tilematch.engine.events import BoardEvent, BoardListener, Match, MatchEvent, RefillEvent
from tilematch.engine.generators import TileGenerator
from tilematch.engine.position import Position
from tilematch.utils.logging_config import get_game_logger

T = TypeVar("T")

logger = get_game_logger(__name__)


class Cell(Enum):
    EMPTY = "empty"

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = Cell.EMPTY


class Board(Generic[T]):
    """A match-3 grid filled from a tile generator.

    Listeners are called synchronously, in registration order, while ``move``
    resolves cascades. They must not call ``move`` themselves.
    """

    def __init__(self, generator: TileGenerator[T], width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self._generator = generator
        self._width = width
        self._height = height
        self._listeners: List[BoardListener] = []
        self._resolving = False
        # Row-major fill, one generator call per cell.
        self._grid: List[List[Union[T, Cell]]] = [
            [generator.next() for _ in range(width)] for _ in range(height)
        ]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def add_listener(self, listener: BoardListener) -> None:
        self._listeners.append(listener)

    def _notify_listeners(self, event: BoardEvent) -> None:
        for listener in self._listeners:
            listener(event)

    def positions(self) -> List[Position]:
        return [Position(row, col) for row in range(self._height) for col in range(self._width)]

    def in_bounds(self, p: Position) -> bool:
        return 0 <= p.row < self._height and 0 <= p.col < self._width

    def piece(self, p: Position) -> Optional[T]:
        """Value at ``p``; None when out of bounds or empty."""
        if not self.in_bounds(p):
            return None
        value = self._grid[p.row][p.col]
        if value is EMPTY:
            return None
        return value

    def snapshot(self) -> List[List[Optional[T]]]:
        """Copy of the grid, row by row, with None for empty cells."""
        return [[None if value is EMPTY else value for value in row] for row in self._grid]

    def _swap(self, a: Position, b: Position) -> None:
        grid = self._grid
        grid[a.row][a.col], grid[b.row][b.col] = grid[b.row][b.col], grid[a.row][a.col]

    def can_move(self, first: Position, second: Position) -> bool:
        """True if both cells share a row or column and swapping them creates a match.

        Distance is not checked: any in-line pair qualifies.
        """
        if not (self.in_bounds(first) and self.in_bounds(second)):
            return False
        if first.row != second.row and first.col != second.col:
            return False
        self._swap(first, second)
        try:
            return len(self.check_matches()) > 0
        finally:
            self._swap(first, second)

    def _is_run(self, start: Position, d_row: int, d_col: int) -> bool:
        value = self._grid[start.row][start.col]
        if value is EMPTY:
            return False
        for step in range(1, MATCH_LENGTH):
            if self._grid[start.row + d_row * step][start.col + d_col * step] != value:
                return False
        return True

    def _to_match(self, start: Position, d_row: int, d_col: int) -> Match[T]:
        matched = self.piece(start)
        if matched is None:
            raise BoardInvariantError(f"No piece found at {start} while building a match")
        positions = tuple(start.offset(d_row * step, d_col * step) for step in range(MATCH_LENGTH))
        return Match(matched=matched, positions=positions)

    def check_matches(self) -> List[Match[T]]:
        """Every three-in-a-row, horizontal matches first.

        A run of four or more yields one overlapping match per start cell.
        """
        positions = self.positions()
        horizontal = [
            self._to_match(p, 0, 1)
            for p in positions
            if p.col <= self._width - MATCH_LENGTH and self._is_run(p, 0, 1)
        ]
        vertical = [
            self._to_match(p, 1, 0)
            for p in positions
            if p.row <= self._height - MATCH_LENGTH and self._is_run(p, 1, 0)
        ]
        return horizontal + vertical

    def move(self, first: Position, second: Position) -> int:
        """Swap two cells and resolve cascades.

        Returns the number of match/refill passes; 0 means the swap was
        rejected and nothing changed.

        If a listener raises (including ``BoardReentryError``), cells already
        cleared in the current pass are refilled before the exception
        propagates, so the grid has no holes, but matches may remain. The next
        legal ``move`` resolves them.
        """
        if self._resolving:
            raise BoardReentryError("move() called from a board listener")
        if not self.can_move(first, second):
            return 0
        self._swap(first, second)
        passes = 0
        self._resolving = True
        try:
            matches = self.check_matches()
            while matches:
                passes += 1
                logger.debug("Cascade pass %d: %d match(es)", passes, len(matches))
                for match in matches:
                    self._notify_listeners(MatchEvent(match))
                    for p in match.positions:
                        self._grid[p.row][p.col] = EMPTY
                self.fill_in_empty_cells()
                self._notify_listeners(RefillEvent())
                matches = self.check_matches()
        except Exception:
            self.fill_in_empty_cells()
            raise
        finally:
            self._resolving = False
        return passes

    def _nearest_filled_above(self, row: int, col: int) -> Optional[int]:
        for source_row in range(row - 1, -1, -1):
            if self._grid[source_row][col] is not EMPTY:
                return source_row
        return None

    def fill_in_empty_cells(self) -> None:
        """Drop surviving tiles into gaps, then fill what is left from the generator.

        Both passes walk from the bottom row up, left to right.
        """
        grid = self._grid
        for row in range(self._height - 1, -1, -1):
            for col in range(self._width):
                if grid[row][col] is not EMPTY:
                    continue
                source_row = self._nearest_filled_above(row, col)
                if source_row is not None:
                    grid[row][col] = grid[source_row][col]
                    grid[source_row][col] = EMPTY
        for row in range(self._height - 1, -1, -1):
            for col in range(self._width):
                if grid[row][col] is EMPTY:
                    grid[row][col] = self._generator.next()

    def valid_moves(self) -> List[Tuple[Position, Position]]:
        """Adjacent (right and down) swaps that would create a match."""
        moves: List[Tuple[Position, Position]] = []
        for p in self.positions():
            for neighbour in (p.offset(cols=1), p.offset(rows=1)):
                if self.in_bounds(neighbour) and self.can_move(p, neighbour):
                    moves.append((p, neighbour))
        return moves
