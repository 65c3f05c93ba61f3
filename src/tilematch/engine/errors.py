"""Exceptions raised by the grid engine.

Rejected swaps are not errors; ``Board.can_move`` and ``Board.move`` report
them as ordinary negative results.
"""


class BoardError(RuntimeError):
    """Base class for engine failures."""


class BoardInvariantError(BoardError):
    """A cell flagged as part of a match no longer holds a value."""


class BoardReentryError(BoardError):
    """A listener tried to mutate the board while a cascade was running."""


class GeneratorExhaustedError(BoardError):
    """An iterable-backed generator stopped producing values."""
