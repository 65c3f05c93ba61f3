"""Tile value generators.

The board only needs an object with a zero-argument ``next()`` that always
returns a value. A few ready-made sources are provided here.
"""
from __future__ import annotations

import itertools
import random
from typing import Generic, Iterable, Iterator, Optional, Protocol, Sequence, TypeVar

from tilematch.engine.errors import GeneratorExhaustedError

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class TileGenerator(Protocol[T_co]):
    def next(self) -> T_co:
        ...


class RandomTileGenerator(Generic[T]):
    """Uniform choice from a fixed palette."""

    def __init__(self, values: Sequence[T], rng: Optional[random.Random] = None):
        if not values:
            raise ValueError("RandomTileGenerator needs at least one value")
        self.values = list(values)
        self.random = rng or random.Random()

    def next(self) -> T:
        return self.random.choice(self.values)


class CyclingGenerator(Generic[T]):
    """Repeats ``values`` in order forever."""

    def __init__(self, values: Sequence[T]):
        if not values:
            raise ValueError("CyclingGenerator needs at least one value")
        self._cycle = itertools.cycle(list(values))

    def next(self) -> T:
        return next(self._cycle)


class ConstantGenerator(Generic[T]):
    def __init__(self, value: T):
        self.value = value

    def next(self) -> T:
        return self.value


class IterableGenerator(Generic[T]):
    """Adapts an iterator; running dry is treated as a generator bug."""

    def __init__(self, values: Iterable[T]):
        self._it: Iterator[T] = iter(values)

    def next(self) -> T:
        try:
            return next(self._it)
        except StopIteration:
            raise GeneratorExhaustedError("Tile generator ran out of values") from None
