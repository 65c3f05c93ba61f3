"""Session assembly: board, world and systems wired to one event bus."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Sequence

from esper import World

from tilematch.constants import DEFAULT_MAX_MOVES, DEFAULT_TILE_TYPES, GRID_COLS, GRID_ROWS, POINTS_PER_MATCH
from tilematch.engine.board import Board
from tilematch.engine.generators import RandomTileGenerator, TileGenerator
from tilematch.events.bus import EventBus
from tilematch.systems import BoardEventSystem, MoveSystem, ScoreSystem, SelectionSystem
from tilematch.world import attach_board, create_world


@dataclass(slots=True)
class GameSession:
    world: World
    event_bus: EventBus
    board: Board


def start_game(
    event_bus: EventBus,
    *,
    generator: TileGenerator[Any] | None = None,
    tile_types: Sequence[Any] = DEFAULT_TILE_TYPES,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    max_moves: int = DEFAULT_MAX_MOVES,
    points_per_match: int = POINTS_PER_MATCH,
    game_id: int | None = None,
    user_id: int | None = None,
    rng: random.Random | None = None,
) -> GameSession:
    """Create a ready-to-play session.

    Without an explicit generator, tiles are drawn uniformly from
    ``tile_types`` using the world's random source.
    """
    world = create_world(max_moves=max_moves, game_id=game_id, user_id=user_id, rng=rng)
    if generator is None:
        generator = RandomTileGenerator(tile_types, rng=world.random)
    board = Board(generator, cols, rows)
    attach_board(world, board)
    # Systems subscribe on construction; the bus keeps them alive.
    BoardEventSystem(world, event_bus)
    SelectionSystem(world, event_bus)
    MoveSystem(world, event_bus)
    ScoreSystem(world, event_bus, points_per_match=points_per_match)
    return GameSession(world=world, event_bus=event_bus, board=board)
