import random

from esper import World

from tilematch.components.board_ref import BoardRef
from tilematch.components.game_state import GameState
from tilematch.components.selection import Selection
from tilematch.constants import DEFAULT_MAX_MOVES
from tilematch.engine.board import Board


def create_world(
    *,
    board: Board | None = None,
    max_moves: int = DEFAULT_MAX_MOVES,
    game_id: int | None = None,
    user_id: int | None = None,
    rng: random.Random | None = None,
) -> World:
    """Build the per-session world: one entity holding game state and selection.

    ``world.random`` is the session's random source; default tile generators
    draw from it.
    """
    if max_moves < 1:
        raise ValueError(f"max_moves must be positive, got {max_moves}")
    world = World()
    setattr(world, "random", rng or random.Random())

    world.create_entity(
        GameState(max_moves=max_moves, game_id=game_id, user_id=user_id),
        Selection(),
    )
    if board is not None:
        attach_board(world, board)
    return world


def attach_board(world: World, board: Board) -> None:
    """Put the board on the game-state entity, replacing any previous one."""
    for entity, _ in world.get_component(GameState):
        world.add_component(entity, BoardRef(board=board))
        return
    raise RuntimeError("GameState component not found; was the world built with create_world()?")
