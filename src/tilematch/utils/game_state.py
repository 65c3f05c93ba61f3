from __future__ import annotations

from typing import Any, Dict

from esper import World

from tilematch.components.board_ref import BoardRef
from tilematch.components.game_state import GameState
from tilematch.components.selection import Selection
from tilematch.engine.board import Board
from tilematch.events.bus import EVENT_CURRENT_GAME_CLEARED, EventBus


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    raise RuntimeError("GameState component not found; was the world built with create_world()?")


def get_selection(world: World) -> Selection:
    for _, selection in world.get_component(Selection):
        return selection
    raise RuntimeError("Selection component not found; was the world built with create_world()?")


def get_board(world: World) -> Board | None:
    for _, ref in world.get_component(BoardRef):
        return ref.board
    return None


def game_update_payload(world: World) -> Dict[str, Any]:
    """Body for updating the stored game record with the current progress."""
    state = get_game_state(world)
    return {"score": state.score, "completed": state.completed}


def clear_current_game(world: World, event_bus: EventBus) -> None:
    """Forget which stored game record this session is bound to."""
    state = get_game_state(world)
    previous = state.game_id
    state.game_id = None
    event_bus.emit(EVENT_CURRENT_GAME_CLEARED, game_id=previous)
