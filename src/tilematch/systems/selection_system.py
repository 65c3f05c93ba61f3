from esper import World

from tilematch.engine.position import Position
from tilematch.events.bus import (EventBus, EVENT_TILE_CLICK, EVENT_FIRST_TILE_SELECTED,
                                  EVENT_SECOND_TILE_SELECTED, EVENT_SELECTION_CLEARED,
                                  EVENT_TILE_SWAP_REQUEST)
from tilematch.utils.game_state import get_board, get_game_state, get_selection


class SelectionSystem:
    """Turns pairs of tile clicks into swap requests."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        if get_game_state(self.world).completed:
            return
        board = get_board(self.world)
        clicked = Position(row, col)
        if board is None or not board.in_bounds(clicked):
            return
        selection = get_selection(self.world)
        if selection.first is None:
            selection.first = clicked
            self.event_bus.emit(EVENT_FIRST_TILE_SELECTED, position=clicked)
            return
        if selection.first == clicked:
            # Clicking the selected tile again deselects it.
            selection.clear()
            self.event_bus.emit(EVENT_SELECTION_CLEARED, reason='deselect')
            return
        selection.second = clicked
        self.event_bus.emit(EVENT_SECOND_TILE_SELECTED, position=clicked)
        self.event_bus.emit(EVENT_TILE_SWAP_REQUEST, src=selection.first, dst=clicked)
        selection.clear()
        self.event_bus.emit(EVENT_SELECTION_CLEARED, reason='swap')
