from esper import World

from tilematch.engine.events import BoardEvent, MatchEvent, RefillEvent
from tilematch.events.bus import (EventBus, EVENT_BOARD_CREATED, EVENT_MATCH_FOUND,
                                  EVENT_REFILL_COMPLETED)
from tilematch.utils.game_state import get_board


class BoardEventSystem:
    """Forwards the board's listener callbacks onto the event bus."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        board = get_board(world)
        if board is None:
            raise RuntimeError("BoardEventSystem needs a world with a BoardRef component")
        board.add_listener(self.on_board_event)
        self.event_bus.emit(EVENT_BOARD_CREATED, rows=board.height, cols=board.width)

    def on_board_event(self, event: BoardEvent) -> None:
        if isinstance(event, MatchEvent):
            positions = list(event.match.positions)
            self.event_bus.emit(EVENT_MATCH_FOUND, positions=positions,
                                value=event.match.matched, size=len(positions))
        elif isinstance(event, RefillEvent):
            self.event_bus.emit(EVENT_REFILL_COMPLETED)
