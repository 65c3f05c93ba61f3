from esper import World

from tilematch.engine.position import Position
from tilematch.events.bus import (EventBus, EVENT_TILE_SWAP_REQUEST, EVENT_TILE_SWAP_VALID,
                                  EVENT_TILE_SWAP_INVALID, EVENT_MOVE_COMPLETED)
from tilematch.utils.game_state import get_board, get_game_state
from tilematch.utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class MoveSystem:
    """Validates swap requests against the board and applies the legal ones."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_SWAP_REQUEST, self.on_swap_request)

    def on_swap_request(self, sender, **kwargs):
        src = kwargs.get('src')
        dst = kwargs.get('dst')
        if src is None or dst is None:
            return
        board = get_board(self.world)
        if board is None or get_game_state(self.world).completed:
            return
        src = Position.of(src)
        dst = Position.of(dst)
        if not board.can_move(src, dst):
            logger.debug("Rejected swap %s <-> %s", src, dst)
            self.event_bus.emit(EVENT_TILE_SWAP_INVALID, src=src, dst=dst)
            return
        self.event_bus.emit(EVENT_TILE_SWAP_VALID, src=src, dst=dst)
        cascades = board.move(src, dst)
        self.event_bus.emit(EVENT_MOVE_COMPLETED, src=src, dst=dst, cascades=cascades)
