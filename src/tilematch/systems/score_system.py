from esper import World

from tilematch.constants import POINTS_PER_MATCH
from tilematch.events.bus import (EventBus, EVENT_MATCH_FOUND, EVENT_MOVE_COMPLETED,
                                  EVENT_SCORE_ADDED, EVENT_GAME_FINISHED)
from tilematch.utils.game_state import get_board, get_game_state
from tilematch.utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class ScoreSystem:
    """Derives score, move count and the finished flag from board events."""

    def __init__(self, world: World, event_bus: EventBus, points_per_match: int = POINTS_PER_MATCH):
        self.world = world
        self.event_bus = event_bus
        self.points_per_match = points_per_match
        self.event_bus.subscribe(EVENT_MATCH_FOUND, self.on_match_found)
        self.event_bus.subscribe(EVENT_MOVE_COMPLETED, self.on_move_completed)

    def on_match_found(self, sender, **kwargs):
        state = get_game_state(self.world)
        state.score += self.points_per_match
        self.event_bus.emit(EVENT_SCORE_ADDED, amount=self.points_per_match, total=state.score)

    def on_move_completed(self, sender, **kwargs):
        state = get_game_state(self.world)
        if state.completed:
            return
        state.moves_made += 1
        reason = None
        if state.moves_made >= state.max_moves:
            reason = 'out_of_moves'
        else:
            board = get_board(self.world)
            if board is not None and not board.valid_moves():
                reason = 'no_moves_left'
        if reason is None:
            return
        state.completed = True
        logger.info("Game finished (%s): score=%d after %d moves", reason, state.score, state.moves_made)
        self.event_bus.emit(EVENT_GAME_FINISHED, score=state.score, moves_made=state.moves_made, reason=reason)
