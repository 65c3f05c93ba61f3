from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems nobody else references alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & SELECTION
# ============================================================================
EVENT_TILE_CLICK = "tile_click"                        # payload: row, col
EVENT_FIRST_TILE_SELECTED = "first_tile_selected"      # payload: position=Position
EVENT_SECOND_TILE_SELECTED = "second_tile_selected"    # payload: position=Position
EVENT_SELECTION_CLEARED = "selection_cleared"          # payload: reason=str


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_BOARD_CREATED = "board_created"                  # payload: rows=int, cols=int
EVENT_TILE_SWAP_REQUEST = "tile_swap_request"          # payload: src=Position, dst=Position
EVENT_TILE_SWAP_VALID = "tile_swap_valid"              # payload: src=Position, dst=Position
EVENT_TILE_SWAP_INVALID = "tile_swap_invalid"          # payload: src=Position, dst=Position
EVENT_MATCH_FOUND = "match_found"                      # payload: positions=[Position,...], value=Any, size=int
EVENT_REFILL_COMPLETED = "refill_completed"            # payload: None
EVENT_MOVE_COMPLETED = "move_completed"                # payload: src=Position, dst=Position, cascades=int


# ============================================================================
# SCORE & GAME FLOW
# ============================================================================
EVENT_SCORE_ADDED = "score_added"                      # payload: amount=int, total=int
EVENT_GAME_FINISHED = "game_finished"                  # payload: score=int, moves_made=int, reason=str
EVENT_CURRENT_GAME_CLEARED = "current_game_cleared"    # payload: game_id=int|None
