"""Entry point for a headless Tilematch session.

Plays random valid swaps through tile clicks until the game finishes and
logs the result.
"""
import argparse
import random

from tilematch.constants import LOG_LEVEL
from tilematch.events.bus import EventBus, EVENT_GAME_FINISHED, EVENT_TILE_CLICK
from tilematch.game import start_game
from tilematch.utils.game_state import game_update_payload, get_game_state
from tilematch.utils.logging_config import get_game_logger, setup_logging

logger = get_game_logger(__name__)


def autoplay(seed: int | None = None) -> dict:
    rng = random.Random(seed)
    event_bus = EventBus()
    session = start_game(event_bus, rng=rng)
    event_bus.subscribe(EVENT_GAME_FINISHED, lambda sender, **k: logger.info("Finished: %s", k))
    state = get_game_state(session.world)
    while not state.completed:
        moves = session.board.valid_moves()
        if not moves:
            break
        src, dst = rng.choice(moves)
        event_bus.emit(EVENT_TILE_CLICK, row=src.row, col=src.col)
        event_bus.emit(EVENT_TILE_CLICK, row=dst.row, col=dst.col)
    return game_update_payload(session.world)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play a headless Tilematch game with random valid swaps.")
    p.add_argument("seed", nargs="?", type=int, default=None, help="random seed for the board and moves")
    p.add_argument("--log-level", default=LOG_LEVEL)
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    result = autoplay(args.seed)
    logger.info("Final score %d (completed=%s)", result["score"], result["completed"])


if __name__ == '__main__':
    main()
