"""Logging configuration for Tilematch."""

import logging
import sys

from tilematch.constants import LOG_FORMAT_STYLE, LOG_LEVEL

FORMATS = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
}


def setup_logging(level: str = LOG_LEVEL, format_style: str = LOG_FORMAT_STYLE) -> None:
    """
    Set up logging for the whole application.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: "simple" or "detailed"; unknown styles fall back to "simple"
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format=FORMATS.get(format_style, FORMATS["simple"]),
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # blinker and esper are quiet, but keep third-party loggers out of debug runs.
    logging.getLogger("blinker").setLevel(logging.WARNING)
    logging.getLogger("esper").setLevel(logging.WARNING)


def get_game_logger(module_name: str) -> logging.Logger:
    """
    Get a logger with the package prefix removed.

    Args:
        module_name: Full module name (e.g., 'tilematch.engine.board')

    Returns:
        Logger named e.g. 'engine.board'
    """
    if module_name.startswith('tilematch.'):
        module_name = module_name[len('tilematch.'):]
    return logging.getLogger(module_name)
