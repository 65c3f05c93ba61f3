GRID_ROWS = 8
GRID_COLS = 8

# Only runs of exactly this length are reported; longer runs yield overlapping matches.
MATCH_LENGTH = 3

# Default palette for the random tile generator.
DEFAULT_TILE_TYPES = ('red', 'green', 'blue', 'yellow', 'magenta', 'cyan')

# Scoring and game length used by the state container.
POINTS_PER_MATCH = 10
DEFAULT_MAX_MOVES = 20

# Logging defaults (see tilematch.utils.logging_config)
LOG_LEVEL = "INFO"
LOG_FORMAT_STYLE = "simple"
