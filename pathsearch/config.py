"""
Configuration constants for the Path Search project.

All paths, defaults, and tunable parameters are defined here.
Values can be overridden through environment variables or a project .env file.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathsearch/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# Directory holding saved grid maps (.msgpack)
MAPS_DIR = Path(os.environ.get("PATHSEARCH_MAPS_DIR", PROJECT_ROOT / "maps"))

# Extension used for saved grid maps
MAP_SUFFIX = ".msgpack"

# =============================================================================
# Grid Configuration
# =============================================================================

# Tile scale factor: world-space size of one tile, and the cost of one step
TILE_SCALE = float(os.environ.get("PATHSEARCH_TILE_SCALE", "1.0"))

# Default grid size for generated maps
DEFAULT_ROWS = 10
DEFAULT_COLS = 10

# Characters understood by TileGrid.from_strings()
WALL_CHAR = "#"
FREE_CHAR = "."
START_CHAR = "S"
GOAL_CHAR = "G"

# =============================================================================
# Heuristic Configuration
# =============================================================================

# Heuristic used when none is requested explicitly
DEFAULT_HEURISTIC = os.environ.get("PATHSEARCH_HEURISTIC", "manhattan")

# Weight of the cross-product tie-break term added to Manhattan distance.
# The bias never exceeds this fraction of one step, whatever the map size.
CROSS_PRODUCT_WEIGHT = 0.001

# =============================================================================
# Visualization Configuration
# =============================================================================

# Tile colors by display state (cyan open, blue closed, yellow active/path)
OPEN_COLOR = "#00ffff"
CLOSED_COLOR = "#0000ff"
ACTIVE_COLOR = "#ffff00"
PATH_COLOR = "#ffff00"
UNVISITED_COLOR = "#ffffff"
WALL_COLOR = "#333333"

# Figure height per grid row, in pixels
FIGURE_ROW_HEIGHT = 40

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


# =============================================================================
# Validation Helpers
# =============================================================================

def list_saved_maps() -> list[Path]:
    """Return saved map files in MAPS_DIR, sorted by name."""
    if not MAPS_DIR.exists():
        return []
    return sorted(MAPS_DIR.glob(f"*{MAP_SUFFIX}"))
