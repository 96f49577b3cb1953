"""
Configuration constants for the Pathfinder project.

All paths, settings, and tunable parameters are defined here.
Environment overrides are read with os.environ - scripts call
load_dotenv() first so a local .env file is honoured.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathfinder/
PROJECT_ROOT = Path(__file__).parent.parent

# Saved graphs (JSON or msgpack, see pathfinder.graph.io)
DATA_DIR = Path(os.environ.get("PATHFINDER_DATA_DIR", PROJECT_ROOT / "data"))

# Benchmark output
RESULTS_DIR = PROJECT_ROOT / "results"

# =============================================================================
# Search Configuration
# =============================================================================

# Names accepted by pathfinder.search.get_algorithm, in comparison order
ALGORITHM_KEYS = ("dijkstra", "astar", "bfs", "dfs")

DEFAULT_ALGORITHM = "dijkstra"

# A* heuristic: h(n) = euclidean(n, destination) / ASTAR_HEURISTIC_SCALE
# Ties canvas pixels to edge-weight units. Only admissible when edge
# weights are at least (pixel distance / 50), which the generator does
# not guarantee.
ASTAR_HEURISTIC_SCALE = 50.0

# Distance reported when the destination cannot be reached
UNREACHABLE_DISTANCE = -1

# Execution time is reported in milliseconds rounded to this many places
EXECUTION_TIME_PRECISION = 2

# =============================================================================
# Random Graph Configuration
# =============================================================================

DEFAULT_NODE_COUNT = 8

# Canvas the random nodes are placed on (pixels)
CANVAS_WIDTH = 700
CANVAS_HEIGHT = 450
CANVAS_PADDING = 60

# Inclusive integer range for random edge weights
MIN_EDGE_WEIGHT = 1
MAX_EDGE_WEIGHT = 15

# Extra edge attempts on top of the spanning tree: floor(n * ratio)
EXTRA_EDGE_RATIO = 0.6

# Length of generated node/edge ids (base-36)
GENERATED_ID_LENGTH = 9

# =============================================================================
# Animation Configuration
# =============================================================================

# Delay between replayed steps (milliseconds)
DEFAULT_SPEED_MS = 500

# Delay before the first step after start()
START_DELAY_MS = 300

# Named speed presets shown by the replay controls
SPEED_PRESETS = {
    "turbo": 100,
    "fast": 300,
    "medium": 500,
    "slow": 800,
    "step": 1200,
}

# =============================================================================
# Benchmark Configuration
# =============================================================================

DEFAULT_BENCHMARK_TRIALS = 50

DEFAULT_BENCHMARK_NODE_COUNT = 10

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

LOG_DATE_FORMAT = "%H:%M:%S"


def speed_label(speed_ms: int) -> str:
    """Return the name of the preset closest to speed_ms."""
    return min(SPEED_PRESETS, key=lambda name: abs(SPEED_PRESETS[name] - speed_ms))
