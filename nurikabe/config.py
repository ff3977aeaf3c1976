import os
from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
PUZZLES_DIR = DATA_DIR / "puzzles"

# Results directories
RESULTS_DIR = PROJECT_ROOT / "results"
RESULTS_SOLUTIONS_DIR = RESULTS_DIR / "solutions"
RESULTS_VIZ_DIR = RESULTS_DIR / "visualizations"
RESULTS_BENCHMARKS_DIR = RESULTS_DIR / "benchmarks"
RESULTS_LOGS_DIR = RESULTS_DIR / "logs"


def ensure_directories():
    """Create the results directories if they don't exist"""
    for dir_path in [RESULTS_SOLUTIONS_DIR, RESULTS_VIZ_DIR,
                     RESULTS_BENCHMARKS_DIR, RESULTS_LOGS_DIR]:
        dir_path.mkdir(parents=True, exist_ok=True)


# Search parameters
DEFAULT_ALGORITHM = "dfs"
DEFAULT_TIME_LIMIT = 60.0  # seconds
DEFAULT_MAX_ITERATIONS = 5_000_000  # nodes popped from the frontier

# Visualization settings
VIZ_DPI = 150
VIZ_FIGSIZE = (6, 6)

# Logging configuration
LOG_LEVEL = os.environ.get("NURIKABE_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
