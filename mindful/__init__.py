"""MindfulTask - personal task tracking with AI goal breakdown

Components:
    tasks/: Task store, goal breakdown and encouragement clients, chart stats
    storage/: Key-value store and write-through persistence adapter
    notify/: Notification hosts, permission cache and reminder scheduling
    dashboard/: FastAPI backend serving the task list and charts
    state.py: Application state container owned by the app root
"""

from pathlib import Path


PROJECT_ROOT = Path(__file__).parent.parent
ARGS_DIR = PROJECT_ROOT / "args"
DATA_DIR = PROJECT_ROOT / "data"
CONFIG_PATH = ARGS_DIR / "mindful.yaml"

__version__ = "0.1.0"

__all__ = ["PROJECT_ROOT", "ARGS_DIR", "DATA_DIR", "CONFIG_PATH", "__version__"]
