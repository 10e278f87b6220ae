"""I/O helpers: logging and on-disk locations."""

from .directories import get_cache_dir, get_config_dir, get_runtime_dir
from .logger import get_logger, setup_logging

__all__ = [
    "get_cache_dir",
    "get_config_dir",
    "get_logger",
    "get_runtime_dir",
    "setup_logging",
]
