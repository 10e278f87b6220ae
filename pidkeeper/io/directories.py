"""XDG Base Directory support for pidkeeper.

Config lives under $XDG_CONFIG_HOME, marker files under $XDG_RUNTIME_DIR
(falling back to the cache directory when no runtime dir is provided, as on
macOS or inside cron).
"""

import os
from pathlib import Path


def get_config_dir() -> Path:
    """Get the configuration directory for pidkeeper.

    Returns ~/.config/pidkeeper/ by default, or respects $XDG_CONFIG_HOME if
    set. Does NOT create the directory.

    Returns:
        Path to the configuration directory
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home) / "pidkeeper"
    return Path.home() / ".config" / "pidkeeper"


def get_cache_dir() -> Path:
    """Get the cache directory for pidkeeper.

    Returns ~/.cache/pidkeeper/ by default, or respects $XDG_CACHE_HOME if set.

    Returns:
        Path to the cache directory
    """
    xdg_cache_home = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache_home:
        return Path(xdg_cache_home) / "pidkeeper"
    return Path.home() / ".cache" / "pidkeeper"


def get_runtime_dir() -> Path:
    """Get the directory that holds marker (PID) files.

    Returns $XDG_RUNTIME_DIR/pidkeeper/ when the variable is set, otherwise
    <cache dir>/pids/. Marker writes create the directory on demand.

    Returns:
        Path to the runtime directory
    """
    xdg_runtime_dir = os.environ.get("XDG_RUNTIME_DIR")
    if xdg_runtime_dir:
        return Path(xdg_runtime_dir) / "pidkeeper"
    return get_cache_dir() / "pids"
