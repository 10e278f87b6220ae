"""Configuration loading and validation."""

from .config import Config
from .schema import PidkeeperConfig

__all__ = ["Config", "PidkeeperConfig"]
