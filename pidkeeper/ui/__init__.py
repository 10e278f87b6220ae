"""Console output for pidkeeper."""

from .display_utils import NORD_COLORS, DisplayUtils
from .lifecycle_reporter import LifecycleReporter

__all__ = ["DisplayUtils", "LifecycleReporter", "NORD_COLORS"]
