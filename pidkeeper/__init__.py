"""pidkeeper - run any unit of work as a singleton, pid-file controlled daemon"""

__version__ = "0.1.0"

from .config import Config
from .core import (
    EventBus,
    MarkerFile,
    ProcessTable,
    Service,
    ServiceController,
    ServiceHooks,
    ServiceIdentity,
    ServiceStatus,
    StatusOracle,
)
from .core.exceptions import (
    ConfigurationError,
    PidkeeperError,
    ServiceDefinitionError,
    ServiceLoadError,
)
from .io import get_logger, setup_logging

__all__ = [
    # Version
    "__version__",
    # Core
    "Service",
    "ServiceController",
    "ServiceHooks",
    "ServiceIdentity",
    "ServiceStatus",
    "StatusOracle",
    "MarkerFile",
    "ProcessTable",
    "EventBus",
    # Config
    "Config",
    # Errors
    "PidkeeperError",
    "ServiceDefinitionError",
    "ServiceLoadError",
    "ConfigurationError",
    # IO
    "get_logger",
    "setup_logging",
]
