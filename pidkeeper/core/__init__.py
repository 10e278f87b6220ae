"""Core lifecycle machinery: marker file, status oracle and controller."""

from .controller import ServiceController
from .event_bus import EventBus
from .identity import ServiceIdentity, default_pid_file, resolve_identity
from .marker import MarkerFile, parse_pid
from .oracle import StatusOracle
from .process import ProcessTable
from .service import Service, ServiceHooks
from .status import ServiceStatus

__all__ = [
    "EventBus",
    "MarkerFile",
    "ProcessTable",
    "Service",
    "ServiceController",
    "ServiceHooks",
    "ServiceIdentity",
    "ServiceStatus",
    "StatusOracle",
    "default_pid_file",
    "parse_pid",
    "resolve_identity",
]
