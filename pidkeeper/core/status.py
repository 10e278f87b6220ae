"""Lifecycle status values."""

from enum import Enum


class ServiceStatus(str, Enum):
    """Status of a service as derived from its marker file.

    Never stored; see ``StatusOracle.status``.
    """

    STOPPED = "stopped"
    SHUTTING_DOWN = "shutting down"
    RUNNING = "running"
    OTHER_RUNNING = "other running"
    PID_NO_PROCESS = "pid no process"

    @property
    def is_alive(self) -> bool:
        """True when some process currently holds the service."""
        return self in (ServiceStatus.RUNNING, ServiceStatus.OTHER_RUNNING)
