"""Status oracle: derives a service's status from its marker file."""

from .marker import MarkerFile, has_shutdown_token, parse_pid
from .process import ProcessTable
from .status import ServiceStatus


class StatusOracle:
    """Derives one of the five lifecycle states.

    Checks run in a fixed order and the first match wins:

    1. no marker file                       -> STOPPED
    2. content holds the shutdown token     -> SHUTTING_DOWN
    3. marker PID is this process           -> RUNNING
    4. marker PID is another live process   -> OTHER_RUNNING
    5. anything else (dead or missing PID)  -> PID_NO_PROCESS

    The marker and the process table can change between any two reads, so
    the answer is only a snapshot. Nothing here raises on I/O trouble.
    """

    def __init__(self, marker: MarkerFile, processes: ProcessTable):
        self.marker = marker
        self.processes = processes

    def status(self) -> ServiceStatus:
        """Return the current status of the service."""
        if not self.marker.exists():
            return ServiceStatus.STOPPED

        # One read per poll so checks 2-4 agree on the same content
        content = self.marker.read()
        if has_shutdown_token(content):
            return ServiceStatus.SHUTTING_DOWN

        pid = parse_pid(content)
        if pid is not None and pid == self.processes.current_pid:
            return ServiceStatus.RUNNING

        if pid is not None and self.processes.is_alive(pid):
            return ServiceStatus.OTHER_RUNNING

        return ServiceStatus.PID_NO_PROCESS

    def owns_marker(self) -> bool:
        """True if the marker's PID line names this process."""
        return self.marker.pid == self.processes.current_pid
