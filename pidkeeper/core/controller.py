"""Lifecycle driver: start, stop, restart and shutdown of a singleton service."""

import traceback
from typing import TYPE_CHECKING, Any, Optional

from ..io.logger import get_logger
from .clock import SystemClock
from .event_bus import EventBus
from .events import (
    AlreadyRunningEvent,
    Event,
    NotRunningEvent,
    ServiceErrorEvent,
    ServiceExitedEvent,
    ServiceStartingEvent,
    ServiceStoppedEvent,
    ServiceStoppingEvent,
    ShutdownRequestedEvent,
    StaleMarkerRemovedEvent,
    StopTimeoutEvent,
)
from .identity import ServiceIdentity, resolve_identity
from .marker import MarkerFile
from .oracle import StatusOracle
from .process import ProcessTable
from .service import ServiceHooks
from .status import ServiceStatus

if TYPE_CHECKING:
    from ..config import Config

logger = get_logger("controller")


class ServiceController:
    """Runs a unit of work as a singleton, marker-file controlled daemon.

    The same controller type is used on both sides of the protocol: the
    daemon process calls ``start()`` and stays in the work loop, while any
    other process may call ``stop()``, ``shutdown()`` or the queries. The
    marker file is the only shared state; no OS signals are sent.

    Lifecycle operations do not raise for runtime failures. Outcomes are
    reported through the return value, the event bus and the log.
    """

    def __init__(
        self,
        identity: ServiceIdentity,
        hooks: ServiceHooks,
        event_bus: Optional[EventBus] = None,
        processes: Optional[ProcessTable] = None,
        clock: Optional[Any] = None,
    ):
        """Initialize controller.

        Args:
            identity: Name, marker path and timing of the service
            hooks: Work callback and optional lifecycle hooks
            event_bus: Where lifecycle events go (a private bus if None)
            processes: Own-PID and liveness lookups
            clock: Object with ``now()`` and ``sleep(seconds)``
        """
        self.identity = identity
        self.hooks = hooks
        self.event_bus = event_bus or EventBus()
        self.processes = processes or ProcessTable()
        self.clock = clock or SystemClock()
        self.marker = MarkerFile(identity.pid_file)
        self.oracle = StatusOracle(self.marker, self.processes)

    @classmethod
    def for_service(
        cls, service: Any, config: Optional["Config"] = None, **kwargs
    ) -> "ServiceController":
        """Build a controller for a service object and bind it back.

        Args:
            service: A ``Service`` (or any object with ``perform_work_chunk``)
            config: Optional configuration supplying overrides
            **kwargs: Passed through to the constructor

        Returns:
            The controller, also stored as ``service.controller``
        """
        identity = resolve_identity(service, config)
        controller = cls(identity, ServiceHooks.from_service(service), **kwargs)
        service.controller = controller
        return controller

    def __repr__(self) -> str:
        pid_file = str(self.identity.pid_file)
        return f"ServiceController({self.name!r}, pid_file={pid_file!r})"

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def pid(self) -> int:
        """PID of this process."""
        return self.processes.current_pid

    # Queries

    def status(self) -> ServiceStatus:
        return self.oracle.status()

    @property
    def is_running(self) -> bool:
        """True if this or another process currently runs the service."""
        return self.status().is_alive

    @property
    def current_pid(self) -> Optional[int]:
        """PID recorded in the marker file, or None."""
        return self.marker.pid

    # Operations

    def start(self) -> bool:
        """Run the service in this process until a shutdown is observed.

        Returns:
            True if the work loop ran and exited cleanly, False if another
            instance holds the service or the run failed
        """
        status = self.status()
        if status == ServiceStatus.SHUTTING_DOWN and self._marker_owner_dead():
            # Owner was asked to stop but died before removing its marker
            status = ServiceStatus.PID_NO_PROCESS

        if status in (
            ServiceStatus.RUNNING,
            ServiceStatus.OTHER_RUNNING,
            ServiceStatus.SHUTTING_DOWN,
        ):
            pid = self.current_pid
            logger.info(f"{self.name} ({pid}) is already running. Ignoring.")
            self._emit(AlreadyRunningEvent(self.name, pid=pid, status=status.value))
            return False

        try:
            if status == ServiceStatus.PID_NO_PROCESS:
                self._remove_stale_marker()

            logger.info(f"Starting {self.name} ({self.pid})")
            self.marker.write_pid(self.pid)
            self._emit(
                ServiceStartingEvent(
                    self.name, pid=self.pid, pid_file=self.identity.pid_file
                )
            )

            if self.hooks.after_start is not None:
                self.hooks.after_start()

            final_status = self._work_loop()
        except Exception as e:
            removed = self._release_marker()
            self._report_error("start", e, marker_removed=removed)
            logger.info(f"Exiting ({self.pid})")
            return False
        except BaseException:
            # KeyboardInterrupt/SystemExit propagate once the marker is gone
            self._release_marker()
            raise

        self._release_marker()
        logger.info(f"Shutting down {self.name} ({self.pid})")
        self._emit(
            ServiceExitedEvent(
                self.name, pid=self.pid, final_status=final_status.value
            )
        )
        return True

    def stop(self, timeout: Optional[float] = None) -> bool:
        """Stop the running instance and wait until it has exited.

        Args:
            timeout: Seconds to wait before giving up; None waits forever

        Returns:
            True once nothing runs the service, False on timeout or when the
            ``before_stop`` hook failed
        """
        status = self.status()

        if status == ServiceStatus.STOPPED:
            logger.info(f"{self.name} is not running")
            self._emit(NotRunningEvent(self.name))
            return True

        if status == ServiceStatus.PID_NO_PROCESS:
            self._remove_stale_marker()
            self._emit(NotRunningEvent(self.name))
            return True

        pid_to_stop = self.current_pid

        if pid_to_stop == self.pid:
            # Called from inside our own work loop; it exits on its next poll
            if status == ServiceStatus.RUNNING:
                return self._request_shutdown()
            return True

        logger.info(f"Stopping {self.name} ({pid_to_stop})")
        self._emit(ServiceStoppingEvent(self.name, pid=pid_to_stop))

        if status == ServiceStatus.OTHER_RUNNING and not self._request_shutdown():
            return False

        return self._wait_for_stop(pid_to_stop, timeout)

    def restart(self, timeout: Optional[float] = None) -> bool:
        """Stop any running instance, then start in this process."""
        if not self.stop(timeout=timeout):
            return False
        return self.start()

    def shutdown(self) -> bool:
        """Ask the marker's owner to exit after its current work cycle.

        Runs ``before_stop`` and appends the shutdown token to the marker.
        Does not wait; see ``stop()``.

        Returns:
            True if the token was written, False if there was no marker
        """
        if self.hooks.before_stop is not None:
            self.hooks.before_stop()

        pid = self.current_pid
        if not self.marker.append_shutdown_token():
            logger.debug(f"No marker for {self.name}; nothing to shut down")
            return False

        logger.info(f"Shutdown requested for {self.name} ({pid})")
        self._emit(ShutdownRequestedEvent(self.name, pid=pid))
        return True

    # Internals

    def _work_loop(self) -> ServiceStatus:
        """Alternate work and bounded sleeps while this process is RUNNING.

        Returns:
            The first non-RUNNING status observed
        """
        next_work_at = self.clock.now()

        while True:
            status = self.status()
            if status != ServiceStatus.RUNNING:
                return status

            now = self.clock.now()
            if now >= next_work_at:
                self.hooks.work()
                # Without a sleep_time the next chunk runs immediately
                if self.identity.sleep_time is not None:
                    next_work_at = self.clock.now() + self.identity.sleep_time
            else:
                self.clock.sleep(
                    min(self.identity.poll_interval, next_work_at - now)
                )

    def _wait_for_stop(self, pid: Optional[int], timeout: Optional[float]) -> bool:
        deadline = None if timeout is None else self.clock.now() + timeout

        while True:
            status = self.status()
            if status == ServiceStatus.STOPPED:
                break

            if status in (
                ServiceStatus.SHUTTING_DOWN,
                ServiceStatus.PID_NO_PROCESS,
            ) and self._marker_owner_dead():
                # Owner died (e.g. kill -9) before removing its marker
                self._remove_stale_marker()
                break

            if deadline is not None and self.clock.now() >= deadline:
                logger.warning(
                    f"{self.name} ({pid}) did not stop within {timeout:g}s"
                )
                self._emit(StopTimeoutEvent(self.name, pid=pid, timeout=timeout))
                return False

            logger.debug(f"Waiting for {self.name} ({pid}): {status.value}")
            self.clock.sleep(self.identity.stop_poll_interval)

        logger.info(f"{self.name} ({pid}) stopped")
        self._emit(ServiceStoppedEvent(self.name, pid=pid))
        return True

    def _request_shutdown(self) -> bool:
        try:
            return self.shutdown()
        except Exception as e:
            self._report_error("stop", e)
            return False

    def _marker_owner_dead(self) -> bool:
        pid = self.current_pid
        if pid is None:
            return True
        return pid != self.pid and not self.processes.is_alive(pid)

    def _remove_stale_marker(self) -> None:
        pid = self.current_pid
        logger.info(
            "Pid file exists but process is not running. Removing old pid file."
        )
        self.marker.remove()
        self._emit(
            StaleMarkerRemovedEvent(
                self.name, pid=pid, pid_file=self.identity.pid_file
            )
        )

    def _release_marker(self) -> bool:
        """Delete the marker if this process still owns it."""
        if self.oracle.owns_marker():
            return self.marker.remove()
        return False

    def _report_error(
        self, operation: str, error: Exception, marker_removed: bool = False
    ) -> None:
        logger.error(f"ERROR in {self.name}: {error}", exc_info=error)
        self._emit(
            ServiceErrorEvent(
                self.name,
                pid=self.pid,
                operation=operation,
                error_type=type(error).__name__,
                error_message=str(error),
                traceback="".join(
                    traceback.format_exception(
                        type(error), error, error.__traceback__
                    )
                ),
                marker_removed=marker_removed,
            )
        )

    def _emit(self, event: Event) -> None:
        self.event_bus.emit(event)
