"""Console reporting of lifecycle events."""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from ..core.event_bus import EventBus
from ..core.events import (
    AlreadyRunningEvent,
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
from .display_utils import DisplayUtils


class LifecycleReporter:
    """Prints one line per lifecycle event.

    Attach with ``LifecycleReporter(console).attach(bus)``.
    """

    def __init__(self, console: Optional[Console] = None, show_traceback: bool = True):
        self.display = DisplayUtils(console)
        self.show_traceback = show_traceback
        self._handlers = {
            ServiceStartingEvent: self.on_starting,
            AlreadyRunningEvent: self.on_already_running,
            StaleMarkerRemovedEvent: self.on_stale_marker,
            ShutdownRequestedEvent: self.on_shutdown_requested,
            ServiceExitedEvent: self.on_exited,
            ServiceStoppingEvent: self.on_stopping,
            ServiceStoppedEvent: self.on_stopped,
            NotRunningEvent: self.on_not_running,
            StopTimeoutEvent: self.on_stop_timeout,
            ServiceErrorEvent: self.on_error,
        }

    def attach(self, bus: EventBus) -> "LifecycleReporter":
        for event_type, handler in self._handlers.items():
            bus.subscribe(event_type, handler)
        return self

    def detach(self, bus: EventBus) -> None:
        for event_type, handler in self._handlers.items():
            bus.unsubscribe(event_type, handler)

    def on_starting(self, event: ServiceStartingEvent) -> None:
        self.display.status(
            f"Starting {escape(event.service_name)} ({event.pid})", style="nord14"
        )
        self.display.dim(f"  pid file: {escape(str(event.pid_file))}")

    def on_already_running(self, event: AlreadyRunningEvent) -> None:
        self.display.warning(
            f"{escape(event.service_name)} ({event.pid}) is already running. Ignoring.",
            context=f"status: {event.status}",
        )

    def on_stale_marker(self, event: StaleMarkerRemovedEvent) -> None:
        self.display.dim(
            f"Pid file {escape(str(event.pid_file))} points to dead process "
            f"{event.pid}; removed it."
        )

    def on_shutdown_requested(self, event: ShutdownRequestedEvent) -> None:
        self.display.status(
            f"Shutdown requested for {escape(event.service_name)} ({event.pid})",
            style="nord13",
        )

    def on_exited(self, event: ServiceExitedEvent) -> None:
        self.display.status(
            f"Shutting down {escape(event.service_name)} ({event.pid})",
            style="nord13",
        )

    def on_stopping(self, event: ServiceStoppingEvent) -> None:
        self.display.status(
            f"Stopping {escape(event.service_name)} ({event.pid})...", style="nord13"
        )

    def on_stopped(self, event: ServiceStoppedEvent) -> None:
        self.display.success(f"{escape(event.service_name)} ({event.pid}) stopped")

    def on_not_running(self, event: NotRunningEvent) -> None:
        self.display.info(f"{escape(event.service_name)} is not running")

    def on_stop_timeout(self, event: StopTimeoutEvent) -> None:
        self.display.error(
            f"{escape(event.service_name)} ({event.pid}) did not stop within "
            f"{event.timeout:g}s",
            use_panel=False,
        )

    def on_error(self, event: ServiceErrorEvent) -> None:
        message = f"{event.error_type}: {escape(event.error_message)}"
        if event.marker_removed:
            message += "\n\nPid file removed."
        self.display.error(
            message,
            title=f"{escape(event.service_name)} failed during {event.operation}",
            context=escape(event.traceback) if self.show_traceback else None,
        )
