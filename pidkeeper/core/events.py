"""Lifecycle event types emitted by the service controller."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
from uuid import uuid4


@dataclass
class Event:
    """Base event with timestamp and ID."""

    timestamp: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), init=False
    )
    event_id: str = field(default_factory=lambda: uuid4().hex[:8], init=False)


@dataclass
class ServiceEvent(Event):
    """Base for everything concerning one named service."""

    service_name: str


@dataclass
class ServiceStartingEvent(ServiceEvent):
    """This process wrote its PID and is about to enter the work loop."""

    pid: int
    pid_file: Path


@dataclass
class AlreadyRunningEvent(ServiceEvent):
    """start() found a live owner (or one still shutting down) and did nothing."""

    pid: Optional[int]
    status: str


@dataclass
class StaleMarkerRemovedEvent(ServiceEvent):
    """A marker pointing at a dead process was deleted."""

    pid: Optional[int]
    pid_file: Path


@dataclass
class ShutdownRequestedEvent(ServiceEvent):
    """The shutdown token was appended to the marker."""

    pid: Optional[int]


@dataclass
class ServiceExitedEvent(ServiceEvent):
    """The work loop observed a non-running status and returned."""

    pid: int
    final_status: str


@dataclass
class ServiceStoppingEvent(ServiceEvent):
    """stop() is waiting for the owner to exit."""

    pid: Optional[int]


@dataclass
class ServiceStoppedEvent(ServiceEvent):
    """stop() confirmed the marker is gone."""

    pid: Optional[int]


@dataclass
class NotRunningEvent(ServiceEvent):
    """stop() found nothing to stop."""


@dataclass
class StopTimeoutEvent(ServiceEvent):
    """stop() gave up waiting."""

    pid: Optional[int]
    timeout: float


@dataclass
class ServiceErrorEvent(ServiceEvent):
    """An exception escaped the work callback, a hook, or marker I/O."""

    pid: int
    operation: str
    error_type: str
    error_message: str
    traceback: str = ""
    marker_removed: bool = False
