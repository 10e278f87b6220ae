"""Work-unit definitions driven by a ServiceController."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from .exceptions import ServiceDefinitionError

if TYPE_CHECKING:
    from .controller import ServiceController


@dataclass(frozen=True)
class ServiceHooks:
    """Callables a controller invokes.

    ``work`` is called once per cycle and should return quickly so shutdown
    requests are noticed. ``after_start`` runs once after the marker is
    written, ``before_stop`` once before the shutdown token is appended.
    """

    work: Callable[[], Any]
    after_start: Optional[Callable[[], Any]] = None
    before_stop: Optional[Callable[[], Any]] = None

    def __post_init__(self):
        if not callable(self.work):
            raise ServiceDefinitionError("hooks", "work callback must be callable")
        for field_name in ("after_start", "before_stop"):
            hook = getattr(self, field_name)
            if hook is not None and not callable(hook):
                raise ServiceDefinitionError("hooks", f"{field_name} is not callable")

    @classmethod
    def from_service(cls, service: Any) -> "ServiceHooks":
        """Collect hooks from an object exposing ``perform_work_chunk``."""
        work = getattr(service, "perform_work_chunk", None)
        if not callable(work):
            raise ServiceDefinitionError(
                type(service).__name__, "perform_work_chunk() is not defined"
            )
        return cls(
            work=work,
            after_start=getattr(service, "after_start", None),
            before_stop=getattr(service, "before_stop", None),
        )


class Service(ABC):
    """Base class for a repeatable unit of work run as a singleton daemon.

    Subclasses implement ``perform_work_chunk`` and may set the class
    attributes below; anything left as None falls back to configuration or
    built-in defaults. Call ``self.shutdown()`` from inside a work chunk to
    stop after the current cycle (useful for cron-style jobs).

    Example::

        class Indexer(Service):
            sleep_time = 30

            def perform_work_chunk(self):
                index_next_batch()

        ServiceController.for_service(Indexer()).start()
    """

    name: Optional[str] = None
    pid_file: Optional[Union[str, Path]] = None
    sleep_time: Optional[float] = None
    poll_interval: Optional[float] = None
    stop_poll_interval: Optional[float] = None

    controller: Optional["ServiceController"] = None

    @abstractmethod
    def perform_work_chunk(self) -> None:
        """Do one bounded chunk of work."""

    def after_start(self) -> None:
        """Called once the service owns its marker, before the first chunk."""

    def before_stop(self) -> None:
        """Called by whichever process requests the shutdown."""

    def shutdown(self) -> bool:
        """Ask the running service to exit after the current cycle."""
        if self.controller is None:
            raise ServiceDefinitionError(
                type(self).__name__, "not bound to a ServiceController"
            )
        return self.controller.shutdown()
