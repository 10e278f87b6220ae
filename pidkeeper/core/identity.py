"""Service identity: name, marker path and timing for one controller."""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Union

from ..io.directories import get_runtime_dir
from ..utils.text import slugify
from .constants import MarkerFormat, ServiceDefaults
from .exceptions import ServiceDefinitionError

if TYPE_CHECKING:
    from ..config import Config


def default_pid_file(name: str, pid_dir: Optional[Union[str, Path]] = None) -> Path:
    """Marker path for ``name``: ``<pid_dir>/<slug>.pid``.

    Args:
        name: Display name of the service
        pid_dir: Directory override; defaults to the runtime directory

    Returns:
        Path to the marker file (not created)
    """
    directory = Path(pid_dir).expanduser() if pid_dir else get_runtime_dir()
    return directory / f"{slugify(name)}{MarkerFormat.EXTENSION}"


@dataclass(frozen=True)
class ServiceIdentity:
    """Everything a controller needs to know about the service it drives.

    Resolved once per controller and never changed afterwards.
    """

    name: str
    pid_file: Path
    sleep_time: Optional[float] = ServiceDefaults.SLEEP_TIME
    poll_interval: float = ServiceDefaults.POLL_INTERVAL
    stop_poll_interval: float = ServiceDefaults.STOP_POLL_INTERVAL

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ServiceDefinitionError(repr(self.name), "name must not be empty")
        if self.sleep_time is not None and self.sleep_time < 0:
            raise ServiceDefinitionError(self.name, "sleep_time must be >= 0")
        if self.poll_interval <= 0:
            raise ServiceDefinitionError(self.name, "poll_interval must be > 0")
        if self.stop_poll_interval <= 0:
            raise ServiceDefinitionError(self.name, "stop_poll_interval must be > 0")
        object.__setattr__(self, "pid_file", Path(self.pid_file).expanduser())

    @classmethod
    def named(
        cls, name: str, pid_file: Optional[Union[str, Path]] = None, **kwargs
    ) -> "ServiceIdentity":
        """Build an identity, deriving the marker path from ``name`` if needed."""
        return cls(name=name, pid_file=pid_file or default_pid_file(name), **kwargs)


def _first_set(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def resolve_identity(
    service: Any, config: Optional["Config"] = None
) -> ServiceIdentity:
    """Resolve the identity of a service object.

    Each field is taken from the first source that sets it: the config
    file's section for this service, the service's own attribute, the
    config file's ``defaults``, then the built-in default.

    Args:
        service: Object providing ``perform_work_chunk`` and optional
            ``name``, ``pid_file``, ``sleep_time``, ``poll_interval``
        config: Optional loaded configuration

    Returns:
        The resolved identity
    """
    name = getattr(service, "name", None) or type(service).__name__

    overrides = config.service_settings(name) if config else {}
    pid_dir = config.get("defaults.pid_dir") if config else None
    default_poll = config.get("defaults.poll_interval") if config else None
    default_stop_poll = config.get("defaults.stop_poll_interval") if config else None

    pid_file = _first_set(
        overrides.get("pid_file"),
        getattr(service, "pid_file", None),
    ) or default_pid_file(name, pid_dir)

    return ServiceIdentity(
        name=name,
        pid_file=pid_file,
        sleep_time=_first_set(
            overrides.get("sleep_time"), getattr(service, "sleep_time", None)
        ),
        poll_interval=_first_set(
            overrides.get("poll_interval"),
            getattr(service, "poll_interval", None),
            default_poll,
            ServiceDefaults.POLL_INTERVAL,
        ),
        stop_poll_interval=_first_set(
            overrides.get("stop_poll_interval"),
            getattr(service, "stop_poll_interval", None),
            default_stop_poll,
            ServiceDefaults.STOP_POLL_INTERVAL,
        ),
    )
