"""Shared fixtures: isolated directories, a fake clock and a fake process table."""

import pytest

from pidkeeper.core.controller import ServiceController
from pidkeeper.core.event_bus import EventBus
from pidkeeper.core.identity import ServiceIdentity
from pidkeeper.core.process import ProcessTable
from pidkeeper.core.service import ServiceHooks

OWN_PID = 4242
OTHER_LIVE_PID = 5555
DEAD_PID = 54321


class FakeClock:
    """Manually advanced clock; ``sleep`` moves time forward instantly.

    Callbacks registered with ``at`` fire once time reaches their deadline,
    which lets a test change the marker "while" the service sleeps.
    """

    def __init__(self, limit: float = 10_000.0):
        self.time = 0.0
        self.limit = limit
        self.sleeps = []
        self._scheduled = []

    def now(self) -> float:
        return self.time

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.advance(seconds)

    def advance(self, seconds: float) -> None:
        self.time += seconds
        if self.time > self.limit:
            raise RuntimeError(f"fake clock ran past {self.limit}s")
        due = [item for item in self._scheduled if item[0] <= self.time]
        self._scheduled = [item for item in self._scheduled if item[0] > self.time]
        for _, callback in sorted(due, key=lambda item: item[0]):
            callback()

    def at(self, when: float, callback) -> None:
        self._scheduled.append((when, callback))


class FakeProcessTable(ProcessTable):
    """Process table with a fixed own PID and an editable set of live PIDs."""

    def __init__(self, current_pid: int = OWN_PID, alive=(OTHER_LIVE_PID,)):
        super().__init__(current_pid=current_pid)
        self.alive = set(alive)

    def is_alive(self, pid: int) -> bool:
        return pid == self.current_pid or pid in self.alive


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Point every XDG directory at a temp dir."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    monkeypatch.setenv("XDG_RUNTIME_DIR", str(tmp_path / "runtime"))
    yield tmp_path


@pytest.fixture
def pid_file(tmp_path):
    return tmp_path / "run" / "worker.pid"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def processes():
    return FakeProcessTable()


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def make_controller(pid_file, clock, processes, event_bus):
    """Factory for controllers wired to the fakes above."""

    def _make(
        work=None,
        after_start=None,
        before_stop=None,
        sleep_time=None,
        poll_interval=2.0,
        stop_poll_interval=1.0,
        process_table=None,
    ):
        identity = ServiceIdentity(
            name="Worker",
            pid_file=pid_file,
            sleep_time=sleep_time,
            poll_interval=poll_interval,
            stop_poll_interval=stop_poll_interval,
        )
        hooks = ServiceHooks(
            work=work or (lambda: None),
            after_start=after_start,
            before_stop=before_stop,
        )
        return ServiceController(
            identity,
            hooks,
            event_bus=event_bus,
            processes=process_table or processes,
            clock=clock,
        )

    return _make
