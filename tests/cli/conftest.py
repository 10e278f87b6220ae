"""Fixtures for CLI tests: an importable module of sample services."""

import sys
import textwrap

import pytest

SERVICES_MODULE = "cli_jobs"

SERVICES_SOURCE = textwrap.dedent(
    '''
    from pidkeeper import Service


    class OneShot(Service):
        """Runs a single chunk and stops itself."""

        name = "One Shot"

        def perform_work_chunk(self):
            self.shutdown()


    class Failing(Service):
        def perform_work_chunk(self):
            raise RuntimeError("chunk failed")


    class NeedsArgs(Service):
        def __init__(self, queue):
            self.queue = queue

        def perform_work_chunk(self):
            pass


    class NotAService:
        pass


    class Namespace:
        class Inner(Service):
            def perform_work_chunk(self):
                self.shutdown()


    ready_made = OneShot()
    '''
)


@pytest.fixture
def services_module(tmp_path, monkeypatch):
    """Write the sample services into a fresh cwd and forget old imports."""
    (tmp_path / f"{SERVICES_MODULE}.py").write_text(SERVICES_SOURCE)
    monkeypatch.chdir(tmp_path)
    monkeypatch.delitem(sys.modules, SERVICES_MODULE, raising=False)
    return SERVICES_MODULE
