"""Tests for Service, ServiceHooks and for_service binding."""

import pytest

from pidkeeper.core.controller import ServiceController
from pidkeeper.core.exceptions import ServiceDefinitionError
from pidkeeper.core.service import Service, ServiceHooks


class CountingJob(Service):
    """Runs three chunks, then stops itself."""

    sleep_time = None

    def __init__(self):
        self.chunks = 0
        self.started = False
        self.stopped = False

    def after_start(self):
        self.started = True

    def before_stop(self):
        self.stopped = True

    def perform_work_chunk(self):
        self.chunks += 1
        if self.chunks == 3:
            self.shutdown()


class TestServiceHooks:
    """Test ServiceHooks validation."""

    def test_work_required(self):
        with pytest.raises(ServiceDefinitionError):
            ServiceHooks(work=None)

    def test_hooks_must_be_callable(self):
        with pytest.raises(ServiceDefinitionError, match="after_start"):
            ServiceHooks(work=lambda: None, after_start="nope")

    def test_from_service_requires_work_method(self):
        class NoWork:
            pass

        with pytest.raises(ServiceDefinitionError, match="perform_work_chunk"):
            ServiceHooks.from_service(NoWork())

    def test_from_duck_typed_object_without_hooks(self):
        class Minimal:
            def perform_work_chunk(self):
                pass

        hooks = ServiceHooks.from_service(Minimal())

        assert hooks.after_start is None
        assert hooks.before_stop is None


class TestService:
    """Test the Service base class."""

    def test_abstract(self):
        with pytest.raises(TypeError):
            Service()

    def test_shutdown_requires_controller(self):
        with pytest.raises(ServiceDefinitionError, match="not bound"):
            CountingJob().shutdown()

    def test_full_run_through_controller(self, tmp_path):
        job = CountingJob()
        controller = ServiceController.for_service(job)

        assert job.controller is controller
        assert controller.name == "CountingJob"

        assert controller.start() is True

        assert job.started
        assert job.stopped
        assert job.chunks == 3
        assert not controller.identity.pid_file.exists()
