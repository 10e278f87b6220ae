"""Tests for service identity resolution."""

from pathlib import Path

import pytest

from pidkeeper.config import Config
from pidkeeper.core.exceptions import ServiceDefinitionError
from pidkeeper.core.identity import ServiceIdentity, default_pid_file, resolve_identity
from pidkeeper.core.service import Service


class NightlyReport(Service):
    def perform_work_chunk(self):
        pass


class TunedIndexer(Service):
    name = "Search Indexer"
    sleep_time = 30
    poll_interval = 0.5

    def perform_work_chunk(self):
        pass


def write_config(tmp_path, text):
    path = tmp_path / "pidkeeper.yaml"
    path.write_text(text)
    return Config(path)


class TestDefaultPidFile:
    """Test default_pid_file function."""

    def test_uses_runtime_dir_and_slug(self, tmp_path):
        assert default_pid_file("NightlyReport") == (
            tmp_path / "runtime" / "pidkeeper" / "nightly_report.pid"
        )

    def test_falls_back_to_cache_dir(self, tmp_path, monkeypatch):
        monkeypatch.delenv("XDG_RUNTIME_DIR")
        assert default_pid_file("Mailer") == (
            tmp_path / "cache" / "pidkeeper" / "pids" / "mailer.pid"
        )

    def test_explicit_dir(self, tmp_path):
        assert default_pid_file("Search Indexer", tmp_path / "pids") == (
            tmp_path / "pids" / "search_indexer.pid"
        )


class TestServiceIdentity:
    """Test ServiceIdentity validation."""

    def test_defaults(self, tmp_path):
        identity = ServiceIdentity(name="svc", pid_file=str(tmp_path / "svc.pid"))

        assert identity.pid_file == tmp_path / "svc.pid"
        assert isinstance(identity.pid_file, Path)
        assert identity.sleep_time is None
        assert identity.poll_interval == 2
        assert identity.stop_poll_interval == 1

    def test_named_derives_pid_file(self, tmp_path):
        identity = ServiceIdentity.named("QueueWorker", sleep_time=1)

        assert identity.pid_file.name == "queue_worker.pid"
        assert identity.sleep_time == 1

    def test_is_frozen(self, tmp_path):
        identity = ServiceIdentity(name="svc", pid_file=tmp_path / "svc.pid")

        with pytest.raises(AttributeError):
            identity.name = "other"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"name": ""},
            {"name": "   "},
            {"sleep_time": -1},
            {"poll_interval": 0},
            {"stop_poll_interval": -0.5},
        ],
    )
    def test_invalid_values(self, tmp_path, kwargs):
        values = {"name": "svc", "pid_file": tmp_path / "svc.pid", **kwargs}

        with pytest.raises(ServiceDefinitionError):
            ServiceIdentity(**values)

    def test_zero_sleep_time_allowed(self, tmp_path):
        identity = ServiceIdentity(name="svc", pid_file=tmp_path / "x", sleep_time=0)
        assert identity.sleep_time == 0


class TestResolveIdentity:
    """Test resolve_identity precedence."""

    def test_class_name_default(self, tmp_path):
        identity = resolve_identity(NightlyReport())

        assert identity.name == "NightlyReport"
        assert identity.pid_file == (
            tmp_path / "runtime" / "pidkeeper" / "nightly_report.pid"
        )
        assert identity.sleep_time is None
        assert identity.poll_interval == 2

    def test_service_attributes(self):
        identity = resolve_identity(TunedIndexer())

        assert identity.name == "Search Indexer"
        assert identity.pid_file.name == "search_indexer.pid"
        assert identity.sleep_time == 30
        assert identity.poll_interval == 0.5

    def test_config_defaults_apply_below_service_attributes(self, tmp_path):
        config = write_config(
            tmp_path,
            f"defaults:\n  pid_dir: {tmp_path / 'pids'}\n  poll_interval: 5\n",
        )

        plain = resolve_identity(NightlyReport(), config)
        tuned = resolve_identity(TunedIndexer(), config)

        assert plain.pid_file == tmp_path / "pids" / "nightly_report.pid"
        assert plain.poll_interval == 5
        assert tuned.poll_interval == 0.5

    def test_service_section_wins(self, tmp_path):
        config = write_config(
            tmp_path,
            "services:\n"
            "  Search Indexer:\n"
            f"    pid_file: {tmp_path / 'custom.pid'}\n"
            "    sleep_time: 90\n"
            "    poll_interval: 3\n",
        )

        identity = resolve_identity(TunedIndexer(), config)

        assert identity.pid_file == tmp_path / "custom.pid"
        assert identity.sleep_time == 90
        assert identity.poll_interval == 3

    def test_duck_typed_service(self):
        class Plain:
            def perform_work_chunk(self):
                pass

        assert resolve_identity(Plain()).name == "Plain"
