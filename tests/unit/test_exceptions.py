"""Tests for pidkeeper exceptions."""

import pytest

from pidkeeper.core.exceptions import (
    ConfigurationError,
    PidkeeperError,
    ServiceDefinitionError,
    ServiceLoadError,
)


@pytest.mark.parametrize(
    "error",
    [
        ServiceDefinitionError("Mailer", "bad"),
        ServiceLoadError("app:Mailer", "bad"),
        ConfigurationError("bad"),
    ],
)
def test_hierarchy(error):
    assert isinstance(error, PidkeeperError)


def test_service_definition_error():
    error = ServiceDefinitionError("Mailer", "sleep_time must be >= 0")

    assert error.service == "Mailer"
    assert error.reason == "sleep_time must be >= 0"
    assert str(error) == (
        "Invalid service definition for Mailer: sleep_time must be >= 0"
    )


def test_service_load_error():
    error = ServiceLoadError("jobs:Missing", "module has no attribute 'Missing'")

    assert error.target == "jobs:Missing"
    assert "Cannot load service 'jobs:Missing'" in str(error)
