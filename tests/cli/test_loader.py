"""Tests for resolving module:Class targets."""

import pytest

from pidkeeper.cli.loader import load_service
from pidkeeper.core.exceptions import ServiceLoadError


def test_class_is_instantiated(services_module):
    service = load_service(f"{services_module}:OneShot")

    assert type(service).__name__ == "OneShot"
    assert service.name == "One Shot"


def test_instance_returned_as_is(services_module):
    service = load_service(f"{services_module}:ready_made")

    assert type(service).__name__ == "OneShot"


def test_nested_attribute(services_module):
    service = load_service(f"{services_module}:Namespace.Inner")

    assert type(service).__name__ == "Inner"


@pytest.mark.parametrize(
    "target,message",
    [
        ("no_colon", "expected the form"),
        (":OneShot", "expected the form"),
        ("{mod}:", "expected the form"),
        ("definitely_not_a_module_xyz:Thing", "No module named"),
        ("{mod}:Missing", "'Missing' not found"),
        ("{mod}:NeedsArgs", "cannot instantiate"),
        ("{mod}:NotAService", "perform_work_chunk"),
    ],
)
def test_errors(services_module, target, message):
    with pytest.raises(ServiceLoadError, match=message):
        load_service(target.format(mod=services_module))
