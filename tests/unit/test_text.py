"""Tests for name transformations."""

import pytest

from pidkeeper.utils.text import slugify, underscore


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Indexer", "indexer"),
        ("QueueWorker", "queue_worker"),
        ("HTTPQueueWorker", "http_queue_worker"),
        ("Worker2Go", "worker2_go"),
        ("already_snake", "already_snake"),
        ("kebab-case", "kebab_case"),
    ],
)
def test_underscore(name, expected):
    assert underscore(name) == expected


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Nightly Report Mailer", "nightly_report_mailer"),
        ("  Padded  ", "padded"),
        ("a/b\\c", "a_b_c"),
        ("../escape", "escape"),
        ("!!!", "service"),
    ],
)
def test_slugify(name, expected):
    assert slugify(name) == expected
