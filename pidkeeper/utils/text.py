"""Name transformations used to derive file names from service names."""

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_UNSAFE = re.compile(r"[^\w.-]+")


def underscore(name: str) -> str:
    """Convert a CamelCase name to snake_case.

    >>> underscore("HTTPQueueWorker")
    'http_queue_worker'
    """
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    word = _WORD_BOUNDARY.sub(r"\1_\2", word)
    return word.replace("-", "_").lower()


def slugify(name: str) -> str:
    """Turn a display name into a file-system safe stem.

    Whitespace and path separators become underscores.

    >>> slugify("Nightly Report Mailer")
    'nightly_report_mailer'
    """
    slug = underscore(name.strip())
    slug = re.sub(r"\s+", "_", slug)
    slug = _UNSAFE.sub("_", slug)
    return slug.strip("._") or "service"
