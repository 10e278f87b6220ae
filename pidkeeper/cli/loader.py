"""Resolve ``module:Attribute`` targets into service objects."""

import importlib
import os
import sys
from typing import Any

from ..core.exceptions import ServiceLoadError


def load_service(target: str) -> Any:
    """Import and instantiate the service named by ``target``.

    ``target`` has the form ``package.module:ClassName`` (nested attributes
    such as ``module:Outer.Inner`` are allowed). Classes are instantiated
    without arguments; instances are returned as-is. The current directory
    is importable, as with ``python -m``.

    Args:
        target: Import string of the service

    Returns:
        An object exposing ``perform_work_chunk``

    Raises:
        ServiceLoadError: If the target cannot be imported or is not a service
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ServiceLoadError(target, "expected the form 'package.module:ClassName'")

    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise ServiceLoadError(target, str(e)) from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ServiceLoadError(
                target, f"'{part}' not found in {getattr(obj, '__name__', obj)!r}"
            ) from e

    if isinstance(obj, type):
        try:
            obj = obj()
        except TypeError as e:
            raise ServiceLoadError(target, f"cannot instantiate: {e}") from e

    if not callable(getattr(obj, "perform_work_chunk", None)):
        raise ServiceLoadError(target, "does not define perform_work_chunk()")

    return obj
