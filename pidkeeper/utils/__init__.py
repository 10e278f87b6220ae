"""Utility helpers for pidkeeper."""

from .text import slugify, underscore

__all__ = ["slugify", "underscore"]
