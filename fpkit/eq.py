"""Equality helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def equals(lhs: Any, rhs: Any) -> bool:
    """Return whether two values are equal."""
    return lhs == rhs


def elem(x: Any, xs: Iterable[Any]) -> bool:
    """Return whether ``x`` is equal to any item of ``xs``."""
    return any(equals(x, y) for y in xs)