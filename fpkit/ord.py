"""Ordering helpers."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")


class Ordering(Enum):
    """Result of comparing two values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare(lhs: Any, rhs: Any) -> Ordering:
    """Compare two values and return their ordering."""
    if lhs < rhs:
        return Ordering.LESS
    if lhs == rhs:
        return Ordering.EQUAL
    return Ordering.GREATER


def minimum(lhs: T, rhs: T) -> T:
    """Return the smaller value; on a tie, return ``rhs``."""
    return lhs if compare(lhs, rhs) is Ordering.LESS else rhs