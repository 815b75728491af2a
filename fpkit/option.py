"""An optional value: either ``Some(value)`` or ``Nothing()``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fpkit.concepts import Monad

T = TypeVar("T")
U = TypeVar("U")


class FpOption(Monad, Generic[T]):
    """Base of :class:`Some` and :class:`Nothing`."""

    __slots__ = ()

    def is_some(self) -> bool:
        """Return whether a value is present."""
        return isinstance(self, Some)

    def is_none(self) -> bool:
        """Return whether no value is present."""
        return isinstance(self, Nothing)

    def or_(self, v: FpOption[T]) -> FpOption[T]:
        """Return ``self`` if it holds a value, otherwise ``v``."""
        return self if self.is_some() else v

    def or_else(self, f: Callable[[], FpOption[T]]) -> FpOption[T]:
        """Return ``self`` if it holds a value, otherwise the result of ``f()``."""
        return self if self.is_some() else f()

    def map(self, f: Callable[[T], U]) -> FpOption[U]:
        """Apply ``f`` to the value if present; ``Nothing`` stays ``Nothing``."""
        match self:
            case Some(value):
                return Some(f(value))
            case _:
                return Nothing()

    @classmethod
    def pure(cls, v: T) -> FpOption[T]:
        """Box ``v`` in :class:`Some`."""
        return Some(v)

    def ap(self, f: FpOption[Callable[[T], U]]) -> FpOption[U]:
        """Apply the boxed function when both it and the value are present."""
        match self, f:
            case Some(value), Some(func):
                return Some(func(value))
            case _:
                return Nothing()

    def flatmap(self, f: Callable[[T], FpOption[U]]) -> FpOption[U]:
        """Apply ``f`` to the value if present and return its option unnested."""
        match self:
            case Some(value):
                return f(value)
            case _:
                return Nothing()


@dataclass(frozen=True)
class Some(FpOption[T]):
    """An option holding a value."""

    value: T


@dataclass(frozen=True)
class Nothing(FpOption[Any]):
    """An option holding no value."""