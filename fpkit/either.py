"""A value that is either a ``Left`` (usually an error) or a ``Right``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fpkit.concepts import Monad

E = TypeVar("E")
V = TypeVar("V")
U = TypeVar("U")


class Either(Monad, Generic[E, V]):
    """Base of :class:`Left` and :class:`Right`."""

    __slots__ = ()

    def or_(self, v: Either[E, V]) -> Either[E, V]:
        """Return ``self`` if it is a ``Right``, otherwise ``v``."""
        return self if isinstance(self, Right) else v

    def or_else(self, f: Callable[[], Either[E, V]]) -> Either[E, V]:
        """Return ``self`` if it is a ``Right``, otherwise the result of ``f()``."""
        return self if isinstance(self, Right) else f()

    def map(self, f: Callable[[V], U]) -> Either[E, U]:
        """Apply ``f`` to a ``Right`` value; a ``Left`` is returned unchanged."""
        match self:
            case Right(value):
                return Right(f(value))
            case _:
                return self

    @classmethod
    def pure(cls, v: V) -> Either[Any, V]:
        """Box ``v`` in :class:`Right`."""
        return Right(v)

    def ap(self, f: Either[E, Callable[[V], U]]) -> Either[E, U]:
        """Apply a ``Right`` function to a ``Right`` value; otherwise the first ``Left``."""
        match self, f:
            case Right(value), Right(func):
                return Right(func(value))
            case Right(), Left():
                return f
            case _:
                return self

    def flatmap(self, f: Callable[[V], Either[E, U]]) -> Either[E, U]:
        """Apply ``f`` to a ``Right`` value; a ``Left`` is returned unchanged."""
        match self:
            case Right(value):
                return f(value)
            case _:
                return self


@dataclass(frozen=True)
class Left(Either[E, Any]):
    """The left alternative."""

    value: E


@dataclass(frozen=True)
class Right(Either[Any, V]):
    """The right alternative."""

    value: V