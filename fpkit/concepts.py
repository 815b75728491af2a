"""Abstract functor, applicative and monad interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class Functor(ABC):
    """A container whose contents can be transformed with ``map``."""

    @abstractmethod
    def map(self, f: Callable[[Any], Any]) -> Functor:
        """Apply ``f`` to the contained value and return the boxed result."""


class Applicative(Functor):
    """A functor that can box plain values and apply boxed functions."""

    @classmethod
    @abstractmethod
    def pure(cls, v: Any) -> Applicative:
        """Box the value ``v``."""

    @classmethod
    def of(cls, v: Any) -> Applicative:
        """Alias of :meth:`pure`."""
        return cls.pure(v)

    @abstractmethod
    def ap(self, f: Applicative) -> Applicative:
        """Apply the boxed function ``f`` to the contained value."""


class Monad(Applicative):
    """An applicative that can chain actions without nesting boxes."""

    @abstractmethod
    def flatmap(self, f: Callable[[Any], Monad]) -> Monad:
        """Apply ``f``, which returns a boxed value, and return it unnested."""