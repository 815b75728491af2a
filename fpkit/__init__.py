"""Functor, Applicative and Monad abstractions with Option and Either types."""

__version__ = "0.1.0"
__all__ = ["concepts", "either", "eq", "option", "ord"]