# fpkit

Small functional-programming building blocks. The package has these parts:

- `fpkit.concepts`: the abstract base classes `Functor`, `Applicative` and `Monad`.
- `fpkit.option`: `FpOption`, which is `Some(value)` or `Nothing()`.
- `fpkit.either`: `Either`, which is `Left(value)` or `Right(value)`.
- `fpkit.eq` and `fpkit.ord`: equality and ordering helpers.

It is a library only and has no command-line program.

## Installation

```
pip install .
```

## Concepts

`Functor` declares `map(f)`. `Applicative` adds the class method `pure(v)`,
its alias `of(v)`, and `ap(f)`, which applies a boxed function. `Monad` adds
`flatmap(f)`, which applies a function that itself returns a box and does not
nest the result. `FpOption` and `Either` both implement `Monad`.

## Option

`Some` and `Nothing` are frozen dataclasses. They compare equal by value.

```python
from fpkit.option import FpOption, Some, Nothing

value = Some(5)
doubled = value.ap(Some(lambda x: x * 2))   # Some(value=10)
incremented = doubled.map(lambda x: x + 1)  # Some(value=11)

fallback = Nothing().map(lambda x: x * 2).or_else(lambda: FpOption.pure(-100))
# Some(value=-100)

FpOption.of(3)                              # Some(value=3)
Some(1).flatmap(lambda x: Some(x * 2))      # Some(value=2)
Nothing().flatmap(lambda x: Some(x * 2))    # Nothing()
Some(1).is_some()                           # True
Nothing().is_none()                         # True
Some(1).or_(Some(2))                        # Some(value=1)
Nothing().or_(Some(2))                      # Some(value=2)
```

`ap` returns `Nothing()` unless both the value and the boxed function are
present.

## Either

`Right` holds a value, `Left` usually holds an error. Mapping and chaining
only touch `Right`; a `Left` is returned unchanged.

```python
from fpkit.either import Either, Left, Right

Right(1).map(lambda x: x * 2)                    # Right(value=2)
Left(-1).map(lambda x: x * 2)                    # Left(value=-1)
Either.pure(1).ap(Either.pure(lambda x: x * 2))  # Right(value=2)
Right(1).ap(Left(-5))                            # Left(value=-5)
Left(-1).ap(Either.pure(lambda x: x * 2))        # Left(value=-1)
Right(1).flatmap(lambda x: Left(x * 2))          # Left(value=2)
Right(1).or_(Right(2))                           # Right(value=1)
Left(-1).or_(Right(2))                           # Right(value=2)
Left(-1).or_else(lambda: Left(-2))               # Left(value=-2)
```

## Equality and ordering helpers

```python
from fpkit.eq import equals, elem
from fpkit.ord import Ordering, compare, minimum
from fpkit.option import Some

equals(Some(1), Some(1))    # True
elem(1, [1, 3])             # True
elem(1, [])                 # False
compare(1, 2)               # Ordering.LESS
compare(2, 2)               # Ordering.EQUAL
minimum(4, 3)               # 3
```

`Ordering` has the members `LESS`, `EQUAL` and `GREATER`. `minimum` returns
the right-hand argument when both compare equal.

## Running the tests

```
pip install .[test]
pytest
```