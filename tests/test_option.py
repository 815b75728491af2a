from fpkit.option import FpOption, Nothing, Some


def test_functor():
    assert Some(1).map(lambda x: x * 2) == Some(2)
    assert Nothing().map(lambda x: x * 2) == Nothing()


def test_applicative():
    x = FpOption.pure(1)
    assert x == Some(1)
    f = FpOption.pure(lambda v: v * 2)
    assert x.ap(f) == Some(2)
    assert Nothing().ap(FpOption.pure(lambda v: v * 2)) == Nothing()


def test_ap_with_missing_function():
    assert Some(1).ap(Nothing()) == Nothing()


def test_of_is_pure():
    assert FpOption.of(3) == FpOption.pure(3)


def test_monad():
    assert FpOption.pure(1).flatmap(lambda x: FpOption.pure(x * 2)) == FpOption.pure(2)
    assert Nothing().flatmap(lambda x: FpOption.pure(x * 2)) == Nothing()


def test_is_some():
    assert FpOption.pure(1).is_some()
    assert not Nothing().is_some()


def test_is_none():
    assert not FpOption.pure(1).is_none()
    assert Nothing().is_none()


def test_or():
    assert FpOption.pure(1).or_(FpOption.pure(2)) == FpOption.pure(1)
    assert FpOption.pure(1).or_(Nothing()) == FpOption.pure(1)
    assert Nothing().or_(FpOption.pure(2)) == FpOption.pure(2)
    assert Nothing().or_(Nothing()) == Nothing()


def test_or_else():
    assert FpOption.pure(1).or_else(lambda: FpOption.pure(2)) == FpOption.pure(1)
    assert FpOption.pure(1).or_else(lambda: Nothing()) == FpOption.pure(1)
    assert Nothing().or_else(lambda: FpOption.pure(2)) == FpOption.pure(2)
    assert Nothing().or_else(lambda: Nothing()) == Nothing()


def test_or_else_not_called_when_some():
    calls = []

    def fallback():
        calls.append(1)
        return Nothing()

    result = Some(1).or_else(fallback)
    assert result == Some(1)
    assert calls == []


def test_example_chain():
    result = Some(5).ap(Some(lambda x: x * 2))
    assert result == Some(10)
    assert result.map(lambda x: x + 1) == Some(11)
    fallback = Nothing().map(lambda x: x * 2).or_else(lambda: FpOption.pure(-100))
    assert fallback == Some(-100)


def test_some_and_nothing_differ():
    assert Some(None) != Nothing()