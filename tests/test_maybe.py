"""Tests for the Maybe monad."""

import pytest

from monadic import UnwrapNothingError
from monadic.maybe import (
    Nothing,
    Some,
    chain,
    divide,
    from_optional,
    lift,
    or_else,
    unwrap,
    whatever,
)


def test_lift_is_present():
    assert lift(10) == Some(10)


@pytest.mark.parametrize("falsy", [0, 0.0, "", False, None, []])
def test_falsy_payloads_are_present(falsy):
    wrapped = lift(falsy)

    assert isinstance(wrapped, Some)
    assert wrapped.value == falsy
    assert wrapped != Nothing()


def test_chain_continues_on_zero():
    result = chain(lift(0), whatever)

    assert result == Some(42)


def test_lift_wraps_exactly_one_layer():
    wrapped = lift(10)

    assert wrapped == Some(10)
    assert not isinstance(wrapped.value, Some)


def test_lift_of_nothing_is_present():
    wrapped = lift(Nothing())

    assert wrapped == Some(Nothing())
    assert wrapped.is_some()


def test_divide_by_zero_skips_whatever():
    assert chain(chain(lift(10), divide(0)), whatever) == Nothing()


def test_divide_by_five_then_whatever():
    result = chain(chain(lift(10), divide(5)), whatever)

    assert result == Some(44)


def test_divide_is_reusable():
    halve = divide(2)

    assert halve(10) == Some(5)
    assert halve(3) == Some(1.5)
    assert divide(0)(0) == Nothing()


def test_chain_never_calls_step_on_nothing(counting):
    step = counting(whatever)

    result = chain(Nothing(), step)

    assert result == Nothing()
    assert step.count == 0


def test_chain_returns_step_result_as_is(counting):
    step = counting(lambda x: Nothing())

    assert chain(Some(1), step) == Nothing()
    assert step.calls == [1]


def test_absorption_in_nested_chain(counting):
    after = [counting(whatever) for _ in range(3)]

    result = lift(10)
    result = chain(result, divide(0))
    for step in after:
        result = chain(result, step)

    assert result == Nothing()
    assert [step.count for step in after] == [0, 0, 0]


def test_nothing_instances_are_equal():
    assert Nothing() == Nothing()
    assert Some(1) != Some(2)


def test_methods():
    assert Some(10).then(divide(5)).then(whatever) == Some(44)
    assert Some(10).then(divide(0)).then(whatever) == Nothing()
    assert Some(2).map(str) == Some("2")
    assert Nothing().map(str) == Nothing()
    assert Some(1).is_some() and not Some(1).is_nothing()
    assert Nothing().is_nothing() and not Nothing().is_some()
    assert Some(1).unwrap_or(9) == 1
    assert Nothing().unwrap_or(9) == 9


def test_from_optional():
    assert from_optional(None) == Nothing()
    assert from_optional(0) == Some(0)


def test_or_else():
    assert or_else(Some(0), 7) == 0
    assert or_else(Nothing(), 7) == 7


def test_unwrap():
    assert unwrap(Some("x")) == "x"
    with pytest.raises(UnwrapNothingError):
        unwrap(Nothing())


def test_left_identity():
    assert chain(lift(10), divide(5)) == divide(5)(10)


def test_right_identity():
    assert chain(Some(3), lift) == Some(3)
    assert chain(Nothing(), lift) == Nothing()


def test_right_identity_with_nested_payload():
    assert chain(Some(Some(1)), lift) == Some(Some(1))
    assert chain(Some(Nothing()), lift) == Some(Nothing())


def test_associativity():
    for m in (Some(10), Nothing()):
        left = chain(chain(m, divide(5)), whatever)
        right = chain(m, lambda x: chain(divide(5)(x), whatever))
        assert left == right


def test_repr():
    assert repr(Some(44.0)) == "Some(44.0)"
    assert repr(Nothing()) == "Nothing"
