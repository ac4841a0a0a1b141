import pytest

from risp.builtins.comparison import (
    builtins,
    equal,
    greater,
    greater_equal,
    less,
    less_equal,
    not_equal,
)
from risp.collections import RispList
from risp.errors import TypeMismatch, WrongArity
from risp.values import Keyword, Map, Set, Vector


def call(func, *values):
    return func([(v, index) for index, v in enumerate(values)], "call")


@pytest.mark.parametrize(
    "values, expected",
    [
        ((1, 1), True),
        ((1, 2), False),
        (("a", "a"), True),
        ((Keyword("foo"), Keyword("foo")), True),
        ((None, None), True),
        ((True, True), True),
        ((1, 1, 1), True),
        ((1, 1, 2), False),
        ((RispList([1, 2, 3]), Vector((1, 2, 3))), True),
        ((Vector((1, 2, 3)), RispList([1, 2, 3])), True),
        ((RispList([1, 2]), Vector((1, 3))), False),
        ((RispList([1, 2]), Vector((1, 2, 3))), False),
        ((RispList(), Vector()), True),
        ((Set((1, 2)), RispList([1, 2])), False),
        ((Set((1, 2)), Set((1, 2))), True),
        ((Map([(Keyword("a"), 1)]), Map([(Keyword("a"), 1)])), True),
        ((1,), True),
    ],
)
def test_eq(values, expected):
    assert call(equal, *values) is expected


def test_eq_long_and_double_differ():
    assert call(equal, 1, 1.0) is False


def test_eq_wrong_arity_zero_args():
    with pytest.raises(WrongArity) as info:
        call(equal)
    assert info.value.expected == 1


@pytest.mark.parametrize(
    "values, expected",
    [((1, 2), True), ((1, 1), False), ((1, 1, 1), False), ((1, 1, 2), True)],
)
def test_neq(values, expected):
    assert call(not_equal, *values) is expected


@pytest.mark.parametrize(
    "values, expected",
    [
        ((3, 2), True),
        ((2, 3), False),
        ((2, 2), False),
        ((5, 3, 1), True),
        ((5, 3, 3), False),
        ((3, 1.5), True),
        ((1,), True),
        ((3.5, 2), True),
        ((1.5, 2), False),
        ((2.5, 1.5), True),
        ((1.5, 2.5), False),
    ],
)
def test_gt(values, expected):
    assert call(greater, *values) is expected


@pytest.mark.parametrize(
    "values, expected",
    [
        ((1, 2), True),
        ((2, 1), False),
        ((3, 3), False),
        ((1, 2, 3), True),
        ((1, 3, 2), False),
        ((5,), True),
        ((1, 1.5), True),
        ((1.5, 1), False),
    ],
)
def test_lt(values, expected):
    assert call(less, *values) is expected


@pytest.mark.parametrize(
    "values, expected",
    [((1, 2), True), ((3, 3), True), ((3, 2), False), ((1, 2, 2, 3), True), ((5,), True)],
)
def test_le(values, expected):
    assert call(less_equal, *values) is expected


@pytest.mark.parametrize(
    "values, expected",
    [((2, 1), True), ((3, 3), True), ((1, 2), False), ((3, 2, 2, 1), True), ((5,), True)],
)
def test_ge(values, expected):
    assert call(greater_equal, *values) is expected


def test_gt_wrong_arity_zero_args():
    with pytest.raises(WrongArity) as info:
        call(greater)
    assert (info.value.expected, info.value.got) == (1, 0)


def test_ge_wrong_arity_zero_args():
    with pytest.raises(WrongArity) as info:
        call(greater_equal)
    assert (info.value.expected, info.value.got) == (1, 0)


def test_lt_wrong_arity_zero_args():
    with pytest.raises(WrongArity) as info:
        call(less)
    assert (info.value.expected, info.value.got) == (1, 0)


def test_le_wrong_arity_zero_args():
    with pytest.raises(WrongArity) as info:
        call(less_equal)
    assert (info.value.expected, info.value.got) == (1, 0)


def test_gt_type_error_on_string():
    with pytest.raises(TypeMismatch) as info:
        call(greater, "a", "b")
    assert info.value.expected == "number"
    assert info.value.got == "string"
    assert info.value.span == 0


def test_lt_type_error_on_string():
    with pytest.raises(TypeMismatch) as info:
        call(less, "a", "b")
    assert info.value.expected == "number"
    assert info.value.got == "string"
    assert info.value.span == 0


def test_ordering_stops_before_later_bad_value():
    assert call(less, 2, 1, "x") is False


def test_negative_zero_orders_below_zero():
    assert call(less, -0.0, 0.0) is True


def test_builtins_names():
    table = dict(builtins())
    assert list(table) == ["=", "not=", ">", ">=", "<", "<="]
    assert table["<"]([(1, None), (2, None)], None) is True