import pytest

from risp.errors import (
    AnalyzeError,
    DivisionByZero,
    IndexOutOfBounds,
    NotCallable,
    ParseError,
    RecurOutsideLoop,
    RispError,
    TypeMismatch,
    UndefinedVariable,
    UnsupportedType,
    WrongArity,
)


@pytest.mark.parametrize(
    "error, text",
    [
        (UndefinedVariable("x"), "(undefined-variable 'x)"),
        (NotCallable(), "(not-callable)"),
        (WrongArity(1, 2), "(wrong-number-of-args\n  (expected 1)\n  (got 2))"),
        (TypeMismatch("bool", "long"), "(type-error\n  (expected bool)\n  (got long))"),
        (UnsupportedType("map"), '(unsupported-type "map)"'),
        (
            IndexOutOfBounds(2, 10),
            "(index-out-of-bounds\n  (max-index 2)\n  (got 10))",
        ),
        (DivisionByZero(), "(division-by-zero)"),
        (ParseError("boom"), "(parse-error\n  boom)"),
        (AnalyzeError("boom"), "(analyze-error boom)"),
        (RecurOutsideLoop(), "(recur-outside-loop)"),
    ],
)
def test_messages(error, text):
    assert str(error) == text
    assert isinstance(error, RispError)


def test_wrong_arity_fields():
    err = WrongArity(1, 2, span=(3, 4))
    assert (err.expected, err.got, err.span) == (1, 2, (3, 4))


def test_type_mismatch_fields():
    err = TypeMismatch("number", "string")
    assert err.expected == "number"
    assert err.got == "string"
    assert err.span is None


def test_undefined_variable_keeps_name():
    assert UndefinedVariable("user/foo").name == "user/foo"


def test_index_out_of_bounds_fields():
    err = IndexOutOfBounds(2, 10)
    assert (err.max_accessible, err.got) == (2, 10)


def test_parse_error_keeps_message():
    assert ParseError("unexpected )").message == "unexpected )"


def test_division_by_zero_is_a_risp_error():
    err = DivisionByZero(span=7)
    assert err.span == 7
    assert isinstance(err, RispError)
    assert str(err) == "(division-by-zero)"