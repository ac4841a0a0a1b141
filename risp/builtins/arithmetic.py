"""Arithmetic builtins: +, -, *, / and mod."""

from __future__ import annotations

import math
from typing import Any, Callable, List, Sequence, Tuple

from ..errors import DivisionByZero, TypeMismatch, UnsupportedType, WrongArity
from ..values import Builtin, type_name

Args = Sequence[Tuple[Any, Any]]

_NUMBER = "long or double"


def _is_long(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_double(value: Any) -> bool:
    return isinstance(value, float)


def _is_number(value: Any) -> bool:
    return _is_long(value) or _is_double(value)


def _fold(args: Args, initial: Any, op: Callable[[Any, Any], Any]) -> Any:
    """Combine numbers left to right; the result becomes a double once one appears."""
    result = initial
    for value, span in args:
        if _is_long(value):
            result = op(result, value)
        elif _is_double(value):
            result = op(float(result), value)
        else:
            raise TypeMismatch(_NUMBER, type_name(value), span)
    return result


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _truncating_rem(a: int, b: int) -> int:
    return a - b * _truncating_div(a, b)


def _float_rem(a: float, b: float) -> float:
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def add(args: Args, span: Any) -> Any:
    """Sum of all arguments; 0 when there are none."""
    return _fold(args, 0, lambda a, b: a + b)


def subtract(args: Args, span: Any) -> Any:
    """Negate a single argument, or subtract the rest from the first."""
    if not args:
        raise WrongArity(1, 0, span)
    first, first_span = args[0]
    if not _is_number(first):
        raise TypeMismatch(_NUMBER, type_name(first), first_span)
    if len(args) == 1:
        return -first
    return _fold(args[1:], first, lambda a, b: a - b)


def multiply(args: Args, span: Any) -> Any:
    """Product of all arguments; 1 when there are none."""
    return _fold(args, 1, lambda a, b: a * b)


def divide(args: Args, span: Any) -> Any:
    """Divide exactly two numbers; longs divide with truncation toward zero."""
    if len(args) != 2:
        raise WrongArity(2, len(args), span)
    (dividend, dividend_span), (divider, divider_span) = args
    if _is_number(divider) and divider == 0:
        raise DivisionByZero(divider_span)
    if not (_is_number(dividend) and _is_number(divider)):
        raise TypeMismatch(_NUMBER, type_name(dividend), dividend_span)
    if _is_long(dividend) and _is_long(divider):
        return _truncating_div(dividend, divider)
    return float(dividend) / float(divider)


def modulo(args: Args, span: Any) -> Any:
    """Remainder of two numbers, taking the sign of the dividend."""
    if len(args) != 2:
        raise WrongArity(2, len(args), span)
    (num, num_span), (div, div_span) = args
    if not (_is_number(num) and _is_number(div)):
        raise UnsupportedType(f"{type_name(num)} % {type_name(div)}", num_span)
    if _is_long(num) and _is_long(div):
        if div == 0:
            raise DivisionByZero(div_span)
        return _truncating_rem(num, div)
    return _float_rem(float(num), float(div))


def builtins() -> List[Tuple[str, Builtin]]:
    """Name and callable of every arithmetic builtin."""
    return [
        ("+", Builtin("+", add)),
        ("-", Builtin("-", subtract)),
        ("*", Builtin("*", multiply)),
        ("/", Builtin("/", divide)),
        ("mod", Builtin("mod", modulo)),
    ]