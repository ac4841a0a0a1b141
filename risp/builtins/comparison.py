"""Equality and numeric ordering builtins."""

from __future__ import annotations

import struct
from itertools import pairwise
from typing import Any, Callable, List, Sequence, Tuple

from ..errors import TypeMismatch, WrongArity
from ..values import Builtin, type_name, values_equal

Args = Sequence[Tuple[Any, Any]]

_I64_MAGNITUDE = 0x7FFF_FFFF_FFFF_FFFF


def _total_key(x: float) -> int:
    """Integer key that orders doubles totally, NaN and signed zero included."""
    bits = struct.unpack("<q", struct.pack("<d", x))[0]
    return bits ^ _I64_MAGNITUDE if bits < 0 else bits


def _is_long(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _compare(a: Any, b: Any, span: Any) -> int:
    """Return -1, 0 or 1 as ``a`` is below, equal to or above ``b``."""
    if _is_long(a) and _is_long(b):
        return (a > b) - (a < b)
    numeric = (_is_long(a) or isinstance(a, float)) and (
        _is_long(b) or isinstance(b, float)
    )
    if not numeric:
        raise TypeMismatch("number", type_name(a), span)
    ka, kb = _total_key(float(a)), _total_key(float(b))
    return (ka > kb) - (ka < kb)


def equal(args: Args, span: Any) -> bool:
    """True when every argument equals the first."""
    if not args:
        raise WrongArity(1, 0, span)
    first = args[0][0]
    return all(values_equal(value, first) for value, _ in args[1:])


def not_equal(args: Args, span: Any) -> bool:
    """Negation of :func:`equal`."""
    return not equal(args, span)


def _chain(args: Args, span: Any, accept: Callable[[int], bool]) -> bool:
    if not args:
        raise WrongArity(1, 0, span)
    for (a, a_span), (b, _) in pairwise(args):
        if not accept(_compare(a, b, a_span)):
            return False
    return True


def greater(args: Args, span: Any) -> bool:
    """True when the arguments strictly decrease."""
    return _chain(args, span, lambda c: c > 0)


def greater_equal(args: Args, span: Any) -> bool:
    """True when the arguments never increase."""
    return _chain(args, span, lambda c: c >= 0)


def less(args: Args, span: Any) -> bool:
    """True when the arguments strictly increase."""
    return _chain(args, span, lambda c: c < 0)


def less_equal(args: Args, span: Any) -> bool:
    """True when the arguments never decrease."""
    return _chain(args, span, lambda c: c <= 0)


def builtins() -> List[Tuple[str, Builtin]]:
    """Name and callable of every comparison builtin."""
    return [
        ("=", Builtin("=", equal)),
        ("not=", Builtin("not=", not_equal)),
        (">", Builtin(">", greater)),
        (">=", Builtin(">=", greater_equal)),
        ("<", Builtin("<", less)),
        ("<=", Builtin("<=", less_equal)),
    ]