"""Runtime values of the language and the operations shared by all of them.

Values map onto Python types: nil is None, booleans are bool, longs are int,
doubles are float and strings are str. Keywords, symbols, vectors, maps, sets
and callables have their own classes below; lists are :class:`RispList`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Callable, Iterable, Optional, Sequence, Tuple

from .collections import RispList


@dataclass(frozen=True)
class Keyword:
    name: str

    def __str__(self) -> str:
        return f":{self.name}"


@dataclass(frozen=True)
class Symbol:
    name: str

    def __str__(self) -> str:
        return self.name


class Vector(tuple):
    """An immutable indexed sequence of values."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Vector, RispList)):
            return values_equal(self, other)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return debug_repr(self)


class Map(tuple):
    """Key/value pairs kept in insertion order."""

    __slots__ = ()

    def __new__(cls, pairs: Iterable[Tuple[Any, Any]] = ()) -> "Map":
        return super().__new__(cls, ((k, v) for k, v in pairs))

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None when absent."""
        for k, v in self:
            if values_equal(k, key):
                return v
        return None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Map):
            return values_equal(self, other)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return debug_repr(self)


class Set(tuple):
    """Distinct values kept in insertion order."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Set):
            return values_equal(self, other)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return debug_repr(self)


@dataclass(frozen=True)
class ClosureArity:
    """One parameter list of a function and the body that goes with it."""

    params: Tuple[int, ...]
    variadic: Optional[int]
    body: Any


@dataclass(eq=False, repr=False)
class Closure:
    """A user-defined function together with the environment it closes over."""

    arities: Tuple[ClosureArity, ...]
    env: Any
    name: Optional[str] = None

    def with_name(self, name: str) -> "Closure":
        """Return a copy of this closure carrying ``name``."""
        return replace(self, name=name)

    def __str__(self) -> str:
        return f"#<fn {self.name if self.name is not None else 'lamba'}>"

    def __repr__(self) -> str:
        return f"Closure(name={self.name!r})"


BuiltinFunction = Callable[[Sequence[Tuple[Any, Any]], Any], Any]


@dataclass(frozen=True, eq=False)
class Builtin:
    """A function provided by the interpreter itself."""

    name: str
    func: BuiltinFunction

    def __call__(self, args: Sequence[Tuple[Any, Any]], span: Any) -> Any:
        return self.func(args, span)

    def __str__(self) -> str:
        return self.name


def type_name(value: Any) -> str:
    """Return the language-level name of the type of ``value``."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "long"
    if isinstance(value, float):
        return "double"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Keyword):
        return "keyword"
    if isinstance(value, RispList):
        return "list"
    if isinstance(value, Vector):
        return "vector"
    if isinstance(value, Map):
        return "map"
    if isinstance(value, Set):
        return "set"
    if isinstance(value, Symbol):
        return "symbol"
    if isinstance(value, (Closure, Builtin)):
        return "callable"
    raise TypeError(f"not a runtime value: {value!r}")


def is_truthy(value: Any) -> bool:
    """Everything except nil and false is truthy."""
    return not (value is None or value is False)


def _sequence_equal(xs: Iterable[Any], ys: Iterable[Any]) -> bool:
    xs, ys = list(xs), list(ys)
    return len(xs) == len(ys) and all(values_equal(x, y) for x, y in zip(xs, ys))


def values_equal(a: Any, b: Any) -> bool:
    """Language equality: lists equal vectors, longs never equal doubles,
    callables equal nothing."""
    if a is None or b is None:
        return a is None and b is None
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, int) or isinstance(b, int):
        return isinstance(a, int) and isinstance(b, int) and a == b
    if isinstance(a, float) or isinstance(b, float):
        return isinstance(a, float) and isinstance(b, float) and a == b
    if isinstance(a, str) or isinstance(b, str):
        return isinstance(a, str) and isinstance(b, str) and a == b
    if isinstance(a, (Keyword, Symbol)) or isinstance(b, (Keyword, Symbol)):
        return type(a) is type(b) and a.name == b.name
    if isinstance(a, (RispList, Vector)) and isinstance(b, (RispList, Vector)):
        return _sequence_equal(a, b)
    if isinstance(a, Set) and isinstance(b, Set):
        return _sequence_equal(a, b)
    if isinstance(a, Map) and isinstance(b, Map):
        return len(a) == len(b) and all(
            values_equal(ka, kb) and values_equal(va, vb)
            for (ka, va), (kb, vb) in zip(a, b)
        )
    return False


def _format_double(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    if x.is_integer():
        sign = "-" if math.copysign(1.0, x) < 0 else ""
        return sign + str(abs(int(x)))
    return format(Decimal(repr(x)), "f")


def _debug_double(x: float) -> str:
    text = _format_double(x)
    if math.isfinite(x) and "." not in text:
        text += ".0"
    return text


_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\0": "\\0",
}


def _quote(text: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(c, c) for c in text) + '"'


def display(value: Any) -> str:
    """Render ``value`` the way the language prints it."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_double(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (Keyword, Symbol, Closure, Builtin)):
        return str(value)
    if isinstance(value, RispList):
        return "(" + " ".join(display(v) for v in value) + ")"
    if isinstance(value, Vector):
        return "[" + " ".join(display(v) for v in value) + "]"
    if isinstance(value, Map):
        return "{" + ", ".join(f"{display(k)} {display(v)}" for k, v in value) + "}"
    if isinstance(value, Set):
        return "#{" + " ".join(display(v) for v in value) + "}"
    raise TypeError(f"not a runtime value: {value!r}")


def debug_repr(value: Any) -> str:
    """Render ``value`` with its type, for diagnostics."""
    if value is None:
        return "Nil"
    if isinstance(value, bool):
        return f"Bool({'true' if value else 'false'})"
    if isinstance(value, int):
        return f"Long({value})"
    if isinstance(value, float):
        return f"Double({_debug_double(value)})"
    if isinstance(value, str):
        return f"String({_quote(value)})"
    if isinstance(value, Keyword):
        return f"Keyword({value.name})"
    if isinstance(value, Symbol):
        return f"Symbol({value.name})"
    if isinstance(value, RispList):
        return "List((" + " ".join(debug_repr(v) for v in value) + "))"
    if isinstance(value, Vector):
        return "Vector([" + ", ".join(debug_repr(v) for v in value) + "])"
    if isinstance(value, Map):
        pairs = ", ".join(f"({debug_repr(k)}, {debug_repr(v)})" for k, v in value)
        return f"Map([{pairs}])"
    if isinstance(value, Set):
        return "Set([" + ", ".join(debug_repr(v) for v in value) + "])"
    if isinstance(value, (Closure, Builtin)):
        return "Callable(...)"
    raise TypeError(f"not a runtime value: {value!r}")