"""Builtins that inspect and build sequences: count, first, rest, conj and friends."""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from ..collections import CollectionError, RispList
from ..errors import IndexOutOfBounds, TypeMismatch, UnsupportedType, WrongArity
from ..values import Builtin, Map, Set, Vector, type_name, values_equal

Args = Sequence[Tuple[Any, Any]]


def _expect_arity(args: Args, expected: int, span: Any) -> None:
    if len(args) != expected:
        raise WrongArity(expected, len(args), span)


def _seq_to_list(value: Any) -> Any:
    """Vectors become lists so that sets hold one form of each sequence."""
    if isinstance(value, Vector):
        return RispList(value)
    return value


def _pair(key: Any, value: Any) -> Vector:
    return Vector((key, value))


def _is_long(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def count(args: Args, span: Any) -> int:
    """Number of elements in a list, vector, set or map."""
    _expect_arity(args, 1, span)
    coll = args[0][0]
    if isinstance(coll, (RispList, Vector, Set, Map)):
        return len(coll)
    raise TypeMismatch("seq", type_name(coll), span)


def first(args: Args, span: Any) -> Any:
    """First element, a [key value] vector for maps, nil when empty."""
    _expect_arity(args, 1, span)
    coll, coll_span = args[0]
    if isinstance(coll, RispList):
        return coll.first()
    if isinstance(coll, (Vector, Set)):
        return coll[0] if coll else None
    if isinstance(coll, Map):
        return _pair(*coll[0]) if coll else None
    raise TypeMismatch("seq", type_name(coll), coll_span)


def rest(args: Args, span: Any) -> RispList:
    """Everything after the first element, always as a list."""
    _expect_arity(args, 1, span)
    coll, coll_span = args[0]
    if isinstance(coll, RispList):
        return coll.rest()
    if isinstance(coll, (Vector, Set)):
        return RispList(coll[1:])
    if isinstance(coll, Map):
        return RispList(_pair(k, v) for k, v in coll[1:])
    raise TypeMismatch("seq", type_name(coll), coll_span)


def second(args: Args, span: Any) -> Any:
    """Second element, or nil when there is none."""
    _expect_arity(args, 1, span)
    coll, coll_span = args[0]
    if isinstance(coll, RispList):
        try:
            return coll.nth(1)
        except CollectionError:
            return None
    if isinstance(coll, (Vector, Set)):
        return coll[1] if len(coll) >= 2 else None
    if isinstance(coll, Map):
        return _pair(*coll[1]) if len(coll) >= 2 else None
    raise TypeMismatch("seq", type_name(coll), coll_span)


def last(args: Args, span: Any) -> Any:
    """Last element, a [key value] vector for maps, nil when empty."""
    _expect_arity(args, 1, span)
    coll, coll_span = args[0]
    if isinstance(coll, RispList):
        return coll.last()
    if isinstance(coll, (Vector, Set)):
        return coll[-1] if coll else None
    if isinstance(coll, Map):
        return _pair(*coll[-1]) if coll else None
    raise TypeMismatch("seq", type_name(coll), coll_span)


def nth(args: Args, span: Any) -> Any:
    """Element at a non-negative index of a list, vector or set."""
    _expect_arity(args, 2, span)
    (coll, coll_span), (index, index_span) = args
    if _is_long(index) and index < 0:
        raise TypeMismatch("non-negative index", "negative long", index_span)
    if _is_long(index) and isinstance(coll, RispList):
        try:
            return coll.get(index)
        except CollectionError:
            raise IndexOutOfBounds(len(coll) - 1, index, coll_span) from None
    if _is_long(index) and isinstance(coll, (Vector, Set)):
        if index < len(coll):
            return coll[index]
        raise IndexOutOfBounds(len(coll) - 1, index, coll_span)
    raise UnsupportedType(type_name(coll), coll_span)


def _merge_entry(entries: List[Tuple[Any, Any]], key: Any, value: Any) -> None:
    for position, (existing, _) in enumerate(entries):
        if values_equal(existing, key):
            entries[position] = (existing, value)
            return
    entries.append((key, value))


def conj(args: Args, span: Any) -> Any:
    """Add a value the way the collection grows: vectors at the end, lists in front."""
    _expect_arity(args, 2, span)
    (coll, coll_span), (value, value_span) = args
    if isinstance(coll, Vector):
        return Vector((*coll, value))
    if isinstance(coll, RispList):
        return coll.cons(value)
    if isinstance(coll, Set):
        value = _seq_to_list(value)
        if any(values_equal(existing, value) for existing in coll):
            return Set(coll)
        return Set((*coll, value))
    if isinstance(coll, Map):
        entries = list(coll)
        if isinstance(value, Vector) and len(value) == 2:
            _merge_entry(entries, value[0], value[1])
        elif isinstance(value, Map):
            for key, item in value:
                _merge_entry(entries, key, item)
        else:
            raise TypeMismatch("vector pair or map", type_name(value), value_span)
        return Map(entries)
    raise TypeMismatch("seq", type_name(coll), coll_span)


def is_empty(args: Args, span: Any) -> bool:
    """True when the collection has no elements."""
    _expect_arity(args, 1, span)
    coll, coll_span = args[0]
    if isinstance(coll, (RispList, Vector, Set, Map)):
        return len(coll) == 0
    raise TypeMismatch("collection", type_name(coll), coll_span)


def cons(args: Args, span: Any) -> RispList:
    """A list with the value in front of the collection's elements."""
    _expect_arity(args, 2, span)
    (value, _), (coll, coll_span) = args
    if isinstance(coll, RispList):
        return coll.cons(value)
    if isinstance(coll, (Vector, Set)):
        return RispList((value, *coll))
    if isinstance(coll, Map):
        return RispList((value, *(_pair(k, v) for k, v in coll)))
    raise TypeMismatch("collection", type_name(coll), coll_span)


def builtins() -> List[Tuple[str, Builtin]]:
    """Name and callable of every sequence builtin."""
    return [
        ("count", Builtin("count", count)),
        ("first", Builtin("first", first)),
        ("rest", Builtin("rest", rest)),
        ("second", Builtin("second", second)),
        ("last", Builtin("last", last)),
        ("nth", Builtin("nth", nth)),
        ("conj", Builtin("conj", conj)),
        ("empty?", Builtin("empty?", is_empty)),
        ("cons", Builtin("cons", cons)),
    ]