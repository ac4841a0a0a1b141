"""Builtins that construct lists, vectors and maps."""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from ..collections import RispList
from ..errors import WrongArity
from ..values import Builtin, Map, Vector

Args = Sequence[Tuple[Any, Any]]


def make_list(args: Args, span: Any) -> RispList:
    """A list of the arguments, in order."""
    return RispList(value for value, _ in args)


def make_vector(args: Args, span: Any) -> Vector:
    """A vector of the arguments, in order."""
    return Vector(value for value, _ in args)


def make_map(args: Args, span: Any) -> Map:
    """A map from alternating keys and values."""
    if len(args) % 2:
        raise WrongArity(len(args) + 1, len(args), span)
    values = [value for value, _ in args]
    return Map(zip(values[::2], values[1::2]))


def builtins() -> List[Tuple[str, Builtin]]:
    """Name and callable of every constructor builtin."""
    return [
        ("list", Builtin("list", make_list)),
        ("vector", Builtin("vector", make_vector)),
        ("hash-map", Builtin("hash-map", make_map)),
    ]