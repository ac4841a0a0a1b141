"""Output and string-building builtins."""

from __future__ import annotations

import sys
from typing import Any, List, Sequence, Tuple

from ..errors import UnsupportedType, WrongArity
from ..values import Builtin, display, type_name

Args = Sequence[Tuple[Any, Any]]


def write(args: Args, span: Any) -> None:
    """Print one string to standard output without a newline; return nil."""
    if len(args) != 1:
        raise WrongArity(1, len(args), span)
    value, value_span = args[0]
    if not isinstance(value, str):
        raise UnsupportedType(type_name(value), value_span)
    sys.stdout.write(value)
    return None


def str_concat(args: Args, span: Any) -> str:
    """Concatenate the printed forms of all arguments."""
    return "".join(display(value) for value, _ in args)


def builtins() -> List[Tuple[str, Builtin]]:
    """Name and callable of every stdio builtin."""
    return [
        ("write", Builtin("write", write)),
        ("str", Builtin("str", str_concat)),
    ]