"""The full table of builtins the interpreter loads at start-up."""

from __future__ import annotations

from itertools import chain
from typing import List, Tuple

from ..values import Builtin
from . import arithmetic, comparison, sequences, stdio, structures


def all_builtins() -> List[Tuple[str, Builtin]]:
    """Name and callable of every builtin, grouped by module."""
    return list(
        chain(
            arithmetic.builtins(),
            stdio.builtins(),
            structures.builtins(),
            sequences.builtins(),
            comparison.builtins(),
        )
    )