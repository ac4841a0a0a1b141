"""Errors raised while reading and evaluating programs."""

from __future__ import annotations

from typing import Any, Optional


class RispError(Exception):
    """Base class of every error the interpreter reports."""

    def __init__(self, message: str, span: Optional[Any] = None) -> None:
        super().__init__(message)
        self.span = span


class UndefinedVariable(RispError):
    def __init__(self, name: str, span: Optional[Any] = None) -> None:
        super().__init__(f"(undefined-variable '{name})", span)
        self.name = name


class NotCallable(RispError):
    def __init__(self, span: Optional[Any] = None) -> None:
        super().__init__("(not-callable)", span)


class WrongArity(RispError):
    def __init__(self, expected: int, got: int, span: Optional[Any] = None) -> None:
        super().__init__(
            f"(wrong-number-of-args\n  (expected {expected})\n  (got {got}))", span
        )
        self.expected = expected
        self.got = got


class TypeMismatch(RispError):
    """A value of the wrong type was given."""

    def __init__(self, expected: str, got: str, span: Optional[Any] = None) -> None:
        super().__init__(f"(type-error\n  (expected {expected})\n  (got {got}))", span)
        self.expected = expected
        self.got = got


class UnsupportedType(RispError):
    def __init__(self, description: str, span: Optional[Any] = None) -> None:
        super().__init__(f'(unsupported-type "{description})"', span)
        self.description = description


class IndexOutOfBounds(RispError):
    def __init__(
        self, max_accessible: int, got: int, span: Optional[Any] = None
    ) -> None:
        super().__init__(
            f"(index-out-of-bounds\n  (max-index {max_accessible})\n  (got {got}))",
            span,
        )
        self.max_accessible = max_accessible
        self.got = got


class DivisionByZero(RispError):
    def __init__(self, span: Optional[Any] = None) -> None:
        super().__init__("(division-by-zero)", span)


class ParseError(RispError):
    def __init__(self, message: str) -> None:
        super().__init__(f"(parse-error\n  {message})")
        self.message = message


class AnalyzeError(RispError):
    def __init__(self, message: str) -> None:
        super().__init__(f"(analyze-error {message})")
        self.message = message


class RecurOutsideLoop(RispError):
    def __init__(self, span: Optional[Any] = None) -> None:
        super().__init__("(recur-outside-loop)", span)