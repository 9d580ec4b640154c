"""Exceptions raised by the differentiator."""

from __future__ import annotations


class DiffError(Exception):
    """Base exception for diff-related errors."""

    pass


class TypeMismatchError(DiffError):
    """
    Raised when two values at the same tree position have incompatible shapes.

    Shapes are compared by category (object, array or scalar). The error
    aborts the whole diff call; there is no partial result.
    """

    def __init__(self, before_kind: str, after_kind: str):
        super().__init__(f"incompatible JSON shapes: {before_kind} vs {after_kind}")
        self.before_kind = before_kind
        self.after_kind = after_kind
