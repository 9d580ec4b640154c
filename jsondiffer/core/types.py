from __future__ import annotations

from enum import Enum


class ChangeKind(str, Enum):
    """Classification of a single key-level difference."""

    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


class OutputMode(str, Enum):
    """
    How a ChangeKind is encoded into the output tree.

    SYMBOLIC: keys prefixed with "+", "-" or "*"
    PLAIN: keys left as-is, the change kind is not encoded
    DETAILED: keys grouped under "added", "removed" and "changed"
    """

    SYMBOLIC = "symbolic"
    PLAIN = "plain"
    DETAILED = "detailed"
