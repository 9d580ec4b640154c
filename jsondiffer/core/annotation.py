"""
Annotation policy: how a classified difference is written into a diff object.

SYMBOLIC  "+key" (added), "-key" (removed), "*key" (changed)
PLAIN     "key", the change kind is not encoded
DETAILED  {"added": {"key": ...}, "removed": {...}, "changed": {...}}

Detailed groups are per object level and only appear once something is
written into them.
"""

from __future__ import annotations

from typing import Dict, Optional

from .types import ChangeKind, OutputMode
from .values import JsonObject, JsonValue

_SYMBOLS = {
    ChangeKind.ADDED: "+",
    ChangeKind.REMOVED: "-",
    ChangeKind.CHANGED: "*",
}


def annotate_key(kind: ChangeKind, key: str, mode: OutputMode) -> str:
    """
    Literal output key for a difference under SYMBOLIC or PLAIN mode.

    Under DETAILED mode this is the name of the grouping node.
    """
    if mode == OutputMode.PLAIN:
        return key
    if mode == OutputMode.SYMBOLIC:
        return f"{_SYMBOLS[kind]}{key}"
    return kind.value


class DiffBuilder:
    """
    Accumulates the entries of one diff object.

    Entries keep the order in which they were added. In DETAILED mode each
    group is placed where its first entry arrived.
    """

    def __init__(self, mode: OutputMode):
        self.mode = mode
        self._entries: Dict[str, JsonValue] = {}
        self._groups: Dict[str, Dict[str, JsonValue]] = {}

    def add(self, kind: ChangeKind, key: str, value: JsonValue) -> None:
        target = annotate_key(kind, key, self.mode)
        if self.mode != OutputMode.DETAILED:
            self._entries[target] = value
            return

        group = self._groups.get(target)
        if group is None:
            group = self._groups[target] = {}
            # Reserve the slot; filled in by build()
            self._entries[target] = JsonObject()
        group[key] = value

    def build(self) -> Optional[JsonObject]:
        """The finished diff object, or None when nothing was added."""
        if not self._entries:
            return None
        entries = dict(self._entries)
        for name, group in self._groups.items():
            entries[name] = JsonObject(group)
        return JsonObject(entries)
