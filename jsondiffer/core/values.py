"""
Value model for jsondiffer.

Both diff inputs and the diff output are expressed as JsonValue trees.
The output is not a separate patch type: it reuses the same variants with
annotated keys.

Variants:
    JsonScalar   null, boolean, number or string
    JsonArray    ordered sequence of values
    JsonObject   insertion-ordered mapping from string keys to values

Python None is reserved for "absent" (a missing side or position).
JSON null is JsonScalar(None), exported as NULL.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple, Union

ScalarType = Union[None, bool, int, float, str]

SCALAR = "scalar"
ARRAY = "array"
OBJECT = "object"


class JsonValue:
    """Base class for JSON values. Not instantiated directly."""

    __slots__ = ()

    @property
    def category(self) -> str:
        raise NotImplementedError

    @property
    def is_scalar(self) -> bool:
        return self.category == SCALAR

    @property
    def is_container(self) -> bool:
        return not self.is_scalar


@dataclass(frozen=True, eq=False)
class JsonScalar(JsonValue):
    """
    A leaf value: null, boolean, number or string.

    Equality follows JSON rather than Python: True != 1, while 1 == 1.0.
    NaN and infinities are rejected.
    """

    value: ScalarType = None

    def __post_init__(self):
        if self.value is not None and not isinstance(
            self.value, (bool, int, float, str)
        ):
            raise TypeError(f"Unsupported scalar type: {type(self.value).__name__}")
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise ValueError(f"Non-finite number is not valid JSON: {self.value!r}")

    @property
    def category(self) -> str:
        return SCALAR

    @property
    def kind(self) -> str:
        if self.value is None:
            return "null"
        if isinstance(self.value, bool):
            return "boolean"
        if isinstance(self.value, str):
            return "string"
        return "number"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonScalar):
            return NotImplemented
        if self.kind != other.kind:
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __repr__(self) -> str:
        return f"JsonScalar({self.value!r})"


@dataclass(frozen=True)
class JsonArray(JsonValue):
    """An ordered sequence of values. Equality is order-sensitive."""

    items: Tuple[JsonValue, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def category(self) -> str:
        return ARRAY

    def get(self, index: int) -> Optional[JsonValue]:
        """Element at index, or None past either end."""
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)

    def __repr__(self) -> str:
        return f"JsonArray({list(self.items)!r})"


@dataclass(frozen=True)
class JsonObject(JsonValue):
    """
    A mapping of string keys to values.

    Insertion order is kept for stable rendering but does not take part
    in equality.
    """

    entries: Dict[str, JsonValue]

    def __init__(self, entries: Optional[Dict[str, JsonValue]] = None):
        object.__setattr__(self, "entries", dict(entries or {}))

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    @property
    def category(self) -> str:
        return OBJECT

    def get(self, key: str) -> Optional[JsonValue]:
        """Value stored under key, or None when the key is absent."""
        return self.entries.get(key)

    def keys(self):
        return self.entries.keys()

    def items(self):
        return self.entries.items()

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __getitem__(self, key: str) -> JsonValue:
        return self.entries[key]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __repr__(self) -> str:
        return f"JsonObject({self.entries!r})"


NULL = JsonScalar(None)


def category_of(value: Optional[JsonValue]) -> str:
    """Category name of a value, "absent" for None."""
    if value is None:
        return "absent"
    return value.category

