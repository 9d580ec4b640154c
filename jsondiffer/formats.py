"""
Conversions between plain Python / JSON text and JsonValue trees.

    dict         -> JsonObject (insertion order kept)
    list/tuple   -> JsonArray
    str/int/float/bool/None -> JsonScalar

Text parsing and printing use the standard json module.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

from .core.values import JsonArray, JsonObject, JsonScalar, JsonValue


def from_python(obj: Any) -> JsonValue:
    """
    Convert a JSON-compatible Python object to a JsonValue.

    Nested structures are converted recursively. Non-string keys are
    stringified, as json.dumps would.

    Raises:
        TypeError: If obj holds a type with no JSON counterpart
        ValueError: If two keys collide once stringified, or a number is
            NaN or infinite
    """
    if isinstance(obj, JsonValue):
        return obj
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return JsonScalar(obj)
    if isinstance(obj, (list, tuple)):
        return JsonArray(tuple(from_python(item) for item in obj))
    if isinstance(obj, dict):
        entries = {}
        for k, v in obj.items():
            key = str(k)
            if key in entries:
                raise ValueError(f"Duplicate key after stringifying: {key!r}")
            entries[key] = from_python(v)
        return JsonObject(entries)
    raise TypeError(f"Cannot convert {type(obj).__name__} to a JSON value")


def to_python(value: JsonValue) -> Any:
    """Convert a JsonValue back to plain dicts, lists and scalars."""
    if isinstance(value, JsonScalar):
        return value.value
    if isinstance(value, JsonArray):
        return [to_python(item) for item in value]
    if isinstance(value, JsonObject):
        return {k: to_python(v) for k, v in value.items()}
    raise TypeError(f"Unknown JsonValue type: {type(value).__name__}")


def _reject_constant(name: str) -> None:
    raise ValueError(f"Non-finite number is not valid JSON: {name}")


def from_json(text: str) -> JsonValue:
    """Parse JSON text into a JsonValue."""
    return from_python(json.loads(text, parse_constant=_reject_constant))


def to_json(value: JsonValue, indent: int | None = 2) -> str:
    """Render a JsonValue as JSON text, keeping object key order."""
    return json.dumps(to_python(value), indent=indent, ensure_ascii=False)


def load(path: Union[str, Path]) -> JsonValue:
    """Read and parse a UTF-8 JSON file."""
    return from_json(Path(path).read_text(encoding="utf-8"))
