"""
Structural JSON differentiator.

Walks two JsonValue trees depth-first and builds a new tree that holds
only the differing paths, with keys annotated by change kind.

Rules:
- Equal subtrees (including both sides absent) produce no output
- Values compared at the same position must share a category
  (object, array or scalar), checked at every level
- A scalar, or a side with nothing to pair against, yields the present
  side unwrapped
- Object keys are visited in first-seen order: keys of "before", then the
  keys only "after" has
- Arrays whose "before" elements are all containers are diffed by index;
  any other array is reported whole, as found on the "before" side
- Inputs are never mutated
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from .annotation import DiffBuilder
from .config import DiffConfig
from .errors import TypeMismatchError
from .types import ChangeKind
from .values import JsonArray, JsonObject, JsonValue, category_of

logger = logging.getLogger(__name__)


def differentiate(
    before: Optional[JsonValue],
    after: Optional[JsonValue],
    config: Optional[DiffConfig] = None,
) -> Optional[JsonValue]:
    """
    Compute the annotated difference between two JSON trees.

    Args:
        before: Original tree, or None when absent
        after: Changed tree, or None when absent
        config: Output mode, value selection and redaction (default config if None)

    Returns:
        The difference tree, or None when both trees are equivalent

    Raises:
        TypeMismatchError: If two values at the same position have
            incompatible shapes, at any depth
    """
    if config is None:
        config = DiffConfig.default()
    logger.debug(
        "Diffing %s against %s (mode=%s)",
        category_of(before),
        category_of(after),
        config.output_mode.value,
    )
    return _diff(before, after, config)


def _diff(
    before: Optional[JsonValue], after: Optional[JsonValue], config: DiffConfig
) -> Optional[JsonValue]:
    if before == after:
        return None

    if before is not None and after is not None and before.category != after.category:
        logger.debug(
            "Type mismatch: %s vs %s", before.category, after.category
        )
        raise TypeMismatchError(before.category, after.category)

    present = before if before is not None else after
    if present.is_scalar:
        return present
    if isinstance(present, JsonObject):
        return _diff_objects(before, after, config)
    return _diff_arrays(before, after, config)


def _union_keys(
    before: Optional[JsonObject], after: Optional[JsonObject]
) -> Iterator[str]:
    seen = set()
    for side in (before, after):
        if side is None:
            continue
        for key in side:
            if key not in seen:
                seen.add(key)
                yield key


def _diff_objects(
    before: Optional[JsonObject], after: Optional[JsonObject], config: DiffConfig
) -> Optional[JsonValue]:
    keys = list(_union_keys(before, after))
    if not keys:
        # One side absent, the other an empty object
        return before if before is not None else after

    redaction = config.redaction
    builder = DiffBuilder(config.output_mode)

    for key in keys:
        old = before.get(key) if before is not None else None
        new = after.get(key) if after is not None else None

        if old is None:
            builder.add(ChangeKind.ADDED, key, redaction.apply(key, new))
            continue

        if new is None:
            builder.add(ChangeKind.REMOVED, key, redaction.apply(key, old))
            continue

        if old.is_scalar and new.is_scalar:
            if old != new:
                value = old if config.show_original_value else new
                builder.add(ChangeKind.CHANGED, key, redaction.apply(key, value))
            continue

        nested = _diff(old, new, config)
        if nested is not None:
            builder.add(ChangeKind.CHANGED, key, nested)

    return builder.build()


def _diff_arrays(
    before: Optional[JsonArray], after: Optional[JsonArray], config: DiffConfig
) -> Optional[JsonValue]:
    if before is None:
        return after
    if after is None and not len(before):
        return before

    if not all(item.is_container for item in before):
        return before

    after_len = len(after) if after is not None else 0
    items: List[JsonValue] = []
    for i in range(max(len(before), after_len)):
        nested = _diff(before.get(i), after.get(i) if after is not None else None, config)
        if nested is not None:
            items.append(nested)

    if not items:
        return None
    return JsonArray(tuple(items))


class Differentiator:
    """
    Differentiator bound to a fixed configuration.

    Example:
        differ = Differentiator(DiffConfig.detailed())
        result = differ.diff(before, after)
    """

    def __init__(self, config: Optional[DiffConfig] = None):
        self.config = config if config is not None else DiffConfig.default()

    def diff(
        self, before: Optional[JsonValue], after: Optional[JsonValue]
    ) -> Optional[JsonValue]:
        """Diff two trees with this differentiator's configuration."""
        return differentiate(before, after, self.config)
