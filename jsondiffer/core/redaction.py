"""
Value redaction for diff reports.

A redacted value is replaced by a fixed placeholder before it is written
into the diff output. Redaction only touches the emitted leaf: keys are
never rewritten and untouched sibling subtrees are never visited.

Scopes:
- NONE: values pass through unchanged
- ALL: every emitted value is replaced
- LISTED: values of the listed property names are replaced. An empty
  list redacts everything, same as ALL.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Optional

from .values import JsonScalar, JsonValue

DEFAULT_PLACEHOLDER = "***"


class RedactionScope(str, Enum):
    """Which emitted values a RedactionPolicy replaces."""

    NONE = "none"
    ALL = "all"
    LISTED = "listed"


@dataclass(frozen=True)
class RedactionPolicy:
    """
    Deterministic redaction policy.

    Attributes:
        scope: Which values are redacted
        keys: Property names redacted under the LISTED scope
        placeholder: Text written in place of a redacted value
    """

    scope: RedactionScope = RedactionScope.NONE
    keys: FrozenSet[str] = field(default_factory=frozenset)
    placeholder: str = DEFAULT_PLACEHOLDER

    def __post_init__(self):
        object.__setattr__(self, "scope", RedactionScope(self.scope))
        object.__setattr__(self, "keys", frozenset(self.keys))
        if self.keys and self.scope != RedactionScope.LISTED:
            raise ValueError("Redaction keys are only valid with the listed scope")

    @classmethod
    def none(cls) -> "RedactionPolicy":
        """Create a policy that never redacts."""
        return cls()

    @classmethod
    def redact_all(cls, placeholder: str = DEFAULT_PLACEHOLDER) -> "RedactionPolicy":
        """Create a policy that redacts every emitted value."""
        return cls(scope=RedactionScope.ALL, placeholder=placeholder)

    @classmethod
    def listed(
        cls, keys: Iterable[str], placeholder: str = DEFAULT_PLACEHOLDER
    ) -> "RedactionPolicy":
        """
        Create a policy that redacts the values of the given property names.

        An empty iterable redacts everything.
        """
        return cls(
            scope=RedactionScope.LISTED, keys=frozenset(keys), placeholder=placeholder
        )

    def applies_to(self, key: Optional[str]) -> bool:
        """Whether a value emitted under this property name is redacted."""
        if self.scope == RedactionScope.NONE or not key:
            return False
        if self.scope == RedactionScope.ALL:
            return True
        # An empty allow-list behaves like ALL
        return not self.keys or key in self.keys

    def apply(self, key: Optional[str], value: JsonValue) -> JsonValue:
        """
        Redact a value about to be emitted under key.

        Args:
            key: Logical property name (never the annotated output key)
            value: Resolved output value

        Returns:
            The placeholder scalar, or value unchanged
        """
        if self.applies_to(key):
            return JsonScalar(self.placeholder)
        return value
