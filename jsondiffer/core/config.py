from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .redaction import DEFAULT_PLACEHOLDER, RedactionPolicy
from .types import OutputMode

_CONFIG_KEYS = {"output_mode", "show_original_value", "redact", "placeholder"}


@dataclass(frozen=True)
class DiffConfig:
    """
    Configuration for a diff call.

    Attributes:
        output_mode: How change kinds are encoded into output keys.
        show_original_value: For changed scalars, emit the "before" value
            instead of the "after" value.
        redaction: Which emitted values are replaced by a placeholder.
    """

    output_mode: OutputMode = OutputMode.SYMBOLIC
    show_original_value: bool = False
    redaction: RedactionPolicy = field(default_factory=RedactionPolicy.none)

    def __post_init__(self):
        object.__setattr__(self, "output_mode", OutputMode(self.output_mode))

    @classmethod
    def default(cls) -> "DiffConfig":
        """Create default config: symbolic keys, "after" values, no redaction."""
        return cls()

    @classmethod
    def plain(cls) -> "DiffConfig":
        """Create a config that leaves output keys unannotated."""
        return cls(output_mode=OutputMode.PLAIN)

    @classmethod
    def detailed(cls) -> "DiffConfig":
        """Create a config that groups changes under added/removed/changed."""
        return cls(output_mode=OutputMode.DETAILED)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DiffConfig":
        """
        Build a config from a config-file mapping.

        Recognized keys:
            output_mode: "symbolic", "plain" or "detailed"
            show_original_value: bool
            redact: true (redact all), a list of property names, or false
            placeholder: replacement text for redacted values

        Raises:
            ValueError: On unknown keys or invalid values
        """
        unknown = set(data) - _CONFIG_KEYS
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        mode = data.get("output_mode", OutputMode.SYMBOLIC.value)
        try:
            output_mode = OutputMode(mode)
        except ValueError:
            choices = ", ".join(m.value for m in OutputMode)
            raise ValueError(
                f"Invalid output_mode {mode!r}; expected one of: {choices}"
            ) from None

        show_original = data.get("show_original_value", False)
        if not isinstance(show_original, bool):
            raise ValueError("show_original_value must be a boolean")

        placeholder = data.get("placeholder", DEFAULT_PLACEHOLDER)
        if not isinstance(placeholder, str):
            raise ValueError("placeholder must be a string")

        redact = data.get("redact", False)
        if redact is True:
            redaction = RedactionPolicy.redact_all(placeholder)
        elif redact is False or redact is None:
            redaction = RedactionPolicy(placeholder=placeholder)
        elif isinstance(redact, list) and all(isinstance(k, str) for k in redact):
            redaction = RedactionPolicy.listed(redact, placeholder)
        else:
            raise ValueError("redact must be a boolean or a list of property names")

        return cls(
            output_mode=output_mode,
            show_original_value=show_original,
            redaction=redaction,
        )
