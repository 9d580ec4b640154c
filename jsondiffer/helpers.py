from __future__ import annotations

from typing import Any, Optional

from .core.config import DiffConfig
from .core.differ import differentiate
from .core.redaction import RedactionPolicy
from .core.types import OutputMode
from .formats import from_python, to_python


def difference(
    before: Any,
    after: Any,
    output_mode: OutputMode = OutputMode.SYMBOLIC,
    show_original_value: bool = False,
    redaction: Optional[RedactionPolicy] = None,
) -> Any:
    """
    Diff two plain Python JSON documents.

    Both documents must be present; None here is JSON null. Use
    differentiate() directly to diff against an absent side.

    Returns:
        The difference as plain dicts and lists, or None when equivalent
    """
    config = DiffConfig(
        output_mode=output_mode,
        show_original_value=show_original_value,
        redaction=redaction if redaction is not None else RedactionPolicy.none(),
    )
    result = differentiate(from_python(before), from_python(after), config)
    if result is None:
        return None
    return to_python(result)
