from .core import (
    # Value model
    NULL,
    JsonArray,
    JsonObject,
    JsonScalar,
    JsonValue,
    # Configuration
    ChangeKind,
    DiffConfig,
    OutputMode,
    # Redaction
    RedactionPolicy,
    RedactionScope,
    # Differentiator
    Differentiator,
    differentiate,
    # Exceptions
    DiffError,
    TypeMismatchError,
)
from .formats import from_json, from_python, load, to_json, to_python
from .helpers import difference
from .version import JSONDIFFER_VERSION

__version__ = JSONDIFFER_VERSION

__all__ = [
    # Version
    "JSONDIFFER_VERSION",
    # Value model
    "JsonValue",
    "JsonScalar",
    "JsonArray",
    "JsonObject",
    "NULL",
    # Configuration
    "ChangeKind",
    "OutputMode",
    "DiffConfig",
    # Redaction
    "RedactionPolicy",
    "RedactionScope",
    # Differentiator
    "Differentiator",
    "differentiate",
    "difference",
    # Formats
    "from_python",
    "to_python",
    "from_json",
    "to_json",
    "load",
    # Exceptions
    "DiffError",
    "TypeMismatchError",
]
