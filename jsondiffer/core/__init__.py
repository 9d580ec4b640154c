"""Core types and logic for jsondiffer."""

from .annotation import DiffBuilder, annotate_key
from .config import DiffConfig
from .differ import Differentiator, differentiate
from .errors import DiffError, TypeMismatchError
from .redaction import DEFAULT_PLACEHOLDER, RedactionPolicy, RedactionScope
from .types import ChangeKind, OutputMode
from .values import NULL, JsonArray, JsonObject, JsonScalar, JsonValue, category_of

__all__ = [
    # Value model
    "JsonValue",
    "JsonScalar",
    "JsonArray",
    "JsonObject",
    "NULL",
    "category_of",
    # Configuration
    "ChangeKind",
    "OutputMode",
    "DiffConfig",
    # Redaction
    "DEFAULT_PLACEHOLDER",
    "RedactionPolicy",
    "RedactionScope",
    # Annotation
    "DiffBuilder",
    "annotate_key",
    # Differentiator
    "Differentiator",
    "differentiate",
    # Exceptions
    "DiffError",
    "TypeMismatchError",
]
