"""Domain layer: directive value objects and exceptions."""

from moenster.domain.directives import (
    AnyRun,
    AnySingle,
    ByteClass,
    ByteRange,
    Directive,
    DirectiveKind,
    Literal,
)
from moenster.domain.exceptions import MalformedPatternError, MoensterError

__all__ = [
    "AnyRun",
    "AnySingle",
    "ByteClass",
    "ByteRange",
    "Directive",
    "DirectiveKind",
    "Literal",
    "MalformedPatternError",
    "MoensterError",
]
