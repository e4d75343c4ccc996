"""Public matching API.

Public exports:
    matches: Match bytes or str against a glob pattern
    stringmatch: str-only variant of matches
    compile_pattern: Pattern compilation
    CompiledPattern: Compiled pattern type
    matches_any/matches_all: Match against several compiled patterns
    render_pattern: Directive table for a compiled pattern
"""

from moenster.presentation.api.patterns import (
    CompiledPattern,
    compile_pattern,
    matches,
    matches_all,
    matches_any,
    render_pattern,
    stringmatch,
)

__all__ = [
    "CompiledPattern",
    "compile_pattern",
    "matches",
    "matches_all",
    "matches_any",
    "render_pattern",
    "stringmatch",
]
