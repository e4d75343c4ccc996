"""Glob pattern matching over bytes.

Anchored: a pattern must account for the whole subject.

Syntax:
    *       any run of bytes, including none
    ?       exactly one byte
    [abc]   one byte from the set (ranges: [a-z])
    [^abc]  one byte not in the set
    []      never matches
    [^]     any single byte
    \\]     literal ] inside brackets
    \\x     literal x outside brackets

str arguments are UTF-8 encoded first; ? and [...] then consume
single bytes, not characters.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from moenster.application.compiler import compile_directives
from moenster.application.evaluator import evaluate
from moenster.application.reporters.console import ConsoleReporter, ReporterConfig
from moenster.domain.directives import Directive

type ByteInput = bytes | bytearray | memoryview | str

_CACHE_SIZE = 256


def to_bytes(value: ByteInput, name: str) -> bytes:
    """Normalize pattern or subject to bytes.

    Args:
        value: Bytes-like or str (UTF-8 encoded)
        name: Argument name for error messages

    Returns:
        Immutable bytes

    Raises:
        TypeError: If value is None or not bytes-like/str
    """
    if value is None:
        raise TypeError(f"{name} must not be None")
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{name} must be bytes or str, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Compiled glob pattern.

    Immutable value object containing original pattern and its directives.
    Safe to share between threads.

    Attributes:
        original: Original pattern bytes
        directives: Directives compiled from original
    """

    original: bytes
    directives: tuple[Directive, ...]

    def match(self, subject: ByteInput) -> bool:
        """Check if subject matches pattern.

        Args:
            subject: Bytes (or str, UTF-8 encoded) to match

        Returns:
            True if the whole subject matches

        Raises:
            TypeError: If subject is None or of unsupported type
        """
        return evaluate(self.directives, to_bytes(subject, "subject"))

    def describe(self, config: ReporterConfig | None = None) -> str:
        """Render directives as a table (see ConsoleReporter)."""
        return ConsoleReporter(config).report(self.original, self.directives)

    def __str__(self) -> str:
        """Return original pattern, decoded for display."""
        return self.original.decode("utf-8", errors="backslashreplace")

    def __repr__(self) -> str:
        """Return repr with original pattern."""
        return f"CompiledPattern({self.original!r})"


@lru_cache(maxsize=_CACHE_SIZE)
def _compile_cached(pattern: bytes) -> CompiledPattern:
    return CompiledPattern(original=pattern, directives=compile_directives(pattern))


def compile_pattern(pattern: ByteInput) -> CompiledPattern:
    """Compile glob pattern for repeated matching.

    FAIL-FIRST: raises MalformedPatternError for invalid patterns.

    Args:
        pattern: Glob pattern (empty pattern matches only empty subject)

    Returns:
        CompiledPattern with original and directives

    Raises:
        TypeError: If pattern is None or of unsupported type
        MalformedPatternError: If a bracket expression is not closed
    """
    return _compile_cached(to_bytes(pattern, "pattern"))


def matches(pattern: ByteInput, subject: ByteInput) -> bool:
    """Check if subject matches glob pattern as a whole.

    Args:
        pattern: Glob pattern
        subject: Bytes (or str) to match

    Returns:
        True if subject matches pattern

    Raises:
        TypeError: If pattern or subject is None or of unsupported type
        MalformedPatternError: If a bracket expression is not closed
    """
    return compile_pattern(pattern).match(subject)


def stringmatch(pattern: str, subject: str) -> bool:
    """String variant of matches().

    Example:
        >>> stringmatch("m*nster", "mønster")
        True
    """
    return matches(pattern, subject)


def matches_any(subject: ByteInput, patterns: tuple[CompiledPattern, ...]) -> bool:
    """Check if subject matches any of the patterns.

    Args:
        subject: Bytes (or str) to match
        patterns: Compiled patterns to check

    Returns:
        True if subject matches at least one pattern
    """
    data = to_bytes(subject, "subject")
    return any(evaluate(p.directives, data) for p in patterns)


def matches_all(subject: ByteInput, patterns: tuple[CompiledPattern, ...]) -> bool:
    """Check if subject matches all patterns.

    Args:
        subject: Bytes (or str) to match
        patterns: Compiled patterns to check

    Returns:
        True if subject matches all patterns (empty patterns = True)
    """
    data = to_bytes(subject, "subject")
    return all(evaluate(p.directives, data) for p in patterns)


def render_pattern(pattern: CompiledPattern, config: ReporterConfig | None = None) -> str:
    """Render compiled pattern as a directive table.

    Args:
        pattern: Compiled pattern to describe
        config: Reporter configuration. Uses defaults if None.

    Returns:
        Formatted string (rich markup already rendered)
    """
    return pattern.describe(config)
