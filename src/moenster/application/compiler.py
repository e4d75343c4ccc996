"""Pattern compiler: raw pattern bytes → directive tuple.

Syntax:
    *       any run of bytes, including none
    ?       exactly one byte
    [abc]   one byte from the set
    [a-z]   one byte in the inclusive range
    [^...]  one byte NOT in the set
    []      never matches
    [^]     any single byte
    \\]     literal ] inside brackets
    \\x     literal x outside brackets

Bytes, not characters: a multi-byte UTF-8 sequence is several
directives, one per byte.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from moenster.domain.directives import (
    AnyRun,
    AnySingle,
    ByteClass,
    ByteRange,
    Directive,
    Literal,
)
from moenster.domain.exceptions import MalformedPatternError

logger = logging.getLogger(__name__)

STAR = ord("*")
QUESTION = ord("?")
OPEN_BRACKET = ord("[")
CLOSE_BRACKET = ord("]")
CARET = ord("^")
DASH = ord("-")
BACKSLASH = ord("\\")


@dataclass(slots=True)
class _Reader:
    """Cursor over pattern bytes.

    Attributes:
        pattern: Raw pattern (read-only)
        pos: Offset of the next unread byte
    """

    pattern: bytes
    pos: int = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.pattern)

    def peek(self, offset: int = 0) -> int | None:
        index = self.pos + offset
        if index < len(self.pattern):
            return self.pattern[index]
        return None

    def take(self) -> int:
        value = self.pattern[self.pos]
        self.pos += 1
        return value


def compile_directives(pattern: bytes) -> tuple[Directive, ...]:
    """Compile pattern bytes into directives.

    FAIL-FIRST: raises for unterminated bracket expressions.

    Args:
        pattern: Raw pattern bytes (may be empty)

    Returns:
        Directives in pattern order. Consecutive ``*`` collapse to one AnyRun.

    Raises:
        TypeError: If pattern is not bytes
        MalformedPatternError: If a ``[`` has no closing ``]``
    """
    if not isinstance(pattern, bytes):
        raise TypeError(f"pattern must be bytes, got {type(pattern).__name__}")

    reader = _Reader(pattern)
    directives: list[Directive] = []

    while not reader.at_end():
        byte = reader.take()
        if byte == STAR:
            if not directives or not isinstance(directives[-1], AnyRun):
                directives.append(AnyRun())
        elif byte == QUESTION:
            directives.append(AnySingle())
        elif byte == OPEN_BRACKET:
            directives.append(_parse_class(reader, start=reader.pos - 1))
        elif byte == BACKSLASH and not reader.at_end():
            # Escaped byte; a trailing backslash stays literal
            directives.append(Literal(reader.take()))
        else:
            directives.append(Literal(byte))

    logger.debug("compiled %r into %d directive(s)", pattern, len(directives))
    return tuple(directives)


def _parse_class(reader: _Reader, start: int) -> ByteClass:
    """Parse a bracket body. Reader sits just after ``[``.

    Args:
        reader: Pattern cursor
        start: Offset of the opening ``[`` (for error reporting)

    Returns:
        ByteClass with members in pattern order

    Raises:
        MalformedPatternError: If the pattern ends before ``]``
    """
    negated = False
    if reader.peek() == CARET:
        reader.take()
        negated = True

    members: list[ByteRange] = []
    while True:
        if reader.at_end():
            raise MalformedPatternError(reader.pattern, start, "unterminated bracket expression")

        byte = reader.take()
        if byte == CLOSE_BRACKET:
            return ByteClass(negated=negated, members=tuple(members))

        low = _unescape(reader, byte)
        # A dash right before ] is a literal member
        if reader.peek() == DASH and reader.peek(1) not in (CLOSE_BRACKET, None):
            reader.take()
            high = _unescape(reader, reader.take())
            members.append(ByteRange(low, high))
        else:
            members.append(ByteRange(low, low))


def _unescape(reader: _Reader, byte: int) -> int:
    """Resolve ``\\]`` to ``]``; any other byte is itself."""
    if byte == BACKSLASH and reader.peek() == CLOSE_BRACKET:
        return reader.take()
    return byte
