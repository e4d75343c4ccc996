"""Directive value objects.

A compiled pattern is a tuple of directives. Each directive either
consumes exactly one subject byte (Literal, AnySingle, ByteClass)
or marks a lazily grown run of bytes (AnyRun).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

BYTE_MIN = 0
BYTE_MAX = 255


class DirectiveKind(Enum):
    """Directive variant tag."""

    LITERAL = auto()  # one specific byte
    ANY_SINGLE = auto()  # ?
    ANY_RUN = auto()  # *
    CLASS = auto()  # [...]


def _check_byte(name: str, value: int) -> None:
    """Validate a byte value. FAIL-FIRST."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if not BYTE_MIN <= value <= BYTE_MAX:
        raise ValueError(f"{name} must be in {BYTE_MIN}..{BYTE_MAX}, got {value}")


@dataclass(frozen=True, slots=True)
class Literal:
    """Match exactly one specific byte.

    Attributes:
        byte: Byte value (0..255)
    """

    byte: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _check_byte("byte", self.byte)

    @property
    def kind(self) -> DirectiveKind:
        return DirectiveKind.LITERAL

    def accepts(self, value: int) -> bool:
        return value == self.byte


@dataclass(frozen=True, slots=True)
class AnySingle:
    """Match exactly one arbitrary byte."""

    @property
    def kind(self) -> DirectiveKind:
        return DirectiveKind.ANY_SINGLE

    def accepts(self, value: int) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class AnyRun:
    """Match zero or more arbitrary bytes."""

    @property
    def kind(self) -> DirectiveKind:
        return DirectiveKind.ANY_RUN


@dataclass(frozen=True, slots=True)
class ByteRange:
    """Inclusive range of byte values.

    A range with low > high is empty: it contains no byte.

    Attributes:
        low: First byte value of the range
        high: Last byte value of the range
    """

    low: int
    high: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _check_byte("low", self.low)
        _check_byte("high", self.high)

    @property
    def is_empty(self) -> bool:
        return self.low > self.high

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.low <= value <= self.high


@dataclass(frozen=True, slots=True)
class ByteClass:
    """Match one byte by set membership.

    Membership is the union of ``members``. With ``negated`` the result
    is inverted, so an empty negated class accepts every byte while an
    empty plain class accepts none.

    Attributes:
        negated: True for ``[^...]``
        members: Inclusive byte ranges, in pattern order
    """

    negated: bool
    members: tuple[ByteRange, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.members, tuple):
            raise TypeError(f"members must be tuple, got {type(self.members).__name__}")

    @property
    def kind(self) -> DirectiveKind:
        return DirectiveKind.CLASS

    def accepts(self, value: int) -> bool:
        found = any(value in member for member in self.members)
        return found != self.negated


# Compiled pattern unit
type Directive = Literal | AnySingle | AnyRun | ByteClass
