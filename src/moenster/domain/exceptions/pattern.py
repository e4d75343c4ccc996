"""Pattern parsing exceptions."""

from moenster.domain.exceptions.base import MoensterError


class MalformedPatternError(MoensterError):
    """Pattern text cannot be compiled.

    Raised when a bracket expression is opened but never closed.
    Never downgraded to a non-match.

    Attributes:
        pattern: Raw pattern bytes
        position: Offset of the offending byte (must be >= 0)
        reason: Why the pattern is malformed (must not be empty)
    """

    def __init__(self, pattern: bytes, position: int, reason: str) -> None:
        # FAIL-FIRST validation
        if pattern is None:
            raise TypeError("pattern must not be None")
        if position < 0:
            raise ValueError(f"position must be >= 0, got {position}")
        if not reason:
            raise ValueError("reason must not be empty")

        self.pattern = pattern
        self.position = position
        self.reason = reason
        super().__init__(f"Malformed pattern {pattern!r} at offset {position}: {reason}")
