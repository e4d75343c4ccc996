"""Domain exceptions."""

from moenster.domain.exceptions.base import MoensterError
from moenster.domain.exceptions.pattern import MalformedPatternError

__all__ = [
    "MalformedPatternError",
    "MoensterError",
]
