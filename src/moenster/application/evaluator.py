"""Anchored directive evaluator.

Iterative backtracking with a single bookmark at the most recent ``*``.
On a mismatch the star absorbs one more subject byte and scanning
resumes just after it. No recursion, O(len(directives) * len(subject)).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from moenster.domain.directives import AnyRun

if TYPE_CHECKING:
    from collections.abc import Sequence

    from moenster.domain.directives import Directive

_UNSET = -1


def evaluate(directives: Sequence[Directive], subject: bytes) -> bool:
    """Check whether directives match the whole subject.

    Args:
        directives: Compiled pattern
        subject: Bytes to match, never decoded

    Returns:
        True if directives account for every subject byte
    """
    d_len = len(directives)
    s_len = len(subject)
    di = 0
    si = 0
    # Bookmark: directive index after the last *, subject index it resumes at
    star_di = _UNSET
    star_si = _UNSET

    while si < s_len:
        if di < d_len:
            directive = directives[di]
            if isinstance(directive, AnyRun):
                di += 1
                star_di = di
                star_si = si
                continue
            if directive.accepts(subject[si]):
                di += 1
                si += 1
                continue

        if star_di == _UNSET:
            return False

        # Grow the star by one byte and retry
        star_si += 1
        di = star_di
        si = star_si

    # Subject exhausted: only trailing stars may remain
    while di < d_len and isinstance(directives[di], AnyRun):
        di += 1
    return di == d_len
