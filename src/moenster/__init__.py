"""moenster - anchored glob matching over bytes.

mønster (n) - pattern.
"""

__version__ = "0.1.0"

from moenster.application.reporters import ReporterConfig
from moenster.domain.exceptions import MalformedPatternError, MoensterError
from moenster.presentation.api import (
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
    "MalformedPatternError",
    "MoensterError",
    "ReporterConfig",
    "__version__",
    "compile_pattern",
    "matches",
    "matches_all",
    "matches_any",
    "render_pattern",
    "stringmatch",
]
