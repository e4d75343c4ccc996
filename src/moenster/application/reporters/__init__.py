"""Reporters for compiled patterns."""

from moenster.application.reporters.console import (
    ConsoleReporter,
    ReporterConfig,
    describe_directive,
)

__all__ = [
    "ConsoleReporter",
    "ReporterConfig",
    "describe_directive",
]
