"""Console reporter: compiled pattern → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from moenster.domain.directives import AnyRun, AnySingle, ByteClass, ByteRange, Literal

if TYPE_CHECKING:
    from collections.abc import Sequence

    from moenster.domain.directives import Directive


@dataclass(frozen=True, slots=True)
class ReporterConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        color: Emit ANSI styles. False gives plain text.
        width: Console width in columns (must be > 0).
        show_summary: Show directive count line under the table.
    """

    color: bool = True
    width: int = 100
    show_summary: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


def format_byte(value: int) -> str:
    """Format byte as printable char or hex escape."""
    if 0x21 <= value <= 0x7E:
        return chr(value)
    return f"\\x{value:02x}"


def _format_range(member: ByteRange) -> str:
    if member.low == member.high:
        return format_byte(member.low)
    text = f"{format_byte(member.low)}-{format_byte(member.high)}"
    if member.is_empty:
        return f"{text} (empty)"
    return text


def describe_directive(directive: Directive) -> tuple[str, str]:
    """Describe directive as (kind label, meaning)."""
    match directive:
        case Literal():
            return "literal", format_byte(directive.byte)
        case AnySingle():
            return "any-single", "exactly one byte"
        case AnyRun():
            return "any-run", "zero or more bytes"
        case ByteClass(negated=negated, members=members):
            label = "class (negated)" if negated else "class"
            if not members:
                return label, "any single byte" if negated else "nothing"
            listed = ", ".join(_format_range(m) for m in members)
            return label, f"none of {listed}" if negated else f"one of {listed}"
    raise TypeError(f"unknown directive: {type(directive).__name__}")


class ConsoleReporter:
    """Console reporter: one table row per directive.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ReporterConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ReporterConfig()

    def report(self, pattern: bytes, directives: Sequence[Directive]) -> str:
        """Format compiled pattern as rich formatted string.

        Args:
            pattern: Original pattern bytes.
            directives: Directives compiled from pattern.

        Returns:
            Formatted string with title, table and optional summary.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        table = Table(title=escape(f"Pattern {pattern!r}"))
        table.add_column("#", justify="right", style="dim")
        table.add_column("Directive", style="cyan")
        table.add_column("Matches")

        for index, directive in enumerate(directives):
            label, meaning = describe_directive(directive)
            table.add_row(str(index), label, escape(meaning))

        console.print(table)

        if self._config.show_summary:
            console.print(f"[bold]Directives:[/bold] {len(directives)}")

        return output.getvalue()
