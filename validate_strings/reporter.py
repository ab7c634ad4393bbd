"""Diagnostic formatting and emission."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import click

from .models import Diagnostic, Position, Severity

RELATED_KEY_MESSAGE = "related key is here"


def clamp_position(position: Position, lines: Sequence[str]) -> Position:
    """Clamp a position so it can be rendered against `lines`.

    Lines are kept within ``[1, len(lines)]`` and columns within
    ``[1, len(line) + 1]``.

    Examples:
        clamp_position(Position(9, 40), ["abc"])  # Position(line=1, column=4)
    """
    line = min(max(position.line, 1), max(len(lines), 1))
    source_line = lines[line - 1] if lines else ""
    column = min(max(position.column, 1), len(source_line) + 1)
    return Position(line, column)


def caret_line(source_line: str, column: int) -> str:
    """Build the marker line pointing at `column` of `source_line`.

    Tabs before the column are repeated so the caret stays aligned with
    tab-indented text; everything else becomes a space.

    Examples:
        caret_line('"a" x', 5)  # '    ^'
    """
    prefix = source_line[: column - 1]
    fill = "".join("\t" if char == "\t" else " " for char in prefix)
    return f"{fill}{' ' * (column - 1 - len(prefix))}^"


def format_diagnostic(diagnostic: Diagnostic, lines: Sequence[str]) -> list[str]:
    """Render a diagnostic as its header, source line, and caret line."""
    source_line = lines[diagnostic.line - 1] if 0 < diagnostic.line <= len(lines) else ""
    return [diagnostic.header, source_line, caret_line(source_line, diagnostic.column)]


class DiagnosticReporter:
    """Emit diagnostics for one file and remember whether any error occurred.

    Args:
        path: File path shown at the start of every diagnostic.
        lines: Line table of the file.
        echo: Callable used to write each output line; defaults to `click.echo`.

    Examples:
        reporter = DiagnosticReporter("en.strings", source.lines)
        reporter.error("expected ';'", Position(3, 12), related=Position(3, 1))
    """

    def __init__(
        self,
        path: str,
        lines: Sequence[str],
        echo: Callable[[str], None] | None = None,
    ):
        self.path = path
        self.lines = tuple(lines)
        self.echo = echo or click.echo
        self.diagnostics: list[Diagnostic] = []
        self.failed = False

    def report(
        self,
        severity: Severity,
        message: str,
        position: Position,
        related: Position | None = None,
    ) -> Diagnostic:
        """Emit one diagnostic, plus a related-key note when `related` is given."""
        position = clamp_position(position, self.lines)
        diagnostic = Diagnostic(self.path, severity, message, position.line, position.column)
        self._emit(diagnostic)

        if severity is Severity.ERROR:
            self.failed = True

        if related is not None:
            self.report(Severity.NOTE, RELATED_KEY_MESSAGE, related)

        return diagnostic

    def error(
        self, message: str, position: Position, related: Position | None = None
    ) -> Diagnostic:
        return self.report(Severity.ERROR, message, position, related)

    def note(self, message: str, position: Position) -> Diagnostic:
        return self.report(Severity.NOTE, message, position)

    def _emit(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        for line in format_diagnostic(diagnostic, self.lines):
            self.echo(line)
