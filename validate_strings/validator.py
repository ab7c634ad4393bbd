"""Validate whole resource files or in-memory text."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .config import ValidatorConfig
from .filesystem import build_line_table, load_source
from .models import SourceText, ValidationResult
from .reporter import DiagnosticReporter
from .scanner import finish, scan


def validate_source(
    source: SourceText,
    path: str,
    config: ValidatorConfig | None = None,
    echo: Callable[[str], None] | None = None,
) -> ValidationResult:
    """Scan loaded content and collect its diagnostics.

    Args:
        source: Content and line table to validate.
        path: Name shown in diagnostics.
        config: Scanner options; defaults to a new `ValidatorConfig`.
        echo: Output callable for rendered diagnostics; defaults to `click.echo`.

    Returns:
        ValidationResult: Every emitted diagnostic and the failure flag.
    """
    reporter = DiagnosticReporter(path, source.lines, echo)
    ctx = scan(source.text, reporter, config)
    finish(ctx, reporter)
    return ValidationResult(diagnostics=list(reporter.diagnostics), failed=reporter.failed)


def validate_text(
    text: str,
    path: str = "<string>",
    config: ValidatorConfig | None = None,
    echo: Callable[[str], None] | None = None,
) -> ValidationResult:
    """Validate resource file content held in memory.

    Examples:
        result = validate_text('"greeting" = "Hello";\\n', echo=lambda line: None)
        assert not result.failed
    """
    source = SourceText(text=text, lines=build_line_table(text))
    return validate_source(source, path, config, echo)


def validate_file(
    filepath: Path | str,
    config: ValidatorConfig | None = None,
    echo: Callable[[str], None] | None = None,
    max_file_size: int | None = None,
) -> ValidationResult:
    """Load and validate a resource file.

    Args:
        filepath: Path to the resource file; shown verbatim in diagnostics.
        config: Scanner options; defaults to a new `ValidatorConfig`.
        echo: Output callable for rendered diagnostics; defaults to `click.echo`.
        max_file_size: Size limit override in bytes; defaults to
            `config.max_file_size`.

    Returns:
        ValidationResult: Every emitted diagnostic and the failure flag.

    Raises:
        FileUnreadableError: If the file cannot be read or decoded.
    """
    config = config or ValidatorConfig()
    limit = config.max_file_size if max_file_size is None else max_file_size
    source = load_source(filepath, limit)
    return validate_source(source, str(filepath), config, echo)
