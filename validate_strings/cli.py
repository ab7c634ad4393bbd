"""
Validates the syntax of a ``"key" = "value";`` localization resource file.
Diagnostics are printed in the ``path:line:col: severity: message`` form that
build tools surface inline; the exit status is 0 when no error was found.
"""

from __future__ import annotations

from pathlib import Path

import click
from .config import build_config
from .exceptions import FileUnreadableError, UsageError
from .filesystem import get_max_file_size
from .validator import validate_file

__all__ = ["cli"]

USAGE_MESSAGE = (
    "validate-strings requires a single argument specifying the path of a *.strings file."
)


def _single_path(filepaths: tuple[str, ...]) -> str:
    if len(filepaths) != 1:
        raise UsageError(USAGE_MESSAGE)
    return filepaths[0]


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("filepaths", nargs=-1, metavar="FILEPATH")
@click.pass_context
def cli(ctx: click.Context, filepaths: tuple[str, ...]):
    """
    Entry point for validating a resource file.

    Args:
        ctx: Click context used to set the exit status.
        filepaths: Command-line paths; exactly one is required.

    Returns:
        None. Exits with status 1 when the file has syntax errors, cannot be
        read, the configuration is invalid, or the argument is missing.

    Examples:
        validate-strings en.lproj/Localizable.strings
    """
    try:
        filepath = _single_path(filepaths)
    except UsageError as error:
        click.echo(str(error))
        ctx.exit(1)

    try:
        config = build_config(Path(filepath).parent)
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        click.echo(str(error))
        ctx.exit(1)

    try:
        result = validate_file(filepath, config, max_file_size=max_file_size)
    except FileUnreadableError as error:
        click.echo(str(error))
        click.echo(error.reason)
        ctx.exit(1)

    ctx.exit(1 if result.failed else 0)


if __name__ == "__main__":
    cli()
