"""Filesystem helpers for validate-strings."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import TextIO

from .config import ValidatorConfig
from .exceptions import FileUnreadableError
from .models import SourceText

MAX_FILE_SIZE_ENV_VAR = "VALIDATE_STRINGS_MAX_FILE_SIZE"
DEFAULT_MAX_FILE_SIZE = ValidatorConfig().max_file_size


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Resolve the maximum allowed file size.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed file size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["VALIDATE_STRINGS_MAX_FILE_SIZE"] = "204800"
        limit = get_max_file_size(default=102400)
    """
    env_value = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_size = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ValueError(error_message) from error

    if max_size <= 0:
        error_message = f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {max_size}."
        raise ValueError(error_message)

    return max_size


def collect_file_stat(filepath: Path) -> os.stat_result:
    """Return stat information for a regular file.

    Raises:
        FileUnreadableError: If the path is inaccessible or not a regular file.
    """
    try:
        stat_result = os.stat(filepath)
    except OSError as error:
        raise FileUnreadableError(str(filepath), f"Error accessing {filepath}: {error}") from error

    if not stat.S_ISREG(stat_result.st_mode):
        raise FileUnreadableError(str(filepath), f"{filepath} is not a regular file.")

    return stat_result


def enforce_file_size(stat_result: os.stat_result, max_size: int, filepath: Path):
    """Guard against files that exceed the configured maximum size.

    Raises:
        FileUnreadableError: If `stat_result.st_size` exceeds `max_size`.
    """
    if stat_result.st_size > max_size:
        error_message = f"{filepath} exceeds the maximum allowed size of {max_size} bytes."
        raise FileUnreadableError(str(filepath), error_message)


def safe_read(filepath: Path) -> TextIO:
    """Open a file for reading as UTF-8 with consistent error handling.

    A leading byte order mark is dropped; newlines are not translated.

    Raises:
        FileUnreadableError: If the path is missing, inaccessible, or not a file.

    Examples:
        with safe_read(Path("en.lproj/Localizable.strings")) as handle:
            content = handle.read()
    """
    try:
        return open(filepath, "r", encoding="utf-8-sig", newline="")
    except OSError as error:
        raise FileUnreadableError(str(filepath), f"Error accessing {filepath}: {error}") from error


def build_line_table(text: str) -> tuple[str, ...]:
    """Split text on ``\\n`` keeping empty interior and trailing lines.

    Examples:
        build_line_table('"a" = "b";\\n')  # ('"a" = "b";', '')
    """
    return tuple(text.split("\n"))


def load_source(filepath: Path | str, max_file_size: int | None = None) -> SourceText:
    """Read a resource file fully into memory and build its line table.

    The file handle is closed as soon as the read completes.

    Args:
        filepath: Path to the resource file.
        max_file_size: Size limit in bytes; defaults to the configured default.

    Returns:
        SourceText: Decoded content and line table.

    Raises:
        FileUnreadableError: If the file is missing, not a regular file, too
            large, unreadable, or not valid UTF-8.
    """
    filepath = Path(filepath)
    limit = DEFAULT_MAX_FILE_SIZE if max_file_size is None else max_file_size

    stat_result = collect_file_stat(filepath)
    enforce_file_size(stat_result, limit, filepath)

    try:
        with safe_read(filepath) as file:
            content = file.read()
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {filepath}: {error}"
        raise FileUnreadableError(str(filepath), error_message) from error
    except OSError as error:
        raise FileUnreadableError(str(filepath), f"Error reading {filepath}: {error}") from error

    return SourceText(text=content, lines=build_line_table(content))
