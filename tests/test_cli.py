from __future__ import annotations

import textwrap
from pathlib import Path

from validate_strings.cli import USAGE_MESSAGE, cli
from validate_strings.filesystem import MAX_FILE_SIZE_ENV_VAR


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_cli_valid_file_exits_zero(cli_runner, tmp_path):
    target = _write(
        tmp_path,
        "Localizable.strings",
        """
        /* Settings */
        "title" = "Settings";
        "done" = "Done"; // button
        """,
    )

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.output == ""


def test_cli_reports_syntax_errors(cli_runner, tmp_path):
    target = _write(
        tmp_path,
        "Localizable.strings",
        """
        "a" = "b" "c" = "d";
        """,
    )

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert result.output.splitlines() == [
        f"{target}:1:11: error: expected ';'",
        '"a" = "b" "c" = "d";',
        "          ^",
        f"{target}:1:1: note: related key is here",
        '"a" = "b" "c" = "d";',
        "^",
    ]


def test_cli_reports_unterminated_value(cli_runner, tmp_path):
    target = tmp_path / "broken.strings"
    target.write_text('"a" = "b";\n"c" = "d', encoding="utf-8")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert f"{target}:2:9: error: end of file reached when expecting end of value" in result.output
    assert f"{target}:2:1: note: related key is here" in result.output


def test_cli_requires_an_argument(cli_runner):
    result = cli_runner.invoke(cli, [])

    assert result.exit_code == 1
    assert result.output == f"{USAGE_MESSAGE}\n"


def test_cli_rejects_extra_arguments(cli_runner, tmp_path):
    first = _write(tmp_path, "a.strings", '"a" = "b";\n')
    second = _write(tmp_path, "b.strings", '"a" = "b";\n')

    result = cli_runner.invoke(cli, [str(first), str(second)])

    assert result.exit_code == 1
    assert USAGE_MESSAGE in result.output


def test_cli_missing_file(cli_runner, tmp_path):
    missing = tmp_path / "missing.strings"

    result = cli_runner.invoke(cli, [str(missing)])

    assert result.exit_code == 1
    assert result.output.startswith(f"Unable to parse strings file: {missing}\n")


def test_cli_invalid_utf8(cli_runner, tmp_path):
    target = tmp_path / "latin1.strings"
    target.write_bytes(b'"caf\xe9" = "x";\n')

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "Unable to parse strings file" in result.output
    assert "Invalid UTF-8" in result.output


def test_cli_reads_config_from_pyproject(cli_runner, tmp_path):
    _write_pyproject(
        tmp_path,
        """
        [tool.validate-strings]
        strict_comments = true
        """,
    )
    target = _write(tmp_path, "Localizable.strings", '"a" = "b"; /x\n')

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert f"{target}:1:13: error: expected comment start" in result.output


def test_cli_reports_invalid_config(cli_runner, tmp_path):
    _write_pyproject(
        tmp_path,
        """
        [tool.validate-strings]
        max_file_size = 0
        """,
    )
    target = _write(tmp_path, "Localizable.strings", '"a" = "b";\n')

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "`max_file_size` must be a positive integer" in result.output


def test_cli_honours_size_limit_from_environment(cli_runner, tmp_path, monkeypatch):
    monkeypatch.setenv(MAX_FILE_SIZE_ENV_VAR, "4")
    target = _write(tmp_path, "Localizable.strings", '"a" = "b";\n')

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "exceeds the maximum allowed size of 4 bytes" in result.output


def test_cli_rejects_invalid_size_environment(cli_runner, tmp_path, monkeypatch):
    monkeypatch.setenv(MAX_FILE_SIZE_ENV_VAR, "lots")
    target = _write(tmp_path, "Localizable.strings", '"a" = "b";\n')

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}" in result.output


def test_cli_output_is_stable_across_runs(cli_runner, tmp_path):
    target = _write(tmp_path, "Localizable.strings", '"a" "b";\nx\n"c" = "d\n')

    first = cli_runner.invoke(cli, [str(target)])
    second = cli_runner.invoke(cli, [str(target)])

    assert first.exit_code == second.exit_code == 1
    assert first.output == second.output


def test_cli_unknown_option_reports_usage_on_stdout(cli_runner, tmp_path):
    target = _write(tmp_path, "Localizable.strings", '"a" = "b";\n')

    result = cli_runner.invoke(cli, ["--bogus", str(target)])

    assert result.exit_code == 1
    assert result.output == f"{USAGE_MESSAGE}\n"


def test_cli_accepts_path_starting_with_dash(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write(tmp_path, "-dash.strings", '"a" = "b" "c" = "d";\n')

    result = cli_runner.invoke(cli, ["-dash.strings"])

    assert result.exit_code == 1
    assert result.output.startswith("-dash.strings:1:11: error: expected ';'\n")
