import pytest
from click.testing import CliRunner


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def output_lines() -> list[str]:
    """Collects lines written by a diagnostic reporter."""
    return []
