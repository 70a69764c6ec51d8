"""Shared fixtures for CLI tests."""

import pytest
from loguru import logger
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def drop_cli_log_sinks():
    """Remove sinks the CLI callback attached to the runner's captured stderr."""
    yield
    logger.remove()
