# topmark:header:start
#
#   project      : PDFMinion
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for invoking PDFMinion through Click's test runner.

Commands read ``./pdfminion.yaml`` from the working directory, so tests that
depend on a config file should use the ``isolation`` fixture (an empty
temporary CWD) and write the file there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from pdfminion.cli.exit_codes import ExitCode
from pdfminion.cli.main import cli
from pdfminion.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reinstall the test-session logging after the CLI reconfigured it."""
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI with colors disabled.

    Args:
        argv (Sequence[str]): Arguments after the program name, e.g. ``["settings"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, ["--no-color", *argv])


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
