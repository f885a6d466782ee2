# topmark:header:start
#
#   project      : PDFMinion
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

from pdfminion.constants import PDFMINION_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_version() -> None:
    """It should print the installed version string and nothing else."""
    result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.output.strip() == PDFMINION_VERSION


@mark_cli
def test_verbose_version_has_heading() -> None:
    result = run_cli(["-v", "version"])

    assert_SUCCESS(result)
    assert "PDFMinion version:" in result.output
    assert PDFMINION_VERSION in result.output
