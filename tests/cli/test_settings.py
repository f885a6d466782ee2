# topmark:header:start
#
#   project      : PDFMinion
#   file         : test_settings.py
#   file_relpath : tests/cli/test_settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `settings` command and the layered configuration it shows."""

from __future__ import annotations

from typing import TYPE_CHECKING

import yaml

from pdfminion.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

    import pytest
    from click.testing import Result


def _row(output: str, label: str) -> str:
    """Return the value column of the settings row starting with ``label``."""
    for line in output.splitlines():
        if line.strip().startswith(label):
            return line.split(":", 1)[1].strip()
    raise AssertionError(f"no row {label!r} in:\n{output}")


def _yaml(argv: list[str]) -> dict[str, object]:
    result: Result = run_cli(["settings", "--format", "yaml", *argv])
    assert_SUCCESS(result)
    return yaml.safe_load(result.output)


@mark_cli
def test_settings_shows_defaults(isolation: Path) -> None:
    result: Result = run_cli(["settings"])

    assert_SUCCESS(result)
    assert "PDFMinion settings" in result.output
    assert _row(result.output, "Language") == "en"
    assert _row(result.output, "Source directory").startswith("_pdfs")
    assert _row(result.output, "Chapter prefix") == "Chapter"
    assert _row(result.output, "Evenify") == "true"
    assert "[invalid]" in _row(result.output, "Config file")


@mark_cli
def test_language_option_selects_texts(isolation: Path) -> None:
    result: Result = run_cli(["settings", "--language", "de"])

    assert_SUCCESS(result)
    assert _row(result.output, "Language") == "de"
    assert _row(result.output, "Chapter prefix") == "Kapitel"
    assert _row(result.output, "Page prefix") == "Seite"


@mark_cli
def test_system_locale_selects_defaults(isolation: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LANG", "de_DE.UTF-8")

    data = _yaml([])

    assert data["language"] == "de"
    assert data["chapterPrefix"] == "Kapitel"


@mark_cli
def test_unsupported_system_locale_falls_back(
    isolation: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("LANG", "fr_FR.UTF-8")

    result: Result = run_cli(["-v", "settings"])

    assert_SUCCESS(result)
    assert _row(result.output, "Language") == "en"
    assert "falling back to 'en'" in result.output


@mark_cli
def test_config_file_in_cwd_is_applied(isolation: Path) -> None:
    (isolation / "pdfminion.yaml").write_text(
        "target: /out\nmerge: true\nchapterPrefix: Teil\n", encoding="utf-8"
    )

    data = _yaml([])

    assert data["target"] == "/out"
    assert data["merge"] is True
    assert data["chapterPrefix"] == "Teil"


@mark_cli
def test_cli_beats_config_file(isolation: Path) -> None:
    (isolation / "pdfminion.yaml").write_text("force: true\nsource: from-file\n", encoding="utf-8")

    data = _yaml(["--no-force", "--source", "from-cli"])

    assert data["force"] is False
    assert data["source"] == "from-cli"


@mark_cli
def test_unset_cli_flags_keep_file_values(isolation: Path) -> None:
    (isolation / "pdfminion.yaml").write_text(
        "force: true\nevenify: false\n", encoding="utf-8"
    )

    data = _yaml(["--merge"])

    assert data["force"] is True
    assert data["evenify"] is False
    assert data["merge"] is True


@mark_cli
def test_cli_text_beats_cli_language(isolation: Path) -> None:
    data = _yaml(["--language", "de", "--chapter-prefix", "Custom"])

    assert data["language"] == "de"
    assert data["chapterPrefix"] == "Custom"
    assert data["pagePrefix"] == "Seite"


@mark_cli
def test_file_language_then_cli_text(isolation: Path) -> None:
    (isolation / "pdfminion.yaml").write_text("language: de\n", encoding="utf-8")

    data = _yaml(["--page-prefix", "S."])

    assert data["chapterPrefix"] == "Kapitel"
    assert data["pagePrefix"] == "S."


@mark_cli
def test_no_config_ignores_file(isolation: Path) -> None:
    (isolation / "pdfminion.yaml").write_text("force: true\n", encoding="utf-8")

    data = _yaml(["--no-config"])

    assert data["force"] is False


@mark_cli
def test_explicit_config_path(isolation: Path) -> None:
    cfg: Path = isolation / "custom.yaml"
    cfg.write_text("mergeFileName: all.pdf\n", encoding="utf-8")

    result: Result = run_cli(["settings", "--config", str(cfg)])

    assert_SUCCESS(result)
    assert _row(result.output, "Merge file name") == "all.pdf"
    assert "custom.yaml" in _row(result.output, "Config file")
    assert "[ok]" in _row(result.output, "Config file")


@mark_cli
def test_missing_config_path_exits_file_not_found(isolation: Path) -> None:
    result: Result = run_cli(["settings", "--config", "absent.yaml"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


@mark_cli
def test_invalid_config_exits_config_error(isolation: Path) -> None:
    (isolation / "pdfminion.yaml").write_text("source: [unclosed\n", encoding="utf-8")

    result: Result = run_cli(["settings"])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


@mark_cli
def test_unknown_key_is_reported_in_verbose_mode(isolation: Path) -> None:
    (isolation / "pdfminion.yaml").write_text("colour: blue\n", encoding="utf-8")

    quiet: Result = run_cli(["settings"])
    verbose: Result = run_cli(["-v", "settings"])

    assert_SUCCESS(quiet)
    assert_SUCCESS(verbose)
    assert "colour" not in quiet.output
    assert "colour" in verbose.output


@mark_cli
def test_verbose_sets_verbose_setting(isolation: Path) -> None:
    result: Result = run_cli(["-v", "settings"])

    assert_SUCCESS(result)
    assert _row(result.output, "Verbose") == "true"


@mark_cli
def test_path_validity_marks(isolation: Path) -> None:
    (isolation / "_pdfs").mkdir()

    result: Result = run_cli(["settings"])

    assert_SUCCESS(result)
    assert "[ok]" in _row(result.output, "Source directory")
    assert "[ok]" in _row(result.output, "Target directory")


@mark_cli
def test_yaml_output_reloads(isolation: Path) -> None:
    """Saving the YAML output as the config file reproduces the settings."""
    first = _yaml(["--language", "de", "--separator", " | ", "--merge"])
    (isolation / "pdfminion.yaml").write_text(yaml.safe_dump(first), encoding="utf-8")

    second = _yaml([])

    assert second == first


@mark_cli
def test_no_config_does_not_report_ignored_file(isolation: Path) -> None:
    """A skipped ``pdfminion.yaml`` must not show up as the config in use."""
    (isolation / "pdfminion.yaml").write_text("target: /from-file\n", encoding="utf-8")

    result: Result = run_cli(["settings", "--no-config"])

    assert_SUCCESS(result)
    row: str = _row(result.output, "Config file")
    assert "[ok]" not in row
    assert row.startswith("(none)")
    assert _row(result.output, "Target directory").startswith("_target")


@mark_cli
def test_no_file_found_reports_none(isolation: Path) -> None:
    result: Result = run_cli(["settings"])

    assert_SUCCESS(result)
    assert _row(result.output, "Config file") == "(none)  [invalid]"
