"""CLI behavior tests for license-compliance."""
import json
from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner

from license_compliance import __version__
from license_compliance.cli import main
from license_compliance.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_VIOLATIONS


@pytest.fixture
def project(make_project: Callable[..., Path]) -> Path:
    """Project with one MIT and one GPL dependency."""
    return make_project(
        {
            "dependencies": {"a": "1.0.0"},
            "devDependencies": {"b": "1.0.0", "eslint-plugin-foo": "1.0.0"},
        },
        packages={
            "a": {"version": "1.0.0", "license": "MIT"},
            "b": {"version": "2.0.0", "license": "GPL-3.0-only"},
            "eslint-plugin-foo": {"version": "1.0.0", "license": "GPL-3.0-only"},
        },
    )


def test_cli_help(cli_runner: CliRunner) -> None:
    """Test that --help outputs usage information."""
    result = cli_runner.invoke(main, ["--help"])

    assert result.exit_code == 0
    assert "License Compliance" in result.output
    assert "check" in result.output
    assert "--version" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    """Test that --version outputs correct version."""
    result = cli_runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_check_help_lists_options(cli_runner: CliRunner) -> None:
    """Test that check --help lists the policy options."""
    result = cli_runner.invoke(main, ["check", "--help"])

    assert result.exit_code == 0
    for option in ("--allowed", "--disallowed", "--ignore", "--dependencies"):
        assert option in result.output


def test_check_passes_without_policy(cli_runner: CliRunner, project: Path) -> None:
    """Test that no policy means every package passes."""
    result = cli_runner.invoke(main, ["check", "--cwd", str(project)])

    assert result.exit_code == EXIT_SUCCESS
    assert "PASS" in result.output


def test_check_reports_violations(cli_runner: CliRunner, project: Path) -> None:
    """Test exit code and message when violations exist."""
    result = cli_runner.invoke(
        main,
        ["check", "--cwd", str(project), "--disallowed", "GPL-3.0-only"],
    )

    assert result.exit_code == EXIT_VIOLATIONS
    assert "License violations found: b (GPL-3.0-only)" in result.output
    assert "VIOLATIONS FOUND" in result.output


def test_check_ignore_option(cli_runner: CliRunner, project: Path) -> None:
    """Test that ignore patterns exempt packages."""
    result = cli_runner.invoke(
        main,
        [
            "check",
            "--cwd",
            str(project),
            "--disallowed",
            "GPL-3.0-only",
            "--ignore",
            "eslint-*",
            "--ignore",
            "b",
        ],
    )

    assert result.exit_code == EXIT_SUCCESS


def test_check_dependencies_option(cli_runner: CliRunner, project: Path) -> None:
    """Test that only the selected dependency group is scanned."""
    result = cli_runner.invoke(
        main,
        [
            "check",
            "--cwd",
            str(project),
            "--disallowed",
            "GPL-3.0-only",
            "--dependencies",
            "dependencies",
        ],
    )

    assert result.exit_code == EXIT_SUCCESS


def test_check_rejects_unknown_group(cli_runner: CliRunner, project: Path) -> None:
    """Test that Click rejects unknown dependency groups."""
    result = cli_runner.invoke(
        main, ["check", "--cwd", str(project), "--dependencies", "bundled"]
    )

    assert result.exit_code != EXIT_SUCCESS
    assert "bundled" in result.output


def test_check_reads_config_file(cli_runner: CliRunner, project: Path) -> None:
    """Test that .license-compliance.yaml in the start directory is used."""
    (project / ".license-compliance.yaml").write_text(
        "allowed:\n  - Apache-2.0\n"
    )

    result = cli_runner.invoke(main, ["check", "--cwd", str(project), "-q"])

    assert result.exit_code == EXIT_VIOLATIONS
    assert "a (MIT)" in result.output


def test_check_flags_extend_config(cli_runner: CliRunner, project: Path) -> None:
    """Test that command line values are added to file values."""
    config_file = project / "custom.yaml"
    config_file.write_text("disallowed:\n  - GPL-3.0-only\nignores:\n  - 'eslint-*'\n")

    result = cli_runner.invoke(
        main,
        [
            "check",
            "--cwd",
            str(project),
            "--config",
            str(config_file),
            "--ignore",
            "b",
        ],
    )

    assert result.exit_code == EXIT_SUCCESS


def test_check_invalid_config(cli_runner: CliRunner, project: Path) -> None:
    """Test that an invalid config file exits with error code."""
    config_file = project / "bad.yaml"
    config_file.write_text("dependencies:\n  - bundledDependencies\n")

    result = cli_runner.invoke(
        main, ["check", "--cwd", str(project), "--config", str(config_file)]
    )

    assert result.exit_code == EXIT_ERROR
    assert "ConfigurationError" in result.output


def test_check_missing_manifest(
    cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that a missing package.json fails the check."""
    monkeypatch.setattr(
        "license_compliance.scanner.find_manifest", lambda start_dir=None: None
    )

    result = cli_runner.invoke(main, ["check", "--cwd", str(tmp_path)])

    assert result.exit_code == EXIT_ERROR
    assert "License check failed: package.json not found" in result.output


def test_check_json_format(cli_runner: CliRunner, project: Path) -> None:
    """Test JSON output for a failing check."""
    result = cli_runner.invoke(
        main,
        [
            "check",
            "--cwd",
            str(project),
            "--disallowed",
            "GPL-3.0-only",
            "--format",
            "json",
        ],
    )

    assert result.exit_code == EXIT_VIOLATIONS
    data = json.loads(result.output)
    assert data["summary"]["status"] == "violations_found"
    assert [v["package"] for v in data["violations"]] == ["b", "eslint-plugin-foo"]
    assert data["errors"][0]["text"].startswith("License violations found:")


def test_check_quiet_warns_nothing_on_pass(
    cli_runner: CliRunner, project: Path
) -> None:
    """Test quiet output on a passing check."""
    result = cli_runner.invoke(main, ["check", "--cwd", str(project), "--quiet"])

    assert result.exit_code == EXIT_SUCCESS
    assert "PASS - 3 packages checked" in result.output
