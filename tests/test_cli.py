# SPDX-License-Identifier: MIT
"""Tests for the semver-order command line interface."""

from __future__ import annotations

import json

from click.testing import CliRunner

from semver_order import __version__
from semver_order.cli import cli


class TestValidateCommand:
    """Tests for semver-order validate."""

    def test_all_valid(self, cli_runner: CliRunner) -> None:
        """Test validating only valid versions."""
        result = cli_runner.invoke(cli, ["validate", "1.0.0", "1.0.0-rc.1+build"])

        assert result.exit_code == 0
        assert "1.0.0: valid" in result.output
        assert "1.0.0-rc.1+build: valid" in result.output

    def test_some_invalid(self, cli_runner: CliRunner) -> None:
        """Test that any invalid version fails the command."""
        result = cli_runner.invoke(cli, ["validate", "1.0.0", "1.0"])

        assert result.exit_code == 1
        assert "1.0.0: valid" in result.output
        assert "1.0: invalid" in result.output

    def test_requires_argument(self, cli_runner: CliRunner) -> None:
        """Test that at least one version is required."""
        result = cli_runner.invoke(cli, ["validate"])

        assert result.exit_code == 2

    def test_verbose_summary(self, cli_runner: CliRunner) -> None:
        """Test that --verbose reports a summary."""
        result = cli_runner.invoke(cli, ["-v", "validate", "1.0.0", "1b.0.0"])

        assert result.exit_code == 1
        assert "Checked 2 version(s), 1 invalid" in result.output


class TestCompareCommand:
    """Tests for semver-order compare."""

    def test_less(self, cli_runner: CliRunner) -> None:
        """Test a lower first version."""
        result = cli_runner.invoke(cli, ["compare", "1.0.0-alpha", "1.0.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.0.0-alpha < 1.0.0"

    def test_equal_ignores_build(self, cli_runner: CliRunner) -> None:
        """Test that build metadata does not affect the result."""
        result = cli_runner.invoke(cli, ["compare", "1.2.3+a", "1.2.3+b"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.2.3+a == 1.2.3+b"

    def test_numeric(self, cli_runner: CliRunner) -> None:
        """Test --numeric output."""
        result = cli_runner.invoke(cli, ["compare", "--numeric", "2.0.0", "1.0.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "1"

    def test_long_numbers(self, cli_runner: CliRunner) -> None:
        """Test numbers longer than int() accepts from a string."""
        huge = "9" * 5000
        result = cli_runner.invoke(cli, ["-v", "compare", "--numeric", f"{huge}.0.0", f"1.0.0-a.{huge}"])

        assert result.exit_code == 0
        assert result.output.strip().splitlines()[-1] == "1"

    def test_invalid(self, cli_runner: CliRunner) -> None:
        """Test that an invalid version exits with an error."""
        result = cli_runner.invoke(cli, ["compare", "1.0.0", "1..0"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "1..0" in result.output


class TestSortCommand:
    """Tests for semver-order sort."""

    def test_sort_arguments(self, cli_runner: CliRunner) -> None:
        """Test sorting versions given as arguments."""
        result = cli_runner.invoke(cli, ["sort", "2.0.0", "1.0.0", "1.0.0-beta.11", "1.0.0-beta.2"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["1.0.0-beta.2", "1.0.0-beta.11", "1.0.0", "2.0.0"]

    def test_sort_reverse(self, cli_runner: CliRunner) -> None:
        """Test descending order."""
        result = cli_runner.invoke(cli, ["sort", "--reverse", "1.0.0-rc.1", "2.0.0", "1.0.0"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["2.0.0", "1.0.0", "1.0.0-rc.1"]

    def test_sort_stdin(self, cli_runner: CliRunner, precedence_chain: list[str]) -> None:
        """Test reading versions from stdin."""
        stdin = "\n".join(reversed(precedence_chain)) + "\n\n"
        result = cli_runner.invoke(cli, ["sort"], input=stdin)

        assert result.exit_code == 0
        assert result.output.splitlines() == precedence_chain

    def test_sort_invalid(self, cli_runner: CliRunner) -> None:
        """Test that an invalid version aborts sorting."""
        result = cli_runner.invoke(cli, ["sort", "1.0.0", "1.0-b"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_sort_nothing(self, cli_runner: CliRunner) -> None:
        """Test empty stdin."""
        result = cli_runner.invoke(cli, ["sort"], input="")

        assert result.exit_code == 0
        assert "No versions to sort" in result.output


class TestShowCommand:
    """Tests for semver-order show."""

    def test_show_fields(self, cli_runner: CliRunner) -> None:
        """Test plain field output."""
        result = cli_runner.invoke(cli, ["show", "1.2.3-rc.1+build.5"])

        assert result.exit_code == 0
        assert "major: 1" in result.output
        assert "minor: 2" in result.output
        assert "patch: 3" in result.output
        assert "prerelease: rc.1" in result.output
        assert "build: build.5" in result.output

    def test_show_json(self, cli_runner: CliRunner) -> None:
        """Test JSON output."""
        result = cli_runner.invoke(cli, ["show", "--json", "17897798789984631.0.0-alpha"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "major": 17897798789984631,
            "minor": 0,
            "patch": 0,
            "prerelease": "alpha",
            "build": "",
        }

    def test_show_invalid(self, cli_runner: CliRunner) -> None:
        """Test that an invalid version exits with an error."""
        result = cli_runner.invoke(cli, ["show", "a.b.c"])

        assert result.exit_code == 1
        assert "major" in result.output


def test_version_option(cli_runner: CliRunner) -> None:
    """Test --version output."""
    result = cli_runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
