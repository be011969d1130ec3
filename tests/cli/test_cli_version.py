# topmark:header:start
#
#   project      : YamlScribe
#   file         : test_cli_version.py
#   file_relpath : tests/cli/test_cli_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command and group help."""

from __future__ import annotations

import pytest

from tests.cli.conftest import assert_SUCCESS, assert_exit, run_cli
from yamlscribe.cli.exit_codes import ExitCode
from yamlscribe.constants import YAMLSCRIBE_VERSION

pytestmark = pytest.mark.cli


def test_version_outputs_bare_version() -> None:
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == YAMLSCRIBE_VERSION


def test_version_verbose_outputs_label() -> None:
    result = run_cli(["-v", "version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == f"YamlScribe version {YAMLSCRIBE_VERSION}"


def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])
    assert_exit(result, ExitCode.USAGE_ERROR)
    assert "mutually exclusive" in result.output


def test_group_without_command_prints_help() -> None:
    result = run_cli([])
    assert_SUCCESS(result)
    assert "Hint:" in result.stdout
    assert "render" in result.stdout
    assert "scalar" in result.stdout


def test_help_lists_style_choices() -> None:
    result = run_cli(["render", "--help"])
    assert_SUCCESS(result)
    assert "preserve|plain|single_quoted" in result.stdout
    assert "lf|crlf|auto" in result.stdout
