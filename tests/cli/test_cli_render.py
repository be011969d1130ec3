# topmark:header:start
#
#   project      : YamlScribe
#   file         : test_cli_render.py
#   file_relpath : tests/cli/test_cli_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `yamlscribe render`: styles, config, line endings and exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import yaml

from tests.cli.conftest import assert_SUCCESS, assert_exit, run_cli_in
from tests.conftest import parametrize
from yamlscribe.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli

SOURCE = "name: 'it''s'\nbody: |-\n    line 1\n    line 2\ntags: [a, b]\n"


def test_render_stdin_keeps_styles(isolation: Path) -> None:
    result = run_cli_in(isolation, ["render"], input_text=SOURCE)
    assert_SUCCESS(result)
    assert result.stdout == SOURCE


def test_render_file(isolation: Path) -> None:
    (isolation / "doc.yaml").write_text("a: 1\nb:\n- x\n- y\n", encoding="utf-8")
    result = run_cli_in(isolation, ["render", "doc.yaml"])
    assert_SUCCESS(result)
    assert result.stdout == "a: 1\nb:\n  - x\n  - y\n"


def test_render_quotes_ambiguous_scalars(isolation: Path) -> None:
    result = run_cli_in(isolation, ["render", "-"], input_text='- "yes"\n- "1.0"\n- plain\n')
    assert_SUCCESS(result)
    assert result.stdout == '- "yes"\n- "1.0"\n- plain\n'


def test_render_flow(isolation: Path) -> None:
    result = run_cli_in(isolation, ["render", "--flow"], input_text="a:\n  - 1\n  - b\n")
    assert_SUCCESS(result)
    assert result.stdout == "{a: [1, b]}\n"


def test_render_style_overrides(isolation: Path) -> None:
    result = run_cli_in(
        isolation,
        ["render", "--scalar-style", "single", "--collection-style", "flow"],
        input_text="k:\n  - v\n",
    )
    assert_SUCCESS(result)
    assert result.stdout == "{k: ['v']}\n"


def test_render_indent(isolation: Path) -> None:
    result = run_cli_in(isolation, ["render", "--indent", "2"], input_text="a: 1\nb: 2\n")
    assert_SUCCESS(result)
    assert result.stdout == "  a: 1\n  b: 2\n"


def test_render_follows_crlf_input(isolation: Path) -> None:
    result = run_cli_in(isolation, ["render"], input_text=b"- x\r\n- y\r\n")
    assert_SUCCESS(result)
    assert result.stdout_bytes == b"- x\r\n- y\r\n"


def test_render_line_ending_option(isolation: Path) -> None:
    result = run_cli_in(isolation, ["render", "--line-ending", "lf"], input_text=b"- x\r\n- y\r\n")
    assert_SUCCESS(result)
    assert result.stdout_bytes == b"- x\n- y\n"


def test_render_keep_chomped_scalar_ends_output(isolation: Path) -> None:
    result = run_cli_in(isolation, ["render"], input_text="k: |+\n  text\n\n")
    assert_SUCCESS(result)
    assert yaml.safe_load(result.stdout) == {"k": "text\n\n"}
    assert result.stdout.endswith("text\n\n")


def test_render_uses_yamlscribe_toml(isolation: Path) -> None:
    (isolation / "yamlscribe.toml").write_text(
        'indentation = 4\nscalar_style = "double"\n', encoding="utf-8"
    )
    result = run_cli_in(isolation, ["render"], input_text="k: v\n")
    assert_SUCCESS(result)
    assert result.stdout == '    k: "v"\n'


def test_render_cli_overrides_config(isolation: Path) -> None:
    (isolation / "pyproject.toml").write_text(
        '[tool.yamlscribe]\nscalar_style = "double"\nindentation = 4\n', encoding="utf-8"
    )
    result = run_cli_in(
        isolation,
        ["render", "--scalar-style", "preserve", "--indent", "0"],
        input_text="k: v\n",
    )
    assert_SUCCESS(result)
    assert result.stdout == "k: v\n"


def test_render_explicit_config(isolation: Path) -> None:
    cfg: Path = isolation / "custom.toml"
    cfg.write_text('collection_style = "flow"\n', encoding="utf-8")
    result = run_cli_in(isolation, ["render", "--config", str(cfg)], input_text="- 1\n- 2\n")
    assert_SUCCESS(result)
    assert result.stdout == "[1, 2]\n"


def test_render_config_warning_goes_to_stderr(isolation: Path) -> None:
    (isolation / "yamlscribe.toml").write_text("colour = true\n", encoding="utf-8")
    result = run_cli_in(isolation, ["--no-color", "render"], input_text="a: 1\n")
    assert_SUCCESS(result)
    assert result.stdout == "a: 1\n"
    assert "warning: Ignoring unknown key" in result.stderr


def test_render_quiet_hides_config_warning(isolation: Path) -> None:
    (isolation / "yamlscribe.toml").write_text("colour = true\n", encoding="utf-8")
    result = run_cli_in(isolation, ["-q", "render"], input_text="a: 1\n")
    assert_SUCCESS(result)
    assert result.stderr == ""


def test_render_invalid_config(isolation: Path) -> None:
    (isolation / "yamlscribe.toml").write_text("indentation = -3\n", encoding="utf-8")
    result = run_cli_in(isolation, ["render"], input_text="a: 1\n")
    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "must be >= 0" in result.stderr


def test_render_missing_config_file(isolation: Path) -> None:
    result = run_cli_in(isolation, ["render", "--config", "nope.toml"], input_text="a: 1\n")
    assert_exit(result, ExitCode.CONFIG_ERROR)


def test_render_missing_input(isolation: Path) -> None:
    result = run_cli_in(isolation, ["render", "missing.yaml"])
    assert_exit(result, ExitCode.FILE_NOT_FOUND)
    assert "missing.yaml" in result.stderr


def test_render_directory_input(isolation: Path) -> None:
    (isolation / "sub").mkdir()
    result = run_cli_in(isolation, ["render", "sub"])
    assert_exit(result, ExitCode.IO_ERROR)


@parametrize(
    "data",
    [
        b"a: [1\n",
        b"--- 1\n--- 2\n",
        b"when: 2001-12-14\n",
        b"\xff\xfe not utf-8",
    ],
)
def test_render_bad_input(isolation: Path, data: bytes) -> None:
    result = run_cli_in(isolation, ["render"], input_text=data)
    assert_exit(result, ExitCode.ENCODING_ERROR)
    assert "<stdin>" in result.stderr


def test_render_bad_style_token(isolation: Path) -> None:
    result = run_cli_in(isolation, ["render", "--scalar-style", "fancy"], input_text="a\n")
    assert result.exit_code != ExitCode.SUCCESS
    assert "Must be one of" in result.stderr
