# topmark:header:start
#
#   project      : YamlScribe
#   file         : scalar.py
#   file_relpath : src/yamlscribe/cli/commands/scalar.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlScribe `scalar` command.

Encodes a single string the way the block encoder would write it as a value,
which is handy to see which style a string ends up in and why (run with
``YAMLSCRIBE_LOG_LEVEL=TRACE`` to see the fallbacks).
"""

from __future__ import annotations

import click

from yamlscribe.cli.cli_types import KeyedEnumChoiceParam
from yamlscribe.cli.io import write_output
from yamlscribe.cli.options import common_layout_options
from yamlscribe.encoding.block import render
from yamlscribe.model.context import RenderContext, detect_line_ending
from yamlscribe.model.nodes import ScalarNode
from yamlscribe.model.styles import LineEnding, ScalarStyle


def unescape(text: str) -> str:
    r"""Interpret Python-style backslash escapes (``\n``, ``\t``, ``\x85`` ...) in ``text``.

    Characters outside Latin-1 are kept as they are.
    """
    return text.encode("latin-1", "backslashreplace").decode("unicode_escape")


@click.command(
    name="scalar",
    help="Encode TEXT as a YAML scalar value.",
)
@click.argument("text", type=str)
@click.option(
    "--style",
    "style",
    type=KeyedEnumChoiceParam(ScalarStyle),
    default=ScalarStyle.PLAIN,
    show_default=True,
    help="Requested scalar style.",
)
@common_layout_options
@click.option(
    "--unescape",
    "do_unescape",
    is_flag=True,
    default=False,
    help="Interpret backslash escapes such as \\n and \\t in TEXT.",
)
def scalar_command(
    *,
    text: str,
    style: ScalarStyle,
    indentation: int | None,
    line_ending: LineEnding | None,
    do_unescape: bool,
) -> None:
    """Encode one string scalar.

    Args:
        text (str): The string to encode.
        style (ScalarStyle): Requested style; the encoder may fall back.
        indentation (int | None): Indentation of the enclosing block (default 0).
        line_ending (LineEnding | None): Line ending (default: ``\\n`` unless
            TEXT contains CRLF).
        do_unescape (bool): Interpret backslash escapes in ``text`` first.
    """
    value: str = unescape(text) if do_unescape else text
    chars: str | None = line_ending.chars if line_ending is not None else None
    context = RenderContext(
        indentation=indentation or 0,
        line_ending=chars if chars is not None else detect_line_ending(value),
    )
    write_output(render(ScalarNode(value, style), context), context.line_ending)
