# topmark:header:start
#
#   project      : YamlScribe
#   file         : render.py
#   file_relpath : src/yamlscribe/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlScribe `render` command.

Reads a YAML document, applies the configured style overrides and prints it
again through the YamlScribe encoder. Styles the document already uses
(quoting, block scalars, flow collections) are kept unless overridden, and
every value reads back the same.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from yamlscribe.adapters.pyyaml import node_from_yaml
from yamlscribe.cli.cli_types import KeyedEnumChoiceParam
from yamlscribe.cli.cmd_common import load_config
from yamlscribe.cli.errors import cli_errors
from yamlscribe.cli.io import STDIN_MARKER, read_source, source_name, write_output
from yamlscribe.cli.options import common_layout_options
from yamlscribe.config.keys import Toml
from yamlscribe.config.logging import get_logger
from yamlscribe.encoding.block import render
from yamlscribe.encoding.flow import encode_flow
from yamlscribe.model.styles import CollectionStyle, LineEnding, ScalarStyle

if TYPE_CHECKING:
    from yamlscribe.config.model import EncoderConfig
    from yamlscribe.model.context import RenderContext
    from yamlscribe.model.nodes import Node

logger = get_logger(__name__)


@click.command(
    name="render",
    help="Re-encode a YAML document (PATH, or '-' for STDIN) with YamlScribe.",
)
@click.argument("path", required=False, default=STDIN_MARKER, type=str)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this TOML file instead of discovering one.",
)
@common_layout_options
@click.option(
    "--scalar-style",
    "scalar_style",
    type=KeyedEnumChoiceParam(ScalarStyle, extra=(Toml.VALUE_PRESERVE,)),
    default=None,
    help="Force a style on every value scalar ('preserve' keeps the document's).",
)
@click.option(
    "--collection-style",
    "collection_style",
    type=KeyedEnumChoiceParam(CollectionStyle, extra=(Toml.VALUE_PRESERVE,)),
    default=None,
    help="Force a style on every collection ('preserve' keeps the document's).",
)
@click.option(
    "--flow",
    "flow",
    is_flag=True,
    default=False,
    help="Print the whole document on one line in flow style.",
)
def render_command(
    *,
    path: str,
    config_path: Path | None,
    indentation: int | None,
    line_ending: LineEnding | None,
    scalar_style: ScalarStyle | str | None,
    collection_style: CollectionStyle | str | None,
    flow: bool,
) -> None:
    """Re-encode a YAML document.

    Args:
        path (str): Input file, or ``-`` for standard input.
        config_path (Path | None): Explicit configuration file.
        indentation (int | None): Base indentation override.
        line_ending (LineEnding | None): Line ending override.
        scalar_style (ScalarStyle | str | None): Scalar style override, or ``"preserve"``.
        collection_style (CollectionStyle | str | None): Collection style
            override, or ``"preserve"``.
        flow (bool): Print the document as a single flow fragment.
    """
    ctx = click.get_current_context()
    source: str = source_name(path)

    with cli_errors(source):
        config: EncoderConfig = load_config(
            ctx,
            config_path,
            indentation=indentation,
            line_ending=line_ending,
            scalar_style=scalar_style,
            collection_style=collection_style,
        )
        text: str = read_source(path)
        node: Node = config.apply_styles(node_from_yaml(text))
        context: RenderContext = config.render_context(text)
        logger.debug("Rendering %s with %r", source, context)
        output: str = encode_flow(node) if flow else render(node, context)
        write_output(output, context.line_ending)
