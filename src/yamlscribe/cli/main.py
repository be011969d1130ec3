# topmark:header:start
#
#   project      : YamlScribe
#   file         : main.py
#   file_relpath : src/yamlscribe/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlScribe CLI entry point.

Group-level options are resolved once and stored in ``ctx.obj``:

- ``verbosity_level``: program-output verbosity from ``-v``/``-q``;
- ``log_level``: internal logging level from ``YAMLSCRIBE_LOG_LEVEL``;
- ``color_enabled``: ``False`` when ``--no-color`` was given.
"""

from __future__ import annotations

import click

from yamlscribe.cli.commands.render import render_command
from yamlscribe.cli.commands.scalar import scalar_command
from yamlscribe.cli.commands.version import version_command
from yamlscribe.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from yamlscribe.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.obj["color_enabled"] = not no_color
    if no_color:
        ctx.color = False


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="YamlScribe: style-preserving YAML encoder.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the YamlScribe CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'yamlscribe render [PATH]' to re-encode a document.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

cli.add_command(scalar_command)

if __name__ == "__main__":
    cli()
