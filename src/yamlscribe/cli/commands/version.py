# topmark:header:start
#
#   project      : YamlScribe
#   file         : version.py
#   file_relpath : src/yamlscribe/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlScribe `version` command.

Prints the YamlScribe version as installed in the active Python environment.
"""

from __future__ import annotations

import logging

import click

from yamlscribe.constants import YAMLSCRIBE_VERSION


@click.command(
    name="version",
    help="Show the current version of YamlScribe.",
)
def version_command() -> None:
    """Show the current version of YamlScribe.

    With ``-v`` the version is preceded by a short label.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    vlevel: int = ctx.obj.get("verbosity_level", logging.WARNING)

    if vlevel <= logging.INFO:
        click.echo(f"YamlScribe version {YAMLSCRIBE_VERSION}")
    else:
        click.echo(YAMLSCRIBE_VERSION)
