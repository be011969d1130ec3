# topmark:header:start
#
#   project      : YamlScribe
#   file         : cmd_common.py
#   file_relpath : src/yamlscribe/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by the commands: verbosity lookup, diagnostic reporting
and configuration loading. They hold plumbing only; exit codes come from the
exceptions in `yamlscribe.cli.errors`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import click

from yamlscribe.config.logging import get_logger
from yamlscribe.config.model import EncoderConfig
from yamlscribe.core.diagnostics import DiagnosticLevel, DiagnosticLog

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)

# Lowest program-output verbosity at which each diagnostic level is shown
_SHOW_AT: dict[DiagnosticLevel, int] = {
    DiagnosticLevel.INFO: logging.INFO,
    DiagnosticLevel.WARNING: logging.WARNING,
    DiagnosticLevel.ERROR: logging.ERROR,
}


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (default WARNING)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def report_diagnostics(ctx: click.Context, diagnostics: DiagnosticLog) -> None:
    """Echo the diagnostics allowed by the current verbosity to stderr."""
    vlevel: int = get_effective_verbosity(ctx)
    color: bool = bool(ctx.obj.get("color_enabled", True))
    for diag in diagnostics:
        if vlevel <= _SHOW_AT[diag.level]:
            click.echo(diag.render(color=color), err=True)


def load_config(
    ctx: click.Context,
    config_path: Path | None,
    **overrides: Any,
) -> EncoderConfig:
    """Load the encoder configuration and apply the CLI overrides.

    Args:
        ctx (click.Context): Current Click context (for diagnostic reporting).
        config_path (Path | None): Explicit ``--config`` file, or ``None`` to discover one.
        **overrides (Any): Settings given on the command line (``None`` = not given).

    Returns:
        EncoderConfig: The effective configuration.

    Raises:
        ConfigError: If the configuration is invalid.
    """
    diagnostics = DiagnosticLog()
    try:
        config: EncoderConfig = EncoderConfig.load(config_path, diagnostics=diagnostics)
    finally:
        report_diagnostics(ctx, diagnostics)
    if config.source is not None:
        logger.info("Using configuration from %s", config.source)
    return config.merged(**overrides)
