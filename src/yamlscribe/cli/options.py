# topmark:header:start
#
#   project      : YamlScribe
#   file         : options.py
#   file_relpath : src/yamlscribe/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options for the YamlScribe commands.

Reusable options (verbosity, color, encoder settings) and their resolution
logic live here so the group and the commands stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from yamlscribe.cli.cli_types import KeyedEnumChoiceParam
from yamlscribe.cli.errors import YamlScribeUsageError
from yamlscribe.config.logging import TRACE_LEVEL
from yamlscribe.model.styles import LineEnding

P = ParamSpec("P")
R = TypeVar("R")

# Program-output verbosity, expressed as standard logging levels
LOG_LEVELS: dict[str, int] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: A logging level; lower means more output.

    Raises:
        YamlScribeUsageError: If both flags are used together.

    Behavior:
        ``-vvv`` is TRACE, ``-vv`` DEBUG, ``-v`` INFO; any ``-q`` is ERROR.
        The default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise YamlScribeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:
        return LOG_LEVELS["INFO"]
    if quiet_count >= 1:
        return LOG_LEVELS["ERROR"]
    return LOG_LEVELS["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` flag."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable colored diagnostics and error messages.",
    )(f)
    return f


def common_layout_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--indent`` and ``--line-ending``, shared by `render` and `scalar`."""
    f = click.option(
        "--indent",
        "indentation",
        type=click.IntRange(min=0),
        default=None,
        help="Base indentation in spaces (default: from config, else 0).",
    )(f)
    f = click.option(
        "--line-ending",
        "line_ending",
        type=KeyedEnumChoiceParam(LineEnding),
        default=None,
        help="Line ending (default: from config, else follow the input).",
    )(f)
    return f
