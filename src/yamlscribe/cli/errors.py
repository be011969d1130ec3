# topmark:header:start
#
#   project      : YamlScribe
#   file         : errors.py
#   file_relpath : src/yamlscribe/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the YamlScribe CLI.

Raise these in commands to signal errors with standardized messages and exit
codes. `cli_errors` converts the library exceptions into them.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Any

import click

from yamlscribe.cli.exit_codes import ExitCode
from yamlscribe.config.logging import get_logger
from yamlscribe.errors import ConfigError, InvalidScalarTypeError, YamlSourceError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from yamlscribe.config.logging import YamlScribeLogger

logger: YamlScribeLogger = get_logger(__name__)


class YamlScribeCliError(click.ClickException):
    """Base class for all YamlScribe CLI errors."""

    exit_code = ExitCode.FAILURE

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error in bright red on stderr (when colors are enabled)."""
        click.secho(f"Error: {self.format_message()}", file=file, err=True, fg="bright_red")


class YamlScribeUsageError(YamlScribeCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class YamlScribeConfigError(YamlScribeCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class YamlScribeFileNotFoundError(YamlScribeCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class YamlScribeIOError(YamlScribeCliError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class YamlScribeEncodingError(YamlScribeCliError):
    """Error for undecodable input, invalid YAML, or values that cannot be encoded."""

    exit_code = ExitCode.ENCODING_ERROR


@contextmanager
def cli_errors(source: str) -> Iterator[None]:
    """Translate library and OS exceptions raised in the block into CLI errors.

    Args:
        source (str): Name of the input (a path or ``"<stdin>"``), used in messages.
    """
    try:
        yield
    except ConfigError as exc:
        raise YamlScribeConfigError(str(exc)) from exc
    except YamlSourceError as exc:
        raise YamlScribeEncodingError(f"{source}: {exc}") from exc
    except InvalidScalarTypeError as exc:
        raise YamlScribeEncodingError(f"{source}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise YamlScribeEncodingError(f"{source}: not valid UTF-8 ({exc.reason})") from exc
    except FileNotFoundError as exc:
        raise YamlScribeFileNotFoundError(f"No such file: {source}") from exc
    except OSError as exc:
        logger.debug("I/O error on %s: %s", source, exc)
        raise YamlScribeIOError(f"{source}: {exc.strerror or exc}") from exc
