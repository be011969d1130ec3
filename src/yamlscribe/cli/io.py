# topmark:header:start
#
#   project      : YamlScribe
#   file         : io.py
#   file_relpath : src/yamlscribe/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input and output helpers for the CLI commands.

Input is read as bytes and decoded as UTF-8 so that CRLF line endings survive
and can be detected. Output is written verbatim (no newline translation).
"""

from __future__ import annotations

from pathlib import Path

import click

from yamlscribe.config.logging import get_logger

logger = get_logger(__name__)

STDIN_MARKER = "-"


def source_name(path: str) -> str:
    """Return the name used for ``path`` in messages."""
    return "<stdin>" if path == STDIN_MARKER else path


def read_source(path: str) -> str:
    """Read the YAML source named by ``path`` (``-`` for standard input).

    Raises:
        UnicodeDecodeError: If the input is not UTF-8.
        OSError: If the file cannot be read.
    """
    if path == STDIN_MARKER:
        data: bytes = click.get_binary_stream("stdin").read()
    else:
        data = Path(path).read_bytes()
    logger.debug("Read %d byte(s) from %s", len(data), source_name(path))
    return data.decode("utf-8")


def write_output(text: str, line_ending: str) -> None:
    """Write ``text`` to standard output, terminated by ``line_ending``.

    No extra line ending is added when ``text`` already ends with one (a
    keep-chomped block scalar).
    """
    if not text.endswith("\n"):
        text += line_ending
    stdout = click.get_binary_stream("stdout")
    stdout.write(text.encode("utf-8"))
    stdout.flush()
