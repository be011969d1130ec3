# topmark:header:start
#
#   project      : YamlScribe
#   file         : block_scalars.py
#   file_relpath : src/yamlscribe/encoding/block_scalars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Literal (``|``) and folded (``>``) block scalar encoders.

Both encoders split the string into a right-trimmed body and the trailing
white space that was removed. The chomping indicator is ``+`` (keep) when that
suffix holds a line break and ``-`` (strip) otherwise; the suffix itself is
appended verbatim after the encoded body.

The encoders are only valid for strings accepted by `can_encode_block_scalar`.
"""

from __future__ import annotations

from dataclasses import dataclass

from yamlscribe.config.logging import get_logger

from .classify import needs_escaping

logger = get_logger(__name__)


def split_trailing_whitespace(string: str) -> tuple[str, str]:
    """Split ``string`` into its right-trimmed body and the removed suffix."""
    body: str = string.rstrip()
    return body, string[len(body) :]


def chomping_indicator(suffix: str) -> str:
    """Return ``+`` if the trailing suffix holds a line break, else ``-``."""
    return "+" if "\n" in suffix else "-"


def can_encode_block_scalar(string: str) -> bool:
    """Return True if ``string`` round-trips through a literal or folded scalar.

    The string must be non-empty, need no escaping and not start with white
    space (the first line fixes the content indentation). Its trailing
    white space must also survive being reattached verbatim: once the suffix
    contains a line break, only further line breaks may follow, because spaces
    on a trailing line would be read as indentation.
    """
    if not string or needs_escaping(string):
        return False
    if string[0] != string[0].lstrip():
        return False
    _, suffix = split_trailing_whitespace(string)
    first_break: int = suffix.find("\n")
    if first_break >= 0 and suffix[first_break:].strip("\n"):
        return False
    return True


def encode_literal(string: str, indentation: int, line_ending: str) -> str:
    """Generate a YAML-safe literal block scalar.

    Each line of the body is prefixed with ``indentation`` spaces; empty lines
    stay empty so the output carries no trailing white space of its own.

    Example:
        ``encode_literal("a\\n\\nb", 2, "\\n")`` returns ``"|-\\n  a\\n\\n  b"``.

    Args:
        string (str): The string to encode; see `can_encode_block_scalar`.
        indentation (int): Content indentation in spaces.
        line_ending (str): Line break emitted between lines.

    Returns:
        str: The block scalar, starting with its ``|`` header.
    """
    body, suffix = split_trailing_whitespace(string)
    indent: str = " " * indentation
    lines: list[str] = [indent + line if line else "" for line in body.split("\n")]
    return "|" + chomping_indicator(suffix) + line_ending + line_ending.join(lines) + suffix


@dataclass
class _FoldState:
    """Accumulator for one left-to-right pass of the folded encoder.

    Attributes:
        parts (list[str]): Output fragments emitted so far.
        after_indented (bool): Whether the most recent non-empty line started
            with white space. Empty lines leave it unchanged.
    """

    parts: list[str]
    after_indented: bool = False

    def push(self, line: str, indent: str, line_ending: str) -> None:
        if not line:
            self.parts.append(line_ending + indent)
            return
        if line[0] in " \t":
            self.parts.append(line_ending + indent + line)
            self.after_indented = True
            return
        # Two text lines with only empty lines between them are folded into
        # one by the parser, so one extra break keeps the original break.
        separator: str = line_ending if self.after_indented else line_ending * 2
        self.parts.append(separator + indent + line)
        self.after_indented = False


def encode_folded(string: str, indentation: int, line_ending: str) -> str:
    """Generate a YAML-safe folded block scalar.

    Line breaks next to indented lines (and the empty lines themselves) are
    kept by the folding rules, so they are written once. A break between two
    text lines would be folded into a space, so it is written twice.

    Args:
        string (str): The string to encode; see `can_encode_block_scalar`.
        indentation (int): Content indentation in spaces.
        line_ending (str): Line break emitted between lines.

    Returns:
        str: The block scalar, starting with its ``>`` header.
    """
    body, suffix = split_trailing_whitespace(string)
    indent: str = " " * indentation
    first, *rest = body.split("\n")

    state = _FoldState(parts=[">", chomping_indicator(suffix), line_ending, indent, first])
    for line in rest:
        state.push(line, indent, line_ending)
    logger.trace("folded %d line(s) at indentation %d", len(rest) + 1, indentation)
    return "".join(state.parts) + suffix
