# topmark:header:start
#
#   project      : YamlScribe
#   file         : classify.py
#   file_relpath : src/yamlscribe/encoding/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scalar safety classifier.

Decides whether a value is an acceptable scalar at all, whether a string can
only be written double-quoted, and whether it may be written unquoted (plain)
without a parser reading it back as something else.

The implicit-type patterns cover both the YAML 1.1 resolver used by PyYAML
(``yes``/``on``/``0b1``, sexagesimal ``1:30``, timestamps, ``<<`` merge keys) and
the YAML 1.2 core schema (``0o17``, ``1e5``), so a plain string stays a string
under either parser.
"""

from __future__ import annotations

import re
from typing import Final

from yamlscribe.config.logging import get_logger
from yamlscribe.errors import InvalidScalarTypeError

from .tables import UNPRINTABLE_CHAR_CODES

logger = get_logger(__name__)

# Anything outside YAML's c-printable set, plus the byte order mark.
_NON_PRINTABLE_RE: Final[re.Pattern[str]] = re.compile(
    r"[^\x09\x0A\x0D\x20-\x7E\x85\xA0-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]|\uFEFF"
)

_NULL: Final[str] = r"~|null|Null|NULL"
_BOOL: Final[str] = (
    r"yes|Yes|YES|no|No|NO"
    r"|true|True|TRUE|false|False|FALSE"
    r"|on|On|ON|off|Off|OFF"
)
_INT: Final[str] = (
    r"[-+]?0b[0-1_]+"
    r"|[-+]?0o?[0-7_]+"
    r"|[-+]?(?:0|[1-9][0-9_]*)"
    r"|[-+]?0x[0-9a-fA-F_]+"
    r"|[-+]?[1-9][0-9_]*(?::[0-5]?[0-9])+"
)
_FLOAT: Final[str] = (
    r"[-+]?[0-9][0-9_]*\.[0-9_]*(?:[eE][-+]?[0-9]+)?"
    r"|[-+]?\.[0-9_]+(?:[eE][-+]?[0-9]+)?"
    r"|[-+]?[0-9][0-9_]*[eE][-+]?[0-9]+"
    r"|[-+]?[0-9][0-9_]*(?::[0-5]?[0-9])+\.[0-9_]*"
    r"|[-+]?\.(?:inf|Inf|INF)"
    r"|\.(?:nan|NaN|NAN)"
)
_TIMESTAMP: Final[str] = (
    r"[0-9][0-9][0-9][0-9]-[0-9][0-9]-[0-9][0-9]"
    r"|[0-9][0-9][0-9][0-9]-[0-9][0-9]?-[0-9][0-9]?"
    r"(?:[Tt]|[ \t]+)[0-9][0-9]?:[0-9][0-9]:[0-9][0-9](?:\.[0-9]*)?"
    r"(?:[ \t]*(?:Z|[-+][0-9][0-9]?(?::[0-9][0-9])?))?"
)
_SPECIAL_KEYS: Final[str] = r"<<|="

_IMPLICIT_TYPE_RE: Final[re.Pattern[str]] = re.compile(
    "|".join(f"(?:{p})" for p in (_NULL, _BOOL, _INT, _FLOAT, _TIMESTAMP, _SPECIAL_KEYS))
)

# Characters that start a YAML construct when found at the front of a plain scalar.
PLAIN_LEADING_INDICATORS: Final[frozenset[str]] = frozenset("-:?#&*!|>'\"%@`")

# Characters that end a plain scalar inside a flow collection.
FLOW_INDICATORS: Final[frozenset[str]] = frozenset(",[]{}")

_AMBIGUOUS_SEQUENCES: Final[tuple[str, ...]] = (": ", ":\t", " #", "\t#")
_DOCUMENT_MARKERS: Final[tuple[str, ...]] = ("---", "...")


def is_unprintable(string: str) -> bool:
    """Return True if any character of ``string`` is in `UNPRINTABLE_CHAR_CODES`."""
    return any(ord(ch) in UNPRINTABLE_CHAR_CODES for ch in string)


def needs_escaping(string: str) -> bool:
    """Return True if ``string`` can only be written as a double-quoted scalar.

    This widens `is_unprintable` with every character outside YAML's printable
    set (remaining C0/C1 controls, DEL, lone surrogates, BOM, U+FFFE/U+FFFF).
    """
    return is_unprintable(string) or _NON_PRINTABLE_RE.search(string) is not None


def plain_hazard(string: str) -> str | None:
    """Return why ``string`` cannot be written as a plain scalar, or None if it can.

    Args:
        string (str): Candidate plain scalar text.

    Returns:
        str | None: A short reason (used in TRACE logs), or ``None`` when the
            string reads back unchanged when left unquoted.
    """
    if not string:
        return "empty string reads as null"
    if string != string.strip():
        return "leading or trailing whitespace"
    if needs_escaping(string):
        return "contains characters that need escaping"
    if "\n" in string:
        return "contains a line break"
    if "\t" in string:
        return "contains a tab"
    if _IMPLICIT_TYPE_RE.fullmatch(string):
        return "reads as null, boolean, number or timestamp"
    if string[0] in PLAIN_LEADING_INDICATORS:
        return f"starts with indicator {string[0]!r}"
    if string.startswith(_DOCUMENT_MARKERS):
        return "starts with a document marker"
    if any(ch in FLOW_INDICATORS for ch in string):
        return "contains a flow indicator"
    for seq in _AMBIGUOUS_SEQUENCES:
        if seq in string:
            return f"contains {seq!r}"
    if string.endswith(":"):
        return "ends with ':'"
    return None


def is_dangerous_plain(string: str) -> bool:
    """Return True if an unquoted rendering of ``string`` could be misparsed."""
    return plain_hazard(string) is not None


def flow_plain_hazard(string: str) -> str | None:
    """Like `plain_hazard`, for a plain scalar written inside a flow collection.

    PyYAML ends a flow-context plain scalar at any ``?``, so such strings are
    quoted as well.
    """
    reason: str | None = plain_hazard(string)
    if reason is None and "?" in string:
        return "contains '?' inside a flow collection"
    return reason


def assert_valid_scalar(value: object) -> None:
    """Raise `InvalidScalarTypeError` unless ``value`` is a supported scalar.

    Supported scalars are ``None``, ``bool``, ``int``, ``float`` and ``str``
    (subclasses included).

    Raises:
        InvalidScalarTypeError: If ``value`` has any other type.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return
    logger.debug("Rejecting scalar of type %s", type(value).__name__)
    raise InvalidScalarTypeError(value)
