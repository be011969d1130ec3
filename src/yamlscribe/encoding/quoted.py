# topmark:header:start
#
#   project      : YamlScribe
#   file         : quoted.py
#   file_relpath : src/yamlscribe/encoding/quoted.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-line scalar encoders: plain, single-quoted and double-quoted.

Only the double-quoted style can represent every string. The other two are
attempted when asked for and fall back to double-quoted when the string does
not fit them.
"""

from __future__ import annotations

import math
from typing import cast

from yamlscribe.config.logging import get_logger

from .classify import assert_valid_scalar, needs_escaping, plain_hazard
from .tables import DOUBLE_QUOTE_ESCAPE_CHARS

logger = get_logger(__name__)


def _hex_escape(code: int) -> str:
    """Return the shortest ``\\x``/``\\u``/``\\U`` escape for ``code``."""
    if code <= 0xFF:
        return f"\\x{code:02X}"
    if code <= 0xFFFF:
        return f"\\u{code:04X}"
    return f"\\U{code:08X}"


def encode_double_quoted(string: str) -> str:
    """Generate a YAML-safe double-quoted string.

    Every character listed in `DOUBLE_QUOTE_ESCAPE_CHARS` is replaced by its
    escape sequence. Characters outside YAML's printable set that have no named
    escape get a hexadecimal one. Everything else passes through unchanged.

    See 7.3.1 Double-Quoted Style https://yaml.org/spec/1.2/spec.html#id2787109

    Args:
        string (str): The string to quote.

    Returns:
        str: The quoted scalar, including the surrounding ``"`` characters.
    """
    parts: list[str] = []
    for ch in string:
        code: int = ord(ch)
        escape: str | None = DOUBLE_QUOTE_ESCAPE_CHARS.get(code)
        if escape is not None:
            parts.append(escape)
        elif needs_escaping(ch):
            parts.append(_hex_escape(code))
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def encode_single_quoted(string: str) -> str:
    """Generate a YAML-safe single-quoted string, doubling embedded ``'``.

    A string containing a line break is delegated to `encode_double_quoted`:
    single-quoted scalars fold line breaks and drop the leading white space
    of continuation lines, so ``"\\n "`` has no single-quoted spelling.

    The caller must have checked that ``string`` needs no escaping.
    """
    if "\n" in string:
        logger.trace("single-quoted string contains a line break, using double quotes")
        return encode_double_quoted(string)
    return "'" + string.replace("'", "''") + "'"


def _format_float(value: float) -> str:
    if math.isnan(value):
        return ".nan"
    if math.isinf(value):
        return ".inf" if value > 0 else "-.inf"
    text: str = float.__repr__(value).lower()
    # YAML 1.1 floats need a '.' before the exponent ("1e+16" reads as a string).
    if "." not in text and "e" in text:
        text = text.replace("e", ".0e", 1)
    return text


def encode_plain(value: object) -> str:
    """Format ``value`` as a plain scalar, or double-quote it if that is unsafe.

    Non-string scalars always have a safe plain spelling: ``null``,
    ``true``/``false``, decimal integers, and floats (``.nan``, ``.inf``,
    ``-.inf``, or a repr with a decimal point).

    Args:
        value (object): A scalar value.

    Returns:
        str: The encoded scalar.

    Raises:
        InvalidScalarTypeError: If ``value`` is not a supported scalar.
    """
    assert_valid_scalar(value)

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return int.__repr__(value)
    if isinstance(value, float):
        return _format_float(value)

    # assert_valid_scalar leaves str as the only remaining type
    text: str = cast("str", value)
    reason: str | None = plain_hazard(text)
    if reason is not None:
        logger.trace("plain scalar %r is unsafe (%s), using double quotes", text, reason)
        return encode_double_quoted(text)
    return str.__str__(text)
