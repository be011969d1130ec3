# topmark:header:start
#
#   project      : YamlScribe
#   file         : tables.py
#   file_relpath : src/yamlscribe/encoding/tables.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Static lookup tables for quoting.

Both tables map a code point to its YAML double-quoted escape sequence and are
read-only (`types.MappingProxyType`). Besides the encoder, a document editor
can consult them to decide whether a replacement is safe to splice.

See 5.7 Escaped Characters https://yaml.org/spec/1.2/spec.html#id2776092
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

_UNPRINTABLE: dict[int, str] = {
    0x00: "\\0",  # null
    0x07: "\\a",  # bell
    0x08: "\\b",  # backspace
    0x0B: "\\v",  # vertical tab
    0x0C: "\\f",  # form feed
    0x0D: "\\r",  # carriage return (line break)
    0x1B: "\\e",  # escape
    0x85: "\\N",  # next line (NEL)
    0xA0: "\\_",  # non-breaking space
    0x2028: "\\L",  # line separator
    0x2029: "\\P",  # paragraph separator
}

UNPRINTABLE_CHAR_CODES: Final[MappingProxyType[int, str]] = MappingProxyType(_UNPRINTABLE)
"""Characters that can only be represented inside a double-quoted scalar."""

DOUBLE_QUOTE_ESCAPE_CHARS: Final[MappingProxyType[int, str]] = MappingProxyType(
    {
        **_UNPRINTABLE,
        0x09: "\\t",  # horizontal tab (printable)
        0x0A: "\\n",  # line feed (line break)
        0x22: '\\"',  # double quote
        0x2F: "\\/",  # slash, for JSON compatibility
        0x5C: "\\\\",  # backslash
    }
)
"""Every character the double-quoted encoder replaces by an escape sequence."""
