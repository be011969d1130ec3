# topmark:header:start
#
#   project      : YamlScribe
#   file         : styles.py
#   file_relpath : src/yamlscribe/model/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style hints and node tags.

Styles are *hints*: the encoder may downgrade a declared style to guarantee
that the emitted text parses back to the original value.
"""

from __future__ import annotations

from enum import Enum

from yamlscribe.core.enum_mixins import KeyedStrEnum


class NodeKind(Enum):
    """Tag of the node union."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


class ScalarStyle(KeyedStrEnum):
    """Presentation style requested for a scalar."""

    PLAIN = ("plain", "Plain (unquoted)")
    SINGLE_QUOTED = ("single_quoted", "Single-quoted", ("single", "'"))
    DOUBLE_QUOTED = ("double_quoted", "Double-quoted", ("double", '"'))
    FOLDED = ("folded", "Folded block scalar", (">",))
    LITERAL = ("literal", "Literal block scalar", ("|",))

    @property
    def is_block(self) -> bool:
        """Whether this style is a block scalar style (``|`` or ``>``)."""
        return self in (ScalarStyle.FOLDED, ScalarStyle.LITERAL)


class CollectionStyle(KeyedStrEnum):
    """Presentation style requested for a sequence or mapping."""

    FLOW = ("flow", "Flow (inline, bracketed)", ("inline",))
    BLOCK = ("block", "Block (indented, one entry per line)")


class LineEnding(KeyedStrEnum):
    """Configurable line ending; ``AUTO`` follows the input document."""

    LF = ("lf", "Line feed", ("unix",))
    CRLF = ("crlf", "Carriage return + line feed", ("windows", "dos"))
    AUTO = ("auto", "Detect from input")

    @property
    def chars(self) -> str | None:
        """Return the literal line-ending characters, or None for ``AUTO``."""
        if self is LineEnding.LF:
            return "\n"
        if self is LineEnding.CRLF:
            return "\r\n"
        return None
