# topmark:header:start
#
#   project      : YamlScribe
#   file         : context.py
#   file_relpath : src/yamlscribe/model/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering context threaded through a recursive render."""

from __future__ import annotations

from dataclasses import dataclass, replace

from yamlscribe.constants import INDENTATION_STEP


def detect_line_ending(text: str) -> str:
    r"""Return the line ending used by ``text``.

    ``"\r\n"`` when the text contains at least one CRLF pair, ``"\n"`` otherwise
    (including for text without any line break).
    """
    return "\r\n" if "\r\n" in text else "\n"


@dataclass(frozen=True)
class RenderContext:
    """Indentation and line ending for a render call.

    Attributes:
        indentation (int): Number of spaces the rendered fragment is indented by.
        line_ending (str): Line break inserted between block lines.
    """

    indentation: int = 0
    line_ending: str = "\n"

    def __post_init__(self) -> None:
        if self.indentation < 0:
            raise ValueError(f"indentation must be non-negative, got {self.indentation}")

    def nested(self) -> RenderContext:
        """Return the context for the children of a block collection."""
        return replace(self, indentation=self.indentation + INDENTATION_STEP)
