# topmark:header:start
#
#   project      : YamlScribe
#   file         : keys.py
#   file_relpath : src/yamlscribe/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for YamlScribe configuration.

The keys live at the top level of ``yamlscribe.toml``, or inside the
``[tool.yamlscribe]`` table of ``pyproject.toml``. Renaming or removing a key
is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys and special values used by YamlScribe configuration."""

    KEY_INDENTATION: Final[str] = "indentation"
    KEY_LINE_ENDING: Final[str] = "line_ending"
    KEY_SCALAR_STYLE: Final[str] = "scalar_style"
    KEY_COLLECTION_STYLE: Final[str] = "collection_style"

    # Style keys accept this token to keep the styles found in the document.
    VALUE_PRESERVE: Final[str] = "preserve"

    # Root table of pyproject.toml that holds the [tool.yamlscribe] section.
    SECTION_TOOL: Final[str] = "tool"
    SECTION_YAMLSCRIBE: Final[str] = "yamlscribe"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_INDENTATION, KEY_LINE_ENDING, KEY_SCALAR_STYLE, KEY_COLLECTION_STYLE}
    )
