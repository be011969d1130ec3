# topmark:header:start
#
#   project      : YamlScribe
#   file         : loaders.py
#   file_relpath : src/yamlscribe/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Reads ``yamlscribe.toml`` and the ``[tool.yamlscribe]`` table of
``pyproject.toml``. Parsing is done with `tomlkit` and returned as plain `dict`
structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from yamlscribe.config.keys import Toml
from yamlscribe.config.logging import get_logger
from yamlscribe.errors import ConfigError

from .guards import is_toml_table

if TYPE_CHECKING:
    from pathlib import Path

    from yamlscribe.config.logging import YamlScribeLogger

    from .types import TomlTable

logger: YamlScribeLogger = get_logger(__name__)


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): TOML document text.
        source (str): Name of the source, used in error messages.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", source, e)
        raise ConfigError(f"Invalid TOML in {source}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``yamlscribe.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.

    Notes:
        Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    logger.debug("Loaded TOML from %s", path)
    return parse_toml_text(text, source=str(path))


def extract_pyproject_table(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.yamlscribe]`` table of a parsed ``pyproject.toml``.

    Returns:
        TomlTable | None: The table, or ``None`` when the section is absent or
            not a table.
    """
    tool: Any = data.get(Toml.SECTION_TOOL)
    if not is_toml_table(tool):
        return None
    section: Any = tool.get(Toml.SECTION_YAMLSCRIBE)
    if section is None:
        return None
    if not is_toml_table(section):
        logger.warning("Ignoring [tool.yamlscribe]: expected a table, got %r", section)
        return None
    return section
