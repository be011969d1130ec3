# topmark:header:start
#
#   project      : YamlScribe
#   file         : __init__.py
#   file_relpath : src/yamlscribe/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for YamlScribe configuration.

Pure helpers for reading and validating TOML, kept apart from
`yamlscribe.config.model` so the model stays small.

Typical flow:
    1. Load a TOML file (``load_toml_dict``); for ``pyproject.toml`` pick the
       ``[tool.yamlscribe]`` table (``extract_pyproject_table``).
    2. Read values with the checked getters, which record problems in a
       `DiagnosticLog` instead of raising.
"""

from __future__ import annotations

from .getters import (
    get_int_value_or_none_checked,
    get_keyed_enum_value_checked,
    warn_unknown_keys,
)
from .guards import is_toml_int, is_toml_table
from .loaders import extract_pyproject_table, load_toml_dict, parse_toml_text
from .types import TomlTable

__all__ = [
    "TomlTable",
    "extract_pyproject_table",
    "get_int_value_or_none_checked",
    "get_keyed_enum_value_checked",
    "is_toml_int",
    "is_toml_table",
    "load_toml_dict",
    "parse_toml_text",
    "warn_unknown_keys",
]
