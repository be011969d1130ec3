# topmark:header:start
#
#   project      : YamlScribe
#   file         : constants.py
#   file_relpath : src/yamlscribe/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlScribe Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    YAMLSCRIBE_VERSION: str = get_version("yamlscribe")
except PackageNotFoundError:  # running from a source checkout
    YAMLSCRIBE_VERSION = "0.0.0"

# Fixed per-level indentation used by the block encoder.
INDENTATION_STEP: Final[int] = 2

# Longest key written in implicit `key: value` form; longer keys use `? key`.
MAX_IMPLICIT_KEY_LENGTH: Final[int] = 1024

# Config discovery (current working directory).
CONFIG_FILE_NAME: Final[str] = "yamlscribe.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[str] = "tool.yamlscribe"

LOG_LEVEL_ENV_VAR: Final[str] = "YAMLSCRIBE_LOG_LEVEL"
