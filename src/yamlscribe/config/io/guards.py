# topmark:header:start
#
#   project      : YamlScribe
#   file         : guards.py
#   file_relpath : src/yamlscribe/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards for TOML parsing.

`TypeGuard`-based predicates that help Pyright narrow values coming out of
`tomlkit` after they have been unwrapped into plain Python objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeGuard

if TYPE_CHECKING:
    from .types import TomlTable


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def is_toml_int(obj: object) -> TypeGuard[int]:
    """Type guard for a TOML integer; ``bool`` is rejected even though it subclasses ``int``."""
    return isinstance(obj, int) and not isinstance(obj, bool)
