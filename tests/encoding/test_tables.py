# topmark:header:start
#
#   project      : YamlScribe
#   file         : test_tables.py
#   file_relpath : tests/encoding/test_tables.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the escape lookup tables."""

from __future__ import annotations

import pytest
import yaml

from tests.conftest import parametrize
from yamlscribe.encoding.tables import DOUBLE_QUOTE_ESCAPE_CHARS, UNPRINTABLE_CHAR_CODES


def test_unprintable_table_is_subset_of_escape_table() -> None:
    for code, escape in UNPRINTABLE_CHAR_CODES.items():
        assert DOUBLE_QUOTE_ESCAPE_CHARS[code] == escape


def test_escape_table_adds_printable_specials() -> None:
    extra = set(DOUBLE_QUOTE_ESCAPE_CHARS) - set(UNPRINTABLE_CHAR_CODES)
    assert extra == {0x09, 0x0A, 0x22, 0x2F, 0x5C}


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        UNPRINTABLE_CHAR_CODES[0x41] = "A"  # type: ignore[index]
    with pytest.raises(TypeError):
        DOUBLE_QUOTE_ESCAPE_CHARS[0x41] = "A"  # type: ignore[index]


@parametrize("code", sorted(DOUBLE_QUOTE_ESCAPE_CHARS))
def test_every_escape_is_understood_by_pyyaml(code: int) -> None:
    """Each escape sequence decodes back to its own character."""
    escape: str = DOUBLE_QUOTE_ESCAPE_CHARS[code]
    assert yaml.safe_load(f'"{escape}"') == chr(code)
