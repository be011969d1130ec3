# topmark:header:start
#
#   project      : YamlScribe
#   file         : test_enum_mixins.py
#   file_relpath : tests/core/test_enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `KeyedStrEnum` parsing and the style enums built on it."""

from __future__ import annotations

from tests.conftest import parametrize
from yamlscribe.core.enum_mixins import KeyedStrEnum
from yamlscribe.model.styles import CollectionStyle, LineEnding, ScalarStyle


class _Mode(KeyedStrEnum):
    A = ("alpha", "Alpha mode", ("a",))
    B = ("beta_mode", "Beta mode")


def test_members_are_strings() -> None:
    assert _Mode.A == "alpha"
    assert str(_Mode.B) == "beta_mode"
    assert _Mode.A.key == "alpha"
    assert _Mode.A.label == "Alpha mode"
    assert _Mode.A.aliases == ("a",)
    assert _Mode.B.aliases == ()


def test_keys_in_definition_order() -> None:
    assert _Mode.keys() == ["alpha", "beta_mode"]


@parametrize(
    "raw, expected",
    [
        ("alpha", _Mode.A),
        ("ALPHA", _Mode.A),
        (" a ", _Mode.A),
        ("A", _Mode.A),
        ("beta-mode", _Mode.B),
        ("Beta Mode", _Mode.B),
        ("gamma", None),
        ("", None),
        (None, None),
    ],
)
def test_parse(raw: str | None, expected: _Mode | None) -> None:
    assert _Mode.parse(raw) is expected


@parametrize(
    "raw, expected",
    [
        ("plain", ScalarStyle.PLAIN),
        ("single", ScalarStyle.SINGLE_QUOTED),
        ("'", ScalarStyle.SINGLE_QUOTED),
        ("double-quoted", ScalarStyle.DOUBLE_QUOTED),
        ('"', ScalarStyle.DOUBLE_QUOTED),
        ("|", ScalarStyle.LITERAL),
        (">", ScalarStyle.FOLDED),
        ("folded", ScalarStyle.FOLDED),
    ],
)
def test_scalar_style_tokens(raw: str, expected: ScalarStyle) -> None:
    assert ScalarStyle.parse(raw) is expected


def test_collection_style_and_line_ending_tokens() -> None:
    assert CollectionStyle.parse("inline") is CollectionStyle.FLOW
    assert CollectionStyle.parse("block") is CollectionStyle.BLOCK
    assert LineEnding.parse("windows") is LineEnding.CRLF
    assert LineEnding.parse("unix") is LineEnding.LF
    assert LineEnding.parse("auto") is LineEnding.AUTO


def test_block_styles() -> None:
    assert [s for s in ScalarStyle if s.is_block] == [ScalarStyle.FOLDED, ScalarStyle.LITERAL]
