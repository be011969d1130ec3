# topmark:header:start
#
#   project      : YamlScribe
#   file         : __init__.py
#   file_relpath : src/yamlscribe/encoding/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YAML encoders for YamlScribe nodes.

Leaves first: `tables` (escape tables), `classify` (scalar safety checks),
`quoted` (plain and quoted scalars), `block_scalars` (``|`` and ``>``),
`flow` (single-line collections) and `block` (the indented orchestrator).
"""

from __future__ import annotations

from yamlscribe.encoding.block import encode_block, encode_block_scalar, render
from yamlscribe.encoding.block_scalars import (
    can_encode_block_scalar,
    encode_folded,
    encode_literal,
)
from yamlscribe.encoding.classify import (
    assert_valid_scalar,
    is_dangerous_plain,
    is_unprintable,
    needs_escaping,
)
from yamlscribe.encoding.flow import encode_flow
from yamlscribe.encoding.quoted import encode_double_quoted, encode_plain, encode_single_quoted
from yamlscribe.encoding.tables import DOUBLE_QUOTE_ESCAPE_CHARS, UNPRINTABLE_CHAR_CODES

__all__ = [
    "DOUBLE_QUOTE_ESCAPE_CHARS",
    "UNPRINTABLE_CHAR_CODES",
    "assert_valid_scalar",
    "can_encode_block_scalar",
    "encode_block",
    "encode_block_scalar",
    "encode_double_quoted",
    "encode_flow",
    "encode_folded",
    "encode_literal",
    "encode_plain",
    "encode_single_quoted",
    "is_dangerous_plain",
    "is_unprintable",
    "needs_escaping",
    "render",
]
