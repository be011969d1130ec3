# topmark:header:start
#
#   project      : YamlScribe
#   file         : __init__.py
#   file_relpath : src/yamlscribe/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlScribe package.

YamlScribe turns an in-memory tree of YAML nodes back into YAML text. Each node
carries a style hint (plain, quoted, literal, folded, flow or block) that is
honored whenever the result parses back to the same value; otherwise the
encoder falls back to a style that always does.

Example:
    >>> from yamlscribe import encode_block, wrap_as_node
    >>> encode_block(wrap_as_node({"k": [], "s": ["x", "y"]}))
    'k: []\\ns:\\n  - x\\n  - y'
"""

from __future__ import annotations

from yamlscribe.constants import YAMLSCRIBE_VERSION as __version__
from yamlscribe.model import (
    CollectionStyle,
    LineEnding,
    MappingNode,
    Node,
    RenderContext,
    ScalarNode,
    ScalarStyle,
    SequenceNode,
    restyle,
    wrap_as_node,
)
from yamlscribe.encoding import (
    DOUBLE_QUOTE_ESCAPE_CHARS,
    UNPRINTABLE_CHAR_CODES,
    assert_valid_scalar,
    encode_block,
    encode_block_scalar,
    encode_double_quoted,
    encode_flow,
    encode_folded,
    encode_literal,
    encode_plain,
    encode_single_quoted,
    is_dangerous_plain,
    is_unprintable,
    render,
)
from yamlscribe.errors import (
    ConfigError,
    InvalidScalarTypeError,
    YamlScribeError,
    YamlSourceError,
)

__all__ = [
    "DOUBLE_QUOTE_ESCAPE_CHARS",
    "UNPRINTABLE_CHAR_CODES",
    "CollectionStyle",
    "ConfigError",
    "InvalidScalarTypeError",
    "LineEnding",
    "MappingNode",
    "Node",
    "RenderContext",
    "ScalarNode",
    "ScalarStyle",
    "SequenceNode",
    "YamlScribeError",
    "YamlSourceError",
    "__version__",
    "assert_valid_scalar",
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
    "render",
    "restyle",
    "wrap_as_node",
]
