# topmark:header:start
#
#   project      : YamlScribe
#   file         : __init__.py
#   file_relpath : src/yamlscribe/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Node model for YamlScribe: nodes, style hints and the render context."""

from __future__ import annotations

from yamlscribe.model.context import RenderContext, detect_line_ending
from yamlscribe.model.nodes import (
    MappingNode,
    Node,
    ScalarNode,
    ScalarValue,
    SequenceNode,
    is_block_collection,
    is_empty,
)
from yamlscribe.model.styles import CollectionStyle, LineEnding, NodeKind, ScalarStyle

# builders depends on the encoding package, which imports the modules above
from yamlscribe.model.builders import restyle, wrap_as_node  # noqa: E402

__all__ = [
    "CollectionStyle",
    "LineEnding",
    "MappingNode",
    "Node",
    "NodeKind",
    "RenderContext",
    "ScalarNode",
    "ScalarStyle",
    "ScalarValue",
    "SequenceNode",
    "detect_line_ending",
    "is_block_collection",
    "is_empty",
    "restyle",
    "wrap_as_node",
]
