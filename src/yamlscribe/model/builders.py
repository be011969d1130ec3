# topmark:header:start
#
#   project      : YamlScribe
#   file         : builders.py
#   file_relpath : src/yamlscribe/model/builders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build and restyle node trees.

`wrap_as_node` turns plain Python data (dicts, lists, tuples and scalars) into
nodes so callers do not have to spell out every `ScalarNode`. `restyle` returns
a copy of a tree with some style hints replaced, which is how configuration
and CLI overrides are applied.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from yamlscribe.encoding.classify import assert_valid_scalar

from .nodes import MappingNode, ScalarNode, SequenceNode
from .styles import CollectionStyle, ScalarStyle

if TYPE_CHECKING:
    from .nodes import Node


def wrap_as_node(
    value: object,
    *,
    scalar_style: ScalarStyle = ScalarStyle.PLAIN,
    collection_style: CollectionStyle = CollectionStyle.BLOCK,
) -> Node:
    """Recursively wrap a Python value into nodes.

    Existing nodes are returned unchanged (also when nested inside plain
    containers). Mappings keep their iteration order. Strings are scalars, not
    sequences.

    Args:
        value (object): A node, a mapping, a list or tuple, or a scalar.
        scalar_style (ScalarStyle): Style given to every wrapped scalar,
            mapping keys included.
        collection_style (CollectionStyle): Style given to every wrapped
            sequence and mapping.

    Returns:
        Node: The wrapped value.

    Raises:
        InvalidScalarTypeError: If a leaf is not a supported scalar.
    """

    def wrap(item: object) -> Node:
        return wrap_as_node(
            item, scalar_style=scalar_style, collection_style=collection_style
        )

    match value:
        case ScalarNode() | SequenceNode() | MappingNode():
            return value
        case Mapping():
            return MappingNode(
                entries=tuple((wrap(k), wrap(v)) for k, v in value.items()),
                style=collection_style,
            )
        case str():
            return ScalarNode(value, scalar_style)
        case list() | tuple():
            return SequenceNode(items=tuple(wrap(item) for item in value), style=collection_style)
        case _:
            assert_valid_scalar(value)
            return ScalarNode(value, scalar_style)  # type: ignore[arg-type]


def restyle(
    node: Node,
    *,
    scalar_style: ScalarStyle | None = None,
    collection_style: CollectionStyle | None = None,
) -> Node:
    """Return a copy of ``node`` with style hints replaced.

    ``None`` keeps the declared style. Mapping keys keep their scalar style,
    since keys are always written in flow context and a block style would be
    dropped anyway.

    Args:
        node (Node): Root of the tree to restyle.
        scalar_style (ScalarStyle | None): Replacement style for value scalars.
        collection_style (CollectionStyle | None): Replacement style for
            sequences and mappings (keys included).

    Returns:
        Node: A new tree; ``node`` itself is not modified.
    """
    if scalar_style is None and collection_style is None:
        return node

    def again(child: Node, *, is_key: bool = False) -> Node:
        return restyle(
            child,
            scalar_style=None if is_key else scalar_style,
            collection_style=collection_style,
        )

    match node:
        case ScalarNode(value=value, style=style):
            return ScalarNode(value, scalar_style or style)
        case SequenceNode(items=items, style=style):
            return SequenceNode(
                items=tuple(again(item) for item in items),
                style=collection_style or style,
            )
        case MappingNode(entries=entries, style=style):
            return MappingNode(
                entries=tuple((again(k, is_key=True), again(v)) for k, v in entries),
                style=collection_style or style,
            )
        case _:
            raise TypeError(f"Unsupported node type: {type(node).__name__}")
