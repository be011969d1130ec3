# topmark:header:start
#
#   project      : YamlScribe
#   file         : nodes.py
#   file_relpath : src/yamlscribe/model/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable document nodes.

A document subtree is a tagged union of three frozen dataclasses:

    * `ScalarNode`   - a ``None``/``bool``/``int``/``float``/``str`` leaf plus a `ScalarStyle`.
    * `SequenceNode` - an ordered tuple of child nodes plus a `CollectionStyle`.
    * `MappingNode`  - an ordered tuple of ``(key, value)`` node pairs plus a `CollectionStyle`.

Every node exposes its tag as ``kind``. Encoders dispatch with ``match``
statements over the three classes; nodes are never mutated while rendering.

Collections accept any iterable on construction and store a tuple, so a node
built from a list cannot be changed through the original list afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from .styles import CollectionStyle, NodeKind, ScalarStyle

ScalarValue = Union[bool, int, float, str, None]


@dataclass(frozen=True)
class ScalarNode:
    """A leaf value with a presentation hint."""

    value: ScalarValue
    style: ScalarStyle = ScalarStyle.PLAIN

    kind: ClassVar[NodeKind] = NodeKind.SCALAR


@dataclass(frozen=True)
class SequenceNode:
    """An ordered list of nodes."""

    items: tuple[Node, ...] = field(default=())
    style: CollectionStyle = CollectionStyle.BLOCK

    kind: ClassVar[NodeKind] = NodeKind.SEQUENCE

    def __post_init__(self) -> None:
        # frozen: bypass __setattr__ to normalize the container type
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class MappingNode:
    """An ordered list of ``(key, value)`` node pairs."""

    entries: tuple[tuple[Node, Node], ...] = field(default=())
    style: CollectionStyle = CollectionStyle.BLOCK

    kind: ClassVar[NodeKind] = NodeKind.MAPPING

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple((k, v) for k, v in self.entries))

    def __len__(self) -> int:
        return len(self.entries)


Node = Union[ScalarNode, SequenceNode, MappingNode]


def is_empty(node: Node) -> bool:
    """Return True for a sequence or mapping without children.

    Scalars are never empty, even when their value is ``""`` or ``None``.
    """
    match node:
        case SequenceNode(items=items):
            return not items
        case MappingNode(entries=entries):
            return not entries
        case _:
            return False


def is_block_collection(node: Node) -> bool:
    """Return True for a collection whose declared style is block."""
    match node:
        case SequenceNode(style=style) | MappingNode(style=style):
            return style is CollectionStyle.BLOCK
        case _:
            return False
