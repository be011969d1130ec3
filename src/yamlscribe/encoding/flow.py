# topmark:header:start
#
#   project      : YamlScribe
#   file         : flow.py
#   file_relpath : src/yamlscribe/encoding/flow.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-line (flow) encoder.

Flow output never contains a raw line break, so it is used for mapping keys,
for collections declared `CollectionStyle.FLOW` and for empty collections.
Block scalar styles do not exist in flow context; a `ScalarStyle.LITERAL` or
`ScalarStyle.FOLDED` hint is treated like `ScalarStyle.PLAIN`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yamlscribe.config.logging import get_logger
from yamlscribe.constants import MAX_IMPLICIT_KEY_LENGTH
from yamlscribe.model.nodes import MappingNode, ScalarNode, SequenceNode
from yamlscribe.model.styles import ScalarStyle

from .classify import assert_valid_scalar, flow_plain_hazard, needs_escaping
from .quoted import encode_double_quoted, encode_plain, encode_single_quoted

if TYPE_CHECKING:
    from yamlscribe.model.nodes import Node

logger = get_logger(__name__)


def encode_flow_scalar(node: ScalarNode) -> str:
    """Encode a scalar node on a single line.

    Strings that need escaping are always double-quoted. Otherwise the
    quoted styles are honored and everything else is written plain
    unless `flow_plain_hazard` objects, in which case it is double-quoted.
    Non-string values are always written plain.
    """
    value = node.value
    assert_valid_scalar(value)
    if isinstance(value, str):
        if needs_escaping(value) or node.style is ScalarStyle.DOUBLE_QUOTED:
            return encode_double_quoted(value)
        if node.style is ScalarStyle.SINGLE_QUOTED:
            return encode_single_quoted(value)
        reason: str | None = flow_plain_hazard(value)
        if reason is not None:
            logger.trace("flow scalar %r is unsafe (%s), using double quotes", value, reason)
            return encode_double_quoted(value)
    return encode_plain(value)


def encode_key(node: Node) -> str:
    """Encode a mapping key, marking it explicit with ``? `` when it is too long.

    YAML parsers only accept implicit keys of up to `MAX_IMPLICIT_KEY_LENGTH`
    characters.
    """
    text: str = encode_flow(node)
    if len(text) > MAX_IMPLICIT_KEY_LENGTH:
        logger.trace("key of %d characters written as an explicit key", len(text))
        return f"? {text}"
    return text


def encode_flow(node: Node) -> str:
    """Encode ``node`` as a single-line flow fragment.

    Example:
        ``encode_flow(SequenceNode((ScalarNode("a"), ScalarNode(1))))`` returns
        ``"[a, 1]"``.

    Args:
        node (Node): The node to encode; nested collections are written in
            flow style regardless of their declared style.

    Returns:
        str: The encoded fragment.

    Raises:
        InvalidScalarTypeError: If a scalar in the tree holds an unsupported value.
    """
    match node:
        case ScalarNode():
            return encode_flow_scalar(node)
        case SequenceNode(items=items):
            return "[" + ", ".join(encode_flow(item) for item in items) + "]"
        case MappingNode(entries=entries):
            return (
                "{"
                + ", ".join(f"{encode_key(key)}: {encode_flow(value)}" for key, value in entries)
                + "}"
            )
        case _:
            raise TypeError(f"Unsupported node type: {type(node).__name__}")
