# topmark:header:start
#
#   project      : YamlScribe
#   file         : block.py
#   file_relpath : src/yamlscribe/encoding/block.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block (indented) encoder and the block-context style resolver.

`render` is the entry point the rest of YamlScribe uses: it turns a node and a
`RenderContext` into YAML text. Collections declared flow, and every empty
collection, are delegated to `encode_flow`. Block collections recurse into
their children one `INDENTATION_STEP` deeper. Scalars are handed to
`encode_block_scalar`, which picks the best encoder allowed by the node's style
hint and falls back to one that always parses back to the same value.

The returned fragment never starts with the context indentation for scalars
and flow output (the caller places it after ``- `` or ``key: ``); block
collections indent every line including the first one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yamlscribe.config.logging import get_logger
from yamlscribe.constants import INDENTATION_STEP
from yamlscribe.model.context import RenderContext
from yamlscribe.model.nodes import (
    MappingNode,
    ScalarNode,
    SequenceNode,
    is_block_collection,
    is_empty,
)
from yamlscribe.model.styles import CollectionStyle, ScalarStyle

from .block_scalars import can_encode_block_scalar, encode_folded, encode_literal
from .classify import assert_valid_scalar, needs_escaping
from .flow import encode_flow, encode_key
from .quoted import encode_double_quoted, encode_plain, encode_single_quoted

if TYPE_CHECKING:
    from collections.abc import Iterable

    from yamlscribe.model.nodes import Node

logger = get_logger(__name__)


def encode_block_scalar(node: ScalarNode, indentation: int, line_ending: str) -> str:
    """Resolve the style of a scalar in block context and encode it.

    Resolution order for strings:

    1. A string that needs escaping is double-quoted, whatever its style.
    2. `ScalarStyle.SINGLE_QUOTED` and `ScalarStyle.DOUBLE_QUOTED` are honored.
    3. `ScalarStyle.LITERAL` and `ScalarStyle.FOLDED` use the block scalar
       encoders when `can_encode_block_scalar` accepts the string.
    4. Anything left is written plain, or double-quoted when plain is unsafe.

    Non-string values ignore the style and are always written plain.

    Args:
        node (ScalarNode): The scalar to encode.
        indentation (int): Content indentation used by block scalar styles.
        line_ending (str): Line break used by block scalar styles.

    Returns:
        str: The encoded scalar.

    Raises:
        InvalidScalarTypeError: If ``node.value`` is not a supported scalar.
    """
    value = node.value
    assert_valid_scalar(value)
    if not isinstance(value, str):
        return encode_plain(value)

    style: ScalarStyle = node.style
    if needs_escaping(value):
        if style is not ScalarStyle.DOUBLE_QUOTED:
            logger.trace("%s scalar needs escaping, using double quotes", style.key)
        return encode_double_quoted(value)
    if style is ScalarStyle.SINGLE_QUOTED:
        return encode_single_quoted(value)
    if style is ScalarStyle.DOUBLE_QUOTED:
        return encode_double_quoted(value)
    if style.is_block:
        if can_encode_block_scalar(value):
            encoder = encode_literal if style is ScalarStyle.LITERAL else encode_folded
            return encoder(value, indentation, line_ending)
        logger.trace("%s style cannot hold %r, falling back to plain", style.key, value)
    return encode_plain(value)


def _join_lines(pieces: Iterable[str], line_ending: str) -> str:
    """Join rendered entries, one per line.

    A piece that already ends with a line break (a keep-chomped block scalar)
    is not followed by another one.
    """
    out: list[str] = []
    for piece in pieces:
        if out and not out[-1].endswith("\n"):
            out.append(line_ending)
        out.append(piece)
    return "".join(out)


def _opens_block(node: Node) -> bool:
    """Return True if ``node`` is written on the lines below its parent entry."""
    return is_block_collection(node) and not is_empty(node)


def _render_sequence(node: SequenceNode, context: RenderContext) -> str:
    indent: str = " " * context.indentation
    child: RenderContext = context.nested()
    pieces: list[str] = []
    for item in node.items:
        text: str = render(item, child)
        if _opens_block(item):
            # The first line goes right after "- ".
            text = text[child.indentation :]
        pieces.append(f"{indent}- {text}")
    return _join_lines(pieces, context.line_ending)


def _render_mapping(node: MappingNode, context: RenderContext) -> str:
    indent: str = " " * context.indentation
    child: RenderContext = context.nested()
    pieces: list[str] = []
    for key, value in node.entries:
        key_text: str = encode_key(key)
        if key_text.startswith("? "):
            # explicit key: the value indicator goes on its own line
            head: str = f"{indent}{key_text}{context.line_ending}{indent}:"
        else:
            head = f"{indent}{key_text}:"
        if _opens_block(value):
            pieces.append(head + context.line_ending + render(value, child))
        else:
            pieces.append(f"{head} {render(value, child)}")
    return _join_lines(pieces, context.line_ending)


def render(node: Node, context: RenderContext) -> str:
    """Render ``node`` as YAML text in the given context.

    Example:
        ``render(SequenceNode((ScalarNode("x"), ScalarNode("y"))), RenderContext())``
        returns ``"- x\\n- y"``.

    Args:
        node (Node): Root of the subtree to render.
        context (RenderContext): Indentation of the subtree and line ending.

    Returns:
        str: The rendered fragment, without a trailing line ending (a
            keep-chomped block scalar keeps its own trailing line breaks).

    Raises:
        InvalidScalarTypeError: If a scalar in the tree holds an unsupported value.
    """
    match node:
        case ScalarNode():
            return encode_block_scalar(
                node, context.indentation + INDENTATION_STEP, context.line_ending
            )
        case SequenceNode(style=CollectionStyle.FLOW) | MappingNode(style=CollectionStyle.FLOW):
            return encode_flow(node)
        case SequenceNode(items=()):
            logger.trace("empty block sequence rendered as []")
            return "[]"
        case MappingNode(entries=()):
            logger.trace("empty block mapping rendered as {}")
            return "{}"
        case SequenceNode():
            return _render_sequence(node, context)
        case MappingNode():
            return _render_mapping(node, context)
        case _:
            raise TypeError(f"Unsupported node type: {type(node).__name__}")


def encode_block(node: Node, indentation: int = 0, line_ending: str = "\n") -> str:
    """Render ``node`` in block style; see `render`.

    Args:
        node (Node): Root of the subtree to render.
        indentation (int): Indentation of the subtree, in spaces.
        line_ending (str): Line break placed between lines.

    Returns:
        str: The rendered fragment.
    """
    return render(node, RenderContext(indentation=indentation, line_ending=line_ending))
