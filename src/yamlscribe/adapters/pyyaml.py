# topmark:header:start
#
#   project      : YamlScribe
#   file         : pyyaml.py
#   file_relpath : src/yamlscribe/adapters/pyyaml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build YamlScribe nodes from YAML text with PyYAML.

PyYAML's composer keeps the presentation details YamlScribe cares about: the
``style`` of every scalar (``None`` for plain, or one of ``'``, ``"``, ``|``,
``>``) and the ``flow_style`` of every collection. Scalar values are produced by
the safe constructor, so ``"1"`` and ``1`` stay distinct.

Only one document is composed. Aliases resolve to a copy of the anchored node;
anchors themselves are not kept.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

import yaml

from yamlscribe.config.logging import get_logger
from yamlscribe.encoding.classify import assert_valid_scalar
from yamlscribe.errors import YamlSourceError
from yamlscribe.model.nodes import MappingNode, ScalarNode, SequenceNode
from yamlscribe.model.styles import CollectionStyle, ScalarStyle

if TYPE_CHECKING:
    from yamlscribe.model.nodes import Node

logger = get_logger(__name__)

SCALAR_STYLES: Final[dict[str | None, ScalarStyle]] = {
    None: ScalarStyle.PLAIN,
    "": ScalarStyle.PLAIN,
    "'": ScalarStyle.SINGLE_QUOTED,
    '"': ScalarStyle.DOUBLE_QUOTED,
    "|": ScalarStyle.LITERAL,
    ">": ScalarStyle.FOLDED,
}


def _collection_style(node: yaml.CollectionNode) -> CollectionStyle:
    return CollectionStyle.FLOW if node.flow_style else CollectionStyle.BLOCK


def _convert(loader: yaml.SafeLoader, node: yaml.Node) -> Node:
    if isinstance(node, yaml.ScalarNode):
        value = loader.construct_object(node, deep=True)
        assert_valid_scalar(value)
        return ScalarNode(value, SCALAR_STYLES.get(node.style, ScalarStyle.PLAIN))
    if isinstance(node, yaml.SequenceNode):
        return SequenceNode(
            items=tuple(_convert(loader, item) for item in node.value),
            style=_collection_style(node),
        )
    if isinstance(node, yaml.MappingNode):
        return MappingNode(
            entries=tuple((_convert(loader, k), _convert(loader, v)) for k, v in node.value),
            style=_collection_style(node),
        )
    raise YamlSourceError(f"Unsupported YAML node: {type(node).__name__}")


def node_from_yaml(text: str) -> Node:
    """Compose a single YAML document into a YamlScribe node tree.

    An empty document (no content at all) yields ``ScalarNode(None)``.

    Args:
        text (str): YAML source holding at most one document.

    Returns:
        Node: The root node, with the scalar and collection styles found in
            the source.

    Raises:
        YamlSourceError: If PyYAML rejects the text (syntax error, several
            documents).
        InvalidScalarTypeError: If a scalar constructs to a value outside
            ``None``/``bool``/``int``/``float``/``str`` (e.g. a timestamp).
    """
    loader = yaml.SafeLoader(text)
    try:
        root: yaml.Node | None = loader.get_single_node()
        if root is None:
            logger.debug("Empty YAML document, using a null scalar")
            return ScalarNode(None)
        logger.debug("Composed YAML document with root %s", root.tag)
        return _convert(loader, root)
    except yaml.YAMLError as exc:
        raise YamlSourceError(f"Invalid YAML source: {exc}") from exc
    finally:
        loader.dispose()
