# topmark:header:start
#
#   project      : YamlScribe
#   file         : strategies_yamlscribe.py
#   file_relpath : tests/strategies_yamlscribe.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating YamlScribe node trees.

Generated trees hold only values PyYAML's safe loader reads back unchanged:
strings drawn from the whole of Unicode except surrogates, integers, finite
floats, booleans and ``None``. Mapping keys are unique strings so that the
parsed ``dict`` keeps every entry.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

from hypothesis import strategies as st

from yamlscribe.model.nodes import MappingNode, Node, ScalarNode, SequenceNode
from yamlscribe.model.styles import CollectionStyle, ScalarStyle

Draw = Callable[[st.SearchStrategy[Any]], Any]

BLACKLIST_CATEGORIES: tuple[Literal["Cs"], ...] = ("Cs",)

LINE_ENDINGS: tuple[str, ...] = ("\n", "\r\n")

# Printable text without line breaks or tabs, biased towards YAML syntax characters.
YAML_SYNTAX_CHARS: str = "-:?#&*!|>'\"%@`,[]{} ~.=<"

any_text: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(blacklist_categories=BLACKLIST_CATEGORIES),
    max_size=20,
)

syntax_text: st.SearchStrategy[str] = st.text(
    alphabet=st.sampled_from(YAML_SYNTAX_CHARS + "abcxyz019"),
    max_size=12,
)

multiline_text: st.SearchStrategy[str] = st.lists(
    st.text(alphabet=st.sampled_from(" \tab#-:'\"xyz"), max_size=8),
    min_size=1,
    max_size=5,
).map("\n".join)

texts: st.SearchStrategy[str] = st.one_of(any_text, syntax_text, multiline_text)

scalar_values: st.SearchStrategy[Any] = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    texts,
)

scalar_styles: st.SearchStrategy[ScalarStyle] = st.sampled_from(list(ScalarStyle))
collection_styles: st.SearchStrategy[CollectionStyle] = st.sampled_from(list(CollectionStyle))

scalar_nodes: st.SearchStrategy[ScalarNode] = st.builds(ScalarNode, scalar_values, scalar_styles)

key_nodes: st.SearchStrategy[ScalarNode] = st.builds(ScalarNode, texts, scalar_styles)


@st.composite
def mapping_nodes(draw: Draw, children: st.SearchStrategy[Node]) -> MappingNode:
    """Draw a mapping with unique string keys over ``children``."""
    entries: list[tuple[ScalarNode, Node]] = draw(
        st.lists(
            st.tuples(key_nodes, children),
            max_size=4,
            unique_by=lambda kv: kv[0].value,
        )
    )
    return MappingNode(entries=tuple(entries), style=draw(collection_styles))


def _extend(children: st.SearchStrategy[Node]) -> st.SearchStrategy[Node]:
    sequences: st.SearchStrategy[Node] = st.builds(
        SequenceNode,
        st.lists(children, max_size=4).map(tuple),
        collection_styles,
    )
    return st.one_of(sequences, mapping_nodes(children))


nodes: st.SearchStrategy[Node] = st.recursive(scalar_nodes, _extend, max_leaves=12)


def to_python(node: Node) -> Any:
    """Return the plain Python value ``yaml.safe_load`` should produce for ``node``."""
    if isinstance(node, ScalarNode):
        return node.value
    if isinstance(node, SequenceNode):
        return [to_python(item) for item in node.items]
    return {to_python(k): to_python(v) for k, v in node.entries}
