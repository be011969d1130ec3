# topmark:header:start
#
#   project      : YamlScribe
#   file         : test_public_api.py
#   file_relpath : tests/test_public_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Smoke tests for the names exported by the top-level package."""

from __future__ import annotations

import yamlscribe
from yamlscribe import (
    LineEnding,
    MappingNode,
    ScalarNode,
    ScalarStyle,
    SequenceNode,
    encode_block,
    encode_flow,
    wrap_as_node,
)


def test_all_names_resolve() -> None:
    for name in yamlscribe.__all__:
        assert hasattr(yamlscribe, name), name


def test_version_is_exported() -> None:
    assert yamlscribe.__version__ == yamlscribe.constants.YAMLSCRIBE_VERSION


def test_package_example() -> None:
    assert encode_block(wrap_as_node({"k": [], "s": ["x", "y"]})) == "k: []\ns:\n  - x\n  - y"


def test_mixed_tree() -> None:
    tree = MappingNode(
        (
            (ScalarNode("script"), ScalarNode("echo hi\necho bye\n", ScalarStyle.LITERAL)),
            (ScalarNode("args"), SequenceNode((ScalarNode("-x"), ScalarNode(3)))),
        )
    )
    assert encode_block(tree) == 'script: |+\n    echo hi\n    echo bye\nargs:\n  - "-x"\n  - 3'
    assert encode_flow(tree) == '{script: "echo hi\\necho bye\\n", args: ["-x", 3]}'
    assert LineEnding.CRLF.chars == "\r\n"
