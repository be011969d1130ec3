# topmark:header:start
#
#   project      : YamlScribe
#   file         : __main__.py
#   file_relpath : src/yamlscribe/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running YamlScribe via ``python -m yamlscribe``.

Equivalent to the ``yamlscribe`` console script; it delegates to
:func:`yamlscribe.cli.main.cli`.

Examples:
    Re-encode a document from standard input::

        cat doc.yaml | python -m yamlscribe render -
"""

from __future__ import annotations

from yamlscribe.cli.main import cli

if __name__ == "__main__":
    cli()
