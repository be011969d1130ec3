# topmark:header:start
#
#   project      : YamlScribe
#   file         : __init__.py
#   file_relpath : src/yamlscribe/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for YamlScribe.

`yamlscribe.config.logging` sets up logging; `yamlscribe.config.io` loads TOML
files with tomlkit; `yamlscribe.config.model` holds `EncoderConfig` and the
discovery of ``yamlscribe.toml`` / ``[tool.yamlscribe]``.

This package module stays free of imports so that the encoder can import
`yamlscribe.config.logging` without pulling in the configuration model.
"""
