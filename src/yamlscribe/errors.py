# topmark:header:start
#
#   project      : YamlScribe
#   file         : errors.py
#   file_relpath : src/yamlscribe/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by YamlScribe.

The encoder has a single hard failure, `InvalidScalarTypeError`: every other
style problem is resolved by a deterministic fallback. The remaining classes
belong to the layers around the encoder (YAML source adapter and
configuration); the CLI maps all of them onto exit codes.
"""

from __future__ import annotations


class YamlScribeError(Exception):
    """Base class for all YamlScribe errors."""


class InvalidScalarTypeError(YamlScribeError, TypeError):
    """A value used as a scalar is not ``None``, ``bool``, ``int``, ``float`` or ``str``.

    Attributes:
        value (object): The rejected value.
    """

    def __init__(self, value: object) -> None:
        self.value: object = value
        super().__init__(
            f"Invalid scalar type {type(value).__name__!r}: {value!r} "
            "(expected None, bool, int, float or str)"
        )


class YamlSourceError(YamlScribeError, ValueError):
    """YAML source text could not be composed into a single node tree."""


class ConfigError(YamlScribeError, ValueError):
    """A configuration value is malformed or out of range."""
