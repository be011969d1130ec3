# topmark:header:start
#
#   project      : YamlScribe
#   file         : getters.py
#   file_relpath : src/yamlscribe/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Each getter validates the expected shape. A value of the wrong type is logged
and recorded as a *warning* in a `DiagnosticLog`, and the getter returns
``None`` (the key then keeps its default). A value of the right type that is
out of range or not a known token is recorded as an *error*; the caller decides
whether errors abort loading.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, TypeVar

from yamlscribe.core.enum_mixins import KeyedStrEnum

from .guards import is_toml_int

if TYPE_CHECKING:
    from yamlscribe.config.logging import YamlScribeLogger
    from yamlscribe.core.diagnostics import DiagnosticLog

    from .types import TomlTable

E = TypeVar("E", bound=KeyedStrEnum)


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: YamlScribeLogger,
    minimum: int | None = None,
) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    Notes:
        - Missing key -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
        - A value below ``minimum`` is recorded as an error and yields None.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not is_toml_int(value):
        logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
        return None

    if minimum is not None and value < minimum:
        logger.error("Value for %s must be >= %d, got %d", loc, minimum, value)
        diagnostics.add_error(f"Value for {loc} must be >= {minimum}, got {value}")
        return None
    return value


def get_keyed_enum_value_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: YamlScribeLogger,
    extra_tokens: tuple[str, ...] = (),
) -> E | str | None:
    """Parse a `KeyedStrEnum` value from TOML.

    Tokens are matched with `KeyedStrEnum.parse`, so keys, member names and
    aliases are accepted regardless of case and of ``-``/``_``.

    - Missing key -> None
    - Wrong type -> warning + None
    - One of ``extra_tokens`` (e.g. ``"preserve"``) -> that token, lowercased
    - Unknown token -> error + None

    Returns:
        E | str | None: The parsed member, a matched extra token, or None.
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, str):
        logger.warning(
            "Expected string enum value in %s, got %s: %r",
            loc,
            type(raw).__name__,
            raw,
        )
        diagnostics.add_warning(
            f"Expected string enum value in {loc}, got {type(raw).__name__}: {raw!r}"
        )
        return None

    token: str = raw.strip().lower()
    if token in extra_tokens:
        return token

    parsed: E | None = enum_cls.parse(raw)
    if parsed is None:
        allowed: str = ", ".join([*extra_tokens, *enum_cls.keys()])
        logger.error("Invalid value for %s: %r (allowed: %s)", loc, raw, allowed)
        diagnostics.add_error(f"Invalid value for {loc}: {raw!r} (allowed: {allowed})")
    return parsed


def warn_unknown_keys(
    table: TomlTable,
    known: frozenset[str],
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: YamlScribeLogger,
) -> None:
    """Record a warning for every key of ``table`` not in ``known``."""
    for key in table:
        if key not in known:
            logger.warning("Ignoring unknown key %s.%s", where, key)
            diagnostics.add_warning(f"Ignoring unknown key {where}.{key}")
