# topmark:header:start
#
#   project      : YamlScribe
#   file         : cli_types.py
#   file_relpath : src/yamlscribe/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the YamlScribe CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar

import click

from yamlscribe.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=KeyedStrEnum)


class KeyedEnumChoiceParam(click.ParamType, Generic[E]):
    """Convert a token into a `KeyedStrEnum` member.

    Tokens are matched with `KeyedStrEnum.parse` (keys, names and aliases; case
    and ``-``/``_`` insensitive). Tokens listed in ``extra`` (e.g. ``"preserve"``)
    pass through as lowercase strings.
    """

    enum_cls: type[E]
    name: str
    extra: tuple[str, ...]

    def __init__(self, enum_cls: type[E], *, extra: tuple[str, ...] = ()) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self.extra = extra

    @property
    def choices(self) -> list[str]:
        """Canonical tokens shown in help and error messages."""
        return [*self.extra, *self.enum_cls.keys()]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | str:
        """Convert ``value`` to an enum member (or one of the extra tokens)."""
        if isinstance(value, self.enum_cls):
            return value
        token: str = str(value).strip().lower()
        if token in self.extra:
            return token
        parsed: E | None = self.enum_cls.parse(str(value))
        if parsed is None:
            self._fail_noreturn(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return parsed

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Show the canonical tokens as ``[a|b|c]`` in help output."""
        return "[" + "|".join(self.choices) + "]"

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Tab completion over the canonical tokens."""
        # Runtime import to avoid import-time dependency for non-completion paths
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = (incomplete or "").lower()
        return [RuntimeCompletionItem(c) for c in self.choices if c.startswith(prefix)]

    def __repr__(self) -> str:
        return f"KeyedEnumChoiceParam({self.enum_cls.__name__})"
