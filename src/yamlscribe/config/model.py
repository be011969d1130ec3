# topmark:header:start
#
#   project      : YamlScribe
#   file         : model.py
#   file_relpath : src/yamlscribe/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encoder configuration.

`EncoderConfig` holds the settings that are not part of the node tree: the base
indentation, the line ending and optional style overrides. It is loaded from
the first source found, in this order:

1. an explicit path (``--config PATH`` on the command line);
2. ``yamlscribe.toml`` in the working directory;
3. the ``[tool.yamlscribe]`` table of ``pyproject.toml`` in the working directory;
4. built-in defaults.

Sources are not layered: the first one found is the only one read. Command
line options are applied on top with `EncoderConfig.merged`.

Example ``yamlscribe.toml``:

```toml
indentation = 0
line_ending = "auto"       # "lf", "crlf" or "auto" (follow the input)
scalar_style = "preserve"  # or "plain", "single", "double", "literal", "folded"
collection_style = "flow"  # or "block", "preserve"
```
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from yamlscribe.config.io import (
    extract_pyproject_table,
    get_int_value_or_none_checked,
    get_keyed_enum_value_checked,
    load_toml_dict,
    warn_unknown_keys,
)
from yamlscribe.config.keys import Toml
from yamlscribe.config.logging import get_logger
from yamlscribe.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_SECTION
from yamlscribe.core.diagnostics import DiagnosticLog
from yamlscribe.errors import ConfigError
from yamlscribe.model.builders import restyle
from yamlscribe.model.context import RenderContext, detect_line_ending
from yamlscribe.model.styles import CollectionStyle, LineEnding, ScalarStyle

if TYPE_CHECKING:
    from yamlscribe.config.io import TomlTable
    from yamlscribe.config.logging import YamlScribeLogger
    from yamlscribe.model.nodes import Node

logger: YamlScribeLogger = get_logger(__name__)

_PRESERVABLE: Final[frozenset[str]] = frozenset({"scalar_style", "collection_style"})


@dataclass(frozen=True)
class EncoderConfig:
    """Settings applied around a render call.

    Attributes:
        indentation (int): Base indentation of the rendered document, in spaces.
        line_ending (LineEnding): Line ending; `LineEnding.AUTO` follows the input text.
        scalar_style (ScalarStyle | None): Style forced on every value scalar,
            or ``None`` to keep the styles of the document.
        collection_style (CollectionStyle | None): Style forced on every
            collection, or ``None`` to keep the styles of the document.
        source (Path | None): File the configuration was read from, if any.
    """

    indentation: int = 0
    line_ending: LineEnding = LineEnding.AUTO
    scalar_style: ScalarStyle | None = None
    collection_style: CollectionStyle | None = None
    source: Path | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.indentation < 0:
            raise ConfigError(f"indentation must be >= 0, got {self.indentation}")

    # --- Construction ---

    @classmethod
    def from_toml_table(
        cls,
        table: TomlTable,
        *,
        where: str = "[yamlscribe]",
        diagnostics: DiagnosticLog | None = None,
        source: Path | None = None,
    ) -> EncoderConfig:
        """Build a config from a parsed TOML table.

        Values of the wrong type are ignored with a warning. Out-of-range
        values and unknown style tokens are errors.

        Args:
            table (TomlTable): Table holding the YamlScribe keys.
            where (str): Location used in diagnostics (e.g. ``"[tool.yamlscribe]"``).
            diagnostics (DiagnosticLog | None): Log receiving warnings and errors;
                a private log is used when omitted.
            source (Path | None): File the table was read from.

        Returns:
            EncoderConfig: The configuration.

        Raises:
            ConfigError: If any error was recorded.
        """
        diags: DiagnosticLog = diagnostics if diagnostics is not None else DiagnosticLog()
        n_errors_before: int = len(diags.errors())

        warn_unknown_keys(table, Toml.ALL_KEYS, where=where, diagnostics=diags, logger=logger)
        indentation: int | None = get_int_value_or_none_checked(
            table, Toml.KEY_INDENTATION, where=where, diagnostics=diags, logger=logger, minimum=0
        )
        line_ending = get_keyed_enum_value_checked(
            table, Toml.KEY_LINE_ENDING, LineEnding, where=where, diagnostics=diags, logger=logger
        )
        scalar_style = get_keyed_enum_value_checked(
            table,
            Toml.KEY_SCALAR_STYLE,
            ScalarStyle,
            where=where,
            diagnostics=diags,
            logger=logger,
            extra_tokens=(Toml.VALUE_PRESERVE,),
        )
        collection_style = get_keyed_enum_value_checked(
            table,
            Toml.KEY_COLLECTION_STYLE,
            CollectionStyle,
            where=where,
            diagnostics=diags,
            logger=logger,
            extra_tokens=(Toml.VALUE_PRESERVE,),
        )

        new_errors: list[str] = diags.errors()[n_errors_before:]
        if new_errors:
            raise ConfigError("; ".join(new_errors))

        kwargs: dict[str, Any] = {"source": source}
        if indentation is not None:
            kwargs["indentation"] = indentation
        if isinstance(line_ending, LineEnding):
            kwargs["line_ending"] = line_ending
        if isinstance(scalar_style, ScalarStyle):
            kwargs["scalar_style"] = scalar_style
        if isinstance(collection_style, CollectionStyle):
            kwargs["collection_style"] = collection_style
        return cls(**kwargs)

    @classmethod
    def from_path(cls, path: Path, *, diagnostics: DiagnosticLog | None = None) -> EncoderConfig:
        """Load a config file.

        A file named ``pyproject.toml`` is read from its ``[tool.yamlscribe]``
        table (defaults apply when the table is missing); any other file is
        read from its top level.

        Raises:
            ConfigError: If the file cannot be read or parsed, or holds invalid values.
        """
        diags: DiagnosticLog = diagnostics if diagnostics is not None else DiagnosticLog()
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_FILE_NAME:
            section: TomlTable | None = extract_pyproject_table(data)
            if section is None:
                diags.add_warning(f"No [{PYPROJECT_SECTION}] table in {path}, using defaults")
                return cls(source=path)
            return cls.from_toml_table(
                section, where=f"[{PYPROJECT_SECTION}]", diagnostics=diags, source=path
            )
        return cls.from_toml_table(data, where=path.name, diagnostics=diags, source=path)

    @classmethod
    def discover(
        cls,
        cwd: Path | None = None,
        *,
        diagnostics: DiagnosticLog | None = None,
    ) -> EncoderConfig:
        """Find and load the configuration for ``cwd`` (default: the working directory).

        Returns the defaults when neither ``yamlscribe.toml`` nor a
        ``pyproject.toml`` with a ``[tool.yamlscribe]`` table exists.
        """
        base: Path = cwd if cwd is not None else Path.cwd()

        candidate: Path = base / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Using config file %s", candidate)
            return cls.from_path(candidate, diagnostics=diagnostics)

        pyproject: Path = base / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            section: TomlTable | None = extract_pyproject_table(load_toml_dict(pyproject))
            if section is not None:
                logger.debug("Using [%s] from %s", PYPROJECT_SECTION, pyproject)
                return cls.from_toml_table(
                    section,
                    where=f"[{PYPROJECT_SECTION}]",
                    diagnostics=diagnostics,
                    source=pyproject,
                )

        logger.debug("No configuration found in %s, using defaults", base)
        return cls()

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        *,
        cwd: Path | None = None,
        diagnostics: DiagnosticLog | None = None,
    ) -> EncoderConfig:
        """Load ``path`` if given, otherwise run `discover`."""
        if path is not None:
            return cls.from_path(path, diagnostics=diagnostics)
        return cls.discover(cwd, diagnostics=diagnostics)

    # --- Overrides ---

    def merged(self, **overrides: Any) -> EncoderConfig:
        """Return a copy with the non-``None`` ``overrides`` applied.

        For the two style settings the token ``"preserve"`` resets the
        override, so the styles of the document are kept.

        Raises:
            ConfigError: If an override names an unknown setting or sets a
                negative indentation.
        """
        known: set[str] = {f.name for f in fields(self)}
        unknown: list[str] = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(f"Unknown config setting(s): {', '.join(unknown)}")
        changes: dict[str, Any] = {}
        for name, value in overrides.items():
            if value is None:
                continue
            if name in _PRESERVABLE and value == Toml.VALUE_PRESERVE:
                value = None
            changes[name] = value
        if not changes:
            return self
        logger.trace("Applying config overrides: %r", changes)
        return replace(self, **changes)

    # --- Application ---

    def resolve_line_ending(self, text: str = "") -> str:
        """Return the line ending characters to use for output derived from ``text``."""
        chars: str | None = self.line_ending.chars
        return chars if chars is not None else detect_line_ending(text)

    def render_context(self, text: str = "") -> RenderContext:
        """Return the `RenderContext` for rendering a document parsed from ``text``."""
        return RenderContext(
            indentation=self.indentation, line_ending=self.resolve_line_ending(text)
        )

    def apply_styles(self, node: Node) -> Node:
        """Apply the configured style overrides to ``node`` (see `restyle`)."""
        return restyle(
            node, scalar_style=self.scalar_style, collection_style=self.collection_style
        )
