"""Java ``.properties`` escaping on top of the backslash engine.

Keys and values share the ``\\uXXXX`` notation and the level ladder but not
their single escape characters: keys additionally escape space, ``:`` and
``=`` so that the key/value separator cannot appear inside a key.
"""

from typing import Any, Optional, Sequence

from ..engine.assembler import OutputAssembler
from ..engine.backslash import (
    BackslashEscapeTable,
    build_level_table,
    escape_backslash,
    unescape_backslash,
)
from ..engine.scanner import transform_text, transform_window
from ..engine.window import require_config, require_writer
from ..shared.config import PropertiesEscapeConfig, PropertiesRole

_VALUE_SECS = {0x09: "t", 0x0A: "n", 0x0C: "f", 0x0D: "r", 0x5C: "\\"}
_KEY_SECS = {**_VALUE_SECS, 0x20: " ", 0x3A: ":", 0x3D: "="}

# Accepted regardless of role; '#' and '!' are comment markers in the format
_UNESCAPE_ALIASES = {
    "t": "\t",
    "n": "\n",
    "f": "\f",
    "r": "\r",
    "\\": "\\",
    " ": " ",
    ":": ":",
    "=": "=",
    "#": "#",
    "!": "!",
}

VALUE_TABLE = BackslashEscapeTable(
    escape_aliases=_VALUE_SECS,
    levels=build_level_table(set(_VALUE_SECS)),
    unescape_aliases=_UNESCAPE_ALIASES,
)

KEY_TABLE = BackslashEscapeTable(
    escape_aliases=_KEY_SECS,
    levels=build_level_table(set(_KEY_SECS)),
    unescape_aliases=_UNESCAPE_ALIASES,
)


def table_for(role: PropertiesRole) -> BackslashEscapeTable:
    return KEY_TABLE if role is PropertiesRole.KEY else VALUE_TABLE


def _escaper(config: PropertiesEscapeConfig):
    table = table_for(config.role)
    level = int(config.level)

    def transform(source: Sequence[str], start: int, end: int, assembler: OutputAssembler) -> None:
        escape_backslash(source, start, end, assembler, table, level)

    return transform


def _unescape_properties_text(
    source: Sequence[str], start: int, end: int, assembler: OutputAssembler
) -> None:
    unescape_backslash(source, start, end, assembler, KEY_TABLE)


def escape(text: Optional[str], config: PropertiesEscapeConfig) -> Optional[str]:
    """Escape a ``.properties`` key or value according to ``config``."""
    require_config(config, PropertiesEscapeConfig)
    return transform_text(text, _escaper(config))


def escape_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    config: PropertiesEscapeConfig,
) -> None:
    require_writer(writer)
    require_config(config, PropertiesEscapeConfig)
    transform_window(buffer, offset, length, writer, _escaper(config))


def unescape(
    text: Optional[str], config: Optional[PropertiesEscapeConfig] = None
) -> Optional[str]:
    """Unescape a ``.properties`` key or value.

    Raises:
        MalformedEscapeError: On a trailing backslash, an unknown escape or a
            bad ``\\u`` sequence
    """
    return transform_text(text, _unescape_properties_text)


def unescape_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    config: Optional[PropertiesEscapeConfig] = None,
) -> None:
    transform_window(buffer, offset, length, writer, _unescape_properties_text)
