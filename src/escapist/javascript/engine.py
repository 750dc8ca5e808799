"""JavaScript string literal escaping on top of the backslash engine.

Escapes are valid inside both single- and double-quoted literals. NUL is
never written as ``\\0`` because a following digit would turn it into a
legacy octal escape; it falls back to ``\\x00`` or ``\\u0000`` instead.
"""

from typing import Any, Optional, Sequence

from ..engine.assembler import OutputAssembler
from ..engine.backslash import (
    BackslashEscapeTable,
    build_level_table,
    closing_tag_predicate,
    escape_backslash,
    unescape_backslash,
)
from ..engine.scanner import transform_text, transform_window
from ..engine.window import require_config, require_writer
from ..shared.config import JavaScriptEscapeConfig

_SECS = {
    0x08: "b",
    0x09: "t",
    0x0A: "n",
    0x0C: "f",
    0x0D: "r",
    0x22: '"',
    0x27: "'",
    0x5C: "\\",
    0x2F: "/",
}

_UNESCAPE_ALIASES = {
    **{letter: chr(codepoint) for codepoint, letter in _SECS.items()},
    "0": "\x00",
    "v": "\x0b",
}

JAVASCRIPT_TABLE = BackslashEscapeTable(
    escape_aliases=_SECS,
    levels=build_level_table(set(_SECS)),
    unescape_aliases=_UNESCAPE_ALIASES,
    accepts_xhexa=True,
)


def _escaper(config: JavaScriptEscapeConfig):
    level = int(config.level)
    escape_type = config.escape_type

    def transform(source: Sequence[str], start: int, end: int, assembler: OutputAssembler) -> None:
        escape_backslash(
            source,
            start,
            end,
            assembler,
            JAVASCRIPT_TABLE,
            level,
            escape_type.use_secs,
            closing_tag_predicate(JAVASCRIPT_TABLE, source, start, level),
            escape_type.use_xhexa,
        )

    return transform


def _unescape_javascript_text(
    source: Sequence[str], start: int, end: int, assembler: OutputAssembler
) -> None:
    unescape_backslash(source, start, end, assembler, JAVASCRIPT_TABLE)


def escape(text: Optional[str], config: JavaScriptEscapeConfig) -> Optional[str]:
    """Escape ``text`` as JavaScript string content (without enclosing quotes)."""
    require_config(config, JavaScriptEscapeConfig)
    return transform_text(text, _escaper(config))


def escape_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    config: JavaScriptEscapeConfig,
) -> None:
    require_writer(writer)
    require_config(config, JavaScriptEscapeConfig)
    transform_window(buffer, offset, length, writer, _escaper(config))


def unescape(
    text: Optional[str], config: Optional[JavaScriptEscapeConfig] = None
) -> Optional[str]:
    """Unescape JavaScript string content.

    SECs (including ``\\v`` and ``\\0``), ``\\xHH`` and ``\\uXXXX`` are
    decoded; paired ``\\u`` surrogates combine into one codepoint.

    Raises:
        MalformedEscapeError: On a trailing backslash, an unknown escape, a bad
            hexadecimal field or a legacy octal escape
    """
    return transform_text(text, _unescape_javascript_text)


def unescape_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    config: Optional[JavaScriptEscapeConfig] = None,
) -> None:
    transform_window(buffer, offset, length, writer, _unescape_javascript_text)
