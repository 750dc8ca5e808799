"""JSON string escaping on top of the backslash engine.

``/`` is a single escape character in JSON but is only escaped below level 3
when it directly follows ``<``, which is enough to keep ``</script>`` out of
JSON embedded in HTML.
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
from ..shared.config import JsonEscapeConfig

_SECS = {
    0x08: "b",
    0x09: "t",
    0x0A: "n",
    0x0C: "f",
    0x0D: "r",
    0x22: '"',
    0x5C: "\\",
    0x2F: "/",
}

JSON_TABLE = BackslashEscapeTable(
    escape_aliases=_SECS,
    levels=build_level_table(set(_SECS) | {ord("&")}),
    unescape_aliases={letter: chr(codepoint) for codepoint, letter in _SECS.items()},
)


def _escaper(config: JsonEscapeConfig):
    level = int(config.level)
    use_secs = config.escape_type.use_secs

    def transform(source: Sequence[str], start: int, end: int, assembler: OutputAssembler) -> None:
        escape_backslash(
            source,
            start,
            end,
            assembler,
            JSON_TABLE,
            level,
            use_secs,
            closing_tag_predicate(JSON_TABLE, source, start, level),
        )

    return transform


def _unescape_json_text(
    source: Sequence[str], start: int, end: int, assembler: OutputAssembler
) -> None:
    unescape_backslash(source, start, end, assembler, JSON_TABLE)


def escape(text: Optional[str], config: JsonEscapeConfig) -> Optional[str]:
    """Escape ``text`` as JSON string content (without enclosing quotes)."""
    require_config(config, JsonEscapeConfig)
    return transform_text(text, _escaper(config))


def escape_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    config: JsonEscapeConfig,
) -> None:
    require_writer(writer)
    require_config(config, JsonEscapeConfig)
    transform_window(buffer, offset, length, writer, _escaper(config))


def unescape(text: Optional[str], config: Optional[JsonEscapeConfig] = None) -> Optional[str]:
    """Unescape JSON string content.

    Raises:
        MalformedEscapeError: On a trailing backslash, an unknown escape or a
            bad ``\\u`` sequence
    """
    return transform_text(text, _unescape_json_text)


def unescape_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    config: Optional[JsonEscapeConfig] = None,
) -> None:
    transform_window(buffer, offset, length, writer, _unescape_json_text)
