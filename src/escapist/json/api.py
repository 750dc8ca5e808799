"""Convenience functions for JSON string escaping."""

from typing import Any, Optional, Sequence, Union

from escapist.shared.config import JsonEscapeConfig, JsonEscapeLevel, JsonEscapeType

from . import engine

_MINIMAL = JsonEscapeConfig.minimal()
_DEFAULT_TYPE = JsonEscapeType.SINGLE_ESCAPE_CHARS_DEFAULT_TO_UHEXA
_DEFAULT_LEVEL = JsonEscapeLevel.LEVEL_2_ALL_NON_ASCII_PLUS_BASIC_ESCAPE_SET


def escape_json_minimal(text: Optional[str]) -> Optional[str]:
    """Escape only the basic set: SECs, ``&``, controls and ``</``."""
    return engine.escape(text, _MINIMAL)


def escape_json(
    text: Optional[str],
    escape_type: JsonEscapeType = _DEFAULT_TYPE,
    level: Union[JsonEscapeLevel, int] = _DEFAULT_LEVEL,
) -> Optional[str]:
    """Escape JSON string content.

    Args:
        text: Text to escape, or None
        escape_type: Whether single escape characters are preferred over ``\\uXXXX``
        level: How aggressively to escape; defaults to the basic set plus non-ASCII

    Returns:
        The escaped text, ``text`` itself when unchanged, or None for None input
    """
    return engine.escape(text, JsonEscapeConfig(escape_type, level))


def unescape_json(text: Optional[str]) -> Optional[str]:
    return engine.unescape(text)


def escape_json_minimal_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.escape_to(buffer, offset, length, writer, _MINIMAL)


def escape_json_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    escape_type: JsonEscapeType = _DEFAULT_TYPE,
    level: Union[JsonEscapeLevel, int] = _DEFAULT_LEVEL,
) -> None:
    engine.escape_to(buffer, offset, length, writer, JsonEscapeConfig(escape_type, level))


def unescape_json_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.unescape_to(buffer, offset, length, writer)
