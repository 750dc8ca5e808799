"""Convenience functions for Java ``.properties`` escaping."""

from typing import Any, Optional, Sequence, Union

from escapist.shared.config import PropertiesEscapeConfig, PropertiesEscapeLevel, PropertiesRole

from . import engine

_DEFAULT_LEVEL = PropertiesEscapeLevel.LEVEL_2_ALL_NON_ASCII_PLUS_BASIC_ESCAPE_SET
_MINIMAL_LEVEL = PropertiesEscapeLevel.LEVEL_1_BASIC_ESCAPE_SET

LevelArg = Union[PropertiesEscapeLevel, int]


def escape_properties_value_minimal(text: Optional[str]) -> Optional[str]:
    """Escape only the basic set: SEC characters and control characters."""
    return engine.escape(text, PropertiesEscapeConfig(PropertiesRole.VALUE, _MINIMAL_LEVEL))


def escape_properties_value(
    text: Optional[str], level: LevelArg = _DEFAULT_LEVEL
) -> Optional[str]:
    """Escape a property value; by default the basic set plus all non-ASCII.

    Examples:
        >>> escape_properties_value("\\u00e1")
        '\\\\u00E1'
    """
    return engine.escape(text, PropertiesEscapeConfig(PropertiesRole.VALUE, level))


def escape_properties_key_minimal(text: Optional[str]) -> Optional[str]:
    return engine.escape(text, PropertiesEscapeConfig(PropertiesRole.KEY, _MINIMAL_LEVEL))


def escape_properties_key(
    text: Optional[str], level: LevelArg = _DEFAULT_LEVEL
) -> Optional[str]:
    """Escape a property key; space, ``:`` and ``=`` are always escaped."""
    return engine.escape(text, PropertiesEscapeConfig(PropertiesRole.KEY, level))


def unescape_properties(text: Optional[str]) -> Optional[str]:
    """Unescape a property key or value."""
    return engine.unescape(text)


def escape_properties_value_minimal_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.escape_to(
        buffer, offset, length, writer,
        PropertiesEscapeConfig(PropertiesRole.VALUE, _MINIMAL_LEVEL),
    )


def escape_properties_value_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    level: LevelArg = _DEFAULT_LEVEL,
) -> None:
    engine.escape_to(
        buffer, offset, length, writer, PropertiesEscapeConfig(PropertiesRole.VALUE, level)
    )


def escape_properties_key_minimal_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.escape_to(
        buffer, offset, length, writer,
        PropertiesEscapeConfig(PropertiesRole.KEY, _MINIMAL_LEVEL),
    )


def escape_properties_key_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    level: LevelArg = _DEFAULT_LEVEL,
) -> None:
    engine.escape_to(
        buffer, offset, length, writer, PropertiesEscapeConfig(PropertiesRole.KEY, level)
    )


def unescape_properties_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.unescape_to(buffer, offset, length, writer)
