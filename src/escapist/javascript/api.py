"""Convenience functions for JavaScript string literal escaping."""

from typing import Any, Optional, Sequence, Union

from escapist.shared.config import (
    JavaScriptEscapeConfig,
    JavaScriptEscapeLevel,
    JavaScriptEscapeType,
)

from . import engine

_MINIMAL = JavaScriptEscapeConfig.minimal()
_DEFAULT_TYPE = JavaScriptEscapeType.SINGLE_ESCAPE_CHARS_DEFAULT_TO_XHEXA_AND_UHEXA
_DEFAULT_LEVEL = JavaScriptEscapeLevel.LEVEL_2_ALL_NON_ASCII_PLUS_BASIC_ESCAPE_SET


def escape_javascript_minimal(text: Optional[str]) -> Optional[str]:
    """Escape only the basic set: SECs, controls and ``</``.

    Examples:
        >>> print(escape_javascript_minimal("it's </b>"))
        it\\'s <\\/b>
    """
    return engine.escape(text, _MINIMAL)


def escape_javascript(
    text: Optional[str],
    escape_type: JavaScriptEscapeType = _DEFAULT_TYPE,
    level: Union[JavaScriptEscapeLevel, int] = _DEFAULT_LEVEL,
) -> Optional[str]:
    """Escape JavaScript string content.

    Args:
        text: Text to escape, or None
        escape_type: Which of SECs, ``\\xHH`` and ``\\uXXXX`` are used
        level: How aggressively to escape; defaults to the basic set plus non-ASCII

    Returns:
        The escaped text, ``text`` itself when unchanged, or None for None input
    """
    return engine.escape(text, JavaScriptEscapeConfig(escape_type, level))


def unescape_javascript(text: Optional[str]) -> Optional[str]:
    return engine.unescape(text)


def escape_javascript_minimal_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.escape_to(buffer, offset, length, writer, _MINIMAL)


def escape_javascript_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    escape_type: JavaScriptEscapeType = _DEFAULT_TYPE,
    level: Union[JavaScriptEscapeLevel, int] = _DEFAULT_LEVEL,
) -> None:
    engine.escape_to(
        buffer, offset, length, writer, JavaScriptEscapeConfig(escape_type, level)
    )


def unescape_javascript_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.unescape_to(buffer, offset, length, writer)
