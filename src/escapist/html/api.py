"""Convenience functions for HTML escaping.

Each function only supplies defaults and delegates to :mod:`.engine`.
"""

from typing import Any, Optional, Sequence

from escapist.shared.config import HtmlEscapeConfig, HtmlEscapeLevel, HtmlEscapeType

from . import engine

_HTML5 = HtmlEscapeConfig.html5()
_HTML5_XML = HtmlEscapeConfig.html5_xml()
_HTML4 = HtmlEscapeConfig.html4()
_HTML4_XML = HtmlEscapeConfig.html4_xml()


def escape_html5(text: Optional[str]) -> Optional[str]:
    """Escape markup-significant and non-ASCII characters using HTML5 references.

    Examples:
        >>> escape_html5('<div class="A">')
        '&lt;div class=&quot;A&quot;&gt;'
    """
    return engine.escape(text, _HTML5)


def escape_html5_xml(text: Optional[str]) -> Optional[str]:
    """Escape only the five XML-significant characters using HTML5 references."""
    return engine.escape(text, _HTML5_XML)


def escape_html4(text: Optional[str]) -> Optional[str]:
    """Escape markup-significant and non-ASCII characters using HTML4 references."""
    return engine.escape(text, _HTML4)


def escape_html4_xml(text: Optional[str]) -> Optional[str]:
    """Escape only the five XML-significant characters using HTML4 references."""
    return engine.escape(text, _HTML4_XML)


def escape_html(
    text: Optional[str], escape_type: HtmlEscapeType, level: HtmlEscapeLevel
) -> Optional[str]:
    """Escape ``text`` with an explicit reference type and escape level.

    Args:
        text: Text to escape, or None
        escape_type: Notation of the produced references
        level: How aggressively to escape

    Returns:
        The escaped text, ``text`` itself when unchanged, or None for None input

    Raises:
        InvalidArgumentError: If escape_type or level is None or invalid
    """
    return engine.escape(text, HtmlEscapeConfig(escape_type, level))


def unescape_html(text: Optional[str]) -> Optional[str]:
    """Decode every named, decimal and hexadecimal reference in ``text``."""
    return engine.unescape(text)


def escape_html5_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.escape_to(buffer, offset, length, writer, _HTML5)


def escape_html5_xml_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.escape_to(buffer, offset, length, writer, _HTML5_XML)


def escape_html4_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.escape_to(buffer, offset, length, writer, _HTML4)


def escape_html4_xml_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.escape_to(buffer, offset, length, writer, _HTML4_XML)


def escape_html_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    escape_type: HtmlEscapeType,
    level: HtmlEscapeLevel,
) -> None:
    engine.escape_to(buffer, offset, length, writer, HtmlEscapeConfig(escape_type, level))


def unescape_html_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.unescape_to(buffer, offset, length, writer)
