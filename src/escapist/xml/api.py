"""Convenience functions for XML 1.0 and XML 1.1 escaping.

The ``*_minimal`` variants escape only the five markup-significant characters
(plus the characters each version requires to be escaped); the plain variants
also escape everything outside ASCII.
"""

from typing import Any, Optional, Sequence, Union

from escapist.shared.config import XmlEscapeConfig, XmlEscapeLevel, XmlEscapeType, XmlVersion

from . import engine

_XML10_MINIMAL = XmlEscapeConfig.xml10_minimal()
_XML10 = XmlEscapeConfig.xml10()
_XML11_MINIMAL = XmlEscapeConfig.xml11_minimal()
_XML11 = XmlEscapeConfig.xml11()


def escape_xml10_minimal(text: Optional[str]) -> Optional[str]:
    """Escape for XML 1.0 using the predefined entities only.

    Examples:
        >>> escape_xml10_minimal("<a href='x'>café</a>")
        '&lt;a href=&apos;x&apos;&gt;café&lt;/a&gt;'
    """
    return engine.escape(text, _XML10_MINIMAL)


def escape_xml10(text: Optional[str]) -> Optional[str]:
    """Escape for XML 1.0, markup-significant plus all non-ASCII.

    Examples:
        >>> escape_xml10("café & co")
        'caf&#233; &amp; co'
    """
    return engine.escape(text, _XML10)


def escape_xml11_minimal(text: Optional[str]) -> Optional[str]:
    return engine.escape(text, _XML11_MINIMAL)


def escape_xml11(text: Optional[str]) -> Optional[str]:
    return engine.escape(text, _XML11)


def escape_xml(
    text: Optional[str],
    version: XmlVersion,
    escape_type: XmlEscapeType,
    level: Union[XmlEscapeLevel, int],
) -> Optional[str]:
    """Escape ``text`` with an explicit version, type and level.

    Args:
        text: Text to escape, or None
        version: XML version the text is written into
        escape_type: Entity or numeric reference notation
        level: How aggressively to escape

    Raises:
        ConfigValidationError: If a selector is invalid
    """
    return engine.escape(text, XmlEscapeConfig(version, escape_type, level))


def unescape_xml(text: Optional[str]) -> Optional[str]:
    return engine.unescape(text)


def escape_xml10_minimal_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.escape_to(buffer, offset, length, writer, _XML10_MINIMAL)


def escape_xml10_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.escape_to(buffer, offset, length, writer, _XML10)


def escape_xml11_minimal_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.escape_to(buffer, offset, length, writer, _XML11_MINIMAL)


def escape_xml11_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.escape_to(buffer, offset, length, writer, _XML11)


def escape_xml_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    version: XmlVersion,
    escape_type: XmlEscapeType,
    level: Union[XmlEscapeLevel, int],
) -> None:
    engine.escape_to(
        buffer, offset, length, writer, XmlEscapeConfig(version, escape_type, level)
    )


def unescape_xml_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.unescape_to(buffer, offset, length, writer)
