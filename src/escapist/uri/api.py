"""Convenience functions for URI percent-encoding.

Every function takes an optional ``encoding`` (default ``"UTF-8"``) and
delegates to :mod:`.engine` with the matching :class:`UriEscapeConfig`.
"""

from typing import Any, Optional, Sequence

from escapist.shared.config import UriEscapeConfig, UriEscapeType

from . import engine
from .engine import DEFAULT_ENCODING


def escape_uri_path(text: Optional[str], encoding: str = DEFAULT_ENCODING) -> Optional[str]:
    """Escape ``text`` as a URI path; ``/`` is left alone."""
    return engine.escape(text, UriEscapeConfig(UriEscapeType.PATH, encoding))


def escape_uri_path_segment(
    text: Optional[str], encoding: str = DEFAULT_ENCODING
) -> Optional[str]:
    """Escape ``text`` as a single path segment; ``/`` is escaped.

    Examples:
        >>> escape_uri_path_segment("users list")
        'users%20list'
    """
    return engine.escape(text, UriEscapeConfig(UriEscapeType.PATH_SEGMENT, encoding))


def escape_uri_query_param(
    text: Optional[str], encoding: str = DEFAULT_ENCODING
) -> Optional[str]:
    """Escape ``text`` as a query parameter name or value.

    ``=``, ``&``, ``+`` and ``#`` are escaped. Spaces become ``%20``, never ``+``.

    Examples:
        >>> escape_uri_query_param("a=b&c")
        'a%3Db%26c'
    """
    return engine.escape(text, UriEscapeConfig(UriEscapeType.QUERY_PARAM, encoding))


def escape_uri_fragment_id(
    text: Optional[str], encoding: str = DEFAULT_ENCODING
) -> Optional[str]:
    """Escape ``text`` as a fragment identifier."""
    return engine.escape(text, UriEscapeConfig(UriEscapeType.FRAGMENT_ID, encoding))


def unescape_uri_path(text: Optional[str], encoding: str = DEFAULT_ENCODING) -> Optional[str]:
    return engine.unescape(text, UriEscapeConfig(UriEscapeType.PATH, encoding))


def unescape_uri_path_segment(
    text: Optional[str], encoding: str = DEFAULT_ENCODING
) -> Optional[str]:
    return engine.unescape(text, UriEscapeConfig(UriEscapeType.PATH_SEGMENT, encoding))


def unescape_uri_query_param(
    text: Optional[str], encoding: str = DEFAULT_ENCODING
) -> Optional[str]:
    """Unescape a query parameter; ``+`` decodes to a space."""
    return engine.unescape(text, UriEscapeConfig(UriEscapeType.QUERY_PARAM, encoding))


def unescape_uri_fragment_id(
    text: Optional[str], encoding: str = DEFAULT_ENCODING
) -> Optional[str]:
    return engine.unescape(text, UriEscapeConfig(UriEscapeType.FRAGMENT_ID, encoding))


def escape_uri_path_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    engine.escape_to(
        buffer, offset, length, writer, UriEscapeConfig(UriEscapeType.PATH, encoding)
    )


def escape_uri_path_segment_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    engine.escape_to(
        buffer, offset, length, writer, UriEscapeConfig(UriEscapeType.PATH_SEGMENT, encoding)
    )


def escape_uri_query_param_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    engine.escape_to(
        buffer, offset, length, writer, UriEscapeConfig(UriEscapeType.QUERY_PARAM, encoding)
    )


def escape_uri_fragment_id_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    engine.escape_to(
        buffer, offset, length, writer, UriEscapeConfig(UriEscapeType.FRAGMENT_ID, encoding)
    )


def unescape_uri_path_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    engine.unescape_to(
        buffer, offset, length, writer, UriEscapeConfig(UriEscapeType.PATH, encoding)
    )


def unescape_uri_path_segment_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    engine.unescape_to(
        buffer, offset, length, writer, UriEscapeConfig(UriEscapeType.PATH_SEGMENT, encoding)
    )


def unescape_uri_query_param_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    engine.unescape_to(
        buffer, offset, length, writer, UriEscapeConfig(UriEscapeType.QUERY_PARAM, encoding)
    )


def unescape_uri_fragment_id_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    engine.unescape_to(
        buffer, offset, length, writer, UriEscapeConfig(UriEscapeType.FRAGMENT_ID, encoding)
    )
