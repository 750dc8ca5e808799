"""Convenience functions for CSV field escaping."""

from typing import Any, Optional, Sequence

from . import engine


def escape_csv(text: Optional[str]) -> Optional[str]:
    '''Quote ``text`` as an RFC 4180 field when it holds non-alphanumerics.

    Examples:
        >>> escape_csv("value,with,commas")
        '"value,with,commas"'
        >>> escape_csv('say "hi"')
        '"say ""hi"""'
    '''
    return engine.escape(text)


def unescape_csv(text: Optional[str]) -> Optional[str]:
    return engine.unescape(text)


def escape_csv_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.escape_to(buffer, offset, length, writer)


def unescape_csv_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any
) -> None:
    engine.unescape_to(buffer, offset, length, writer)
