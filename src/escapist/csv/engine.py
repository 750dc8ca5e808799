"""RFC 4180 field quoting.

A field holding anything other than ASCII letters and digits is enclosed in
double quotes, with every embedded quote doubled. The enclosing quotes are
the assembler's prefix and suffix, so they only appear once the first
non-alphanumeric character has been seen.
"""

from typing import Any, Optional, Sequence

from ..engine.assembler import OutputAssembler
from ..engine.scanner import transform_text, transform_window
from ..shared.config import CsvEscapeConfig

QUOTE = '"'
DOUBLED_QUOTE = '""'


def _is_alphanumeric(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z" or "0" <= char <= "9"


def escape_csv_text(
    text: Sequence[str], start: int, end: int, assembler: OutputAssembler
) -> None:
    for index in range(start, end):
        char = text[index]
        if char == QUOTE:
            assembler.replace(index, 1, DOUBLED_QUOTE)
        elif not assembler.changed and not _is_alphanumeric(char):
            assembler.touch()


def unescape_csv_text(
    text: Sequence[str], start: int, end: int, assembler: OutputAssembler
) -> None:
    if end - start < 2 or text[start] != QUOTE or text[end - 1] != QUOTE:
        return
    last = end - 1
    assembler.replace(start, 1, "")
    index = start + 1
    while index < last:
        if text[index] == QUOTE and index + 1 < last and text[index + 1] == QUOTE:
            assembler.replace(index, 2, QUOTE)
            index += 2
        else:
            index += 1
    assembler.replace(last, 1, "")


def escape(text: Optional[str], config: Optional[CsvEscapeConfig] = None) -> Optional[str]:
    """Quote ``text`` as a CSV field if it holds any non-alphanumeric character."""
    return transform_text(text, escape_csv_text, prefix=QUOTE, suffix=QUOTE)


def escape_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    config: Optional[CsvEscapeConfig] = None,
) -> None:
    transform_window(
        buffer, offset, length, writer, escape_csv_text, prefix=QUOTE, suffix=QUOTE
    )


def unescape(text: Optional[str], config: Optional[CsvEscapeConfig] = None) -> Optional[str]:
    """Remove the enclosing quotes of a quoted CSV field and undouble inner quotes."""
    return transform_text(text, unescape_csv_text)


def unescape_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    config: Optional[CsvEscapeConfig] = None,
) -> None:
    transform_window(buffer, offset, length, writer, unescape_csv_text)
