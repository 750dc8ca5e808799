"""Backslash notation shared by the ``.properties``, JSON and JavaScript contexts.

All three formats escape a character either with a single escape character
(SEC) such as ``\\t``, or with a fixed-width ``\\uXXXX`` escape. JavaScript
also has the two-digit ``\\xHH`` form for codepoints up to U+00FF.
Codepoints outside the Basic Multilingual Plane are written as a surrogate
pair of ``\\u`` escapes.
"""

from dataclasses import dataclass
from typing import AbstractSet, Mapping, Optional, Sequence, Tuple

from ..shared.errors import MalformedEscapeError
from .assembler import OutputAssembler
from .codepoints import (
    MAX_BMP_CODEPOINT,
    combine_surrogates,
    is_ascii_alphanumeric,
    is_high_surrogate,
    is_low_surrogate,
    parse_hex,
    split_surrogates,
    to_uhexa,
)
from .scanner import EscapePredicate, escape_codepoints
from .window import text_span

# Levels assigned by build_level_table
LEVEL_BASIC = 1
LEVEL_NON_ASCII = 2
LEVEL_NON_ALPHANUMERIC = 3
LEVEL_ALL = 4

# Table covers ASCII plus the C1 control block
_TABLE_SIZE = 0xA0

MAX_XHEXA_CODEPOINT = 0xFF

_SLASH = 0x2F


def build_level_table(basic: AbstractSet[int]) -> Tuple[int, ...]:
    """Build the escape level of every codepoint below U+00A0.

    Alphanumerics need level 4, other printable ASCII level 3. Controls, DEL,
    C1 controls and every codepoint in ``basic`` are escaped from level 1.
    """
    levels = []
    for codepoint in range(_TABLE_SIZE):
        if codepoint in basic or codepoint < 0x20 or codepoint >= 0x7F:
            levels.append(LEVEL_BASIC)
        elif is_ascii_alphanumeric(codepoint):
            levels.append(LEVEL_ALL)
        else:
            levels.append(LEVEL_NON_ALPHANUMERIC)
    return tuple(levels)


@dataclass(frozen=True)
class BackslashEscapeTable:
    """Escape and unescape rules for one backslash-notation format.

    Attributes:
        escape_aliases: Codepoint to SEC letter, used when escaping
        levels: Escape level per codepoint below U+00A0
        unescape_aliases: SEC letter to decoded text, accepted when unescaping
        accepts_xhexa: Whether ``\\xHH`` is accepted when unescaping
    """

    escape_aliases: Mapping[int, str]
    levels: Tuple[int, ...]
    unescape_aliases: Mapping[str, str]
    accepts_xhexa: bool = False

    def level_of(self, codepoint: int) -> int:
        if codepoint < _TABLE_SIZE:
            return self.levels[codepoint]
        return LEVEL_NON_ASCII

    def encode(self, codepoint: int, use_secs: bool = True, use_xhexa: bool = False) -> str:
        if use_secs:
            alias = self.escape_aliases.get(codepoint)
            if alias is not None:
                return "\\" + alias
        if use_xhexa and codepoint <= MAX_XHEXA_CODEPOINT:
            return f"\\x{codepoint:02X}"
        if codepoint > MAX_BMP_CODEPOINT:
            high, low = split_surrogates(codepoint)
            return f"\\u{to_uhexa(high)}\\u{to_uhexa(low)}"
        return "\\u" + to_uhexa(codepoint)


def level_predicate(table: BackslashEscapeTable, level: int) -> EscapePredicate:
    """Predicate escaping every codepoint whose table level is at most ``level``."""

    def needs_escape(codepoint: int, _index: int) -> bool:
        return level >= table.level_of(codepoint)

    return needs_escape


def closing_tag_predicate(
    table: BackslashEscapeTable, text: Sequence[str], start: int, level: int
) -> EscapePredicate:
    """Level predicate where ``/`` below level 3 is escaped only right after ``<``.

    That is enough to keep ``</script>`` out of string literals embedded in
    HTML. A ``<`` before ``start`` lies outside the window and is not looked at.
    """

    def needs_escape(codepoint: int, index: int) -> bool:
        if codepoint == _SLASH and level < LEVEL_NON_ALPHANUMERIC:
            return index > start and text[index - 1] == "<"
        return level >= table.level_of(codepoint)

    return needs_escape


def escape_backslash(
    text: Sequence[str],
    start: int,
    end: int,
    assembler: OutputAssembler,
    table: BackslashEscapeTable,
    level: int,
    use_secs: bool = True,
    needs_escape: Optional[EscapePredicate] = None,
    use_xhexa: bool = False,
) -> None:
    """Escape ``text[start:end]`` with backslash notation.

    Args:
        table: Format-specific escape rules
        level: Escape level; a codepoint is escaped when its table level is at most this
        use_secs: Prefer SEC aliases over ``\\uXXXX``
        needs_escape: Replaces the plain level predicate when given
        use_xhexa: Write ``\\xHH`` for codepoints up to U+00FF
    """
    predicate = needs_escape or level_predicate(table, level)

    def encode(codepoint: int) -> str:
        return table.encode(codepoint, use_secs, use_xhexa)

    escape_codepoints(
        text, start, end, assembler, predicate, encode, skip_letters=level < LEVEL_ALL
    )


def _read_uhexa(text: Sequence[str], index: int, end: int) -> int:
    if index + 6 > end:
        raise MalformedEscapeError(
            "Incomplete unicode escape sequence", index, text_span(text, index, end)
        )
    value = parse_hex(text, index + 2, index + 6)
    if value is None:
        raise MalformedEscapeError(
            "Invalid unicode escape sequence", index, text_span(text, index, index + 6)
        )
    return value


def unescape_backslash(
    text: Sequence[str],
    start: int,
    end: int,
    assembler: OutputAssembler,
    table: BackslashEscapeTable,
) -> None:
    """Decode every backslash escape in ``text[start:end]``.

    Raises:
        MalformedEscapeError: On a trailing backslash, an unknown escape letter,
            a short or non-hex ``\\u`` or ``\\x`` field, or a ``\\0`` followed by
            a digit
    """
    index = start
    while index < end:
        if text[index] != "\\":
            index += 1
            continue
        if index + 1 >= end:
            raise MalformedEscapeError("Incomplete escape sequence", index, "\\")

        letter = text[index + 1]
        if letter == "u":
            codepoint = _read_uhexa(text, index, end)
            width = 6
            if (
                is_high_surrogate(codepoint)
                and index + 12 <= end
                and text[index + 6] == "\\"
                and text[index + 7] == "u"
            ):
                low = parse_hex(text, index + 8, index + 12)
                if low is not None and is_low_surrogate(low):
                    codepoint = combine_surrogates(codepoint, low)
                    width = 12
            assembler.replace(index, width, chr(codepoint))
            index += width
            continue

        if letter == "x" and table.accepts_xhexa:
            value = parse_hex(text, index + 2, index + 4) if index + 4 <= end else None
            if value is None:
                raise MalformedEscapeError(
                    "Invalid hexadecimal escape sequence",
                    index,
                    text_span(text, index, min(end, index + 4)),
                )
            assembler.replace(index, 4, chr(value))
            index += 4
            continue

        decoded = table.unescape_aliases.get(letter)
        if decoded is None:
            raise MalformedEscapeError(
                f"Invalid escape sequence '\\{letter}'", index, "\\" + letter
            )
        if letter == "0" and index + 2 < end and "0" <= text[index + 2] <= "9":
            raise MalformedEscapeError(
                "Octal escape sequences are not supported", index, text_span(text, index, index + 3)
            )
        assembler.replace(index, 2, decoded)
        index += 2

