"""HTML escape and unescape state machines.

Escaping writes a named character reference when the configured type allows
it and one exists, otherwise a decimal or hexadecimal numeric reference.
Unescaping is lenient: numeric references are decoded with or without the
trailing ``;``, named references are matched against the HTML5 table
(longest name first, legacy names included), and anything unrecognized is
copied through literally.
"""

from typing import Any, Mapping, Optional, Sequence

from ..engine.assembler import OutputAssembler
from ..engine.codepoints import (
    MAX_CODEPOINT,
    REPLACEMENT_CHARACTER,
    is_hex_digit,
    is_surrogate,
)
from ..engine.scanner import escape_codepoints, transform_text, transform_window
from ..engine.window import require_config, require_writer, text_span
from ..shared.config import HtmlEscapeConfig, HtmlEscapeLevel, HtmlEscapeType
from .symbols import (
    ASCII_LEVELS,
    HTML4_REFERENCES,
    HTML5_REFERENCES,
    LONGEST_REFERENCE_NAME,
    NON_ASCII_LEVEL,
    UNESCAPE_REFERENCES,
    WINDOWS_1252_REMAP,
)

# Characters after '&' that can never start a reference
_REFERENCE_STOPS = frozenset(" \t\n\f<&")
# Characters that end a reference name
_NAME_STOPS = frozenset(" \t\n\f<&#;")
# Longer digit runs are out of range whatever their value
_MAX_REFERENCE_DIGITS = 16


def level_of(codepoint: int) -> int:
    """Lowest escape level at which ``codepoint`` is escaped."""
    if codepoint < 0x80:
        return ASCII_LEVELS[codepoint]
    return NON_ASCII_LEVEL


def translate_ill_formed_codepoint(value: int) -> str:
    """Map a numeric reference value to the text it stands for.

    Follows the HTML5 parsing rules: 0x80-0x9F are read as Windows-1252,
    while NUL, surrogates and values beyond U+10FFFF become U+FFFD.
    """
    remapped = WINDOWS_1252_REMAP.get(value)
    if remapped is not None:
        return remapped
    if value == 0 or value > MAX_CODEPOINT or is_surrogate(value):
        return REPLACEMENT_CHARACTER
    return chr(value)


def escape_html_text(
    text: Sequence[str],
    start: int,
    end: int,
    assembler: OutputAssembler,
    escape_type: HtmlEscapeType,
    level: HtmlEscapeLevel,
) -> None:
    references: Optional[Mapping[int, str]] = None
    if escape_type.use_ncrs:
        references = HTML5_REFERENCES if escape_type.use_html5 else HTML4_REFERENCES
    use_hexa = escape_type.use_hexa

    def needs_escape(codepoint: int, _index: int) -> bool:
        return level >= level_of(codepoint)

    def encode(codepoint: int) -> str:
        if references is not None:
            reference = references.get(codepoint)
            if reference is not None:
                return reference
        if use_hexa:
            return f"&#x{codepoint:x};"
        return f"&#{codepoint};"

    escape_codepoints(
        text,
        start,
        end,
        assembler,
        needs_escape,
        encode,
        skip_letters=level < HtmlEscapeLevel.LEVEL_4_ALL_CHARACTERS,
    )


def _unescape_numeric(
    text: Sequence[str], index: int, end: int, assembler: OutputAssembler
) -> int:
    """Decode ``&#...`` at ``index``. Returns the index to resume scanning at."""
    cursor = index + 2
    hexa = cursor < end and text[cursor] in "xX"
    if hexa:
        cursor += 1
    digits_start = cursor
    while cursor < end and (is_hex_digit(text[cursor]) if hexa else "0" <= text[cursor] <= "9"):
        cursor += 1
    if cursor == digits_start:
        return index + 1

    digits = text_span(text, digits_start, cursor).lstrip("0")
    if len(digits) > _MAX_REFERENCE_DIGITS:
        value = MAX_CODEPOINT + 1
    else:
        value = int(digits or "0", 16 if hexa else 10)
    if cursor < end and text[cursor] == ";":
        cursor += 1
    assembler.replace(index, cursor - index, translate_ill_formed_codepoint(value))
    return cursor


def _unescape_named(
    text: Sequence[str], index: int, end: int, assembler: OutputAssembler
) -> int:
    """Decode ``&name`` at ``index``. Returns the index to resume scanning at."""
    cursor = index + 1
    limit = min(end, cursor + LONGEST_REFERENCE_NAME)
    while cursor < limit and text[cursor] not in _NAME_STOPS:
        cursor += 1
    if cursor < end and text[cursor] == ";":
        cursor += 1
    name = text_span(text, index + 1, cursor)

    replacement = UNESCAPE_REFERENCES.get(name)
    if replacement is not None:
        assembler.replace(index, cursor - index, replacement)
        return cursor

    # Longest legacy name that prefixes the candidate
    for size in range(len(name) - 1, 1, -1):
        replacement = UNESCAPE_REFERENCES.get(name[:size])
        if replacement is not None:
            assembler.replace(index, size + 1, replacement)
            return index + size + 1
    return index + 1


def unescape_html_text(
    text: Sequence[str], start: int, end: int, assembler: OutputAssembler
) -> None:
    index = start
    while index < end:
        if text[index] != "&" or index + 1 >= end:
            index += 1
            continue
        follower = text[index + 1]
        if follower == "#":
            index = _unescape_numeric(text, index, end, assembler)
        elif follower in _REFERENCE_STOPS:
            index += 1
        else:
            index = _unescape_named(text, index, end, assembler)


def escape(text: Optional[str], config: HtmlEscapeConfig) -> Optional[str]:
    """Escape ``text`` for HTML according to ``config``.

    Returns:
        The escaped text, or ``text`` itself when nothing needed escaping
    """
    require_config(config, HtmlEscapeConfig)
    return transform_text(
        text,
        lambda source, start, end, assembler: escape_html_text(
            source, start, end, assembler, config.escape_type, config.level
        ),
    )


def escape_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    config: HtmlEscapeConfig,
) -> None:
    """Escape ``buffer[offset:offset + length]`` for HTML into ``writer``."""
    require_writer(writer)
    require_config(config, HtmlEscapeConfig)
    transform_window(
        buffer,
        offset,
        length,
        writer,
        lambda source, start, end, assembler: escape_html_text(
            source, start, end, assembler, config.escape_type, config.level
        ),
    )


def unescape(text: Optional[str], config: Optional[HtmlEscapeConfig] = None) -> Optional[str]:
    """Unescape every HTML character reference in ``text``.

    The configuration is accepted for symmetry with :func:`escape`; all
    reference forms are always recognized.
    """
    return transform_text(text, unescape_html_text)


def unescape_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    config: Optional[HtmlEscapeConfig] = None,
) -> None:
    """Unescape ``buffer[offset:offset + length]`` into ``writer``."""
    transform_window(buffer, offset, length, writer, unescape_html_text)
