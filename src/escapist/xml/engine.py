"""XML escape and unescape state machines.

Escaping writes one of the five predefined entity references when the
configured type allows it, otherwise a decimal or hexadecimal character
reference. Codepoints the selected XML version cannot represent at all (most
C0 controls in XML 1.0, NUL in XML 1.1, lone surrogates, U+FFFE and U+FFFF)
are removed from the output.

Unescaping decodes ``&#NNN;``, ``&#xHHH;`` and the five predefined
references. The trailing ``;`` is required and anything unrecognized is
copied through literally.
"""

from typing import Any, Optional, Sequence

from ..engine.assembler import OutputAssembler
from ..engine.codepoints import MAX_CODEPOINT, is_ascii_alphanumeric, is_hex_digit
from ..engine.scanner import escape_codepoints, transform_text, transform_window
from ..engine.window import require_config, require_writer, text_span
from ..shared.config import XmlEscapeConfig, XmlEscapeLevel, XmlEscapeType, XmlVersion
from .symbols import CHARACTER_ENTITY_REFERENCES, UNESCAPE_REFERENCES, VALIDATORS, level_of

# Characters after '&' that can never start a reference
_REFERENCE_STOPS = frozenset(" \t\n\f<&")
# Longer digit runs are out of range whatever their value
_MAX_REFERENCE_DIGITS = 8


def escape_xml_text(
    text: Sequence[str],
    start: int,
    end: int,
    assembler: OutputAssembler,
    version: XmlVersion,
    escape_type: XmlEscapeType,
    level: XmlEscapeLevel,
) -> None:
    is_valid = VALIDATORS[version]
    use_cers = escape_type.use_cers
    use_hexa = escape_type.use_hexa

    def needs_escape(codepoint: int, _index: int) -> bool:
        return level >= level_of(codepoint, version) or not is_valid(codepoint)

    def encode(codepoint: int) -> str:
        if not is_valid(codepoint):
            return ""
        if use_cers:
            reference = CHARACTER_ENTITY_REFERENCES.get(codepoint)
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
        skip_letters=level < XmlEscapeLevel.LEVEL_4_ALL_CHARACTERS,
    )


def _unescape_numeric(
    text: Sequence[str], index: int, end: int, assembler: OutputAssembler
) -> int:
    """Decode ``&#...;`` at ``index``. Returns the index to resume scanning at."""
    cursor = index + 2
    hexa = cursor < end and text[cursor] == "x"
    if hexa:
        cursor += 1
    digits_start = cursor
    while cursor < end and (is_hex_digit(text[cursor]) if hexa else "0" <= text[cursor] <= "9"):
        cursor += 1
    if cursor == digits_start or cursor >= end or text[cursor] != ";":
        return index + 1

    digits = text_span(text, digits_start, cursor).lstrip("0") or "0"
    if len(digits) > _MAX_REFERENCE_DIGITS:
        return index + 1
    value = int(digits, 16 if hexa else 10)
    if value > MAX_CODEPOINT:
        return index + 1
    assembler.replace(index, cursor + 1 - index, chr(value))
    return cursor + 1


def _unescape_named(
    text: Sequence[str], index: int, end: int, assembler: OutputAssembler
) -> int:
    """Decode ``&name;`` at ``index``. Returns the index to resume scanning at."""
    cursor = index + 1
    while cursor < end and is_ascii_alphanumeric(ord(text[cursor])):
        cursor += 1
    if cursor >= end or text[cursor] != ";":
        return index + 1
    replacement = UNESCAPE_REFERENCES.get(text_span(text, index + 1, cursor))
    if replacement is None:
        return index + 1
    assembler.replace(index, cursor + 1 - index, replacement)
    return cursor + 1


def unescape_xml_text(
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


def _escaper(config: XmlEscapeConfig):
    def transform(source: Sequence[str], start: int, end: int, assembler: OutputAssembler) -> None:
        escape_xml_text(
            source, start, end, assembler, config.version, config.escape_type, config.level
        )

    return transform


def escape(text: Optional[str], config: XmlEscapeConfig) -> Optional[str]:
    """Escape ``text`` for XML according to ``config``.

    Returns:
        The escaped text, or ``text`` itself when nothing needed escaping
    """
    require_config(config, XmlEscapeConfig)
    return transform_text(text, _escaper(config))


def escape_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    config: XmlEscapeConfig,
) -> None:
    """Escape ``buffer[offset:offset + length]`` for XML into ``writer``."""
    require_writer(writer)
    require_config(config, XmlEscapeConfig)
    transform_window(buffer, offset, length, writer, _escaper(config))


def unescape(text: Optional[str], config: Optional[XmlEscapeConfig] = None) -> Optional[str]:
    """Unescape XML character and entity references in ``text``.

    Both XML versions share one reference syntax, so the configuration is
    accepted for symmetry with :func:`escape` only.
    """
    return transform_text(text, unescape_xml_text)


def unescape_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    config: Optional[XmlEscapeConfig] = None,
) -> None:
    transform_window(buffer, offset, length, writer, unescape_xml_text)
