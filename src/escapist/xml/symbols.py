"""Escape tables and character validity rules for XML 1.0 and XML 1.1."""

from typing import Callable, Dict, FrozenSet, Mapping, Tuple

from ..engine.codepoints import MAX_CODEPOINT, is_ascii_alphanumeric, is_surrogate
from ..shared.config import XmlVersion

# Predefined entities, escaped from level 1 in both versions
CHARACTER_ENTITY_REFERENCES: Mapping[int, str] = {
    0x22: "&quot;",
    0x26: "&amp;",
    0x27: "&apos;",
    0x3C: "&lt;",
    0x3E: "&gt;",
}

# Name (without '&' and ';') to replacement text
UNESCAPE_REFERENCES: Mapping[str, str] = {
    reference[1:-1]: chr(codepoint)
    for codepoint, reference in CHARACTER_ENTITY_REFERENCES.items()
}

NON_ASCII_LEVEL = 2

# Table covers ASCII plus the C1 control block
_TABLE_SIZE = 0xA0

# Discouraged in XML 1.0, restricted in XML 1.1: always escaped (U+0085 is NEL)
_C1_ESCAPED = frozenset(range(0x7F, 0x85)) | frozenset(range(0x86, 0xA0))

# Restricted in XML 1.1, only valid as character references
_XML11_RESTRICTED = (
    frozenset(range(0x01, 0x09)) | {0x0B, 0x0C} | frozenset(range(0x0E, 0x20))
)


def _build_levels(always_escaped: FrozenSet[int]) -> Tuple[int, ...]:
    levels = []
    for codepoint in range(_TABLE_SIZE):
        if codepoint in CHARACTER_ENTITY_REFERENCES or codepoint in always_escaped:
            levels.append(1)
        elif codepoint >= 0x80:
            levels.append(NON_ASCII_LEVEL)
        elif is_ascii_alphanumeric(codepoint):
            levels.append(4)
        else:
            levels.append(3)
    return tuple(levels)


def _is_valid_xml10(codepoint: int) -> bool:
    if codepoint < 0x20:
        return codepoint in (0x09, 0x0A, 0x0D)
    return not is_surrogate(codepoint) and codepoint not in (0xFFFE, 0xFFFF)


def _is_valid_xml11(codepoint: int) -> bool:
    return (
        0 < codepoint <= MAX_CODEPOINT
        and not is_surrogate(codepoint)
        and codepoint not in (0xFFFE, 0xFFFF)
    )


LEVELS: Dict[XmlVersion, Tuple[int, ...]] = {
    XmlVersion.XML10: _build_levels(_C1_ESCAPED),
    XmlVersion.XML11: _build_levels(_C1_ESCAPED | _XML11_RESTRICTED),
}

# Whether a document of the given version may contain a codepoint at all
VALIDATORS: Dict[XmlVersion, Callable[[int], bool]] = {
    XmlVersion.XML10: _is_valid_xml10,
    XmlVersion.XML11: _is_valid_xml11,
}


def level_of(codepoint: int, version: XmlVersion) -> int:
    """Lowest escape level at which ``codepoint`` is escaped."""
    if codepoint < _TABLE_SIZE:
        return LEVELS[version][codepoint]
    return NON_ASCII_LEVEL
