"""Named character reference tables for HTML escaping and unescaping.

The tables are built once at import time from :mod:`html.entities` and are
never mutated afterwards.
"""

from html.entities import codepoint2name, html5
from typing import Dict, Mapping, Tuple

# Escape level per ASCII codepoint; a codepoint is escaped when the configured
# level is greater than or equal to its entry.
_MARKUP_SIGNIFICANT = {ord("<"), ord(">"), ord("&"), ord('"')}
_APOSTROPHE = ord("'")
NON_ASCII_LEVEL = 2


def _build_ascii_levels() -> Tuple[int, ...]:
    levels = []
    for codepoint in range(0x80):
        char = chr(codepoint)
        if codepoint in _MARKUP_SIGNIFICANT:
            levels.append(0)
        elif codepoint == _APOSTROPHE:
            levels.append(1)
        elif char.isascii() and char.isalnum():
            levels.append(4)
        else:
            levels.append(3)
    return tuple(levels)


ASCII_LEVELS = _build_ascii_levels()


def _build_html4_references() -> Dict[int, str]:
    return {codepoint: f"&{name};" for codepoint, name in codepoint2name.items()}


def _reference_preference(name: str) -> Tuple[int, bool, str]:
    # Shortest first, then all-lower-case, then alphabetical
    return len(name), not name.islower(), name


def _build_html5_references() -> Dict[int, str]:
    best: Dict[int, str] = {}
    for name, value in html5.items():
        if not name.endswith(";") or len(value) != 1:
            continue
        codepoint = ord(value)
        current = best.get(codepoint)
        if current is None or _reference_preference(name) < _reference_preference(current):
            best[codepoint] = name
    return {codepoint: f"&{name}" for codepoint, name in best.items()}


HTML4_REFERENCES: Mapping[int, str] = _build_html4_references()
HTML5_REFERENCES: Mapping[int, str] = _build_html5_references()

# Name (without the leading '&') to replacement text, including the legacy
# names accepted without a trailing ';'
UNESCAPE_REFERENCES: Mapping[str, str] = html5

LONGEST_REFERENCE_NAME = 32

# Numeric references in 0x80-0x9F are read as Windows-1252; undefined
# positions keep their C1 control character.
WINDOWS_1252_REMAP: Mapping[int, str] = {
    0x80: "\u20ac",
    0x82: "\u201a",
    0x83: "\u0192",
    0x84: "\u201e",
    0x85: "\u2026",
    0x86: "\u2020",
    0x87: "\u2021",
    0x88: "\u02c6",
    0x89: "\u2030",
    0x8A: "\u0160",
    0x8B: "\u2039",
    0x8C: "\u0152",
    0x8E: "\u017d",
    0x91: "\u2018",
    0x92: "\u2019",
    0x93: "\u201c",
    0x94: "\u201d",
    0x95: "\u2022",
    0x96: "\u2013",
    0x97: "\u2014",
    0x98: "\u02dc",
    0x99: "\u2122",
    0x9A: "\u0161",
    0x9B: "\u203a",
    0x9C: "\u0153",
    0x9E: "\u017e",
    0x9F: "\u0178",
}
