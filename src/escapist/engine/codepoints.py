"""Codepoint and hex-digit helpers shared by the escape engines."""

from typing import Optional, Sequence, Tuple

HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF
MAX_BMP_CODEPOINT = 0xFFFF
MAX_CODEPOINT = 0x10FFFF
REPLACEMENT_CHARACTER = "\ufffd"

_HEX_VALUES = {c: int(c, 16) for c in "0123456789abcdefABCDEF"}


def is_high_surrogate(codepoint: int) -> bool:
    return HIGH_SURROGATE_MIN <= codepoint <= HIGH_SURROGATE_MAX


def is_low_surrogate(codepoint: int) -> bool:
    return LOW_SURROGATE_MIN <= codepoint <= LOW_SURROGATE_MAX


def is_surrogate(codepoint: int) -> bool:
    return HIGH_SURROGATE_MIN <= codepoint <= LOW_SURROGATE_MAX


def combine_surrogates(high: int, low: int) -> int:
    """Combine a high/low surrogate pair into a supplementary codepoint."""
    return 0x10000 + ((high - HIGH_SURROGATE_MIN) << 10) + (low - LOW_SURROGATE_MIN)


def split_surrogates(codepoint: int) -> Tuple[int, int]:
    """Split a supplementary codepoint into its (high, low) surrogate units."""
    offset = codepoint - 0x10000
    return HIGH_SURROGATE_MIN + (offset >> 10), LOW_SURROGATE_MIN + (offset & 0x3FF)


def codepoint_at(text: Sequence[str], index: int, end: int) -> Tuple[int, int]:
    """Read the codepoint starting at ``index``.

    A high surrogate immediately followed (before ``end``) by a low surrogate
    is combined into one codepoint. Any other unit, including a lone
    surrogate, is returned on its own.

    Args:
        text: Indexable sequence of one-character strings
        index: Position of the first unit to read
        end: Exclusive upper bound of the readable window

    Returns:
        Tuple of (codepoint, number of units consumed)
    """
    codepoint = ord(text[index])
    if is_high_surrogate(codepoint) and index + 1 < end:
        low = ord(text[index + 1])
        if is_low_surrogate(low):
            return combine_surrogates(codepoint, low), 2
    return codepoint, 1


def is_ascii_letter(codepoint: int) -> bool:
    return 0x61 <= codepoint <= 0x7A or 0x41 <= codepoint <= 0x5A


def is_ascii_digit(codepoint: int) -> bool:
    return 0x30 <= codepoint <= 0x39


def is_ascii_alphanumeric(codepoint: int) -> bool:
    return is_ascii_letter(codepoint) or is_ascii_digit(codepoint)


def is_hex_digit(char: str) -> bool:
    return char in _HEX_VALUES


def to_uhexa(unit: int) -> str:
    """Format a 16-bit unit as four upper-case hex digits."""
    return f"{unit:04X}"


def parse_hex(text: Sequence[str], start: int, end: int) -> Optional[int]:
    """Parse ``text[start:end]`` as hexadecimal.

    Returns:
        The parsed value, or None if the span is empty or holds a non-hex digit
    """
    if start >= end:
        return None
    value = 0
    for index in range(start, end):
        digit = _HEX_VALUES.get(text[index])
        if digit is None:
            return None
        value = (value << 4) | digit
    return value
