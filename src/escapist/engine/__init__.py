"""Generic escape engine shared by every context.

The engine is a three-layer pipeline: a per-context table or predicate, a
single-pass codepoint scanner, and a copy-on-write output assembler that
either builds a string or writes to a caller-supplied writer.
"""

from .assembler import OutputAssembler, StringAssembler, WriterAssembler
from .backslash import BackslashEscapeTable, escape_backslash, unescape_backslash
from .codepoints import codepoint_at, combine_surrogates, split_surrogates
from .scanner import escape_codepoints, transform_text, transform_window
from .window import (
    require_argument,
    require_config,
    require_writer,
    text_span,
    validate_window,
)

__all__ = [
    # Modules
    "assembler",
    "backslash",
    "codepoints",
    "scanner",
    "window",
    # Output assembly
    "OutputAssembler",
    "StringAssembler",
    "WriterAssembler",
    # Scanning
    "escape_codepoints",
    "transform_text",
    "transform_window",
    "codepoint_at",
    "combine_surrogates",
    "split_surrogates",
    # Backslash notation
    "BackslashEscapeTable",
    "escape_backslash",
    "unescape_backslash",
    # Argument checks
    "require_argument",
    "require_config",
    "require_writer",
    "text_span",
    "validate_window",
]
