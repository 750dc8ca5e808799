"""Single-pass codepoint scanner and the two input/output shape drivers."""

from typing import Any, Callable, Optional, Sequence

from .assembler import OutputAssembler, StringAssembler, WriterAssembler
from .codepoints import codepoint_at
from .window import require_writer, validate_window

# (text, start, end, assembler) -> None
Transform = Callable[[Sequence[str], int, int, OutputAssembler], None]

# (codepoint, index) -> True if the codepoint at index must be escaped
EscapePredicate = Callable[[int, int], bool]

# codepoint -> escape token
TokenEncoder = Callable[[int], str]


def escape_codepoints(
    text: Sequence[str],
    start: int,
    end: int,
    assembler: OutputAssembler,
    needs_escape: EscapePredicate,
    encode: TokenEncoder,
    skip_letters: bool = True,
) -> None:
    """Scan ``text[start:end]`` and escape every codepoint the predicate rejects.

    ASCII letters are allowed unescaped in every context except at an
    "all characters" level, so they are tested before the predicate.

    Args:
        text: Indexable sequence of one-character strings
        start: Start of the window
        end: Exclusive end of the window
        assembler: Receives one replacement per escaped codepoint
        needs_escape: Predicate deciding whether a codepoint is escaped
        encode: Produces the escape token for a codepoint
        skip_letters: Let ASCII letters through without consulting the predicate
    """
    index = start
    while index < end:
        char = text[index]
        if skip_letters and ("a" <= char <= "z" or "A" <= char <= "Z"):
            index += 1
            continue
        codepoint, width = codepoint_at(text, index, end)
        if needs_escape(codepoint, index):
            assembler.replace(index, width, encode(codepoint))
        index += width


def transform_text(
    text: Optional[str],
    transform: Transform,
    prefix: str = "",
    suffix: str = "",
) -> Optional[str]:
    """Run ``transform`` over a whole string.

    Returns:
        None for None input, the input object itself when nothing changed,
        otherwise the transformed string
    """
    if text is None:
        return None
    assembler = StringAssembler(text, prefix, suffix)
    transform(text, 0, len(text), assembler)
    return assembler.finish()


def transform_window(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    transform: Transform,
    prefix: str = "",
    suffix: str = "",
) -> None:
    """Run ``transform`` over ``buffer[offset:offset + length]`` into ``writer``.

    The writer and the window are validated before anything is written.

    Raises:
        InvalidArgumentError: If writer is None or the window is out of bounds
    """
    require_writer(writer)
    end = validate_window(buffer, offset, length)
    if buffer is None or length == 0:
        return
    assembler = WriterAssembler(writer, buffer, offset, end, prefix, suffix)
    transform(buffer, offset, end, assembler)
    assembler.finish()
