"""URI percent-encoding engine (RFC 3986).

Escaping encodes every codepoint outside the allow-set of the selected URI
part through the configured text encoding, and writes one ``%XX`` triplet per
byte. Unescaping gathers each run of consecutive triplets into a single byte
string and decodes the run in one call, so multi-byte sequences survive.
"""

import codecs
from functools import lru_cache
from typing import Any, Callable, Dict, FrozenSet, Optional, Sequence, Tuple, Union

from ..engine.assembler import OutputAssembler
from ..engine.codepoints import parse_hex
from ..engine.scanner import escape_codepoints, transform_text, transform_window
from ..engine.window import require_config, require_writer, text_span
from ..shared.config import DEFAULT_URI_ENCODING, UriEscapeConfig, UriEscapeType
from ..shared.errors import MalformedEscapeError, UnsupportedEncodingError
from ..shared.logging import get_logger

DEFAULT_ENCODING = DEFAULT_URI_ENCODING

ERROR_HANDLER = "escapist.uri"

logger = get_logger(__name__, component="uri")


def _codec_errors(
    error: UnicodeError,
) -> Tuple[Union[str, bytes], int]:
    # Lone surrogates round-trip where the codec allows it, anything else is
    # replaced ('?' on encode, U+FFFD on decode).
    try:
        return codecs.lookup_error("surrogatepass")(error)
    except UnicodeError:
        return codecs.lookup_error("replace")(error)


codecs.register_error(ERROR_HANDLER, _codec_errors)


def _ascii_set(chars: str) -> FrozenSet[int]:
    return frozenset(ord(c) for c in chars)


_ALPHA = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_UNRESERVED = _ALPHA + "0123456789-._~"
_SUB_DELIMS = "!$&'()*+,;="
_PCHAR = _ascii_set(_UNRESERVED + _SUB_DELIMS + ":@")

ALLOWED_CODEPOINTS: Dict[UriEscapeType, FrozenSet[int]] = {
    UriEscapeType.PATH: _PCHAR | _ascii_set("/"),
    UriEscapeType.PATH_SEGMENT: _PCHAR,
    UriEscapeType.QUERY_PARAM: (_PCHAR | _ascii_set("/?")) - _ascii_set("=&+#"),
    UriEscapeType.FRAGMENT_ID: _PCHAR | _ascii_set("/?"),
}

# Allow-predicate per URI part
ALLOW_PREDICATES: Dict[UriEscapeType, Callable[[int], bool]] = {
    escape_type: allowed.__contains__ for escape_type, allowed in ALLOWED_CODEPOINTS.items()
}


def is_allowed(codepoint: int, escape_type: UriEscapeType) -> bool:
    """Whether ``codepoint`` may appear unescaped in the given URI part."""
    return ALLOW_PREDICATES[escape_type](codepoint)


# Codecs that write a byte order mark on every encode call, and the fixed
# byte order written in their place. A leading BOM is still honoured when
# decoding.
BOM_FREE_CODECS: Dict[str, str] = {
    "utf-16": "utf-16-be",
    "utf-32": "utf-32-be",
    "utf-8-sig": "utf-8",
}

_BYTE_ORDER_MARKS: Dict[str, Tuple[bytes, ...]] = {
    "utf-16": (codecs.BOM_UTF16_BE, codecs.BOM_UTF16_LE),
    "utf-32": (codecs.BOM_UTF32_BE, codecs.BOM_UTF32_LE),
}


@lru_cache(maxsize=64)
def resolve_encoding(encoding: str) -> str:
    """Resolve a text encoding name to its canonical codec name.

    Raises:
        UnsupportedEncodingError: If the name is unknown or is not a text encoding
    """
    try:
        "".encode(encoding)
        name = codecs.lookup(encoding).name
    except LookupError as e:
        raise UnsupportedEncodingError(encoding) from e
    logger.debug(f"Resolved URI encoding '{encoding}' to codec '{name}'")
    return name


def encode_codepoint(codepoint: int, encoding: str) -> bytes:
    """Encode one codepoint, without a byte order mark."""
    name = resolve_encoding(encoding)
    return chr(codepoint).encode(BOM_FREE_CODECS.get(name, name), ERROR_HANDLER)


def decode_run(data: bytes, encoding: str) -> str:
    """Decode the bytes of one run of ``%XX`` triplets.

    For byte-order-sensitive codecs a leading BOM selects the byte order,
    otherwise the fixed order written by :func:`encode_codepoint` is assumed.
    """
    name = resolve_encoding(encoding)
    marks = _BYTE_ORDER_MARKS.get(name)
    if marks is not None and not data.startswith(marks):
        name = BOM_FREE_CODECS[name]
    return data.decode(name, ERROR_HANDLER)


def escape_uri_text(
    text: Sequence[str],
    start: int,
    end: int,
    assembler: OutputAssembler,
    escape_type: UriEscapeType,
    encoding: str,
) -> None:
    allowed = ALLOW_PREDICATES[escape_type]

    def needs_escape(codepoint: int, _index: int) -> bool:
        return not allowed(codepoint)

    def encode(codepoint: int) -> str:
        return "".join(f"%{byte:02X}" for byte in encode_codepoint(codepoint, encoding))

    escape_codepoints(text, start, end, assembler, needs_escape, encode)


def unescape_uri_text(
    text: Sequence[str],
    start: int,
    end: int,
    assembler: OutputAssembler,
    encoding: str,
    plus_as_space: bool = False,
) -> None:
    """Decode percent-escapes in ``text[start:end]``.

    Raises:
        MalformedEscapeError: On a ``%`` not followed by two hex digits
    """
    index = start
    while index < end:
        char = text[index]
        if char == "+" and plus_as_space:
            assembler.replace(index, 1, " ")
            index += 1
            continue
        if char != "%":
            index += 1
            continue

        run_start = index
        data = bytearray()
        while index < end and text[index] == "%":
            if index + 3 > end:
                raise MalformedEscapeError(
                    "Incomplete escape sequence", index, text_span(text, index, end)
                )
            value = parse_hex(text, index + 1, index + 3)
            if value is None:
                raise MalformedEscapeError(
                    "Invalid escape sequence", index, text_span(text, index, index + 3)
                )
            data.append(value)
            index += 3
        decoded = decode_run(bytes(data), encoding)
        assembler.replace(run_start, index - run_start, decoded)


def _escaper(config: UriEscapeConfig) -> Callable[..., None]:
    def transform(source: Sequence[str], start: int, end: int, assembler: OutputAssembler) -> None:
        escape_uri_text(source, start, end, assembler, config.escape_type, config.encoding)

    return transform


def _unescaper(config: UriEscapeConfig) -> Callable[..., None]:
    def transform(source: Sequence[str], start: int, end: int, assembler: OutputAssembler) -> None:
        unescape_uri_text(source, start, end, assembler, config.encoding, config.plus_as_space)

    return transform


def escape(text: Optional[str], config: UriEscapeConfig) -> Optional[str]:
    """Percent-encode ``text`` for the URI part selected by ``config``."""
    require_config(config, UriEscapeConfig)
    return transform_text(text, _escaper(config))


def escape_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    config: UriEscapeConfig,
) -> None:
    """Percent-encode ``buffer[offset:offset + length]`` into ``writer``."""
    require_writer(writer)
    require_config(config, UriEscapeConfig)
    transform_window(buffer, offset, length, writer, _escaper(config))


def unescape(text: Optional[str], config: UriEscapeConfig) -> Optional[str]:
    """Decode percent-escapes in ``text``; ``+`` is a space for query parameters."""
    require_config(config, UriEscapeConfig)
    return transform_text(text, _unescaper(config))


def unescape_to(
    buffer: Optional[Sequence[str]],
    offset: int,
    length: int,
    writer: Any,
    config: UriEscapeConfig,
) -> None:
    """Decode percent-escapes in ``buffer[offset:offset + length]`` into ``writer``."""
    require_writer(writer)
    require_config(config, UriEscapeConfig)
    transform_window(buffer, offset, length, writer, _unescaper(config))
