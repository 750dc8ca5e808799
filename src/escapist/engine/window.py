"""Argument checks for the window-based (buffer, offset, length, writer) shape."""

from typing import Any, Optional, Sequence

from ..shared.errors import InvalidArgumentError


def require_argument(value: Any, name: str) -> None:
    """Raise InvalidArgumentError if a mandatory argument is None."""
    if value is None:
        raise InvalidArgumentError(f"Argument '{name}' cannot be None", argument=name)


def require_writer(writer: Any) -> None:
    """Check that ``writer`` is present and exposes ``write(str)``."""
    require_argument(writer, "writer")
    if not callable(getattr(writer, "write", None)):
        raise InvalidArgumentError(
            f"Argument 'writer' must have a write() method, got {type(writer).__name__}",
            argument="writer",
        )


def require_config(config: Any, config_class: type) -> None:
    """Check that ``config`` is an instance of the context's configuration class."""
    require_argument(config, "config")
    if not isinstance(config, config_class):
        raise InvalidArgumentError(
            f"Argument 'config' must be a {config_class.__name__}, "
            f"got {type(config).__name__}",
            argument="config",
        )


def _require_int(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"Argument '{name}' must be an int, got {value!r}", argument=name
        )


def validate_window(buffer: Optional[Sequence[str]], offset: int, length: int) -> int:
    """Validate an input window against its buffer.

    An absent buffer counts as a buffer of length zero.

    Args:
        buffer: Caller-owned character sequence, or None
        offset: Start of the window
        length: Number of units in the window

    Returns:
        Exclusive end index of the window

    Raises:
        InvalidArgumentError: If the window does not fit inside the buffer
    """
    _require_int(offset, "offset")
    _require_int(length, "length")
    size = 0 if buffer is None else len(buffer)

    if offset < 0 or offset > size:
        raise InvalidArgumentError(
            f"Invalid (offset, len). offset={offset}, len={length}, buffer.length={size}",
            argument="offset",
        )
    if length < 0 or offset + length > size:
        raise InvalidArgumentError(
            f"Invalid (offset, len). offset={offset}, len={length}, buffer.length={size}",
            argument="length",
        )
    return offset + length


def text_span(buffer: Sequence[str], start: int, end: int) -> str:
    """Return ``buffer[start:end]`` as a str, whatever the buffer type."""
    chunk = buffer[start:end]
    if isinstance(chunk, str):
        return chunk
    return "".join(chunk)
