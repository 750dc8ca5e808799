"""Error taxonomy for escaping and unescaping operations.

Every error raised by escapist derives from :class:`EscapeError`. Caller
contract violations are also ``ValueError`` instances so that code written
against plain ``ValueError`` keeps working.
"""

from typing import List, Optional


class EscapeError(Exception):
    """Base exception for all escaping errors."""


class InvalidArgumentError(EscapeError, ValueError):
    """Raised when a caller violates an operation's argument contract.

    Always raised before any output has been produced.
    """

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument


class ConfigValidationError(InvalidArgumentError):
    """Raised when an escape configuration holds an invalid value."""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        suggestions: Optional[List[str]] = None,
    ) -> None:
        super().__init__(message, argument=field_name)
        self.field_name = field_name
        self.suggestions = suggestions or []


class UnsupportedEncodingError(InvalidArgumentError, LookupError):
    """Raised when a text encoding name is not known to the runtime."""

    def __init__(self, encoding: str) -> None:
        super().__init__(
            f"Bad encoding '{encoding}': not a supported text encoding",
            argument="encoding",
        )
        self.encoding = encoding


class MalformedEscapeError(EscapeError, ValueError):
    """Raised by unescape operations on incomplete or invalid escape sequences.

    Attributes:
        position: Index in the input buffer where the sequence starts
        sequence: The offending text, as found in the input
    """

    def __init__(self, message: str, position: int, sequence: str = "") -> None:
        super().__init__(f"{message} at position {position}")
        self.position = position
        self.sequence = sequence
