"""JSON string escaping context."""

from escapist.shared.config import JsonEscapeConfig, JsonEscapeLevel, JsonEscapeType

from .api import (
    escape_json,
    escape_json_minimal,
    escape_json_minimal_to,
    escape_json_to,
    unescape_json,
    unescape_json_to,
)

__all__ = [
    # Modules
    "api",
    "engine",
    # Configuration
    "JsonEscapeConfig",
    "JsonEscapeLevel",
    "JsonEscapeType",
    # Escaping
    "escape_json",
    "escape_json_minimal",
    "unescape_json",
    # Window variants
    "escape_json_minimal_to",
    "escape_json_to",
    "unescape_json_to",
]
