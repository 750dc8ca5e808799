"""JavaScript string literal escaping context."""

from escapist.shared.config import (
    JavaScriptEscapeConfig,
    JavaScriptEscapeLevel,
    JavaScriptEscapeType,
)

from .api import (
    escape_javascript,
    escape_javascript_minimal,
    escape_javascript_minimal_to,
    escape_javascript_to,
    unescape_javascript,
    unescape_javascript_to,
)

__all__ = [
    # Modules
    "api",
    "engine",
    # Configuration
    "JavaScriptEscapeConfig",
    "JavaScriptEscapeLevel",
    "JavaScriptEscapeType",
    # Escaping
    "escape_javascript",
    "escape_javascript_minimal",
    "unescape_javascript",
    # Window variants
    "escape_javascript_minimal_to",
    "escape_javascript_to",
    "unescape_javascript_to",
]
