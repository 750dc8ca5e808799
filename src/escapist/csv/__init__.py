"""CSV escaping context (RFC 4180 quoting)."""

from escapist.shared.config import CsvEscapeConfig

from .api import escape_csv, escape_csv_to, unescape_csv, unescape_csv_to

__all__ = [
    # Modules
    "api",
    "engine",
    # Configuration
    "CsvEscapeConfig",
    # Escaping
    "escape_csv",
    "unescape_csv",
    # Window variants
    "escape_csv_to",
    "unescape_csv_to",
]
