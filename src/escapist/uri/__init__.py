"""URI escaping context.

This module provides RFC 3986 percent-encoding for URI paths, path segments,
query parameters and fragment identifiers.
"""

from escapist.shared.config import UriEscapeConfig, UriEscapeType

from .api import (
    escape_uri_fragment_id,
    escape_uri_fragment_id_to,
    escape_uri_path,
    escape_uri_path_segment,
    escape_uri_path_segment_to,
    escape_uri_path_to,
    escape_uri_query_param,
    escape_uri_query_param_to,
    unescape_uri_fragment_id,
    unescape_uri_fragment_id_to,
    unescape_uri_path,
    unescape_uri_path_segment,
    unescape_uri_path_segment_to,
    unescape_uri_path_to,
    unescape_uri_query_param,
    unescape_uri_query_param_to,
)
from .engine import DEFAULT_ENCODING

__all__ = [
    # Modules
    "api",
    "engine",
    # Configuration
    "DEFAULT_ENCODING",
    "UriEscapeConfig",
    "UriEscapeType",
    # Escaping
    "escape_uri_fragment_id",
    "escape_uri_path",
    "escape_uri_path_segment",
    "escape_uri_query_param",
    # Unescaping
    "unescape_uri_fragment_id",
    "unescape_uri_path",
    "unescape_uri_path_segment",
    "unescape_uri_query_param",
    # Window variants
    "escape_uri_fragment_id_to",
    "escape_uri_path_to",
    "escape_uri_path_segment_to",
    "escape_uri_query_param_to",
    "unescape_uri_fragment_id_to",
    "unescape_uri_path_to",
    "unescape_uri_path_segment_to",
    "unescape_uri_query_param_to",
]
