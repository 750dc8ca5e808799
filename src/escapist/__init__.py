"""Escapist.

Escaping and unescaping of text for HTML, XML, URIs, Java ``.properties``
files, JSON and JavaScript strings and CSV fields, built on one copy-on-write
engine.

Progressive API Disclosure:
- Level 1: Context functions - escape_html5(), escape_uri_path(), escape_csv(), ...
- Level 2: Configured calls - escape(text, config), unescape(text, config)
- Level 3: Window calls - escape_to(buffer, offset, length, writer, config)
"""

__version__ = "0.1.0"
__author__ = "Escapist Team"

# Level 2 and 3: Generic configured API
from .api import escape, escape_to, unescape, unescape_to

# Level 1: Context functions
from .csv import escape_csv, unescape_csv
from .html import (
    escape_html,
    escape_html4,
    escape_html4_xml,
    escape_html5,
    escape_html5_xml,
    unescape_html,
)
from .javascript import escape_javascript, escape_javascript_minimal, unescape_javascript
from .json import escape_json, escape_json_minimal, unescape_json
from .properties import (
    escape_properties_key,
    escape_properties_key_minimal,
    escape_properties_value,
    escape_properties_value_minimal,
    unescape_properties,
)

# Configuration classes
from .shared.config import (
    CsvEscapeConfig,
    EscapeContext,
    HtmlEscapeConfig,
    HtmlEscapeLevel,
    HtmlEscapeType,
    JavaScriptEscapeConfig,
    JavaScriptEscapeLevel,
    JavaScriptEscapeType,
    JsonEscapeConfig,
    JsonEscapeLevel,
    JsonEscapeType,
    PropertiesEscapeConfig,
    PropertiesEscapeLevel,
    PropertiesRole,
    UriEscapeConfig,
    UriEscapeType,
    XmlEscapeConfig,
    XmlEscapeLevel,
    XmlEscapeType,
    XmlVersion,
    config_from_dict,
)

# Errors
from .shared.errors import (
    ConfigValidationError,
    EscapeError,
    InvalidArgumentError,
    MalformedEscapeError,
    UnsupportedEncodingError,
)
from .uri import (
    escape_uri_fragment_id,
    escape_uri_path,
    escape_uri_path_segment,
    escape_uri_query_param,
    unescape_uri_fragment_id,
    unescape_uri_path,
    unescape_uri_path_segment,
    unescape_uri_query_param,
)
from .xml import (
    escape_xml10,
    escape_xml10_minimal,
    escape_xml11,
    escape_xml11_minimal,
    unescape_xml,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Context functions
    "escape_csv",
    "unescape_csv",
    "escape_html",
    "escape_html4",
    "escape_html4_xml",
    "escape_html5",
    "escape_html5_xml",
    "unescape_html",
    "escape_javascript",
    "escape_javascript_minimal",
    "unescape_javascript",
    "escape_json",
    "escape_json_minimal",
    "unescape_json",
    "escape_properties_key",
    "escape_properties_key_minimal",
    "escape_properties_value",
    "escape_properties_value_minimal",
    "unescape_properties",
    "escape_uri_fragment_id",
    "escape_uri_path",
    "escape_uri_path_segment",
    "escape_uri_query_param",
    "unescape_uri_fragment_id",
    "unescape_uri_path",
    "unescape_uri_path_segment",
    "unescape_uri_query_param",
    "escape_xml10",
    "escape_xml10_minimal",
    "escape_xml11",
    "escape_xml11_minimal",
    "unescape_xml",

    # Level 2 and 3: Generic configured API
    "escape",
    "escape_to",
    "unescape",
    "unescape_to",

    # Configuration classes
    "CsvEscapeConfig",
    "EscapeContext",
    "HtmlEscapeConfig",
    "HtmlEscapeLevel",
    "HtmlEscapeType",
    "JavaScriptEscapeConfig",
    "JavaScriptEscapeLevel",
    "JavaScriptEscapeType",
    "JsonEscapeConfig",
    "JsonEscapeLevel",
    "JsonEscapeType",
    "PropertiesEscapeConfig",
    "PropertiesEscapeLevel",
    "PropertiesRole",
    "UriEscapeConfig",
    "UriEscapeType",
    "XmlEscapeConfig",
    "XmlEscapeLevel",
    "XmlEscapeType",
    "XmlVersion",
    "config_from_dict",

    # Errors
    "ConfigValidationError",
    "EscapeError",
    "InvalidArgumentError",
    "MalformedEscapeError",
    "UnsupportedEncodingError",
]
