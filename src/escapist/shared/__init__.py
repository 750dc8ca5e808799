"""Shared utilities for escapist.

This module provides the configuration objects, the error taxonomy and the
logging helpers used by every escape context.
"""

from .config import (
    DEFAULT_URI_ENCODING,
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
from .errors import (
    ConfigValidationError,
    EscapeError,
    InvalidArgumentError,
    MalformedEscapeError,
    UnsupportedEncodingError,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    # Configuration
    "DEFAULT_URI_ENCODING",
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
    # Logging
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
]
