"""XML escaping context.

This module provides XML 1.0 and XML 1.1 escaping with the five predefined
entity references or numeric character references, and unescaping of both.
"""

from escapist.shared.config import XmlEscapeConfig, XmlEscapeLevel, XmlEscapeType, XmlVersion

from .api import (
    escape_xml,
    escape_xml10,
    escape_xml10_minimal,
    escape_xml10_minimal_to,
    escape_xml10_to,
    escape_xml11,
    escape_xml11_minimal,
    escape_xml11_minimal_to,
    escape_xml11_to,
    escape_xml_to,
    unescape_xml,
    unescape_xml_to,
)

__all__ = [
    # Modules
    "api",
    "engine",
    "symbols",
    # Configuration
    "XmlEscapeConfig",
    "XmlEscapeLevel",
    "XmlEscapeType",
    "XmlVersion",
    # Escaping
    "escape_xml",
    "escape_xml10",
    "escape_xml10_minimal",
    "escape_xml11",
    "escape_xml11_minimal",
    "unescape_xml",
    # Window variants
    "escape_xml_to",
    "escape_xml10_to",
    "escape_xml10_minimal_to",
    "escape_xml11_to",
    "escape_xml11_minimal_to",
    "unescape_xml_to",
]
