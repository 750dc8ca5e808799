"""HTML escaping context.

This module provides HTML4/HTML5 named reference escaping, numeric reference
fallbacks and lenient unescaping of every reference form.
"""

from escapist.shared.config import HtmlEscapeConfig, HtmlEscapeLevel, HtmlEscapeType

from .api import (
    escape_html,
    escape_html4,
    escape_html4_to,
    escape_html4_xml,
    escape_html4_xml_to,
    escape_html5,
    escape_html5_to,
    escape_html5_xml,
    escape_html5_xml_to,
    escape_html_to,
    unescape_html,
    unescape_html_to,
)

__all__ = [
    # Modules
    "api",
    "engine",
    "symbols",
    # Configuration
    "HtmlEscapeConfig",
    "HtmlEscapeLevel",
    "HtmlEscapeType",
    # Escaping
    "escape_html",
    "escape_html4",
    "escape_html4_xml",
    "escape_html5",
    "escape_html5_xml",
    "unescape_html",
    # Window variants
    "escape_html_to",
    "escape_html4_to",
    "escape_html4_xml_to",
    "escape_html5_to",
    "escape_html5_xml_to",
    "unescape_html_to",
]
