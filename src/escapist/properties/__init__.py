"""Java ``.properties`` escaping context."""

from escapist.shared.config import PropertiesEscapeConfig, PropertiesEscapeLevel, PropertiesRole

from .api import (
    escape_properties_key,
    escape_properties_key_minimal,
    escape_properties_key_minimal_to,
    escape_properties_key_to,
    escape_properties_value,
    escape_properties_value_minimal,
    escape_properties_value_minimal_to,
    escape_properties_value_to,
    unescape_properties,
    unescape_properties_to,
)

__all__ = [
    # Modules
    "api",
    "engine",
    # Configuration
    "PropertiesEscapeConfig",
    "PropertiesEscapeLevel",
    "PropertiesRole",
    # Escaping
    "escape_properties_key",
    "escape_properties_key_minimal",
    "escape_properties_value",
    "escape_properties_value_minimal",
    "unescape_properties",
    # Window variants
    "escape_properties_key_minimal_to",
    "escape_properties_key_to",
    "escape_properties_value_minimal_to",
    "escape_properties_value_to",
    "unescape_properties_to",
]
