"""Comprehensive tests for escape configuration classes."""

import json

import pytest

from escapist.shared.config import (
    CONFIG_CLASSES,
    # Configuration classes
    CsvEscapeConfig,
    HtmlEscapeConfig,
    JsonEscapeConfig,
    PropertiesEscapeConfig,
    UriEscapeConfig,

    # Enums
    EscapeContext,
    HtmlEscapeLevel,
    HtmlEscapeType,
    JsonEscapeLevel,
    JsonEscapeType,
    PropertiesEscapeLevel,
    PropertiesRole,
    UriEscapeType,

    config_from_dict,
)
from escapist.shared.errors import ConfigValidationError, InvalidArgumentError


class TestEscapeLevels:
    """Test suite for escape level enums."""

    def test_for_level(self):
        """Test numeric level lookup."""
        assert HtmlEscapeLevel.for_level(0) is HtmlEscapeLevel.LEVEL_0_ONLY_MARKUP_SIGNIFICANT_EXCEPT_APOS
        assert JsonEscapeLevel.for_level(4) is JsonEscapeLevel.LEVEL_4_ALL_CHARACTERS
        assert PropertiesEscapeLevel.for_level(
            PropertiesEscapeLevel.LEVEL_1_BASIC_ESCAPE_SET
        ) is PropertiesEscapeLevel.LEVEL_1_BASIC_ESCAPE_SET

    def test_for_level_out_of_range(self):
        """Test that undefined levels are rejected."""
        with pytest.raises(InvalidArgumentError, match="No escape level enum constant defined for level: 5"):
            HtmlEscapeLevel.for_level(5)
        with pytest.raises(InvalidArgumentError):
            JsonEscapeLevel.for_level(0)

    def test_html_escape_type_flags(self):
        """Test the notation flags of HTML escape types."""
        html5_hexa = HtmlEscapeType.HTML5_NAMED_REFERENCES_DEFAULT_TO_HEXA
        assert (html5_hexa.use_ncrs, html5_hexa.use_hexa, html5_hexa.use_html5) == (True, True, True)
        decimal = HtmlEscapeType.DECIMAL_REFERENCES
        assert (decimal.use_ncrs, decimal.use_hexa, decimal.use_html5) == (False, False, False)

    def test_json_use_secs(self):
        """Test the JSON SEC flag."""
        assert JsonEscapeType.SINGLE_ESCAPE_CHARS_DEFAULT_TO_UHEXA.use_secs is True
        assert JsonEscapeType.UHEXA.use_secs is False


class TestHtmlEscapeConfig:
    """Test suite for HtmlEscapeConfig."""

    def test_default_configuration(self):
        """Test default HTML configuration values."""
        config = HtmlEscapeConfig()
        assert config.escape_type is HtmlEscapeType.HTML5_NAMED_REFERENCES_DEFAULT_TO_DECIMAL
        assert config.level is HtmlEscapeLevel.LEVEL_2_ALL_NON_ASCII_PLUS_MARKUP_SIGNIFICANT
        assert config.context is EscapeContext.HTML

    def test_presets(self):
        """Test the named presets."""
        assert HtmlEscapeConfig.html5() == HtmlEscapeConfig()
        assert HtmlEscapeConfig.html5_xml().level == 1
        assert HtmlEscapeConfig.html4().escape_type is HtmlEscapeType.HTML4_NAMED_REFERENCES_DEFAULT_TO_DECIMAL
        assert HtmlEscapeConfig.html4_xml().level == 1

    def test_int_level_coerced(self):
        """Test that int levels are converted to enum members."""
        config = HtmlEscapeConfig(level=3)
        assert config.level is HtmlEscapeLevel.LEVEL_3_ALL_NON_ALPHANUMERIC

    def test_validation_failures(self):
        """Test HTML configuration validation failures."""
        with pytest.raises(ConfigValidationError) as exc_info:
            HtmlEscapeConfig(escape_type=None)
        assert exc_info.value.field_name == "escape_type"
        assert "DECIMAL_REFERENCES" in exc_info.value.suggestions

        with pytest.raises(ConfigValidationError):
            HtmlEscapeConfig(level=None)
        with pytest.raises(ConfigValidationError):
            HtmlEscapeConfig(level=True)
        with pytest.raises(ConfigValidationError):
            HtmlEscapeConfig(level="2")
        with pytest.raises(ConfigValidationError, match="level: 7"):
            HtmlEscapeConfig(level=7)

    def test_immutable(self):
        """Test that configurations are frozen."""
        config = HtmlEscapeConfig()
        with pytest.raises(AttributeError):
            config.level = 0


class TestOtherConfigs:
    """Test suite for the URI, properties, JSON and CSV configurations."""

    def test_uri_presets(self):
        """Test URI presets and their encoding."""
        assert UriEscapeConfig().escape_type is UriEscapeType.PATH
        assert UriEscapeConfig().encoding == "UTF-8"
        assert UriEscapeConfig.path_segment().escape_type is UriEscapeType.PATH_SEGMENT
        assert UriEscapeConfig.query_param("latin-1").encoding == "latin-1"
        assert UriEscapeConfig.fragment_id().escape_type is UriEscapeType.FRAGMENT_ID

    def test_uri_encoding_not_resolved_eagerly(self):
        """Test that an unknown encoding name is accepted at construction."""
        assert UriEscapeConfig.path("no-such-codec").encoding == "no-such-codec"

    def test_properties_presets(self):
        """Test properties presets."""
        assert PropertiesEscapeConfig() == PropertiesEscapeConfig.value()
        assert PropertiesEscapeConfig.key().role is PropertiesRole.KEY
        assert PropertiesEscapeConfig.key_minimal().level == 1
        assert PropertiesEscapeConfig.value_minimal().role is PropertiesRole.VALUE

    def test_properties_validation(self):
        """Test properties configuration validation."""
        with pytest.raises(ConfigValidationError):
            PropertiesEscapeConfig(role="key")
        with pytest.raises(ConfigValidationError):
            PropertiesEscapeConfig(level=0)

    def test_json_presets(self):
        """Test JSON presets."""
        assert JsonEscapeConfig.minimal().level is JsonEscapeLevel.LEVEL_1_BASIC_ESCAPE_SET
        assert JsonEscapeConfig.default() == JsonEscapeConfig()

    def test_csv_config(self):
        """Test that CSV configs are all equal."""
        assert CsvEscapeConfig() == CsvEscapeConfig()
        assert CsvEscapeConfig().context is EscapeContext.CSV


class TestSerialization:
    """Test suite for configuration serialization."""

    def test_to_dict(self):
        """Test dictionary conversion with enums by name."""
        data = HtmlEscapeConfig.html4_xml().to_dict()
        assert data == {
            "context": "html",
            "escape_type": "HTML4_NAMED_REFERENCES_DEFAULT_TO_DECIMAL",
            "level": "LEVEL_1_ONLY_MARKUP_SIGNIFICANT",
        }
        assert CsvEscapeConfig().to_dict() == {"context": "csv"}

    def test_round_trip_all_contexts(self):
        """Test that every configuration survives JSON serialization."""
        configs = [
            HtmlEscapeConfig(HtmlEscapeType.HEXADECIMAL_REFERENCES, 4),
            UriEscapeConfig.query_param("ISO-8859-1"),
            PropertiesEscapeConfig.key_minimal(),
            JsonEscapeConfig(JsonEscapeType.UHEXA, 3),
            CsvEscapeConfig(),
        ]
        for config in configs:
            restored = config_from_dict(json.loads(config.to_json()))
            assert restored == config
            assert type(config).from_json(config.to_json()) == config

    def test_from_dict_accepts_int_level(self):
        """Test that levels may be given as ints."""
        config = JsonEscapeConfig.from_dict({"level": 1})
        assert config == JsonEscapeConfig.minimal()

    def test_from_dict_failures(self):
        """Test unknown fields and enum names."""
        with pytest.raises(ConfigValidationError) as exc_info:
            HtmlEscapeConfig.from_dict({"levle": 1})
        assert exc_info.value.field_name == "levle"
        assert "level" in exc_info.value.suggestions

        with pytest.raises(ConfigValidationError, match="Unknown UriEscapeType member"):
            UriEscapeConfig.from_dict({"escape_type": "QUERY"})

    def test_config_from_dict_unknown_context(self):
        """Test that the context key selects the class."""
        with pytest.raises(ConfigValidationError) as exc_info:
            config_from_dict({"context": "xml"})
        assert "html" in exc_info.value.suggestions
        with pytest.raises(ConfigValidationError):
            config_from_dict({})

    def test_override(self):
        """Test creating a modified copy."""
        config = PropertiesEscapeConfig.key()
        changed = config.override(level=4)
        assert changed.level is PropertiesEscapeLevel.LEVEL_4_ALL_CHARACTERS
        assert changed.role is PropertiesRole.KEY
        assert config.level is PropertiesEscapeLevel.LEVEL_2_ALL_NON_ASCII_PLUS_BASIC_ESCAPE_SET

    def test_config_classes_registry(self):
        """Test that every context has a configuration class."""
        assert set(CONFIG_CLASSES) == set(EscapeContext)
        for context, config_cls in CONFIG_CLASSES.items():
            assert config_cls.context is context
