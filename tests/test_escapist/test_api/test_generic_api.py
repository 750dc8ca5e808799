"""Tests for the generic configured API."""

import io

import pytest

import escapist
from escapist import (
    CsvEscapeConfig,
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
    escape,
    escape_to,
    unescape,
    unescape_to,
)
from escapist.api import ENGINES, engine_for
from escapist.shared.config import EscapeContext
from escapist.shared.errors import InvalidArgumentError

PAIR = chr(0xD83D) + chr(0xDE00)

SAMPLE = "Tom & \"Jerry\" it's <b>café</b>, 50% off: a=b/c?d#e \t\U0001F600 中"


def all_configs():
    configs = [HtmlEscapeConfig(t, level) for t in HtmlEscapeType for level in HtmlEscapeLevel]
    configs += [UriEscapeConfig(t) for t in UriEscapeType]
    configs += [UriEscapeConfig(t, enc) for t in UriEscapeType for enc in ("UTF-16-LE", "UTF-16")]
    configs += [
        PropertiesEscapeConfig(role, level)
        for role in PropertiesRole
        for level in PropertiesEscapeLevel
    ]
    configs += [JsonEscapeConfig(t, level) for t in JsonEscapeType for level in JsonEscapeLevel]
    configs += [
        JavaScriptEscapeConfig(t, level)
        for t in JavaScriptEscapeType
        for level in JavaScriptEscapeLevel
    ]
    configs += [
        XmlEscapeConfig(version, t, level)
        for version in XmlVersion
        for t in XmlEscapeType
        for level in XmlEscapeLevel
    ]
    configs.append(CsvEscapeConfig())
    return configs


# Every level of one context and notation, lowest first
LEVEL_LADDERS = {
    "html": [HtmlEscapeConfig(HtmlEscapeType.DECIMAL_REFERENCES, level) for level in HtmlEscapeLevel],
    "properties-key": [
        PropertiesEscapeConfig(PropertiesRole.KEY, level) for level in PropertiesEscapeLevel
    ],
    "properties-value": [
        PropertiesEscapeConfig(PropertiesRole.VALUE, level) for level in PropertiesEscapeLevel
    ],
    "json": [JsonEscapeConfig(level=level) for level in JsonEscapeLevel],
    "javascript": [JavaScriptEscapeConfig(level=level) for level in JavaScriptEscapeLevel],
    "xml10": [XmlEscapeConfig(XmlVersion.XML10, level=level) for level in XmlEscapeLevel],
    "xml11": [XmlEscapeConfig(XmlVersion.XML11, level=level) for level in XmlEscapeLevel],
}

LADDER_CODEPOINTS = list(range(0x100)) + [0x2028, 0x4E2D, 0xD800, 0xFFFD, 0xFFFE, 0x1F600]


class TestEngineDispatch:
    """Test selection of the engine by configuration."""

    def test_every_context_has_an_engine(self):
        """Test the engine registry."""
        assert set(ENGINES) == set(EscapeContext)
        assert engine_for(HtmlEscapeConfig()) is ENGINES[EscapeContext.HTML]
        assert engine_for(CsvEscapeConfig()) is ENGINES[EscapeContext.CSV]

    @pytest.mark.parametrize("config", [None, "html", object(), EscapeContext.HTML])
    def test_invalid_config(self, config):
        """Test that non-configurations are rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            escape("text", config)
        assert exc_info.value.argument == "config"


class TestRoundTrip:
    """Test that unescape reverses escape in every configuration."""

    @pytest.mark.parametrize("config", all_configs(), ids=repr)
    def test_round_trip(self, config):
        """Test the round-trip law on a mixed sample."""
        escaped = escape(SAMPLE, config)
        assert unescape(escaped, config) == SAMPLE

    @pytest.mark.parametrize(
        "config",
        [
            HtmlEscapeConfig.html5(),
            UriEscapeConfig.path(),
            PropertiesEscapeConfig.value(),
            JsonEscapeConfig(),
            JavaScriptEscapeConfig(),
            XmlEscapeConfig.xml10(),
        ],
    )
    def test_surrogate_pair_is_one_codepoint(self, config):
        """Test that a surrogate pair escapes like the astral character it encodes."""
        assert escape(PAIR, config) == escape("\U0001F600", config)
        assert unescape(escape(PAIR, config), config) == "\U0001F600"

    @pytest.mark.parametrize("config", all_configs(), ids=repr)
    def test_none_passthrough(self, config):
        """Test that None stays None."""
        assert escape(None, config) is None
        assert unescape(None, config) is None

    @pytest.mark.parametrize("config", all_configs(), ids=repr)
    def test_empty_identity(self, config):
        """Test that an empty string is returned unchanged."""
        text = ""
        assert escape(text, config) is text
        assert unescape(text, config) is text


class TestLevels:
    """Test that higher levels escape a superset of lower levels."""

    def test_html_level_monotonicity(self):
        """Test that escaped output only grows with the level."""
        lengths = [
            len(escape(SAMPLE, HtmlEscapeConfig(HtmlEscapeType.DECIMAL_REFERENCES, level)))
            for level in HtmlEscapeLevel
        ]
        assert lengths == sorted(lengths)
        assert len(set(lengths)) == len(lengths)

    def test_json_level_monotonicity(self):
        """Test JSON levels."""
        lengths = [len(escape(SAMPLE, JsonEscapeConfig(level=level))) for level in JsonEscapeLevel]
        assert lengths == sorted(lengths)

    @pytest.mark.parametrize("ladder", sorted(LEVEL_LADDERS))
    def test_per_codepoint_monotonicity(self, ladder):
        """Test that a codepoint escaped at one level is escaped at every higher level."""
        configs = LEVEL_LADDERS[ladder]
        for codepoint in LADDER_CODEPOINTS:
            text = chr(codepoint)
            escaped = [escape(text, config) is not text for config in configs]
            assert escaped == sorted(escaped), f"U+{codepoint:04X}: {escaped}"
            assert escaped[-1], f"U+{codepoint:04X} not escaped at the highest level"


class TestWindowedApi:
    """Test the writer variants of the generic API."""

    @pytest.mark.parametrize("config", all_configs(), ids=repr)
    def test_window_matches_string_form(self, config):
        """Test that a window produces the same text as the string form."""
        padded = "##" + SAMPLE + "##"
        out = io.StringIO()
        escape_to(padded, 2, len(SAMPLE), out, config)
        assert out.getvalue() == escape(SAMPLE, config)

        escaped = escape(SAMPLE, config)
        back = io.StringIO()
        unescape_to(list(escaped), 0, len(escaped), back, config)
        assert back.getvalue() == unescape(escaped, config)

    def test_none_writer(self):
        """Test that the writer is checked before the config."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            escape_to("abc", 0, 3, None, None)
        assert exc_info.value.argument == "writer"
        with pytest.raises(InvalidArgumentError) as exc_info:
            unescape_to("abc", 0, 3, None, HtmlEscapeConfig())
        assert exc_info.value.argument == "writer"

    @pytest.mark.parametrize("offset,length", [(-1, 2), (0, 4), (3, 1), (2, -1)])
    def test_bounds(self, offset, length):
        """Test that bad windows raise before any output."""
        out = io.StringIO()
        with pytest.raises(InvalidArgumentError):
            escape_to("a<c", offset, length, out, HtmlEscapeConfig())
        with pytest.raises(InvalidArgumentError):
            unescape_to("a<c", offset, length, out, CsvEscapeConfig())
        assert out.getvalue() == ""

    def test_none_buffer(self):
        """Test that a None buffer with an empty window is a no-op."""
        out = io.StringIO()
        escape_to(None, 0, 0, out, JsonEscapeConfig())
        assert out.getvalue() == ""


class TestPackageFunctions:
    """Test that package-level context functions match the generic API."""

    def test_context_functions(self):
        """Test each context entry point against its configuration."""
        assert escapist.escape_html5(SAMPLE) == escape(SAMPLE, HtmlEscapeConfig.html5())
        assert escapist.escape_uri_query_param(SAMPLE) == escape(SAMPLE, UriEscapeConfig.query_param())
        assert escapist.escape_properties_key(SAMPLE) == escape(SAMPLE, PropertiesEscapeConfig.key())
        assert escapist.escape_json(SAMPLE) == escape(SAMPLE, JsonEscapeConfig())
        assert escapist.escape_csv(SAMPLE) == escape(SAMPLE, CsvEscapeConfig())
        assert escapist.escape_xml10(SAMPLE) == escape(SAMPLE, XmlEscapeConfig.xml10())
        assert escapist.escape_javascript(SAMPLE) == escape(SAMPLE, JavaScriptEscapeConfig())
