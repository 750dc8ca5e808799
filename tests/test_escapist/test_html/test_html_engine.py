"""Tests for the HTML escape and unescape engine."""

import io

import pytest

from escapist.html import engine
from escapist.html.symbols import (
    ASCII_LEVELS,
    HTML4_REFERENCES,
    HTML5_REFERENCES,
    WINDOWS_1252_REMAP,
)
from escapist.shared.config import HtmlEscapeConfig, HtmlEscapeLevel, HtmlEscapeType
from escapist.shared.errors import InvalidArgumentError

PAIR = chr(0xD83D) + chr(0xDE00)


def escape(text, escape_type=HtmlEscapeType.HTML5_NAMED_REFERENCES_DEFAULT_TO_DECIMAL, level=2):
    return engine.escape(text, HtmlEscapeConfig(escape_type, level))


class TestSymbols:
    """Test the reference tables."""

    def test_ascii_levels(self):
        """Test the level ladder for ASCII characters."""
        for char in '<>&"':
            assert ASCII_LEVELS[ord(char)] == 0
        assert ASCII_LEVELS[ord("'")] == 1
        assert ASCII_LEVELS[ord("-")] == 3
        assert ASCII_LEVELS[ord(" ")] == 3
        assert ASCII_LEVELS[ord("a")] == 4
        assert ASCII_LEVELS[ord("0")] == 4

    def test_html4_references(self):
        """Test that HTML4 has no apostrophe reference."""
        assert HTML4_REFERENCES[ord("<")] == "&lt;"
        assert HTML4_REFERENCES[0xE9] == "&eacute;"
        assert ord("'") not in HTML4_REFERENCES

    def test_html5_preferred_names(self):
        """Test that the shortest lower-case name is preferred."""
        assert HTML5_REFERENCES[ord("<")] == "&lt;"
        assert HTML5_REFERENCES[ord("&")] == "&amp;"
        assert HTML5_REFERENCES[ord('"')] == "&quot;"
        assert HTML5_REFERENCES[ord("'")] == "&apos;"
        assert HTML5_REFERENCES[0xA0] == "&nbsp;"

    def test_windows_1252_remap(self):
        """Test a few entries of the C1 remapping."""
        assert WINDOWS_1252_REMAP[0x80] == "€"
        assert 0x81 not in WINDOWS_1252_REMAP


class TestEscape:
    """Test HTML escaping."""

    def test_markup_significant(self):
        """Test the canonical markup example."""
        assert escape('<div class="A">') == "&lt;div class=&quot;A&quot;&gt;"

    def test_apostrophe_by_type(self):
        """Test apostrophe notation in HTML4 and HTML5."""
        assert escape("'", HtmlEscapeType.HTML5_NAMED_REFERENCES_DEFAULT_TO_DECIMAL) == "&apos;"
        assert escape("'", HtmlEscapeType.HTML4_NAMED_REFERENCES_DEFAULT_TO_DECIMAL) == "&#39;"
        assert escape("'", HtmlEscapeType.HTML4_NAMED_REFERENCES_DEFAULT_TO_HEXA) == "&#x27;"

    def test_apostrophe_not_escaped_at_level_zero(self):
        """Test that level 0 leaves apostrophes alone."""
        assert escape("it's <", level=0) == "it's &lt;"

    def test_non_ascii(self):
        """Test named and numeric fallbacks for non-ASCII."""
        assert escape("café") == "caf&eacute;"
        assert escape("中") == "&#20013;"
        assert escape("中", HtmlEscapeType.HTML5_NAMED_REFERENCES_DEFAULT_TO_HEXA) == "&#x4e2d;"

    def test_non_ascii_left_at_level_one(self):
        """Test that level 1 only touches markup-significant characters."""
        text = "café"
        assert escape(text, level=1) is text

    def test_numeric_only_types(self):
        """Test decimal and hexadecimal reference types."""
        assert escape("<", HtmlEscapeType.DECIMAL_REFERENCES) == "&#60;"
        assert escape("<", HtmlEscapeType.HEXADECIMAL_REFERENCES) == "&#x3c;"

    def test_level_three(self):
        """Test that non-alphanumeric ASCII is escaped at level 3."""
        assert escape("a-b", HtmlEscapeType.DECIMAL_REFERENCES, level=3) == "a&#45;b"

    def test_level_four(self):
        """Test that letters are escaped at level 4."""
        assert escape("ab", HtmlEscapeType.DECIMAL_REFERENCES, HtmlEscapeLevel.LEVEL_4_ALL_CHARACTERS) == "&#97;&#98;"

    def test_astral_single_reference(self):
        """Test that a surrogate pair becomes one numeric reference."""
        assert escape("x" + PAIR, HtmlEscapeType.DECIMAL_REFERENCES) == "x&#128512;"
        assert escape("\U0001F600", HtmlEscapeType.HEXADECIMAL_REFERENCES) == "&#x1f600;"

    def test_identity_and_none(self):
        """Test identity for clean input and None passthrough."""
        text = "plain text"
        assert escape(text) is text
        assert escape(None) is None

    def test_invalid_config(self):
        """Test that a non-HTML config is rejected."""
        with pytest.raises(InvalidArgumentError):
            engine.escape("x", None)


class TestUnescape:
    """Test lenient HTML unescaping."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("&lt;div&gt;", "<div>"),
            ("&#60;&#x3C;&#X3c;", "<<<"),
            ("&#60", "<"),
            ("&amp", "&"),
            ("&ampfoo", "&foo"),
            ("&notit;", "¬it;"),
            ("&eacute;", "é"),
            ("&#128512;", "\U0001F600"),
            ("&#128;", "€"),
            ("&#0;", "\ufffd"),
            ("&#xD800;", "\ufffd"),
            ("&#x110000;", "\ufffd"),
            ("&#00000000000000000000065;", "A"),
            ("&#99999999999999999999;", "\ufffd"),
        ],
    )
    def test_references(self, text, expected):
        """Test decoding of named and numeric references."""
        assert engine.unescape(text) == expected

    @pytest.mark.parametrize("text", ["&unknown;", "a & b", "&#;", "&x;", "&", "&#x;"])
    def test_unrecognized_passthrough(self, text):
        """Test that unrecognized sequences are returned unchanged."""
        assert engine.unescape(text) is text

    def test_config_ignored(self):
        """Test that every reference form is recognized under any config."""
        assert engine.unescape("&apos;", HtmlEscapeConfig.html4()) == "'"


class TestWindows:
    """Test writer variants."""

    def test_escape_to_window(self):
        """Test escaping a window into a writer."""
        out = io.StringIO()
        engine.escape_to("xx<a>xx", 2, 3, out, HtmlEscapeConfig.html5())
        assert out.getvalue() == "&lt;a&gt;"

    def test_unescape_to_window(self):
        """Test that a reference cut by the window end is left alone."""
        out = io.StringIO()
        engine.unescape_to("&lt;&gt;", 0, 6, out)
        assert out.getvalue() == "<&g"

    def test_escape_to_checks_writer_first(self):
        """Test that a None writer is rejected even with a bad window."""
        with pytest.raises(InvalidArgumentError, match="writer"):
            engine.escape_to("abc", 5, 5, None, HtmlEscapeConfig.html5())
