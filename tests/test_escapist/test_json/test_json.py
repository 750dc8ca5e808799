"""Tests for JSON string escaping."""

import io
import json

import pytest

from escapist.json import (
    JsonEscapeLevel,
    JsonEscapeType,
    escape_json,
    escape_json_minimal,
    escape_json_minimal_to,
    escape_json_to,
    unescape_json,
    unescape_json_to,
)
from escapist.shared.errors import MalformedEscapeError

PAIR = chr(0xD83D) + chr(0xDE00)


class TestEscapeJson:
    """Test JSON escaping."""

    def test_single_escape_chars(self):
        """Test SEC output for the JSON escape characters."""
        assert escape_json_minimal('"\\\b\f\n\r\t') == '\\"\\\\\\b\\f\\n\\r\\t'

    def test_uhexa_type(self):
        """Test that UHEXA never uses SECs."""
        assert escape_json("\n", JsonEscapeType.UHEXA) == "\\u000A"
        assert escape_json('"', JsonEscapeType.UHEXA) == "\\u0022"

    def test_ampersand_and_controls(self):
        """Test basic-set members without an SEC."""
        assert escape_json_minimal("a&b") == "a\\u0026b"
        assert escape_json_minimal("\x00\x1f\x7f") == "\\u0000\\u001F\\u007F"

    def test_slash_after_less_than(self):
        """Test that '/' is escaped only after '<' below level 3."""
        assert escape_json_minimal("</script>") == "<\\/script>"
        text = "a/b"
        assert escape_json_minimal(text) is text
        assert escape_json(text, level=JsonEscapeLevel.LEVEL_3_ALL_NON_ALPHANUMERIC) == "a\\/b"

    def test_non_ascii(self):
        """Test non-ASCII handling by level."""
        assert escape_json_minimal("é") == "é"
        assert escape_json("é") == "\\u00E9"
        assert escape_json("x" + PAIR) == "x\\uD83D\\uDE00"

    def test_level_four(self):
        """Test that letters are escaped at level 4."""
        assert escape_json("a", level=4) == "\\u0061"

    def test_valid_json(self):
        """Test that escaped output parses back as a JSON string."""
        text = 'He said "</script>" & left\n\tá \U0001F600'
        for level in range(1, 5):
            escaped = escape_json(text, level=level)
            assert json.loads(f'"{escaped}"') == text


class TestUnescapeJson:
    """Test strict JSON unescaping."""

    def test_all_secs(self):
        """Test every JSON SEC."""
        assert unescape_json('\\"\\\\\\/\\b\\f\\n\\r\\t') == '"\\/\b\f\n\r\t'

    def test_uhexa(self):
        """Test hex escapes and surrogate pairs."""
        assert unescape_json("\\u0026\\u00e9") == "&é"
        assert unescape_json("\\uD83D\\uDE00") == "\U0001F600"

    @pytest.mark.parametrize("text", ["\\", "\\a", "\\u12", "\\uZZZZ", "\\ "])
    def test_malformed(self, text):
        """Test that malformed escapes raise."""
        with pytest.raises(MalformedEscapeError):
            unescape_json(text)

    def test_round_trip(self):
        """Test that unescape reverses escape at every level and type."""
        text = '<a href="/x">é & \U0001F600</a>\r\n'
        for escape_type in JsonEscapeType:
            for level in JsonEscapeLevel:
                assert unescape_json(escape_json(text, escape_type, level)) == text


class TestJsonWriters:
    """Test the writer variants."""

    def test_escape_writers(self):
        """Test escape writers on a window."""
        out = io.StringIO()
        escape_json_minimal_to('["a"]', 1, 3, out)
        escape_json_to("[é]", 1, 1, out)
        assert out.getvalue() == '\\"a\\"\\u00E9'

    def test_unescape_writer(self):
        """Test the unescape writer."""
        out = io.StringIO()
        unescape_json_to("[\\n]", 1, 2, out)
        assert out.getvalue() == "\n"
