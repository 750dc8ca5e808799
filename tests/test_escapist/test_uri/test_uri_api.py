"""Tests for the URI convenience functions."""

import io

import pytest

from escapist.uri import (
    escape_uri_fragment_id,
    escape_uri_fragment_id_to,
    escape_uri_path,
    escape_uri_path_segment,
    escape_uri_path_segment_to,
    escape_uri_path_to,
    escape_uri_query_param,
    escape_uri_query_param_to,
    unescape_uri_fragment_id,
    unescape_uri_path,
    unescape_uri_path_segment,
    unescape_uri_path_to,
    unescape_uri_query_param,
    unescape_uri_query_param_to,
)
from escapist.shared.errors import UnsupportedEncodingError


class TestStringFunctions:
    """Test the string-in, string-out functions."""

    def test_path_family(self):
        """Test that path and segment differ only on '/'."""
        assert escape_uri_path("a b/c") == "a%20b/c"
        assert escape_uri_path_segment("a b/c") == "a%20b%2Fc"

    def test_query_and_fragment(self):
        """Test query parameters and fragment identifiers."""
        assert escape_uri_query_param("q=a&b") == "q%3Da%26b"
        assert escape_uri_fragment_id("sec 1?x=y") == "sec%201?x=y"

    def test_unescape_family(self):
        """Test the unescape functions."""
        assert unescape_uri_path("a%2Fb+c") == "a/b+c"
        assert unescape_uri_path_segment("a%2Fb") == "a/b"
        assert unescape_uri_query_param("a+b%2Bc") == "a b+c"
        assert unescape_uri_fragment_id("x%20y") == "x y"

    def test_encoding_argument(self):
        """Test the optional encoding argument."""
        assert escape_uri_path("é", "ISO-8859-1") == "%E9"
        assert unescape_uri_path("%E9", "ISO-8859-1") == "é"
        with pytest.raises(UnsupportedEncodingError):
            escape_uri_path("é", "no-such-codec")

    def test_none(self):
        """Test None passthrough."""
        assert escape_uri_path(None) is None
        assert unescape_uri_query_param(None) is None

    def test_round_trip(self):
        """Test that unescape reverses escape for every part."""
        text = "a b/c?d=e&f+g#h é"
        assert unescape_uri_path(escape_uri_path(text)) == text
        assert unescape_uri_path_segment(escape_uri_path_segment(text)) == text
        assert unescape_uri_query_param(escape_uri_query_param(text)) == text
        assert unescape_uri_fragment_id(escape_uri_fragment_id(text)) == text


class TestWriterFunctions:
    """Test the window and writer functions."""

    @pytest.mark.parametrize(
        "function,expected",
        [
            (escape_uri_path_to, "a%20b/c"),
            (escape_uri_path_segment_to, "a%20b%2Fc"),
            (escape_uri_query_param_to, "a%20b/c"),
            (escape_uri_fragment_id_to, "a%20b/c"),
        ],
    )
    def test_escape_to(self, function, expected):
        """Test every escape writer on the same window."""
        out = io.StringIO()
        function("[a b/c]", 1, 5, out)
        assert out.getvalue() == expected

    def test_unescape_to(self):
        """Test unescape writers."""
        out = io.StringIO()
        unescape_uri_query_param_to("a+b", 0, 3, out)
        unescape_uri_path_to("+%21", 0, 4, out)
        assert out.getvalue() == "a b+!"
