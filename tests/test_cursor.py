"""Tests for opaque pagination cursors."""

import base64

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS

from eventcatalog_mcp.catalog.cursor import (
    InvalidCursorError,
    decode_cursor,
    decode_cursor_or_raise,
    encode_cursor,
)


def _raw(text: str) -> str:
    return base64.urlsafe_b64encode(text.encode()).decode().rstrip("=")


@pytest.mark.unit
class TestEncodeCursor:
    """Test encode cursor."""

    def test_encodes_zero(self):
        """Test encodes zero."""
        assert encode_cursor(0) == "MA"

    def test_encodes_fifty(self):
        """Test encodes fifty."""
        assert encode_cursor(50) == "NTA"

    def test_no_padding_or_unsafe_characters(self):
        """Test no padding or unsafe characters."""
        for offset in (1, 12, 123, 1234, 987654321):
            cursor = encode_cursor(offset)
            assert "=" not in cursor
            assert "+" not in cursor and "/" not in cursor

    def test_negative_offset_rejected(self):
        """Test negative offset rejected."""
        with pytest.raises(ValueError):
            encode_cursor(-1)


@pytest.mark.unit
class TestDecodeCursor:
    """Test decode cursor."""

    @pytest.mark.parametrize("offset", [0, 50, 100, 999999])
    def test_decodes_encoded_offsets(self, offset):
        """Test decodes encoded offsets."""
        assert decode_cursor(encode_cursor(offset)) == offset

    def test_accepts_padded_input(self):
        """Test accepts padded input."""
        assert decode_cursor("NTA=") == 50

    @pytest.mark.parametrize(
        "cursor",
        [
            "",
            "!!!invalid!!!",
            "!!!not-base64!!!",
            _raw("abc"),
            _raw("-5"),
            _raw("1.5"),
            _raw(" 10"),
            _raw("1e3"),
            _raw("9" * 5000),
            "A",
        ],
    )
    def test_invalid_cursors_decode_to_none(self, cursor):
        """Test invalid cursors decode to none."""
        assert decode_cursor(cursor) is None


@pytest.mark.unit
class TestDecodeCursorOrRaise:
    """Test decode cursor or raise."""

    def test_returns_offset(self):
        """Test returns offset."""
        assert decode_cursor_or_raise(encode_cursor(150)) == 150

    @pytest.mark.parametrize("cursor", ["", "garbage!", _raw("-1")])
    def test_raises_invalid_cursor_error(self, cursor):
        """Test raises invalid cursor error."""
        with pytest.raises(InvalidCursorError) as exc_info:
            decode_cursor_or_raise(cursor)

        assert exc_info.value.code == INVALID_PARAMS == -32602

    def test_error_is_an_mcp_error(self):
        """Test error is an McpError."""
        error = InvalidCursorError()

        assert isinstance(error, McpError)
        assert error.error.message == "Invalid or malformed cursor"

    def test_custom_message(self):
        """Test custom message."""
        assert InvalidCursorError("Cursor expired").error.message == "Cursor expired"
