"""Opaque pagination cursors.

A cursor is the unpadded base64url encoding of a decimal offset into the
filtered resource list. Listings are recomputed on every call, so the offset
is all the state a client needs to hand back.
"""

import base64
import binascii
import re
from typing import Optional

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, ErrorData

_OFFSET_PATTERN = re.compile(r"-?[0-9]+")


class InvalidCursorError(McpError):
    """Raised when a client sends a cursor that does not decode to an offset."""

    def __init__(self, message: str = "Invalid or malformed cursor"):
        super().__init__(ErrorData(code=INVALID_PARAMS, message=message))

    @property
    def code(self) -> int:
        return self.error.code


def encode_cursor(offset: int) -> str:
    """Encode a non-negative offset as an opaque cursor."""
    if offset < 0:
        raise ValueError(f"Cursor offset must be non-negative, got {offset}")
    encoded = base64.urlsafe_b64encode(str(offset).encode("ascii"))
    return encoded.decode("ascii").rstrip("=")


def decode_cursor(cursor: str) -> Optional[int]:
    """Decode a cursor to its offset, or ``None`` if it is not valid."""
    padded = cursor + "=" * (-len(cursor) % 4)
    try:
        raw = base64.b64decode(padded, altchars=b"-_", validate=True)
        decoded = raw.decode("ascii")
    except (binascii.Error, ValueError):
        return None

    if not _OFFSET_PATTERN.fullmatch(decoded):
        return None
    try:
        offset = int(decoded)
    except ValueError:
        # beyond the interpreter's int-string conversion limit
        return None
    return offset if offset >= 0 else None


def decode_cursor_or_raise(cursor: str) -> int:
    """Decode a cursor, raising :class:`InvalidCursorError` when invalid."""
    offset = decode_cursor(cursor)
    if offset is None:
        raise InvalidCursorError()
    return offset
