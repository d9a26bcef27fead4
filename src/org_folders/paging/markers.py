"""Page marker codecs.

A marker is an opaque string handed to callers. Each codec maps it to and
from an internal resume position:

- ``offset``: base64 of the decimal index of the next folder to return.
- ``cursor``: base64 of the 16 raw bytes of the last folder returned.

Encoding is total. Decoding raises ``MalformedMarker``, which the
pagination service absorbs by serving the first page.
"""

from __future__ import annotations

import base64
import binascii
import uuid
from typing import Optional, Protocol, TypeVar

from ..errors import MalformedMarker

P = TypeVar("P")

NIL_ID = uuid.UUID(int=0)

# Longest decimal offset accepted from a marker
MAX_OFFSET_DIGITS = 18


class MarkerCodec(Protocol[P]):
    """Bidirectional mapping between markers and resume positions."""

    name: str

    def encode(self, position: P) -> str:
        ...

    def decode(self, marker: str) -> P:
        ...


def _b64decode(marker: str) -> bytes:
    try:
        return base64.b64decode(marker.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise MalformedMarker(f"invalid marker format: {e}") from e


class OffsetMarkerCodec:
    """Markers holding a zero-based offset into the organization's folders."""

    name = "offset"

    def encode(self, position: int) -> str:
        if position < 0:
            raise ValueError(f"offset must be non-negative, got {position}")
        return base64.b64encode(str(position).encode("ascii")).decode("ascii")

    def decode(self, marker: str) -> int:
        if not marker:
            return 0

        raw = _b64decode(marker)
        try:
            text = raw.decode("ascii")
        except UnicodeDecodeError as e:
            raise MalformedMarker(f"invalid marker content: {e}") from e
        if not text.isdecimal():
            raise MalformedMarker(f"invalid marker content: {text!r} is not an offset")
        if len(text) > MAX_OFFSET_DIGITS:
            raise MalformedMarker(f"invalid marker content: offset has {len(text)} digits")
        return int(text)


class CursorMarkerCodec:
    """Markers holding the id of the last folder already returned."""

    name = "cursor"

    def encode(self, position: Optional[uuid.UUID]) -> str:
        if position is None or position == NIL_ID:
            return ""
        return base64.b64encode(position.bytes).decode("ascii")

    def decode(self, marker: str) -> Optional[uuid.UUID]:
        if not marker:
            return None

        raw = _b64decode(marker)
        if len(raw) != 16:
            raise MalformedMarker(f"invalid cursor content: expected 16 bytes, got {len(raw)}")
        # Reject alternate spellings of the same bytes
        if base64.b64encode(raw).decode("ascii") != marker:
            raise MalformedMarker("invalid cursor content: non-canonical encoding")

        last_seen = uuid.UUID(bytes=raw)
        if last_seen == NIL_ID:
            return None
        return last_seen


CODECS = {
    OffsetMarkerCodec.name: OffsetMarkerCodec,
    CursorMarkerCodec.name: CursorMarkerCodec,
}

STRATEGIES = tuple(CODECS)


def get_codec(strategy: str) -> MarkerCodec:
    """Return the codec for a strategy name (``offset`` or ``cursor``)."""
    try:
        return CODECS[strategy.lower()]()
    except (KeyError, AttributeError):
        raise ValueError(
            f"Unknown pagination strategy: {strategy!r}. Use one of: {', '.join(STRATEGIES)}"
        ) from None
