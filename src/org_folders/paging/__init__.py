"""Pagination engine for organization folders."""

from .compute import compute_cursor_page, compute_offset_page
from .markers import CursorMarkerCodec, MarkerCodec, OffsetMarkerCodec, STRATEGIES, get_codec
from .request import DEFAULT_LIMIT, MAX_LIMIT, PageRequest, PageResult, clamp_limit, validate_request
from .service import PaginationService

__all__ = [
    "compute_cursor_page",
    "compute_offset_page",
    "CursorMarkerCodec",
    "MarkerCodec",
    "OffsetMarkerCodec",
    "STRATEGIES",
    "get_codec",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "PageRequest",
    "PageResult",
    "clamp_limit",
    "validate_request",
    "PaginationService",
]
