"""Pagination metadata for list responses."""

from __future__ import annotations

from typing import Optional


def build_page_info(limit: int, next_marker: Optional[str], count: int) -> dict:
    """Build marker-based pagination metadata."""
    return {
        "limit": limit,
        "count": count,
        "has_more": bool(next_marker),
        "next_page_marker": next_marker or None,
    }
