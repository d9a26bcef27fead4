"""Page selection over an organization's ordered folders."""

from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..models import Folder
from .markers import NIL_ID


def compute_offset_page(
    view: Sequence[Folder],
    offset: int,
    limit: int,
) -> tuple[tuple[Folder, ...], Optional[int]]:
    """Select the page starting at ``offset``.

    Returns the page and the offset of the following page, or None when the
    page reaches the end of ``view``. An exact fit on the last page reports
    no following page.
    """
    total = len(view)
    if offset >= total:
        return (), None

    end = min(offset + limit, total)
    next_offset = end if end < total else None
    return tuple(view[offset:end]), next_offset


def _resume_index(view: Sequence[Folder], last_seen: Optional[uuid.UUID]) -> int:
    if last_seen is None or last_seen == NIL_ID:
        return 0
    for index, folder in enumerate(view):
        if folder.id == last_seen:
            return index + 1
    # Unknown cursor: start over rather than fail
    return 0


def compute_cursor_page(
    view: Sequence[Folder],
    last_seen: Optional[uuid.UUID],
    limit: int,
) -> tuple[tuple[Folder, ...], Optional[uuid.UUID]]:
    """Select the page following the folder ``last_seen``.

    The matching folder itself is excluded. A cursor that is unknown to
    ``view`` (or None) starts from the beginning, and a cursor on the last
    folder yields an empty page. The returned cursor is the id of the last
    folder in the page, or None when nothing follows it.
    """
    start = _resume_index(view, last_seen)
    page = tuple(view[start:start + limit])
    if not page or start + len(page) >= len(view):
        return page, None
    return page, page[-1].id
