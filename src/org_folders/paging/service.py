"""Pagination service: validate, list, decode, compute, encode."""

from __future__ import annotations

import logging
import uuid
from typing import Iterator, Optional, Union

from ..errors import MalformedMarker
from ..sources import FolderSource
from .compute import compute_cursor_page, compute_offset_page
from .markers import get_codec
from .request import DEFAULT_LIMIT, MAX_LIMIT, PageRequest, PageResult, validate_request

logger = logging.getLogger(__name__)


class PaginationService:
    """Serves pages of an organization's folders from a ``FolderSource``.

    The strategy (``cursor`` or ``offset``) is fixed for the lifetime of the
    service; markers issued under one strategy decode as malformed under the
    other and fall back to the first page. The service keeps no state
    between calls and is safe to share between threads.
    """

    def __init__(
        self,
        source: FolderSource,
        strategy: str = "cursor",
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ):
        if default_limit <= 0 or max_limit <= 0:
            raise ValueError("default_limit and max_limit must be positive")
        self.source = source
        self.codec = get_codec(strategy)
        self.strategy = self.codec.name
        self.default_limit = min(default_limit, max_limit)
        self.max_limit = max_limit

    def paginate(self, request: PageRequest) -> PageResult:
        """Return the page of folders described by ``request``.

        Raises:
            InvalidOrganization: If the request has no usable organization id.
        """
        logger.debug(
            "Received request for org: %s, limit: %s, marker: %r",
            request.org_id, request.limit, request.marker,
        )
        request = validate_request(request, self.default_limit, self.max_limit)

        view = self.source.list_by_organization(request.org_id)

        try:
            position = self.codec.decode(request.marker)
        except MalformedMarker as e:
            logger.warning("Ignoring page marker for org %s: %s", request.org_id, e)
            position = self.codec.decode("")

        if self.strategy == "offset":
            items, next_position = compute_offset_page(view, position, request.limit)
        else:
            items, next_position = compute_cursor_page(view, position, request.limit)

        next_marker = self.codec.encode(next_position) if next_position is not None else ""

        logger.debug("Returning %d folders, next marker: %r", len(items), next_marker)
        return PageResult(items=items, next_marker=next_marker)

    def iter_pages(
        self,
        org_id: Union[uuid.UUID, str],
        limit: Optional[int] = None,
        marker: str = "",
    ) -> Iterator[PageResult]:
        """Yield successive pages, following markers until none is returned."""
        while True:
            page = self.paginate(PageRequest(org_id=org_id, limit=limit or 0, marker=marker))
            yield page
            if not page.next_marker:
                return
            marker = page.next_marker
