"""Page request and result types, and request validation."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from typing import Optional, Union

from ..errors import InvalidOrganization
from ..models import Folder

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class PageRequest:
    """A request for one page of an organization's folders.

    ``limit`` is advisory; ``validate_request`` produces the value the
    engine actually uses. ``marker`` is empty for the first page.
    """

    org_id: Optional[Union[uuid.UUID, str]]
    limit: int = 0
    marker: str = ""


@dataclass(frozen=True)
class PageResult:
    """One page of folders and the marker for the next page."""

    items: tuple[Folder, ...] = ()
    next_marker: str = ""

    @property
    def has_more(self) -> bool:
        return bool(self.next_marker)


def _coerce_org_id(org_id: Optional[Union[uuid.UUID, str]]) -> uuid.UUID:
    if org_id is None or org_id == "":
        raise InvalidOrganization(org_id, "cannot be empty")
    if isinstance(org_id, uuid.UUID):
        value = org_id
    else:
        try:
            value = uuid.UUID(str(org_id))
        except ValueError:
            raise InvalidOrganization(org_id, f"not a UUID: {org_id!r}") from None
    if value == uuid.UUID(int=0):
        raise InvalidOrganization(value)
    return value


def clamp_limit(limit: Optional[int], default_limit: int = DEFAULT_LIMIT, max_limit: int = MAX_LIMIT) -> int:
    """Replace non-positive limits with the default and cap at the maximum."""
    if limit is None or limit <= 0:
        return default_limit
    return min(limit, max_limit)


def validate_request(
    request: PageRequest,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> PageRequest:
    """Return a normalized copy of ``request``.

    Raises:
        InvalidOrganization: If the organization id is missing, nil or not a UUID.
    """
    return replace(
        request,
        org_id=_coerce_org_id(request.org_id),
        limit=clamp_limit(request.limit, default_limit, max_limit),
        marker=request.marker or "",
    )
