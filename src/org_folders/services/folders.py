"""Shared folder listing operations for CLI and MCP."""

from __future__ import annotations

import uuid
from typing import Optional, Union

from ..errors import FoldersNotFound, InvalidOrganization
from ..models import Folder
from ..output.pagination import build_page_info
from ..paging import PageRequest, PaginationService, clamp_limit, validate_request
from ..sources import FolderSource


def format_folder(folder: Folder) -> dict:
    return folder.to_dict()


def _error(exc: Exception) -> dict:
    if isinstance(exc, InvalidOrganization):
        return {"error": "invalid_organization", "message": str(exc)}
    return {"error": "not_found", "message": str(exc)}


def fetch_all_folders(source: FolderSource, org_id: Union[uuid.UUID, str]) -> list[Folder]:
    """Return every folder of an organization in one response.

    Unlike pagination, an organization without folders is an error here.

    Raises:
        InvalidOrganization: If ``org_id`` is missing, nil or not a UUID.
        FoldersNotFound: If the organization owns no folders.
    """
    org_uuid = validate_request(PageRequest(org_id=org_id)).org_id
    folders = list(source.list_by_organization(org_uuid))
    if not folders:
        raise FoldersNotFound(org_uuid)
    return folders


def list_folders(source: FolderSource, org_id: Union[uuid.UUID, str]) -> dict:
    try:
        folders = fetch_all_folders(source, org_id)
    except (InvalidOrganization, FoldersNotFound) as e:
        return _error(e)
    return {
        "org_id": str(folders[0].org_id),
        "folders": [format_folder(f) for f in folders],
        "total_count": len(folders),
    }


def list_folder_page(
    service: PaginationService,
    org_id: Union[uuid.UUID, str],
    limit: Optional[int] = None,
    marker: str = "",
) -> dict:
    try:
        page = service.paginate(PageRequest(org_id=org_id, limit=limit or 0, marker=marker or ""))
    except InvalidOrganization as e:
        return _error(e)

    effective_limit = clamp_limit(limit, service.default_limit, service.max_limit)
    return {
        "folders": [format_folder(f) for f in page.items],
        "next_page_marker": page.next_marker,
        "pagination": build_page_info(effective_limit, page.next_marker, len(page.items)),
    }


def walk_folder_pages(
    service: PaginationService,
    org_id: Union[uuid.UUID, str],
    limit: Optional[int] = None,
) -> dict:
    """Follow page markers from the first page until the last one."""
    pages = []
    try:
        for page in service.iter_pages(org_id, limit):
            pages.append({
                "folders": [format_folder(f) for f in page.items],
                "next_page_marker": page.next_marker,
            })
    except InvalidOrganization as e:
        return _error(e)

    return {
        "strategy": service.strategy,
        "page_count": len(pages),
        "total_count": sum(len(p["folders"]) for p in pages),
        "pages": pages,
    }
