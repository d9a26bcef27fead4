"""MCP server exposing organization folder listing to AI assistants.

Uses the same service layer as the CLI. Configuration is resolved per
call from .folders/config.json, so a data file or strategy change is
picked up without restarting the server.
"""

import logging
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .config import FoldersConfig, resolve_config
from .errors import SourceError
from .logging_config import configure_logging
from .output import format_response
from .paging import PaginationService
from .services import (
    list_folders as svc_list_folders,
    list_folder_page as svc_list_folder_page,
)
from .sources import FileFolderSource

logger = logging.getLogger(__name__)

mcp = FastMCP(
    "org-folders",
    instructions="""Organization folder listing.

- `get_folder_page` returns one page and a `next_page_marker`; pass it back
  as `marker` until it comes back empty. Markers are opaque.
- `list_folders` returns every folder at once and reports `not_found` for
  organizations without folders.
""",
)


def _get_config(path: Optional[str]) -> tuple[Optional[FoldersConfig], Optional[dict]]:
    try:
        return resolve_config(Path(path) if path else None), None
    except ValueError as e:
        return None, {"error": "invalid_config", "message": str(e)}


def _get_source_safe(config: FoldersConfig) -> tuple[Optional[FileFolderSource], Optional[dict]]:
    try:
        return FileFolderSource(config.get_data_file()), None
    except SourceError as e:
        logger.error("Folder source unavailable: %s", e)
        return None, {"error": "source_unavailable", "message": str(e)}


def _get_service_safe(
    config: FoldersConfig,
    source: FileFolderSource,
) -> tuple[Optional[PaginationService], Optional[dict]]:
    try:
        service = PaginationService(
            source,
            strategy=config.strategy,
            default_limit=config.default_limit,
            max_limit=config.max_limit,
        )
    except ValueError as e:
        return None, {"error": "invalid_config", "message": str(e)}
    return service, None


@mcp.tool()
def list_folders(
    org_id: Optional[str] = None,
    path: Optional[str] = None,
    format: str = "json",
) -> dict:
    """List every folder owned by an organization.

    Args:
        org_id: Organization UUID (default: default_org_id from config)
        path: Directory used to find .folders/config.json
        format: Output format (json|yaml|text)
    """
    config, error = _get_config(path)
    if error:
        return format_response(error, format)
    source, error = _get_source_safe(config)
    if error:
        return format_response(error, format)

    result = svc_list_folders(source, org_id or config.default_org_id)
    return format_response(result, format)


@mcp.tool()
def get_folder_page(
    org_id: Optional[str] = None,
    limit: int = 10,
    marker: str = "",
    path: Optional[str] = None,
    format: str = "json",
) -> dict:
    """Fetch one page of an organization's folders.

    Args:
        org_id: Organization UUID (default: default_org_id from config)
        limit: Folders per page (non-positive means 10, capped at 100)
        marker: next_page_marker from the previous page, empty for the first
        path: Directory used to find .folders/config.json
        format: Output format (json|yaml|text)
    """
    config, error = _get_config(path)
    if error:
        return format_response(error, format)
    source, error = _get_source_safe(config)
    if error:
        return format_response(error, format)

    service, error = _get_service_safe(config, source)
    if error:
        return format_response(error, format)

    result = svc_list_folder_page(service, org_id or config.default_org_id, limit=limit, marker=marker)
    return format_response(result, format)


def main():
    """Run the MCP server over stdio."""
    configure_logging(resolve_config().log_level)
    mcp.run()


if __name__ == "__main__":
    main()
