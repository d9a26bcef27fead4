"""Shared service layer for CLI and MCP."""

from .folders import (
    format_folder,
    fetch_all_folders,
    list_folders,
    list_folder_page,
    walk_folder_pages,
)

__all__ = [
    "format_folder",
    "fetch_all_folders",
    "list_folders",
    "list_folder_page",
    "walk_folder_pages",
]
