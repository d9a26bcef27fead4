"""Shared output formatting for CLI and MCP."""

from .format import OUTPUT_FORMATS, format_response, render_cli
from .pagination import build_page_info

__all__ = ["OUTPUT_FORMATS", "format_response", "render_cli", "build_page_info"]
