"""Data models for org-folders."""

from .folder import Folder, load_folders, save_folders

__all__ = ["Folder", "load_folders", "save_folders"]
