"""Folder sources.

A source hands the pagination engine the ordered folders of one
organization. The engine never sorts or mutates what it receives, so a
source must return the same ordering for every call made during one
pagination session.
"""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Iterable, Protocol, Sequence, runtime_checkable

import yaml

from .errors import SourceError
from .models import Folder, load_folders


@runtime_checkable
class FolderSource(Protocol):
    """Capability the pagination engine depends on."""

    def list_by_organization(self, org_id: uuid.UUID) -> Sequence[Folder]:
        """Return the folders owned by ``org_id`` in stable order."""
        ...


def filter_by_organization(folders: Iterable[Folder], org_id: uuid.UUID) -> tuple[Folder, ...]:
    """Return the folders belonging to ``org_id``, preserving their order."""
    return tuple(folder for folder in folders if folder.org_id == org_id)


class InMemoryFolderSource:
    """Source backed by an already materialized sequence of folders."""

    def __init__(self, folders: Iterable[Folder]):
        self._folders = tuple(folders)

    def list_all(self) -> tuple[Folder, ...]:
        return self._folders

    def list_by_organization(self, org_id: uuid.UUID) -> tuple[Folder, ...]:
        return filter_by_organization(self._folders, org_id)

    def __len__(self) -> int:
        return len(self._folders)


class FileFolderSource(InMemoryFolderSource):
    """Source loaded once from a YAML or JSON data file."""

    def __init__(self, path: Path):
        self.path = Path(path)
        if not self.path.exists():
            raise SourceError(f"Folder data file not found: {self.path}")
        try:
            folders = load_folders(self.path)
        except (OSError, ValueError, KeyError, TypeError, yaml.YAMLError) as e:
            raise SourceError(f"Could not load folders from {self.path}: {e}") from e
        super().__init__(folders)
