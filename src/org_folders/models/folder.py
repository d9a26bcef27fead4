"""Folder data model."""

import json
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import yaml


@dataclass(frozen=True)
class Folder:
    """A folder owned by an organization."""

    id: uuid.UUID
    org_id: uuid.UUID
    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"Folder {self.id} must have a non-empty name")

    def to_dict(self) -> dict:
        """Convert to dictionary for YAML/JSON serialization."""
        return {
            "id": str(self.id),
            "org_id": str(self.org_id),
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Folder":
        """Create Folder from dictionary.

        Accepts ``orgId`` as an alias of ``org_id`` so sample files exported
        by other tools load unchanged.
        """
        org_id = data.get("org_id", data.get("orgId"))
        if org_id is None:
            raise KeyError("org_id")
        return cls(
            id=uuid.UUID(str(data["id"])),
            org_id=uuid.UUID(str(org_id)),
            name=data["name"],
        )


def load_folders(path: Path) -> list[Folder]:
    """Load folders from a YAML or JSON file.

    The file holds either a list of folder mappings or a mapping with a
    ``folders`` key.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("folders", [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of folders in {path}")

    return [Folder.from_dict(item) for item in data]


def save_folders(folders: Iterable[Folder], path: Path) -> None:
    """Save folders to a YAML or JSON file, chosen by suffix."""
    path = Path(path)
    data = {"folders": [f.to_dict() for f in folders]}

    with open(path, "w", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            json.dump(data, f, indent=2)
        else:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
