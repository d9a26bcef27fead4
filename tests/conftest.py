"""Shared fixtures for org-folders tests."""

import logging
import uuid
from pathlib import Path

import pytest

from org_folders import config as config_module
from org_folders.models import Folder
from org_folders.paging import PaginationService
from org_folders.sources import InMemoryFolderSource

ORG_ID = uuid.UUID("c1556e17-b7c0-45a3-a6ae-9546248fb17a")
OTHER_ORG_ID = uuid.UUID("52214b35-f4da-461a-9f93-fbd3590e700f")
EMPTY_ORG_ID = uuid.UUID("9b7a3c41-2f7e-4d8a-b0a6-5d1e2c3f4a5b")


def make_folder(org_id: uuid.UUID, n: int) -> Folder:
    return Folder(
        id=uuid.uuid5(uuid.NAMESPACE_URL, f"{org_id}/folder-{n}"),
        org_id=org_id,
        name=f"folder-{n}",
    )


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep user config, env overrides and CLI log handlers out of tests."""
    monkeypatch.setattr(config_module, "USER_CONFIG_FILE", tmp_path / "user-config" / "config.json")
    for name in (
        config_module.ENV_DATA_FILE,
        config_module.ENV_STRATEGY,
        config_module.ENV_LOG_LEVEL,
        config_module.ENV_ORG_ID,
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    package_logger = logging.getLogger("org_folders")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def org_folders() -> list[Folder]:
    """The eight folders e0..e7 of ORG_ID, in source order."""
    return [make_folder(ORG_ID, n) for n in range(8)]


@pytest.fixture
def other_folders() -> list[Folder]:
    return [make_folder(OTHER_ORG_ID, n) for n in range(3)]


@pytest.fixture
def all_folders(org_folders: list[Folder], other_folders: list[Folder]) -> list[Folder]:
    """Both organizations' folders, interleaved."""
    return [
        org_folders[0], other_folders[0], org_folders[1], org_folders[2],
        other_folders[1], org_folders[3], org_folders[4], org_folders[5],
        other_folders[2], org_folders[6], org_folders[7],
    ]


@pytest.fixture
def source(all_folders: list[Folder]) -> InMemoryFolderSource:
    return InMemoryFolderSource(all_folders)


@pytest.fixture
def cursor_service(source: InMemoryFolderSource) -> PaginationService:
    return PaginationService(source, strategy="cursor")


@pytest.fixture
def offset_service(source: InMemoryFolderSource) -> PaginationService:
    return PaginationService(source, strategy="offset")
