"""Tests for folder models, sources and sample data."""

import json
import uuid
from pathlib import Path

import pytest

from org_folders.errors import SourceError
from org_folders.models import Folder, load_folders, save_folders
from org_folders.sample import DEFAULT_ORG_ID, SECONDARY_ORG_ID, generate_sample_folders
from org_folders.sources import FileFolderSource, FolderSource, InMemoryFolderSource, filter_by_organization

from conftest import EMPTY_ORG_ID, ORG_ID, OTHER_ORG_ID


class TestFolder:
    def test_roundtrip_dict(self, org_folders):
        folder = org_folders[0]
        assert Folder.from_dict(folder.to_dict()) == folder

    def test_accepts_org_id_alias(self):
        folder = Folder.from_dict({
            "id": "00001d65-d336-485a-8331-7b53f37e8f51",
            "orgId": str(ORG_ID),
            "name": "sacred-moonstar",
        })
        assert folder.org_id == ORG_ID

    def test_rejects_empty_name(self):
        with pytest.raises(ValueError, match="non-empty name"):
            Folder(id=uuid.uuid4(), org_id=ORG_ID, name="  ")

    def test_missing_org_id(self):
        with pytest.raises(KeyError):
            Folder.from_dict({"id": str(uuid.uuid4()), "name": "x"})


class TestFilterByOrganization:
    def test_preserves_order(self, all_folders, org_folders):
        assert filter_by_organization(all_folders, ORG_ID) == tuple(org_folders)

    def test_unknown_organization(self, all_folders):
        assert filter_by_organization(all_folders, EMPTY_ORG_ID) == ()


class TestInMemoryFolderSource:
    def test_implements_protocol(self, source):
        assert isinstance(source, FolderSource)

    def test_list_all(self, source, all_folders):
        assert source.list_all() == tuple(all_folders)
        assert len(source) == len(all_folders)

    def test_list_by_organization(self, source, other_folders):
        assert source.list_by_organization(OTHER_ORG_ID) == tuple(other_folders)

    def test_snapshot_not_affected_by_caller_list(self, all_folders):
        source = InMemoryFolderSource(all_folders)
        all_folders.clear()
        assert len(source) == 11


class TestFileFolderSource:
    @pytest.mark.parametrize("suffix", [".yaml", ".yml", ".json"])
    def test_load_saved_file(self, tmp_path: Path, all_folders, suffix):
        path = tmp_path / f"folders{suffix}"
        save_folders(all_folders, path)

        source = FileFolderSource(path)
        assert source.list_all() == tuple(all_folders)

    def test_load_plain_json_list(self, tmp_path: Path, org_folders):
        path = tmp_path / "sample.json"
        path.write_text(json.dumps([
            {"id": str(f.id), "orgId": str(f.org_id), "name": f.name} for f in org_folders
        ]))
        assert load_folders(path) == org_folders

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert len(FileFolderSource(path)) == 0

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(SourceError, match="not found"):
            FileFolderSource(tmp_path / "missing.yaml")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(SourceError, match="Could not load folders"):
            FileFolderSource(path)

    def test_invalid_uuid(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("folders:\n  - id: nope\n    org_id: nope\n    name: x\n")
        with pytest.raises(SourceError):
            FileFolderSource(path)

    def test_wrong_shape(self, tmp_path: Path):
        path = tmp_path / "scalar.yaml"
        path.write_text("just a string\n")
        with pytest.raises(SourceError):
            FileFolderSource(path)


class TestSampleFolders:
    def test_deterministic(self):
        assert generate_sample_folders(count=50, seed=7) == generate_sample_folders(count=50, seed=7)

    def test_seed_changes_data(self):
        assert generate_sample_folders(count=20, seed=1) != generate_sample_folders(count=20, seed=2)

    def test_spread_over_organizations(self):
        folders = generate_sample_folders(count=200)
        org_ids = {str(f.org_id) for f in folders}
        assert org_ids == {DEFAULT_ORG_ID, SECONDARY_ORG_ID}

    def test_unique_ids(self):
        folders = generate_sample_folders(count=500)
        assert len({f.id for f in folders}) == 500

    def test_rejects_empty_org_list(self):
        with pytest.raises(ValueError):
            generate_sample_folders(org_ids=[])
