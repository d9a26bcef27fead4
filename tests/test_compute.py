"""Tests for page selection."""

import uuid

from org_folders.paging import compute_cursor_page, compute_offset_page


class TestComputeOffsetPage:
    """Tests for offset-based page selection."""

    def test_first_page(self, org_folders):
        items, next_offset = compute_offset_page(org_folders, 0, 5)
        assert list(items) == org_folders[:5]
        assert next_offset == 5

    def test_last_partial_page(self, org_folders):
        items, next_offset = compute_offset_page(org_folders, 5, 5)
        assert list(items) == org_folders[5:]
        assert next_offset is None

    def test_exact_fit_last_page_has_no_next(self, org_folders):
        items, next_offset = compute_offset_page(org_folders, 4, 4)
        assert list(items) == org_folders[4:]
        assert next_offset is None

    def test_offset_beyond_end(self, org_folders):
        assert compute_offset_page(org_folders, 99999, 5) == ((), None)

    def test_offset_at_end(self, org_folders):
        assert compute_offset_page(org_folders, len(org_folders), 5) == ((), None)

    def test_empty_view(self):
        assert compute_offset_page([], 0, 10) == ((), None)

    def test_limit_one_advances_one_at_a_time(self, org_folders):
        items, next_offset = compute_offset_page(org_folders, 3, 1)
        assert list(items) == [org_folders[3]]
        assert next_offset == 4


class TestComputeCursorPage:
    """Tests for identity cursor page selection."""

    def test_first_page(self, org_folders):
        items, cursor = compute_cursor_page(org_folders, None, 5)
        assert list(items) == org_folders[:5]
        assert cursor == org_folders[4].id

    def test_resumes_after_cursor(self, org_folders):
        items, cursor = compute_cursor_page(org_folders, org_folders[4].id, 5)
        assert list(items) == org_folders[5:]
        assert cursor is None

    def test_cursor_on_last_folder_is_terminal(self, org_folders):
        assert compute_cursor_page(org_folders, org_folders[-1].id, 5) == ((), None)

    def test_unknown_cursor_starts_over(self, org_folders):
        items, cursor = compute_cursor_page(org_folders, uuid.uuid4(), 5)
        assert list(items) == org_folders[:5]
        assert cursor == org_folders[4].id

    def test_nil_cursor_starts_over(self, org_folders):
        items, _ = compute_cursor_page(org_folders, uuid.UUID(int=0), 3)
        assert list(items) == org_folders[:3]

    def test_exact_fit_last_page_has_no_cursor(self, org_folders):
        items, cursor = compute_cursor_page(org_folders, org_folders[3].id, 4)
        assert list(items) == org_folders[4:]
        assert cursor is None

    def test_limit_covers_everything(self, org_folders):
        items, cursor = compute_cursor_page(org_folders, None, 100)
        assert list(items) == org_folders
        assert cursor is None

    def test_empty_view(self):
        assert compute_cursor_page([], None, 10) == ((), None)
        assert compute_cursor_page([], uuid.uuid4(), 10) == ((), None)

    def test_limit_one_advances_one_at_a_time(self, org_folders):
        items, cursor = compute_cursor_page(org_folders, org_folders[2].id, 1)
        assert list(items) == [org_folders[3]]
        assert cursor == org_folders[3].id
