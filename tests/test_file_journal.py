"""Tests for the file-based journal store."""

import os
from datetime import datetime
from unittest.mock import patch

import pytest

from inboxapp.adapters.file_journal import FileJournalStore
from inboxapp.adapters.files import ReadStatus, read_text
from inboxapp.core.archive import LineNotFound, TextMismatch
from inboxapp.core.formats import ItemFormat
from inboxapp.core.journal import Counts, DayCount, journal_filename


@pytest.fixture
def store(tmp_path):
    return FileJournalStore(tmp_path)


@pytest.fixture
def archive_store(tmp_path):
    return FileJournalStore(tmp_path, item_format=ItemFormat.ARCHIVE)


def test_journal_filename_for_date():
    assert journal_filename("2025-12-31") == "2025-12-31.md"


class TestLoadOrCreate:
    def test_creates_file_if_missing(self, store, tmp_path):
        assert store.load_or_create("2025-12-31.md") == ""
        assert (tmp_path / "2025-12-31.md").exists()
        assert (tmp_path / "2025-12-31.md").read_text() == ""

    def test_returns_existing_content(self, store, tmp_path):
        (tmp_path / "2025-12-31.md").write_text("hello\n")
        assert store.load_or_create("2025-12-31.md") == "hello\n"

    def test_creates_missing_root(self, tmp_path):
        store = FileJournalStore(tmp_path / "nested" / "root")
        store.load_or_create("2025-12-31.md")
        assert (tmp_path / "nested" / "root" / "2025-12-31.md").exists()

    def test_unreadable_content_is_empty_and_reported(self, tmp_path):
        warnings = []
        store = FileJournalStore(tmp_path, on_warning=warnings.append)
        (tmp_path / "2025-12-31.md").write_bytes(b"\xff\xfe\xfa")
        assert store.load_or_create("2025-12-31.md") == ""
        assert len(warnings) == 1
        assert "2025-12-31.md" in warnings[0]


class TestListMarkdownFiles:
    def test_sorted_and_filtered(self, store, tmp_path):
        for name in ["2025-12-31.md", "2025-01-02.md", "notes.txt", "trash.md"]:
            (tmp_path / name).write_text("x")
        assert store.list_markdown_files() == ["2025-01-02.md", "2025-12-31.md"]

    def test_custom_trash_name_excluded(self, tmp_path):
        store = FileJournalStore(tmp_path, trash_filename="bin.md")
        (tmp_path / "bin.md").write_text("x")
        (tmp_path / "trash.md").write_text("x")
        assert store.list_markdown_files() == ["trash.md"]

    def test_missing_root(self, tmp_path):
        assert FileJournalStore(tmp_path / "absent").list_markdown_files() == []


class TestCounts:
    def test_empty_root(self, store):
        assert store.counts_for("2025-12-31.md", "") == Counts(current=0, total=0, files=1)

    def test_uses_in_memory_active_text(self, store, tmp_path):
        (tmp_path / "2025-12-30.md").write_text("a\n---\nb\n")
        (tmp_path / "2025-12-31.md").write_text("stale\n")
        counts = store.counts_for("2025-12-31.md", "x\n---\ny\n---\nz\n")
        assert counts == Counts(current=3, total=5, files=2)

    def test_unreadable_file_counts_zero(self, store, tmp_path):
        (tmp_path / "2025-12-30.md").write_bytes(b"\xff\xfe")
        (tmp_path / "2025-12-29.md").write_text("one\n")
        assert store.counts_for("2025-12-31.md", "") == Counts(current=0, total=1, files=3)

    def test_archive_format_counts_active_lines(self, archive_store, tmp_path):
        (tmp_path / "2025-12-30.md").write_text("- a\n- b\n\n## Archived\n- c\n")
        counts = archive_store.counts_for("2025-12-31.md", "- x\n\n## Archived\n- y\n- z\n")
        assert counts == Counts(current=1, total=3, files=2)


class TestActiveFile:
    def test_creates_daily_file(self, store, tmp_path):
        result = store.get_active_file_for_date("2025-12-31")
        assert result.filename == "2025-12-31.md"
        assert result.text == ""
        assert result.counts == Counts(current=0, total=0, files=1)
        assert (tmp_path / "2025-12-31.md").exists()

    def test_save_updates_counts(self, store, tmp_path):
        counts = store.save_active_file("2025-12-31.md", "one\n\n---\n\ntwo\n")
        assert counts == Counts(current=2, total=2, files=1)
        assert (tmp_path / "2025-12-31.md").read_text() == "one\n\n---\n\ntwo\n"

    def test_save_writes_verbatim_and_leaves_no_temp_file(self, store, tmp_path):
        store.save_active_file("2025-12-31.md", "  raw  ")
        assert (tmp_path / "2025-12-31.md").read_text() == "  raw  "
        assert sorted(os.listdir(tmp_path)) == ["2025-12-31.md"]

    def test_failed_write_is_reported(self, tmp_path):
        warnings = []
        store = FileJournalStore(tmp_path, on_warning=warnings.append)
        with patch("inboxapp.adapters.files.os.replace", side_effect=OSError("disk full")):
            counts = store.save_active_file("2025-12-31.md", "one\n")
        assert counts.current == 1
        assert any("not saved" in w for w in warnings)
        assert not (tmp_path / "2025-12-31.md").exists()


class TestAppendItem:
    def test_writes_to_daily_file(self, store, tmp_path):
        counts = store.append_item_for_date("2025-12-31", "first")
        assert counts == Counts(current=1, total=1, files=1)
        assert "first" in (tmp_path / "2025-12-31.md").read_text()

    def test_second_item_adds_divider(self, store, tmp_path):
        store.append_item_for_date("2025-12-31", "first")
        counts = store.append_item_for_date("2025-12-31", "second")
        assert counts.current == 2
        assert (tmp_path / "2025-12-31.md").read_text() == "first\n\n---\n\nsecond\n"

    def test_blank_item_changes_nothing(self, store, tmp_path):
        store.append_item_for_date("2025-12-31", "first")
        counts = store.append_item_for_date("2025-12-31", "  \n")
        assert counts.current == 1
        assert (tmp_path / "2025-12-31.md").read_text() == "first\n"


class TestReadItemsForDate:
    def test_does_not_create_file(self, store, tmp_path):
        assert store.read_items_for_date("2026-01-01") == []
        assert not (tmp_path / "2026-01-01.md").exists()

    def test_reads_items(self, store, tmp_path):
        (tmp_path / "2026-01-01.md").write_text("a\n\n---\n\nb\n")
        assert store.read_items_for_date("2026-01-01") == ["a", "b"]


class TestUpdateItem:
    def test_replaces_item(self, store, tmp_path):
        (tmp_path / "2026-01-01.md").write_text("a\n---\nb\n")
        result = store.update_item_for_date("2026-01-01", 1, "B")
        assert result.items == ["a", "B"]
        assert result.count == 2
        assert (tmp_path / "2026-01-01.md").read_text() == "a\n\n---\n\nB\n"

    def test_out_of_range_is_ignored(self, store, tmp_path):
        (tmp_path / "2026-01-01.md").write_text("a\n")
        result = store.update_item_for_date("2026-01-01", 5, "zzz")
        assert result.items == ["a"]
        assert result.date == "2026-01-01"


class TestDeleteItem:
    def test_moves_item_to_trash(self, store, tmp_path):
        (tmp_path / "2026-01-01.md").write_text("a\n---\nb\n---\nc\n")
        with patch("inboxapp.adapters.trash.datetime") as mock_dt:
            mock_dt.now.return_value = datetime(2026, 1, 1, 9, 5)
            result = store.delete_item_for_date("2026-01-01", 1)

        assert result.items == ["a", "c"]
        assert result.count == 2
        assert (tmp_path / "2026-01-01.md").read_text() == "a\n\n---\n\nc\n"
        assert (tmp_path / "trash.md").read_text() == "[2026-01-01 09:05]\nb\n"

    def test_trash_accumulates(self, store, tmp_path):
        (tmp_path / "2026-01-01.md").write_text("a\n---\nb\n")
        store.delete_item_for_date("2026-01-01", 0)
        store.delete_item_for_date("2026-01-01", 0)
        trash = (tmp_path / "trash.md").read_text()
        assert trash.count("---") == 1
        assert "\na\n" in trash
        assert trash.endswith("\nb\n")

    def test_out_of_range_writes_no_trash(self, store, tmp_path):
        (tmp_path / "2026-01-01.md").write_text("a\n")
        result = store.delete_item_for_date("2026-01-01", 3)
        assert result.items == ["a"]
        assert not (tmp_path / "trash.md").exists()

    def test_trash_not_counted(self, store, tmp_path):
        (tmp_path / "2026-01-01.md").write_text("a\n---\nb\n")
        store.delete_item_for_date("2026-01-01", 0)
        assert store.counts_for("2026-01-01.md", "b\n") == Counts(current=1, total=1, files=1)


class TestListDayCounts:
    def test_counts_per_day(self, store, tmp_path):
        (tmp_path / "2026-01-02.md").write_text("a\n---\nb\n")
        (tmp_path / "2026-01-01.md").write_text("")
        (tmp_path / "trash.md").write_text("x\n")
        assert store.list_day_counts() == [
            DayCount(date="2026-01-01", count=0),
            DayCount(date="2026-01-02", count=2),
        ]

    def test_ignores_item_format(self, archive_store, tmp_path):
        (tmp_path / "2026-01-01.md").write_text("a\nb\n## Archived\nc\n")
        assert archive_store.list_day_counts() == [DayCount(date="2026-01-01", count=1)]


class TestArchiveItems:
    def test_archive_item_saves(self, archive_store, tmp_path):
        (tmp_path / "2026-01-01.md").write_text("- one\n- two\n")
        result = archive_store.archive_item("2026-01-01.md", 0)
        assert result.text == "- two\n\n## Archived\n- one\n"
        assert (tmp_path / "2026-01-01.md").read_text() == result.text
        assert result.counts == Counts(current=1, total=1, files=1)

    def test_archive_item_out_of_range(self, archive_store, tmp_path):
        (tmp_path / "2026-01-01.md").write_text("- one\n")
        result = archive_store.archive_item("2026-01-01.md", 4)
        assert result.text == "- one\n"

    def test_matching_mismatch_leaves_file(self, archive_store, tmp_path):
        path = tmp_path / "2026-01-01.md"
        path.write_text("- one\n")
        with pytest.raises(TextMismatch):
            archive_store.archive_item_matching("2026-01-01.md", 0, "- nope")
        assert path.read_text() == "- one\n"

    def test_matching_archives(self, archive_store, tmp_path):
        (tmp_path / "2026-01-01.md").write_text("- one\n- two\n")
        result = archive_store.archive_item_matching("2026-01-01.md", 1, "- two")
        assert result.text == "- one\n\n## Archived\n- two\n"
        assert result.counts.current == 1

    def test_restore_matching(self, archive_store, tmp_path):
        path = tmp_path / "2026-01-01.md"
        path.write_text("- one\n\n## Archived\n- done\n")
        result = archive_store.restore_item_matching("2026-01-01.md", 0, "- done")
        assert path.read_text() == "- one\n\n- done\n"
        assert result.counts.current == 2

    def test_restore_missing_line(self, archive_store, tmp_path):
        path = tmp_path / "2026-01-01.md"
        path.write_text("- one\n")
        with pytest.raises(LineNotFound):
            archive_store.restore_item_matching("2026-01-01.md", 0, "- one")
        assert path.read_text() == "- one\n"


class TestReadText:
    def test_missing(self, tmp_path):
        result = read_text(tmp_path / "none.md")
        assert result.status == ReadStatus.MISSING
        assert result.text == ""

    def test_unreadable(self, tmp_path):
        (tmp_path / "bad.md").write_bytes(b"\xff")
        result = read_text(tmp_path / "bad.md")
        assert result.status == ReadStatus.UNREADABLE
        assert not result.ok

    def test_directory_is_unreadable(self, tmp_path):
        (tmp_path / "dir.md").mkdir()
        assert read_text(tmp_path / "dir.md").status == ReadStatus.UNREADABLE


class TestLineEndings:
    def test_load_keeps_crlf(self, store, tmp_path):
        (tmp_path / "2026-01-01.md").write_bytes(b"a\r\n---\r\nb\r\n")
        assert store.load_or_create("2026-01-01.md") == "a\r\n---\r\nb\r\n"

    def test_read_text_keeps_lone_carriage_return(self, tmp_path):
        (tmp_path / "cr.md").write_bytes(b"a\rb\n")
        assert read_text(tmp_path / "cr.md").text == "a\rb\n"

    def test_save_writes_crlf_verbatim(self, store, tmp_path):
        store.save_active_file("2026-01-01.md", "a\r\nb\r\n")
        assert (tmp_path / "2026-01-01.md").read_bytes() == b"a\r\nb\r\n"

    def test_delete_keeps_unicode_separators(self, store, tmp_path):
        store.append_item_for_date("2026-01-01", "keep\u2028me")
        store.append_item_for_date("2026-01-01", "drop")
        result = store.delete_item_for_date("2026-01-01", 1)
        assert result.items == ["keep\u2028me"]
        assert (tmp_path / "2026-01-01.md").read_bytes() == "keep\u2028me\n".encode()


class TestUpdateSnapshot:
    @pytest.mark.parametrize(
        "replacement, expected",
        [
            ("B  \n", ["a", "B"]),
            ("", ["a"]),
            ("x\n---\ny", ["a", "x", "y"]),
        ],
    )
    def test_items_match_saved_file(self, store, tmp_path, replacement, expected):
        (tmp_path / "2026-01-01.md").write_text("a\n---\nb\n")
        result = store.update_item_for_date("2026-01-01", 1, replacement)
        assert result.items == expected
        assert result.count == len(expected)
        assert store.read_items_for_date("2026-01-01") == expected


class TestUnreadableDayFile:
    @pytest.fixture
    def bad_file(self, tmp_path):
        path = tmp_path / "2026-01-01.md"
        path.write_bytes(b"\xff\xfeprecious")
        return path

    @pytest.fixture
    def warnings(self):
        return []

    @pytest.fixture
    def guarded_store(self, tmp_path, warnings):
        return FileJournalStore(tmp_path, on_warning=warnings.append)

    def test_append_leaves_file(self, guarded_store, bad_file, warnings):
        counts = guarded_store.append_item_for_date("2026-01-01", "new")
        assert bad_file.read_bytes() == b"\xff\xfeprecious"
        assert counts.current == 0
        assert any("untouched" in w for w in warnings)

    def test_update_leaves_file(self, guarded_store, bad_file):
        result = guarded_store.update_item_for_date("2026-01-01", 0, "new")
        assert result.items == []
        assert bad_file.read_bytes() == b"\xff\xfeprecious"

    def test_delete_leaves_file_and_trash(self, guarded_store, bad_file, tmp_path):
        guarded_store.delete_item_for_date("2026-01-01", 0)
        assert bad_file.read_bytes() == b"\xff\xfeprecious"
        assert not (tmp_path / "trash.md").exists()

    def test_archive_leaves_file(self, guarded_store, bad_file):
        result = guarded_store.archive_item("2026-01-01.md", 0)
        assert result.text == ""
        assert bad_file.read_bytes() == b"\xff\xfeprecious"

    def test_matching_archive_raises(self, guarded_store, bad_file):
        with pytest.raises(LineNotFound):
            guarded_store.archive_item_matching("2026-01-01.md", 0, "precious")
        assert bad_file.read_bytes() == b"\xff\xfeprecious"
