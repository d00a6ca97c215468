# Copyright (c) 2024 Refcheck Contributors
# SPDX-License-Identifier: MIT

"""Tests for SqliteReferenceStore against a real temporary database"""
import sqlite3

import pytest

from refindex.reference_store import SqliteReferenceStore


@pytest.fixture
def populated_store(reference_store):
    """Store with managed, soft and non-file references"""
    reference_store.add_reference("m1", "tt_content", 1, "image", "uploads/a.jpg")
    reference_store.add_reference("s1", "tt_content", 2, "bodytext", "fileadmin/b.pdf",
                                  softref_key="typolink_tag")
    reference_store.add_reference("m2", "pages", 3, "media", "uploads/c.jpg", deleted=True)
    reference_store.add_reference("e1", "tt_content", 4, "bodytext", "",
                                  softref_key="email", ref_table="_STRING")
    reference_store.add_reference("r1", "tt_content", 5, "pages", "", ref_table="pages")
    reference_store.add_reference("s2", "tt_content", 6, "bodytext", "fileadmin/d.pdf",
                                  softref_key="")
    return reference_store


class TestQueryFileReferences:

    def test_managed_references(self, populated_store):
        entries = populated_store.query_file_references(softref_present=False)
        assert [e.hash for e in entries] == ["m1", "m2", "s2"]
        assert entries[1].is_deleted_record is True

    def test_soft_references(self, populated_store):
        entries = populated_store.query_file_references(softref_present=True)
        assert [e.hash for e in entries] == ["s1"]
        assert entries[0].softref_key == "typolink_tag"
        assert entries[0].target_path == "fileadmin/b.pdf"

    def test_empty_index(self, reference_store):
        assert reference_store.query_file_references(softref_present=False) == []

    def test_missing_table_raises(self, tmp_path):
        db_path = tmp_path / "empty.db"
        sqlite3.connect(db_path).close()
        store = SqliteReferenceStore(str(db_path))
        with pytest.raises(sqlite3.OperationalError):
            store.query_file_references(softref_present=False)

    def test_missing_database_raises_without_creating_it(self, tmp_path):
        db_path = tmp_path / "mistyped.db"
        store = SqliteReferenceStore(str(db_path))
        with pytest.raises(sqlite3.OperationalError):
            store.query_file_references(softref_present=False)
        assert not db_path.exists()


class TestClearReferenceValue:

    def test_removes_entry(self, populated_store):
        assert populated_store.clear_reference_value("m1") is None
        hashes = [e.hash for e in populated_store.query_file_references(softref_present=False)]
        assert "m1" not in hashes

    def test_unknown_hash_reports_error(self, populated_store):
        error = populated_store.clear_reference_value("nope")
        assert error == 'No reference record with hash "nope" was found!'

    def test_second_clear_reports_error(self, populated_store):
        assert populated_store.clear_reference_value("m2") is None
        assert populated_store.clear_reference_value("m2") is not None

    def test_missing_table_returns_error(self, tmp_path):
        db_path = tmp_path / "empty.db"
        sqlite3.connect(db_path).close()
        store = SqliteReferenceStore(str(db_path))
        error = store.clear_reference_value("m1")
        assert "sys_refindex" in error

    def test_missing_database_returns_error_without_creating_it(self, tmp_path):
        db_path = tmp_path / "mistyped.db"
        store = SqliteReferenceStore(str(db_path))
        error = store.clear_reference_value("m1")
        assert error is not None
        assert not db_path.exists()


class TestCountReferences:

    def test_counts(self, populated_store):
        counts = populated_store.count_references()
        assert counts == {
            'total': 6,
            'file_references': 4,
            'managed_file_references': 3,
            'soft_file_references': 1,
        }

    def test_empty(self, reference_store):
        assert reference_store.count_references()['total'] == 0


def test_ensure_schema_is_repeatable(refindex_db):
    store = SqliteReferenceStore(refindex_db)
    store.ensure_schema()
    store.ensure_schema()
    assert store.count_references()['total'] == 0
