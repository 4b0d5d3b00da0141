"""Unit tests for the SQLAlchemy-backed document store."""
import pytest
from unittest import mock

from sqlalchemy.exc import OperationalError

from domain.errors import StoreError


@pytest.mark.unit
class TestDocumentStore:
    """Test document CRUD semantics."""

    def test_create_assigns_id_and_timestamps(self, store):
        document = store.create("things", {"name": "a", "id": "ignored"})

        assert len(document["id"]) == 32
        assert document["id"] != "ignored"
        assert document["name"] == "a"
        assert document["createdAt"] is not None
        assert document["updatedAt"] is not None

    def test_collections_are_isolated(self, store):
        document = store.create("things", {"name": "a"})

        assert store.find_by_id("other", document["id"]) is None
        assert store.find("other") == []
        assert store.update_by_id("other", document["id"], {"name": "b"}) is None
        assert store.delete_by_id("other", document["id"]) is False

    def test_find_filters_by_type(self, store):
        store.create("things", {"kind": "x", "size": 2, "active": True, "ratio": 0.5})
        store.create("things", {"kind": "y", "size": 3, "active": False, "ratio": 1.5})

        assert [d["kind"] for d in store.find("things", size=2)] == ["x"]
        assert [d["kind"] for d in store.find("things", active=False)] == ["y"]
        assert [d["kind"] for d in store.find("things", ratio=1.5)] == ["y"]
        assert [d["kind"] for d in store.find("things", kind="x", active=True)] == ["x"]
        assert len(store.find("things", kind=None)) == 2
        assert len(store.find("things", kind="y")) == 1

    def test_find_one(self, store):
        assert store.find_one("things", kind="x") is None
        created = store.create("things", {"kind": "x"})
        assert store.find_one("things", kind="x")["id"] == created["id"]

    def test_update_merges(self, store):
        document = store.create("things", {"name": "a", "size": 1})

        updated = store.update_by_id("things", document["id"], {"size": 2, "id": "nope"})

        assert updated["id"] == document["id"]
        assert updated["name"] == "a"
        assert updated["size"] == 2
        assert store.find_by_id("things", document["id"])["size"] == 2

    def test_update_missing(self, store):
        assert store.update_by_id("things", "missing", {"size": 2}) is None

    def test_replace_drops_old_keys(self, store):
        document = store.create("things", {"name": "a", "size": 1})

        replaced = store.replace_by_id("things", document["id"], {"name": "b"})

        assert replaced["name"] == "b"
        assert "size" not in replaced
        assert store.replace_by_id("things", "missing", {"name": "b"}) is None

    def test_delete(self, store):
        document = store.create("things", {"name": "a"})

        assert store.delete_by_id("things", document["id"]) is True
        assert store.delete_by_id("things", document["id"]) is False
        assert store.find_by_id("things", document["id"]) is None

    def test_database_errors_become_store_errors(self, store, caplog):
        failing_factory = mock.Mock(side_effect=OperationalError("SELECT 1", {}, Exception("disk I/O error")))
        store.session_factory = failing_factory

        with pytest.raises(StoreError):
            store.find("things")
        assert "Document store find failed" in caplog.text
