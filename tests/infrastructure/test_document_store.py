"""Tests for the JSON-file document store's transaction semantics."""

import json

import pytest

from vyapar.domain.exceptions import StoreUnavailable
from vyapar.infrastructure.persistence.document_store import ORDERS, JsonDocumentStore


@pytest.fixture
def store(tmp_path):
    return JsonDocumentStore(tmp_path / "store.json")


class TestDocumentStore:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "nested" / "store.json"
        JsonDocumentStore(path)
        assert json.loads(path.read_text()) == {}

    def test_put_get_round_trip_survives_reopen(self, store, tmp_path):
        store.put(ORDERS, "o1", {"status": "requested"})
        reopened = JsonDocumentStore(tmp_path / "store.json")
        assert reopened.get(ORDERS, "o1") == {"status": "requested"}

    def test_get_returns_a_copy(self, store):
        store.put(ORDERS, "o1", {"status": "requested"})
        doc = store.get(ORDERS, "o1")
        doc["status"] = "tampered"
        assert store.get(ORDERS, "o1")["status"] == "requested"

    def test_query_filters_on_equality(self, store):
        store.put(ORDERS, "o1", {"retailerId": "R1"})
        store.put(ORDERS, "o2", {"retailerId": "R2"})
        store.put(ORDERS, "o3", {"retailerId": "R1"})
        assert [doc_id for doc_id, _ in store.query(ORDERS, retailerId="R1")] == ["o1", "o3"]
        assert store.query("missing") == []

    def test_delete(self, store):
        store.put(ORDERS, "o1", {})
        store.delete(ORDERS, "o1")
        store.delete(ORDERS, "never-there")
        assert store.get(ORDERS, "o1") is None

    def test_failed_transaction_rolls_back(self, store, tmp_path):
        store.put(ORDERS, "o1", {"status": "requested"})

        with pytest.raises(RuntimeError):
            with store.transaction():
                store.put(ORDERS, "o1", {"status": "confirmed"})
                store.put(ORDERS, "o2", {"status": "requested"})
                raise RuntimeError("boom")

        assert store.get(ORDERS, "o1") == {"status": "requested"}
        assert store.get(ORDERS, "o2") is None
        on_disk = json.loads((tmp_path / "store.json").read_text())
        assert set(on_disk[ORDERS]) == {"o1"}

    def test_nested_transaction_joins_the_outer_one(self, store):
        with pytest.raises(RuntimeError):
            with store.transaction():
                with store.transaction():
                    store.put(ORDERS, "o1", {})
                raise RuntimeError("outer fails after inner finished")
        assert store.get(ORDERS, "o1") is None

    def test_corrupt_file_is_reported_as_unavailable(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json")
        store = JsonDocumentStore(path)
        with pytest.raises(StoreUnavailable):
            store.get(ORDERS, "o1")

    def test_in_memory_store(self):
        store = JsonDocumentStore()
        store.put(ORDERS, "o1", {"qty": 3})
        assert store.get(ORDERS, "o1") == {"qty": 3}

    def test_new_ids_are_unique(self):
        ids = {JsonDocumentStore.new_id() for _ in range(100)}
        assert len(ids) == 100
