"""Tests for ObjectStoreRecordRepository."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from iprecord.domain.record.model.aggregate import Record
from iprecord.domain.record.model.codec import encode_record
from iprecord.domain.shared.error import CodecError, StorageError
from iprecord.domain.shared.port.object_store import ObjectStore
from iprecord.infrastructure.persistence.adapter.memory import InMemoryObjectStore
from iprecord.infrastructure.persistence.repository.record import (
    CREATOR_KEY,
    ObjectStoreRecordRepository,
)


@pytest.fixture
def record() -> Record:
    return Record.register(
        id="C1",
        title="Sunrise",
        creator_name="Alice",
        holder_address="addrA",
        category="image",
        description="a painting",
        at=datetime(2024, 5, 1, 12, 30, tzinfo=UTC),
    )


@pytest.fixture
def failing_store() -> ObjectStore:
    store = MagicMock(spec=ObjectStore)
    store.get.side_effect = StorageError("backend unavailable")
    return store


class TestRecords:
    def test_save_and_get(self, record):
        store = InMemoryObjectStore()
        repo = ObjectStoreRecordRepository(store)
        repo.save(record)

        assert store.get(b"C1") == encode_record(record)
        assert repo.exists("C1")
        assert repo.get("C1") == record

    def test_missing_record(self):
        repo = ObjectStoreRecordRepository(InMemoryObjectStore())
        assert not repo.exists("C1")
        assert repo.get("C1") is None

    def test_empty_value_counts_as_absent(self):
        repo = ObjectStoreRecordRepository(InMemoryObjectStore({b"C1": b""}))
        assert not repo.exists("C1")
        assert repo.get("C1") is None

    def test_undecodable_value(self):
        repo = ObjectStoreRecordRepository(InMemoryObjectStore({b"C1": b"{broken"}))
        assert repo.exists("C1")
        with pytest.raises(CodecError):
            repo.get("C1")


class TestReadFailures:
    def test_conflated_with_absence_by_default(self, failing_store):
        repo = ObjectStoreRecordRepository(failing_store)
        assert not repo.exists("C1")
        assert repo.get("C1") is None
        assert repo.get_creator() is None

    def test_strict_reads_propagate(self, failing_store):
        repo = ObjectStoreRecordRepository(failing_store, strict_reads=True)
        with pytest.raises(StorageError):
            repo.get("C1")


class TestCreator:
    def test_save_and_get(self):
        store = InMemoryObjectStore()
        repo = ObjectStoreRecordRepository(store)
        repo.save_creator("deployer")

        assert store.get(CREATOR_KEY) == b"deployer"
        assert repo.get_creator() == "deployer"

    def test_unset(self):
        assert ObjectStoreRecordRepository(InMemoryObjectStore()).get_creator() is None
