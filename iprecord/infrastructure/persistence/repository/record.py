"""ObjectStore-backed implementation of RecordRepository."""

import logging

from iprecord.domain.record.model.aggregate import Record
from iprecord.domain.record.model.codec import decode_record, encode_record
from iprecord.domain.record.port.repository import RecordRepository
from iprecord.domain.shared.error import NotFoundError, StorageError
from iprecord.domain.shared.port.object_store import ObjectStore

logger = logging.getLogger(__name__)

# Well-known key holding the deployment creator, outside any record
CREATOR_KEY = b"contract_creator"


class ObjectStoreRecordRepository(RecordRepository):
    """Stores each record under its id as the codec's bytes.

    By default any failed read, whether the key is missing or the backend
    errored, is reported as "nothing stored". With ``strict_reads`` backend
    errors propagate as StorageError and only a missing key counts as absent.
    """

    def __init__(self, store: ObjectStore, *, strict_reads: bool = False) -> None:
        self.store = store
        self.strict_reads = strict_reads

    def _read(self, key: bytes) -> bytes | None:
        try:
            raw = self.store.get(key)
        except NotFoundError:
            return None
        except StorageError:
            if self.strict_reads:
                raise
            logger.debug(f"Read of {key!r} failed, treating as absent", exc_info=True)
            return None
        return raw or None

    def exists(self, record_id: str) -> bool:
        return self._read(record_id.encode("utf-8")) is not None

    def get(self, record_id: str) -> Record | None:
        raw = self._read(record_id.encode("utf-8"))
        return decode_record(raw) if raw is not None else None

    def save(self, record: Record) -> None:
        self.store.put(record.id.encode("utf-8"), encode_record(record))

    def get_creator(self) -> str | None:
        raw = self._read(CREATOR_KEY)
        return raw.decode("utf-8") if raw is not None else None

    def save_creator(self, creator: str) -> None:
        self.store.put(CREATOR_KEY, creator.encode("utf-8"))
