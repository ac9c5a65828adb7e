"""RecordRepository port - persistence interface for records."""

from abc import abstractmethod
from typing import Protocol

from iprecord.domain.record.model.aggregate import Record
from iprecord.domain.shared.port import Port


class RecordRepository(Port, Protocol):
    @abstractmethod
    def exists(self, record_id: str) -> bool:
        """True when non-empty bytes are stored under record_id."""
        ...

    @abstractmethod
    def get(self, record_id: str) -> Record | None:
        """Load a record, live or deleted. None when nothing is stored."""
        ...

    @abstractmethod
    def save(self, record: Record) -> None: ...

    @abstractmethod
    def get_creator(self) -> str | None: ...

    @abstractmethod
    def save_creator(self, creator: str) -> None: ...
