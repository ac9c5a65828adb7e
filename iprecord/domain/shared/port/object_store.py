"""ObjectStore port - the host's get/put-by-key primitive."""

from abc import abstractmethod
from typing import Protocol

from iprecord.domain.shared.port import Port


class ObjectStore(Port, Protocol):
    """Key-value store provided by the host. No transformation of content."""

    @abstractmethod
    def get(self, key: bytes) -> bytes:
        """Return the bytes stored at key.

        Raises:
            NotFoundError: Nothing is stored at key.
            StorageError: The backend failed.
        """
        ...

    @abstractmethod
    def put(self, key: bytes, value: bytes) -> None:
        """Store value at key, replacing any previous value.

        Raises:
            StorageError: The backend failed.
        """
        ...
