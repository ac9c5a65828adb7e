from collections.abc import Mapping

from iprecord.domain.shared.error import NotFoundError
from iprecord.domain.shared.port.object_store import ObjectStore


class InMemoryObjectStore(ObjectStore):
    """Dict-backed ObjectStore for tests and embedded use."""

    def __init__(self, initial: Mapping[bytes, bytes] | None = None) -> None:
        self._objects: dict[bytes, bytes] = dict(initial or {})

    def get(self, key: bytes) -> bytes:
        try:
            return self._objects[key]
        except KeyError:
            raise NotFoundError(f"key not found: {key!r}") from None

    def put(self, key: bytes, value: bytes) -> None:
        self._objects[key] = value

    def __contains__(self, key: bytes) -> bool:
        return key in self._objects

    def __len__(self) -> int:
        return len(self._objects)
