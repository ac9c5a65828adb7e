"""SQL implementation of the ObjectStore port."""

from sqlalchemy import insert, select, update
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from iprecord.domain.shared.error import NotFoundError, StorageError
from iprecord.domain.shared.port.object_store import ObjectStore
from iprecord.infrastructure.persistence.tables import objects_table


class SqlObjectStore(ObjectStore):
    """ObjectStore over the ``objects`` table.

    Runs on the caller's connection; transaction boundaries belong to the host.
    """

    def __init__(self, connection: Connection) -> None:
        self._connection = connection

    def get(self, key: bytes) -> bytes:
        stmt = select(objects_table.c.value).where(objects_table.c.key == key)
        try:
            value = self._connection.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError(f"failed to read key {key!r}: {e}") from e
        if value is None:
            raise NotFoundError(f"key not found: {key!r}")
        return value

    def put(self, key: bytes, value: bytes) -> None:
        try:
            result = self._connection.execute(
                update(objects_table).where(objects_table.c.key == key).values(value=value)
            )
            if result.rowcount == 0:
                self._connection.execute(insert(objects_table).values(key=key, value=value))
        except SQLAlchemyError as e:
            raise StorageError(f"failed to write key {key!r}: {e}") from e
