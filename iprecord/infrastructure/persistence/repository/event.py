"""SQLAlchemy event log implementing the EventEmitter port."""

import logging
from datetime import datetime
from typing import Any

from sqlalchemy import insert, select
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from iprecord.domain.shared.error import StorageError
from iprecord.domain.shared.event import Event
from iprecord.domain.shared.port.event_emitter import EventEmitter
from iprecord.infrastructure.persistence.tables import events_table

logger = logging.getLogger(__name__)


class SqlEventLog(EventEmitter):
    """Appends emitted events to the ``events`` table.

    Writes share the invocation's connection, so events of a rolled-back
    invocation are never persisted.
    """

    def __init__(self, connection: Connection, emitted_at: datetime) -> None:
        self._connection = connection
        self._emitted_at = emitted_at

    def emit(self, name: str, payload: dict[str, Any]) -> None:
        stmt = insert(events_table).values(
            name=name,
            payload=payload,
            emitted_at=self._emitted_at,
        )
        try:
            # Savepoint keeps a failed insert from aborting the invocation transaction
            with self._connection.begin_nested():
                self._connection.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"failed to record event {name}: {e}") from e

    def list_events(
        self,
        limit: int = 50,
        names: list[str] | None = None,
    ) -> list[tuple[datetime, Event]]:
        """List events newest first.

        Args:
            limit: Maximum number of events to return.
            names: Filter by event names (e.g., ["RecordTransferred"]).

        Returns:
            (emitted_at, event) pairs.
        """
        stmt = select(events_table.c.name, events_table.c.payload, events_table.c.emitted_at)
        if names:
            stmt = stmt.where(events_table.c.name.in_(names))
        stmt = stmt.order_by(events_table.c.seq.desc()).limit(limit)

        rows = self._connection.execute(stmt).all()
        events: list[tuple[datetime, Event]] = []
        for name, payload, emitted_at in rows:
            try:
                events.append((emitted_at, Event.from_payload(name, payload)))
            except KeyError:
                logger.warning(f"Skipping event with unknown name: {name}")
        return events
