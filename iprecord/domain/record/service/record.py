"""RecordService - the record lifecycle engine."""

import logging
from datetime import datetime

from iprecord.domain.record.event import (
    RecordDeleted,
    RecordDescriptionUpdated,
    RecordRegistered,
    RecordTransferred,
)
from iprecord.domain.record.model.aggregate import Record
from iprecord.domain.record.port.repository import RecordRepository
from iprecord.domain.shared.authorization.action import Action
from iprecord.domain.shared.authorization.policy import AccessPolicy, PermitAll
from iprecord.domain.shared.error import AlreadyExistsError, InvalidStateError, NotFoundError
from iprecord.domain.shared.event import Event
from iprecord.domain.shared.port.event_emitter import EventEmitter
from iprecord.domain.shared.service import Service

logger = logging.getLogger(__name__)


class RecordService(Service):
    """Creates, mutates and tombstones Record aggregates.

    Every operation reads and writes at most one record key. All validation
    and reads happen before the single write, so a failed operation never
    leaves a partially mutated record behind.
    """

    record_repo: RecordRepository
    emitter: EventEmitter
    policy: AccessPolicy = PermitAll()
    write_once_creator: bool = False

    def initialize(self, creator: str) -> None:
        """Store the deployment creator under the well-known key."""
        if self.write_once_creator:
            existing = self.record_repo.get_creator()
            if existing:
                raise AlreadyExistsError(f"contract creator already set to {existing}")
        self.record_repo.save_creator(creator)
        logger.debug(f"Contract creator stored: {creator}")

    def register(
        self,
        *,
        id: str,
        title: str,
        creator_name: str,
        holder_address: str,
        category: str,
        description: str,
        at: datetime,
    ) -> Record:
        """Create and persist a new live record."""
        if self.record_repo.exists(id):
            raise AlreadyExistsError(f"record ID {id} already exists")

        record = Record.register(
            id=id,
            title=title,
            creator_name=creator_name,
            holder_address=holder_address,
            category=category,
            description=description,
            at=at,
        )
        self.record_repo.save(record)
        logger.debug(f"Record registered: {id}")

        self._emit(RecordRegistered(id=id, title=title, holder_address=holder_address))
        return record

    def get(self, record_id: str) -> Record:
        """Retrieve a stored record, including tombstoned ones."""
        record = self.record_repo.get(record_id)
        if record is None:
            raise NotFoundError(f"record {record_id} not found")
        return record

    def query(self, record_id: str) -> Record:
        """Retrieve a live record. Deleted records are not returned."""
        record = self.get(record_id)
        if record.deleted:
            raise InvalidStateError(f"record {record_id} has been deleted")
        return record

    def transfer(
        self, record_id: str, new_holder: str, *, initiator: str, at: datetime
    ) -> Record:
        record = self.get(record_id)
        if not record.deleted:
            self._authorize(Action.TRANSFER, record, initiator)
        old_holder = record.transfer(new_holder, at)
        self.record_repo.save(record)
        logger.debug(f"Record {record_id} transferred: {old_holder} -> {new_holder}")

        self._emit(RecordTransferred(id=record_id, old_holder=old_holder, new_holder=new_holder))
        return record

    def update_description(
        self, record_id: str, new_description: str, *, initiator: str, at: datetime
    ) -> Record:
        record = self.get(record_id)
        if not record.deleted:
            self._authorize(Action.UPDATE_DESCRIPTION, record, initiator)
        record.update_description(new_description, at)
        self.record_repo.save(record)
        logger.debug(f"Record {record_id} description updated")

        self._emit(RecordDescriptionUpdated(id=record_id, new_description=new_description))
        return record

    def delete(self, record_id: str, *, initiator: str, at: datetime) -> Record:
        """Tombstone a record. Its bytes stay in storage."""
        record = self.get(record_id)
        if not record.deleted:
            self._authorize(Action.DELETE, record, initiator)
        record.mark_deleted(initiator, at)
        self.record_repo.save(record)
        logger.debug(f"Record {record_id} marked as deleted by {initiator}")

        self._emit(RecordDeleted(id=record_id, deleted_by=initiator))
        return record

    def _authorize(self, action: Action, record: Record, initiator: str) -> None:
        creator = self.record_repo.get_creator() if self.policy.requires_creator else None
        self.policy.authorize(action, record, initiator, creator)

    def _emit(self, event: Event) -> None:
        # Events are a side channel: a failing emitter never fails the operation
        try:
            self.emitter.emit(event.name, event.payload())
        except Exception:
            logger.warning(f"Failed to emit {event.name}", exc_info=True)
