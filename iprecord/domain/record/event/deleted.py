"""RecordDeleted event - emitted when a record is tombstoned."""

from iprecord.domain.shared.event import Event


class RecordDeleted(Event):
    id: str
    deleted_by: str
