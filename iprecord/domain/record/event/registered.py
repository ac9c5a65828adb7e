"""RecordRegistered event - emitted when a new record is stored."""

from iprecord.domain.shared.event import Event


class RecordRegistered(Event):
    id: str
    title: str
    holder_address: str
