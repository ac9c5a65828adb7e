from iprecord.domain.shared.event import Event


class RecordTransferred(Event):
    """Emitted when a record's holder is reassigned."""

    id: str
    old_holder: str
    new_holder: str
