from iprecord.domain.shared.event import Event


class RecordDescriptionUpdated(Event):
    id: str
    new_description: str
