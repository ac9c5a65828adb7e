from iprecord.domain.record.event.deleted import RecordDeleted
from iprecord.domain.record.event.description_updated import RecordDescriptionUpdated
from iprecord.domain.record.event.registered import RecordRegistered
from iprecord.domain.record.event.transferred import RecordTransferred

__all__ = [
    "RecordDeleted",
    "RecordDescriptionUpdated",
    "RecordRegistered",
    "RecordTransferred",
]
