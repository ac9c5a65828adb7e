"""Record domain model."""

from iprecord.domain.record.model.aggregate import Record
from iprecord.domain.record.model.codec import decode_record, encode_record
from iprecord.domain.record.model.value import TIMESTAMP_FORMAT, RecordStatus, format_timestamp

__all__ = [
    "Record",
    "RecordStatus",
    "TIMESTAMP_FORMAT",
    "decode_record",
    "encode_record",
    "format_timestamp",
]
