"""Record codec - the byte encoding stored under a record's id."""

from pydantic import ValidationError

from iprecord.domain.record.model.aggregate import Record
from iprecord.domain.shared.error import CodecError


def encode_record(record: Record) -> bytes:
    """Encode a record as UTF-8 JSON with every field named."""
    return record.model_dump_json().encode("utf-8")


def decode_record(raw: bytes) -> Record:
    """Decode bytes written by encode_record.

    Raises:
        CodecError: The bytes are not a valid record.
    """
    try:
        return Record.model_validate_json(raw)
    except ValidationError as e:
        raise CodecError(f"failed to decode record data: {e.error_count()} error(s)") from e
