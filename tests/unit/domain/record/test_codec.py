"""Unit tests for the record codec."""

import json
from datetime import UTC, datetime

import pytest

from iprecord.domain.record.model.aggregate import Record
from iprecord.domain.record.model.codec import decode_record, encode_record
from iprecord.domain.shared.error import CodecError


def _record() -> Record:
    return Record.register(
        id="C1",
        title="Sunrise",
        creator_name="Alice",
        holder_address="addrA",
        category="image",
        description="",
        at=datetime(2024, 1, 1, tzinfo=UTC),
    )


class TestRecordCodec:
    def test_encode_names_every_field(self):
        data = json.loads(encode_record(_record()))
        assert set(data) == {
            "id",
            "title",
            "creator_name",
            "holder_address",
            "registered_at",
            "category",
            "description",
            "history",
            "deleted",
        }

    def test_decode_ignores_field_order(self):
        data = json.loads(encode_record(_record()))
        reordered = json.dumps(dict(reversed(list(data.items())))).encode()
        assert decode_record(reordered) == _record()

    def test_encoding_is_stable(self):
        record = _record()
        assert encode_record(decode_record(encode_record(record))) == encode_record(record)

    @pytest.mark.parametrize("raw", [b"not json", b"{}", b'{"id": "C1"}', b"\xff\xfe"])
    def test_decode_failure_raises_codec_error(self, raw: bytes):
        with pytest.raises(CodecError) as exc_info:
            decode_record(raw)
        assert exc_info.value.code == "CodecFailure"
